from enum import Enum


class TransformType(Enum):
    CENTERED = "Centered"
    INTERNAL = "Internal"
    EXTERNAL_NO_SCALE = "External 1"
    EXTERNAL_SCALED = "External 2"

    @property
    def label(self):
        return self.value

    @classmethod
    def from_label(cls, label):
        """Look up a transform by its display label ("External 1") or enum name ("EXTERNAL_NO_SCALE")."""
        if isinstance(label, cls):
            return label
        for transform_type in cls:
            if label in (transform_type.value, transform_type.name):
                return transform_type
        raise ValueError(f"Unknown fractal type: {label!r}")

    @classmethod
    def labels(cls):
        return [transform_type.value for transform_type in cls]


def compute_center(parent_center, vertex, scale, transform_type):
    """
    Center of the child shape spawned at `vertex` of a parent centered at `parent_center`.

    External 1 places the child a full parent radius outward and ignores `scale`;
    the child's vertices are still scaled by the generator.
    """
    if transform_type is TransformType.CENTERED:
        return vertex
    if transform_type is TransformType.INTERNAL:
        return vertex + (parent_center - vertex) * scale
    if transform_type is TransformType.EXTERNAL_NO_SCALE:
        return vertex + (vertex - parent_center)
    if transform_type is TransformType.EXTERNAL_SCALED:
        return vertex + (vertex - parent_center) * scale
    raise ValueError(f"Unknown fractal type: {transform_type!r}")
