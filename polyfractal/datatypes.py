from dataclasses import dataclass, replace

from polyfractal.transforms import TransformType
from polyfractal.vector import Vector2

MIN_GENERATIONS = 1
MAX_GENERATIONS = 10
MIN_SCALE = 0.1
MAX_SCALE = 2.0


@dataclass(frozen=True)
class FractalParameters:
    scale: float = 0.5
    transform_type: TransformType = TransformType.CENTERED
    generations: int = 3

    def clamped(self):
        """Copy with generations and scale pulled into the ranges the controls allow."""
        return replace(
            self,
            scale=min(max(float(self.scale), MIN_SCALE), MAX_SCALE),
            generations=min(max(int(self.generations), MIN_GENERATIONS), MAX_GENERATIONS),
        )

    def to_dict(self):
        return {
            "type": self.transform_type.label,
            "generations": self.generations,
            "scale": self.scale,
        }

    @classmethod
    def from_dict(cls, params_dict, defaults=None):
        """Build parameters from a mapping, falling back to `defaults` for missing keys."""
        defaults = defaults or cls()
        try:
            return cls(
                scale=float(params_dict.get("scale", defaults.scale)),
                transform_type=TransformType.from_label(params_dict.get("type", defaults.transform_type)),
                generations=int(params_dict.get("generations", defaults.generations)),
            )
        except TypeError as e:
            raise ValueError(f"Invalid fractal parameters: {params_dict!r}") from e


default_parameters = FractalParameters()


@dataclass(frozen=True)
class Preset:
    name: str
    parameters: FractalParameters
    margin: float  # pixels kept free around the shape
    divisor: float  # fraction of the free canvas used as offset
    corners: tuple  # vertex positions in units of the offset, relative to the canvas middle

    def points(self, width, height):
        offset = min(width - self.margin, height - self.margin) / self.divisor
        return tuple(Vector2(width / 2 + dx * offset, height / 2 + dy * offset) for dx, dy in self.corners)


PRESETS = {
    preset.name: preset
    for preset in (
        Preset(
            name="Triangle",
            parameters=FractalParameters(scale=0.5, transform_type=TransformType.INTERNAL, generations=9),
            margin=100,
            divisor=2,
            corners=((0, -1), (1, 1), (-1, 1)),
        ),
        Preset(
            name="Triangle 2",
            parameters=FractalParameters(scale=0.5, transform_type=TransformType.EXTERNAL_NO_SCALE, generations=7),
            margin=100,
            divisor=8,
            corners=((0, 0), (1, 2), (-1, 2)),
        ),
        Preset(
            name="Square",
            parameters=FractalParameters(scale=0.5, transform_type=TransformType.CENTERED, generations=8),
            margin=50,
            divisor=4,
            corners=((-1, -1), (1, -1), (1, 1), (-1, 1)),
        ),
        Preset(
            name="Square 2",
            parameters=FractalParameters(scale=0.5, transform_type=TransformType.EXTERNAL_SCALED, generations=5),
            margin=50,
            divisor=6,
            corners=((-1, -1), (1, -1), (1, 1), (-1, 1)),
        ),
    )
}


def get_preset(name):
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset: {name!r}. Available: {', '.join(PRESETS)}") from None


def preset_points(name, width, height):
    return get_preset(name).points(width, height)
