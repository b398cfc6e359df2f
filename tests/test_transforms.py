from __future__ import annotations

import pytest

from polyfractal.transforms import TransformType, compute_center
from polyfractal.vector import Vector2

C = Vector2(0.0, 0.0)
P = Vector2(2.0, 4.0)


def test_centered_uses_the_vertex() -> None:
    assert compute_center(C, P, 0.5, TransformType.CENTERED) == P


def test_internal_pulls_toward_parent_center() -> None:
    assert compute_center(C, P, 0.5, TransformType.INTERNAL) == Vector2(1.0, 2.0)
    assert compute_center(C, P, 0.0, TransformType.INTERNAL) == P
    assert compute_center(C, P, 1.0, TransformType.INTERNAL) == C


def test_external_no_scale_reflects_full_radius_and_ignores_scale() -> None:
    for s in (0.1, 0.5, 2.0):
        assert compute_center(C, P, s, TransformType.EXTERNAL_NO_SCALE) == Vector2(4.0, 8.0)


def test_external_scaled_pushes_outward() -> None:
    assert compute_center(C, P, 0.5, TransformType.EXTERNAL_SCALED) == Vector2(3.0, 6.0)


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Centered", TransformType.CENTERED),
        ("Internal", TransformType.INTERNAL),
        ("External 1", TransformType.EXTERNAL_NO_SCALE),
        ("External 2", TransformType.EXTERNAL_SCALED),
        ("EXTERNAL_SCALED", TransformType.EXTERNAL_SCALED),
        (TransformType.INTERNAL, TransformType.INTERNAL),
    ],
)
def test_from_label(label, expected) -> None:
    assert TransformType.from_label(label) is expected


def test_from_label_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        TransformType.from_label("External 3")


def test_labels_keep_menu_order() -> None:
    assert TransformType.labels() == ["Centered", "Internal", "External 1", "External 2"]
