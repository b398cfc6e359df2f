from __future__ import annotations

import pytest
import yaml

from polyfractal.settings import AppConfig, config_to_dict, default_config, dict_to_config, dump_config, load_config
from polyfractal.transforms import TransformType


def test_round_trip() -> None:
    assert dict_to_config(config_to_dict(default_config)) == default_config


def test_missing_sections_fall_back_to_defaults() -> None:
    assert dict_to_config({}) == default_config
    assert dict_to_config(None) == default_config


def test_load_config(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.dump(
            {
                "canvas": {"width": 640, "height": 480},
                "fractal": {"type": "External 2", "generations": 4, "scale": 0.4},
                "presentation": {"colour": "white"},
            }
        )
    )
    config = load_config(path)
    assert isinstance(config, AppConfig)
    assert (config.width, config.height) == (640, 480)
    assert config.colour == "white"
    assert config.parameters.transform_type is TransformType.EXTERNAL_SCALED
    assert config.parameters.generations == 4
    assert config.warning_threshold == default_config.warning_threshold


def test_load_config_rejects_non_mapping(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "config_dict",
    [
        {"presentation": {"colour": "not-a-colour"}},
        {"canvas": {"width": 0}},
        {"fractal": {"type": "Spiral"}},
        {"canvas": 5},
        {"canvas": {"width": [1, 2]}},
        {"limits": {"max_points": 0}},
    ],
)
def test_invalid_values(config_dict) -> None:
    with pytest.raises(ValueError):
        dict_to_config(config_dict)


def test_dump_config_is_loadable() -> None:
    assert dict_to_config(yaml.safe_load(dump_config(default_config))) == default_config


def test_load_config_rejects_invalid_yaml(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("canvas: {width: 10\n")
    with pytest.raises(ValueError):
        load_config(path)
