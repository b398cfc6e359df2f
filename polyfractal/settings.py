import logging
from dataclasses import dataclass, field

import yaml
from matplotlib.colors import is_color_like

from polyfractal.datatypes import FractalParameters
from polyfractal.geometry import SHAPE_WARNING_THRESHOLD
from polyfractal.points import MAX_POINTS


@dataclass
class AppConfig:
    width: int = 1000
    height: int = 800
    colour: str = "#0084FF"
    background: str = "#333333"
    warning_threshold: int = SHAPE_WARNING_THRESHOLD
    max_points: int = MAX_POINTS
    parameters: FractalParameters = field(default_factory=FractalParameters)
    log_file: str = "log.txt"


default_config = AppConfig()


def config_to_dict(config):
    """Convert AppConfig to a dictionary for YAML serialization."""
    return {
        "canvas": {
            "width": config.width,
            "height": config.height,
        },
        "fractal": config.parameters.to_dict(),
        "presentation": {
            "colour": config.colour,
            "background": config.background,
        },
        "limits": {
            "warning_threshold": config.warning_threshold,
            "max_points": config.max_points,
        },
        "logging": {
            "file": config.log_file,
        },
    }


def _section(config_dict, name):
    section = config_dict.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section {name!r} must be a mapping, got {section!r}.")
    return section


def dict_to_config(config_dict):
    """Convert a dictionary to an AppConfig, keeping defaults for missing sections."""
    config_dict = config_dict or {}
    canvas = _section(config_dict, "canvas")
    fractal = _section(config_dict, "fractal")
    presentation = _section(config_dict, "presentation")
    limits = _section(config_dict, "limits")
    log_settings = _section(config_dict, "logging")

    try:
        config = AppConfig(
            width=int(canvas.get("width", default_config.width)),
            height=int(canvas.get("height", default_config.height)),
            colour=presentation.get("colour", default_config.colour),
            background=presentation.get("background", default_config.background),
            warning_threshold=int(limits.get("warning_threshold", default_config.warning_threshold)),
            max_points=int(limits.get("max_points", default_config.max_points)),
            parameters=FractalParameters.from_dict(fractal, default_config.parameters),
            log_file=log_settings.get("file", default_config.log_file),
        )
    except TypeError as e:
        raise ValueError(f"Invalid config values: {e}") from e
    for name in ("colour", "background"):
        if not is_color_like(getattr(config, name)):
            raise ValueError(f"Invalid {name}: {getattr(config, name)!r}")
    if config.width <= 0 or config.height <= 0:
        raise ValueError(f"Canvas size must be positive, got {config.width}x{config.height}.")
    if config.max_points < 1:
        raise ValueError(f"max_points must be at least 1, got {config.max_points}.")
    return config


def load_config(path):
    with open(path, "r") as file:
        try:
            config_dict = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ValueError(f"Config file {path} is not valid YAML: {e}") from e
    if config_dict is not None and not isinstance(config_dict, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")
    config = dict_to_config(config_dict)
    logging.info(f"Settings loaded from {path}")
    return config


def dump_config(config):
    return yaml.dump(config_to_dict(config), default_flow_style=False, sort_keys=False)
