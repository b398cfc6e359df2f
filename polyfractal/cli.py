import argparse
import logging
import sys
from dataclasses import replace

from polyfractal.datatypes import PRESETS, get_preset
from polyfractal.geometry import exceeds_shape_warning, total_shapes
from polyfractal.plot_utils import export_fractal
from polyfractal.settings import default_config, dump_config, load_config
from polyfractal.transforms import TransformType

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(log_file="log.txt", level=logging.INFO):
    """Log to stdout and, if `log_file` is set, to a file. Applied once per process."""
    logger = logging.getLogger()
    if logger.handlers:
        return
    logger.setLevel(level)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render a self-similar polygon fractal to an image.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", type=str, metavar="PATH", help="Path to a YAML config file.")
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Start from one of the example fractals.")
    parser.add_argument(
        "--point", type=float, nargs=2, action="append", metavar=("X", "Y"), dest="points",
        help="Add a point of the base shape (repeatable, canvas pixels).",
    )
    parser.add_argument("--type", choices=TransformType.labels(), help="Fractal type.")
    parser.add_argument("--generations", type=int, help="Number of generations.")
    parser.add_argument("--scale", type=float, help="Scale between generations.")
    parser.add_argument("--colour", type=str, help="Line colour.")
    parser.add_argument("--size", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"), help="Image size in pixels.")
    parser.add_argument("--output", type=str, metavar="PATH", default="fractal.png", help="Where to write the PNG.")
    parser.add_argument("--print-config", action="store_true", help="Print the effective config and exit.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=str, metavar="PATH", help="Log file (defaults to the config's).")
    return parser.parse_args(argv)


def resolve_run(args, config):
    """Combine config, preset and command line flags into (config, points, parameters)."""
    if args.colour:
        config = replace(config, colour=args.colour)
    if args.size:
        config = replace(config, width=args.size[0], height=args.size[1])

    parameters = config.parameters
    points = ()
    if args.preset:
        preset = get_preset(args.preset)
        parameters = preset.parameters
        points = preset.points(config.width, config.height)
    if args.points:
        points = tuple(args.points)

    if args.type:
        parameters = replace(parameters, transform_type=TransformType.from_label(args.type))
    if args.generations is not None:
        parameters = replace(parameters, generations=args.generations)
    if args.scale is not None:
        parameters = replace(parameters, scale=args.scale)
    return config, points, parameters.clamped()


def main(argv=None):
    args = parse_args(argv)
    try:
        config = load_config(args.config) if args.config else default_config
    except (OSError, ValueError) as e:
        setup_logging(args.log_file, args.log_level)
        logging.error(f"Could not load config: {e}")
        return 1
    setup_logging(args.log_file or config.log_file, args.log_level)

    try:
        config, points, parameters = resolve_run(args, config)
    except (KeyError, ValueError) as e:
        logging.error(str(e))
        return 2

    if args.print_config:
        print(dump_config(replace(config, parameters=parameters)), end="")
        return 0

    if len(points) < 2:
        logging.error("At least 2 points are needed: pass --preset or two or more --point X Y.")
        return 2

    if exceeds_shape_warning(len(points), parameters.generations, config.warning_threshold):
        logging.warning(
            f"{total_shapes(len(points), parameters.generations)} shapes will be drawn. This may take a while."
        )

    try:
        export_fractal(
            args.output,
            points,
            parameters,
            size=(config.width, config.height),
            colour=config.colour,
            background=config.background,
        )
    except (OSError, ValueError) as e:
        logging.error(f"Export failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
