import logging
from io import BytesIO

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from PIL import Image

from polyfractal.fractal import generate_fractal
from polyfractal.shape import SegmentCollector

DPI = 100


def collect_segments(polygons):
    """Draw every polygon onto a SegmentCollector and return the collected segments."""
    collector = SegmentCollector()
    for polygon in polygons:
        polygon.draw(collector)
    return collector.segments


def plot_polygons(polygons, size=(1000, 800), colour="#0084FF", background="#333333", line_width=1.0):
    """Plot polygon outlines on a figure laid out like the canvas (origin top left, y pointing down)."""
    width, height = size
    fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
    fig.patch.set_facecolor(background)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_facecolor(background)

    ax.add_collection(LineCollection(collect_segments(polygons), colors=colour, linewidths=line_width))

    ax.axis("off")
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    return fig


def render_figure_to_image(fig):
    buf = BytesIO()
    fig.savefig(buf, format="png", dpi=DPI, facecolor=fig.get_facecolor())
    buf.seek(0)
    image = Image.open(BytesIO(buf.read())).convert("RGB")  # Create a new buffer to keep the image open
    buf.close()
    plt.close(fig)
    return image


def render_fractal_image(points, parameters, size=(1000, 800), colour="#0084FF", background="#333333"):
    polygons = generate_fractal(points, parameters)
    fig = plot_polygons(polygons, size=size, colour=colour, background=background)
    return render_figure_to_image(fig)


def export_fractal(file_path, points, parameters, size=(1000, 800), colour="#0084FF", background="#333333"):
    """Render the fractal at a given resolution and save it to a file using Pillow."""
    logging.info(f"Exporting fractal to {file_path} at resolution {size}...")
    image = render_fractal_image(points, parameters, size=size, colour=colour, background=background)
    image.save(file_path)
    logging.info(f"Fractal successfully exported to {file_path}.")
    return image
