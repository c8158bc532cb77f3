"""
Region operation pipeline for pixelgraph.

Loads an image, builds its pixel graph, runs one region operation and saves
the painted image and a JSON report.
"""

import os

from pixelgraph.config import load_config
from pixelgraph.graph.pixel_graph import PixelGraph
from pixelgraph.io.load_image import image_to_color_grid, load_image
from pixelgraph.io.pixel_writer import ArrayPixelWriter, save_image, save_json
from pixelgraph.models import ImageMeta, Operation, RegionReport, Traversal
from pixelgraph.regions.components import count_components
from pixelgraph.regions.fill import flood_fill_bfs, flood_fill_dfs
from pixelgraph.regions.outline import outline_region_bfs, outline_region_dfs
from pixelgraph.tracer import get_tracer, trace

PAINT_OPERATIONS = {
    (Operation.FILL, Traversal.DFS): flood_fill_dfs,
    (Operation.FILL, Traversal.BFS): flood_fill_bfs,
    (Operation.OUTLINE, Traversal.DFS): outline_region_dfs,
    (Operation.OUTLINE, Traversal.BFS): outline_region_bfs,
}


@trace(label="run_region_operation", arg_names=["operation", "start"])
def run_region_operation(input_path, operation, out_path=None, start=None, color=None,
                         traversal=None, config=None, config_path=None, report_path=None):
    """
    Run a region operation on an image file.

    Args:
        input_path: image to analyse
        operation: "fill", "outline" or "count"
        out_path: where to save the painted image (fill/outline only)
        start: (x, y) of the start pixel for fill/outline; None means (0, 0)
        color: paint color; defaults to the configured fill or outline color
        traversal: "dfs" or "bfs"; defaults to the configured traversal
        config: PipelineConfig object (optional)
        config_path: path to YAML config file (optional)
        report_path: where to save the JSON report; defaults to next to out_path
            when reports are enabled

    Returns:
        RegionReport

    Raises:
        ValueError for unknown operations or traversals.
        PixelOutOfBoundsError if start lies outside the image.
    """
    tracer = get_tracer()

    if config is None:
        config = load_config(config_path)

    operation = Operation(operation)
    traversal = Traversal((traversal or config.region.traversal).lower())

    image, meta = load_image(input_path)
    image_meta = ImageMeta(**meta)

    with tracer.span("build_graph", module="pipeline"):
        graph = PixelGraph(image_to_color_grid(image))

    if operation is Operation.COUNT:
        report = RegionReport(
            operation=operation,
            image_meta=image_meta,
            component_count=count_components(graph),
        )
    else:
        x, y = start if start is not None else (0, 0)
        vertex = graph.get_pixel_vertex(x, y)

        if color is None:
            if operation is Operation.FILL:
                color = config.region.fill_color
            else:
                color = config.region.outline_color
        color = [int(c) for c in color]

        canvas = image.copy()
        writer = ArrayPixelWriter(canvas)
        with tracer.span(f"{operation.value}_{traversal.value}", module="pipeline"):
            PAINT_OPERATIONS[(operation, traversal)](vertex, writer, tuple(color))

        if out_path:
            save_image(canvas, out_path)

        report = RegionReport(
            operation=operation,
            image_meta=image_meta,
            traversal=traversal,
            start=[x, y],
            color=color,
            painted_pixels=writer.write_count,
            output_path=os.path.abspath(out_path) if out_path else "",
        )

    if report_path is None and out_path and config.output.save_report:
        report_path = os.path.join(os.path.dirname(out_path), config.output.report_name)
    if report_path:
        save_json(report, report_path)

    tracer.event(f"Report: operation={operation.value} painted={report.painted_pixels} "
                 f"components={report.component_count}")
    return report
