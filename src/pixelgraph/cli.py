"""
Command-line interface for pixelgraph.

Provides commands for filling, outlining and counting same-color regions.
"""

import argparse
import sys

from pixelgraph.config import load_config, save_default_config
from pixelgraph.io.pixel_writer import parse_color
from pixelgraph.tracer import configure_tracer, get_tracer


def _add_trace_arguments(parser):
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    parser.add_argument(
        "--trace-level",
        default=None,
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )
    parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )
    parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output",
    )


def _add_common_arguments(parser):
    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Input image file",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--report",
        default=None,
        help="Path to write the JSON report",
    )
    _add_trace_arguments(parser)


def _add_paint_arguments(parser):
    parser.add_argument(
        "--out", "-o",
        required=True,
        help="Output image file",
    )
    parser.add_argument("--x", type=int, default=0, help="Start pixel column")
    parser.add_argument("--y", type=int, default=0, help="Start pixel row")
    parser.add_argument(
        "--color",
        type=parse_color,
        default=None,
        help="Paint color as R,G,B",
    )
    parser.add_argument(
        "--traversal",
        choices=["bfs", "dfs"],
        default=None,
        help="Traversal order (default from config)",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pixelgraph",
        description="pixelgraph: same-color region analysis over an image's pixel graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    fill_parser = subparsers.add_parser("fill", help="Flood fill the region at a pixel")
    _add_common_arguments(fill_parser)
    _add_paint_arguments(fill_parser)

    outline_parser = subparsers.add_parser("outline", help="Outline the region at a pixel")
    _add_common_arguments(outline_parser)
    _add_paint_arguments(outline_parser)

    count_parser = subparsers.add_parser("count", help="Count same-color regions")
    _add_common_arguments(count_parser)

    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="pixelgraph_config.yaml",
        help="Output path for config file",
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "init-config":
        return handle_init_config(args)
    return handle_region(args)


def handle_region(args):
    """Handle the fill, outline and count commands."""
    config = load_config(args.config)

    configure_tracer(
        enabled=args.trace or config.tracing.enabled,
        level=args.trace_level or config.tracing.level,
        file_path=args.trace_file or config.tracing.file_path,
        json_output=args.trace_json or config.tracing.json_output,
    )

    tracer = get_tracer()

    try:
        from pixelgraph.pipeline import run_region_operation

        kwargs = {}
        if args.command != "count":
            kwargs = dict(
                out_path=args.out,
                start=(args.x, args.y),
                color=args.color,
                traversal=args.traversal,
            )

        with tracer.span(f"cli_{args.command}", module="cli"):
            report = run_region_operation(
                input_path=args.input,
                operation=args.command,
                config=config,
                report_path=args.report,
                **kwargs,
            )

        if args.command == "count":
            print(f"Components: {report.component_count}")
        else:
            print(f"Painted {report.painted_pixels} pixels "
                  f"({report.traversal.value}) from ({args.x}, {args.y})")
            print(f"Output saved to: {args.out}")

        return 0

    except Exception as e:
        tracer.event(f"{args.command} failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1

    finally:
        tracer.config.close()


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
