#!/usr/bin/env python3
"""
CLI for the cypoints surface generator.

Usage:
    python -m cypoints generate [REQUEST] [--output FILE] [--format FORMAT]
    python -m cypoints range [REQUEST]
    python -m cypoints info [REQUEST]
    python -m cypoints serve [--host HOST] [--port PORT]

REQUEST is the plugin request text ``n,alpha,subdivisions``. When it is
omitted the request is built from ``--n``, ``--alpha`` and ``--subdivisions``,
falling back to the ``defaults`` section of the configuration file.

Examples:
    # Plugin response text on stdout
    python -m cypoints generate "3,0.785,16"

    # Write a binary PLY point cloud
    python -m cypoints generate "5,0.3,32" --format ply --output quintic.ply

    # Only the z range
    python -m cypoints range --n 4 --alpha 1.2

    # Serve the HTTP API (requires uvicorn)
    python -m cypoints serve --port 9000
"""

import argparse
import logging
import sys
from pathlib import Path

from cypoints.adapter import format_response, handle_request
from cypoints.config import load_config
from cypoints.errors import ConfigError, Failure
from cypoints.logging_config import setup_logging

logger = logging.getLogger("cypoints.cli")

FORMATS = ("text", "xyz", "ply", "json")


def build_request_text(args, config) -> str:
    """Return the request text from the positional REQUEST or the flags."""
    if args.request is not None:
        return args.request
    defaults = config["defaults"]
    n = args.n if args.n is not None else defaults["n"]
    alpha = args.alpha if args.alpha is not None else defaults["alpha"]
    subdivisions = args.subdivisions if args.subdivisions is not None else defaults["subdivisions"]
    return f"{n},{alpha},{subdivisions}"


def _serve(args, config):
    """Run a request; print the error and return ``None`` on failure."""
    text = build_request_text(args, config)
    result = handle_request(text)
    if isinstance(result, Failure):
        print(format_response(result), file=sys.stderr)
        return None
    return result


def cmd_generate(args, config):
    """Generate a surface and write it as text or a point-cloud file."""
    result = _serve(args, config)
    if result is None:
        return 1

    fmt = args.format
    if fmt == "text":
        payload = format_response(result)
        if args.output:
            Path(args.output).write_text(payload, encoding="ascii")
        else:
            print(payload)
        return 0

    if not args.output:
        print(f"Error: --format {fmt} requires --output", file=sys.stderr)
        return 1

    from cypoints.io import write_json, write_ply, write_xyz

    surface = result.value
    if fmt == "xyz":
        write_xyz(surface.points, args.output)
    elif fmt == "ply":
        write_ply(surface.points, args.output, binary=not args.ascii)
    else:
        write_json(surface, args.output, indent=2)

    print(f"Wrote {surface.point_count} points to {args.output}")
    return 0


def cmd_range(args, config):
    """Print the z range of a surface."""
    result = _serve(args, config)
    if result is None:
        return 1
    surface = result.value
    print(f"{surface.z_min!r} {surface.z_max!r}")
    return 0


def cmd_info(args, config):
    """Print a summary of a surface request."""
    result = _serve(args, config)
    if result is None:
        return 1
    surface = result.value
    request = surface.request
    print(f"Request: {request.to_text()}")
    print(f"  Branches: {request.n * request.n}")
    print(f"  Points per branch: {(request.subdivisions + 1) ** 2}")
    print(f"  Points: {surface.point_count}")
    print(f"  Z range: [{surface.z_min!r}, {surface.z_max!r}]")
    return 0


def cmd_serve(args, config):
    """Run the HTTP service."""
    try:
        import uvicorn
    except ImportError:
        print("Error: the serve command requires uvicorn (pip install cypoints[server])",
              file=sys.stderr)
        return 1

    server = config["server"]
    host = args.host or server["host"]
    port = args.port or server["port"]
    logger.info("serving on %s:%s", host, port)
    uvicorn.run("cypoints.server:app", host=host, port=int(port))
    return 0


def _add_request_args(parser):
    parser.add_argument("request", nargs="?", help="Request text n,alpha,subdivisions")
    parser.add_argument("--n", type=int, help="Surface order")
    parser.add_argument("--alpha", type=float, help="Mixing angle in radians")
    parser.add_argument("--subdivisions", type=int, help="Grid subdivisions per axis")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cypoints",
        description="Calabi-Yau surface point-cloud generator",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a surface")
    _add_request_args(gen_parser)
    gen_parser.add_argument("--output", "-o", help="Output file")
    gen_parser.add_argument("--format", "-f", choices=FORMATS, default="text",
                            help="Output format (default: text)")
    gen_parser.add_argument("--ascii", action="store_true", help="Write ASCII PLY")

    range_parser = subparsers.add_parser("range", help="Print the z range")
    _add_request_args(range_parser)

    info_parser = subparsers.add_parser("info", help="Summarize a request")
    _add_request_args(info_parser)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service")
    serve_parser.add_argument("--host", help="Bind address")
    serve_parser.add_argument("--port", type=int, help="Port")

    return parser


COMMANDS = {
    "generate": cmd_generate,
    "range": cmd_range,
    "info": cmd_info,
    "serve": cmd_serve,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    level = "DEBUG" if args.verbose else config["logging"]["level"]
    setup_logging(level, args.log_file)

    return COMMANDS[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
