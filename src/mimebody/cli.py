#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/cli.py
"""Command line interface for mimebody.

Reads a message request document and writes the MIME body::

    mimebody request.json -o body.mime
    cat request.json | mimebody - --random-boundaries

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from mimebody import __version__
from mimebody.api import create_body
from mimebody.config import load_config_with_priority, options_from_config
from mimebody.exceptions import MimeBodyError, ParsingError, RenderingError, ValidationError
from mimebody.logging_utils import configure_logging
from mimebody.parsers.request import load_request
from mimebody.utils.boundaries import find_boundary_collisions
from mimebody.utils.io_utils import write_content

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mimebody command."""
    parser = argparse.ArgumentParser(
        prog="mimebody",
        description="Serialize a message request into a nested MIME multipart upload body.",
    )
    parser.add_argument(
        "input",
        help="Request file (.json, .yaml, .yml, .toml) or '-' to read JSON from stdin",
    )
    parser.add_argument("-o", "--out", help="Write the body to this file instead of stdout")
    parser.add_argument("--config", help="Configuration file (overrides MIMEBODY_CONFIG and discovery)")
    parser.add_argument(
        "--random-boundaries",
        action="store_true",
        help="Generate random boundary tokens for this document",
    )
    parser.add_argument(
        "--check-boundaries",
        action="store_true",
        help="Fail when a boundary token appears inside request content",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Render missing required fields as empty strings instead of failing",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_config(parsed_args: argparse.Namespace) -> dict:
    """Load the configuration file and apply command line overrides."""
    config = dict(load_config_with_priority(explicit_path=parsed_args.config))
    if parsed_args.random_boundaries:
        config["random_boundaries"] = True
    if parsed_args.check_boundaries:
        config["check_boundary_collisions"] = True
    if parsed_args.lenient:
        config["validate_required_fields"] = False
    return config


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI entry point.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = options_from_config(_build_config(parsed_args))
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        source = sys.stdin.buffer if parsed_args.input == "-" else parsed_args.input
        request = load_request(source)

        if not options.check_boundary_collisions:
            for field_path, token in find_boundary_collisions(request, options.boundaries):
                logger.warning("Boundary token '%s' appears in %s; the body may not parse", token, field_path)

        body = create_body(request, options)

        if parsed_args.out:
            write_content(body, parsed_args.out)
            logger.info("Wrote %d characters to %s", len(body), parsed_args.out)
        else:
            write_content(body, sys.stdout.buffer)
            sys.stdout.buffer.flush()
    except MimeBodyError as e:
        logger.debug("Failed to create body", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
