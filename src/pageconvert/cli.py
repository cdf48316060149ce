"""CLI entry point for the PDF page rasterizer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pageconvert import __version__, logger
from pageconvert.converter import convert_pdf_to_images
from pageconvert.dependencies import ensure_cli_dependencies_for_convert
from pageconvert.exceptions import ArgumentParseError, PackageError
from pageconvert.logging import configure_logging
from pageconvert.page_range import LAST_PAGE
from pageconvert.pdf_render import PyMuPdfEngine
from pageconvert.settings import Settings, get_settings
from pageconvert.typing.models import ConversionRequest

_BANNER = "Welcome to the PDF to Image Conversion Demo."
_USAGE_FOOTER = "Entering end page as -1 converts all pages."


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Page numbers are kept as raw strings so that invalid values can be reported
    and replaced by their defaults instead of aborting the run.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="pageconvert",
        description="Rasterize a range of PDF pages to bmp, png, gif or jpg images.",
        epilog=_USAGE_FOOTER,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("input_file", nargs="?", default=None, help="PDF file to convert.")
    parser.add_argument(
        "image_format",
        nargs="?",
        default="jpg",
        help="bmp, png, gif, jpg or jpeg (default: jpg; anything else falls back to jpg).",
    )
    parser.add_argument("page_start", nargs="?", default=None, help="First page, 0-based (default: 0).")
    parser.add_argument("page_end", nargs="?", default=None, help="Last page, 0-based (default: -1, last page).")
    # Trailing positionals past the end page are ignored.
    parser.add_argument("ignored", nargs="*", help=argparse.SUPPRESS)

    parser.add_argument("--output-dir", type=Path, default=None, dest="output_dir")
    parser.add_argument(
        "--no-overwrite",
        action="store_false",
        default=None,
        dest="overwrite_existing",
        help="Fail instead of replacing existing images.",
    )
    parser.add_argument(
        "--discard-partial",
        action="store_false",
        default=None,
        dest="keep_partial_output",
        help="Delete images already written when a page fails.",
    )
    parser.add_argument("--wait", action="store_true", help="Wait for Enter before exiting.")
    return parser


def parse_page_number(value: str) -> int:
    """Parse a page argument.

    Args:
        value (str): Raw CLI value.

    Raises:
        ArgumentParseError: If the value is not an integer.

    Returns:
        int: Parsed page number.
    """
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ArgumentParseError(value=value) from exc


def _page_or_default(value: str | None, default: int) -> int:
    """Parse an optional page argument, reporting invalid values and keeping the default.

    Args:
        value (str | None): Raw CLI value, if given.
        default (int): Value kept when `value` is missing or invalid.

    Returns:
        int: Page number to use.
    """
    if value is None:
        return default
    try:
        return parse_page_number(value)
    except ArgumentParseError as exc:
        print(exc)
        logger.warning("Invalid page argument, using default", extra={"value": value, "default": default})
        return default


def _build_conversion_request(args: argparse.Namespace, settings: Settings) -> ConversionRequest:
    """Build the conversion request from CLI arguments and settings.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        settings (Settings): Runtime settings supplying defaults.

    Returns:
        ConversionRequest: Request object.
    """
    return ConversionRequest(
        input_path=Path(args.input_file),
        image_format=args.image_format,
        page_start=_page_or_default(args.page_start, 0),
        page_end=_page_or_default(args.page_end, LAST_PAGE),
        output_dir=args.output_dir or settings.output_dir,
        overwrite_existing=_flag_or_default(args.overwrite_existing, settings.overwrite_existing),
        keep_partial_output=_flag_or_default(args.keep_partial_output, settings.keep_partial_output),
    )


def _flag_or_default(value: bool | None, default: bool) -> bool:
    return default if value is None else value


def _print_progress(done: int, total: int) -> None:
    sys.stdout.write(f"\rConverting {done} out of {total}")
    sys.stdout.flush()


def _run(args: argparse.Namespace, parser: argparse.ArgumentParser, settings: Settings) -> int:
    """Validate the input file and run one conversion.

    Returns:
        int: Exit code.
    """
    if args.input_file is None:
        parser.print_usage()
        print(_USAGE_FOOTER)
        return 0

    input_path = Path(args.input_file)
    if not input_path.is_file():
        print(f"File does not exist: {input_path}")
        logger.error("Input file not found", extra={"input_path": str(input_path)})
        return 1

    request = _build_conversion_request(args, settings)
    print(f"{input_path} exists.")

    try:
        ensure_cli_dependencies_for_convert()
        with PyMuPdfEngine() as engine:
            result = convert_pdf_to_images(
                request,
                engine=engine,
                render_options=settings.render_options(),
                on_progress=_print_progress,
            )
    except PackageError as exc:
        print()
        print(exc)
        logger.exception("Conversion failed")
        return 1
    except KeyboardInterrupt:
        print()
        logger.info("Conversion aborted by user")
        return 130
    except Exception:
        print()
        logger.exception("Unexpected error during conversion")
        return 1

    print()
    logger.info("Conversion completed", extra={"pages": len(result.written_paths)})
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Arguments; `sys.argv[1:]` when omitted.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    print(_BANNER)
    try:
        return _run(args, parser, settings)
    finally:
        if args.wait:
            input("Hit Enter to terminate.")


if __name__ == "__main__":
    raise SystemExit(main())
