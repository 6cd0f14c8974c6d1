import argparse
import math
import sys

from genresume.shared import (
    DEFAULT_OUTPUT,
    DEFAULT_TEMPLATE,
    DEFAULT_TIMEOUT,
    Color,
    echo,
)
from genresume.cmd import cmd_generate


EPILOG = """Example:
  genresume -json resume.json -template template.html -output john_doe_resume.pdf
"""


def positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value}") from exc
    if not math.isfinite(seconds):
        raise argparse.ArgumentTypeError(f"must be a finite number: {value}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genresume",
        description="Gen Resume - Generate professional PDF resumes from JSON data",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-json",
        "--json",
        dest="json",
        metavar="PATH",
        help="Path to JSON (or YAML) file containing resume data (required)",
    )
    parser.add_argument(
        "-template",
        "--template",
        default=DEFAULT_TEMPLATE,
        metavar="PATH",
        help=f"Path to HTML template file (default: {DEFAULT_TEMPLATE})",
    )
    parser.add_argument(
        "-output",
        "--output",
        default=DEFAULT_OUTPUT,
        metavar="PATH",
        help=f"Path for output PDF file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-timeout",
        "--timeout",
        type=positive_float,
        default=DEFAULT_TIMEOUT,
        metavar="SECONDS",
        help=f"Browser rendering timeout (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "-html-only",
        "--html-only",
        action="store_true",
        help="Write the rendered HTML to the output path instead of a PDF",
    )
    parser.add_argument(
        "-v", "-verbose", "--verbose", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "-h", "-help", "--help", action="help", help="Show help message"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.json:
        echo("Error: JSON file path is required", Color.ERROR, err=True)
        print(file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    return cmd_generate(args)


if __name__ == "__main__":
    sys.exit(main())
