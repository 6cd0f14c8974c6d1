"""Resume to PDF generation command."""

import argparse
from pathlib import Path

from genresume.shared import BuildConfig, Color, ResumeError, echo
from genresume.resume import generate_resume


def build_config(args: argparse.Namespace) -> BuildConfig:
    return BuildConfig(
        json_path=Path(args.json),
        template_path=Path(args.template),
        output_path=Path(args.output),
        timeout=args.timeout,
        html_only=args.html_only,
        verbose=args.verbose,
    )


def cmd_generate(args: argparse.Namespace) -> int:
    """Handle resume generation."""
    config = build_config(args)

    try:
        output_path = generate_resume(config)
    except ResumeError as e:
        echo(f"Error: {e}", Color.ERROR, err=True)
        if config.verbose:
            import traceback

            traceback.print_exc()
        return 1

    echo(f"✓ Resume generated successfully: {output_path}", Color.SUCCESS)
    return 0
