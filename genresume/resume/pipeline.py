"""Loader -> renderer -> exporter orchestration."""

from pathlib import Path

from genresume.shared import BuildConfig, Color, ResumeIOError, echo
from genresume.resume.exporter import PDFExporter, ensure_output_dir
from genresume.resume.loader import load_resume
from genresume.resume.renderer import render_template


def build_html(config: BuildConfig) -> str:
    """Load the resume data and render it through the template."""
    if config.verbose:
        echo(f"Loading resume data from {config.json_path}", Color.INFO)
    resume = load_resume(config.json_path)

    if config.verbose:
        echo(f"Rendering template {config.template_path}", Color.INFO)
    return render_template(config.template_path, resume)


def write_html(html: str, output_path: Path) -> None:
    ensure_output_dir(output_path)
    try:
        output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise ResumeIOError("write HTML file", output_path, e, stage="export") from e


def generate_resume(config: BuildConfig) -> Path:
    """Run the whole pipeline and return the path that was written."""
    html = build_html(config)
    output_path = Path(config.output_path)

    if config.html_only:
        write_html(html, output_path)
        return output_path

    if config.verbose:
        echo(f"Printing PDF (timeout {config.timeout:g}s)", Color.INFO)
    exporter = PDFExporter(timeout=config.timeout, verbose=config.verbose)
    return exporter.export(html, output_path)
