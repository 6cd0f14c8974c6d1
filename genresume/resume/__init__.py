"""Resume to PDF conversion module.

Loads resume data files, renders them through an HTML template and prints
the result to PDF with headless Chromium.
"""

from genresume.resume.models import Resume
from genresume.resume.loader import load_resume
from genresume.resume.renderer import render_string, render_template
from genresume.resume.exporter import PDFExporter, export_pdf
from genresume.resume.pipeline import build_html, generate_resume

__all__ = [
    "Resume",
    "load_resume",
    "render_string",
    "render_template",
    "PDFExporter",
    "export_pdf",
    "build_html",
    "generate_resume",
]
