"""HTML to PDF conversion through headless Chromium.

The rendered HTML is written to a temporary file, opened in a Playwright
controlled Chromium and printed with A4 geometry and no margins. A single
deadline covers launching the browser, loading the page and printing.
"""

import asyncio
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from genresume.shared import (
    A4_HEIGHT_IN,
    A4_WIDTH_IN,
    CHROMIUM_ARGS,
    DEFAULT_TIMEOUT,
    Color,
    Deadline,
    RenderError,
    RenderTimeoutError,
    ResumeIOError,
    echo,
)


PDF_OPTIONS = {
    "print_background": True,
    "width": f"{A4_WIDTH_IN}in",
    "height": f"{A4_HEIGHT_IN}in",
    "margin": {"top": "0", "right": "0", "bottom": "0", "left": "0"},
    "prefer_css_page_size": True,
}


def ensure_output_dir(output_path: Path) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ResumeIOError("create output directory", output_path.parent, e, stage="export") from e


@contextmanager
def scoped_html_file(html: str) -> Iterator[Path]:
    """Write ``html`` to a temporary file that is removed on exit."""
    try:
        fd, name = tempfile.mkstemp(prefix="resume-", suffix=".html")
    except OSError as e:
        raise ResumeIOError("create temporary file in", tempfile.gettempdir(), e, stage="export") from e

    path = Path(name)
    try:
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(html)
        except OSError as e:
            raise ResumeIOError("write HTML to", path, e, stage="export") from e
        yield path
    finally:
        path.unlink(missing_ok=True)


def write_pdf(pdf: bytes, output_path: Path) -> None:
    try:
        output_path.write_bytes(pdf)
    except OSError as e:
        raise ResumeIOError("write PDF file", output_path, e, stage="export") from e


class PDFExporter:
    """Prints HTML documents to PDF with a headless browser."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, verbose: bool = False):
        self.timeout = timeout
        self.verbose = verbose
        self.step = "launch browser"

    def _enter(self, step: str) -> None:
        self.step = step
        if self.verbose:
            echo(f"  Browser: {step}", Color.INFO)

    async def _print_page(self, html_path: Path, deadline: Deadline) -> bytes:
        async with async_playwright() as p:
            self._enter("launch browser")
            browser = await p.chromium.launch(
                headless=True,
                args=CHROMIUM_ARGS,
                chromium_sandbox=False,
                timeout=deadline.budget_ms(self.step),
            )
            try:
                self._enter("load page")
                page = await browser.new_page()
                await page.goto(
                    html_path.as_uri(),
                    wait_until="load",
                    timeout=deadline.budget_ms(self.step),
                )

                self._enter("wait for document body")
                await page.wait_for_selector(
                    "body", state="attached", timeout=deadline.budget_ms(self.step)
                )

                self._enter("print to PDF")
                page.set_default_timeout(deadline.budget_ms(self.step))
                return await page.pdf(**PDF_OPTIONS)
            finally:
                await browser.close()

    def print_to_pdf(self, html_path: Path, deadline: Deadline) -> bytes:
        """Load ``html_path`` in the browser and return the printed PDF bytes."""
        self.step = "launch browser"
        session = self._print_page(html_path, deadline)
        try:
            pdf = asyncio.run(asyncio.wait_for(session, timeout=deadline.remaining()))
        except (asyncio.TimeoutError, PlaywrightTimeoutError) as e:
            raise RenderTimeoutError(deadline.seconds, self.step) from e
        except PlaywrightError as e:
            if deadline.expired:
                raise RenderTimeoutError(deadline.seconds, self.step) from e
            raise RenderError(self.step, e.message) from e

        if not pdf:
            raise RenderError(self.step, "browser returned an empty document")
        return pdf

    def export(self, html: str, output_path: Path | str) -> Path:
        """Convert ``html`` to PDF and write it to ``output_path``."""
        output_path = Path(output_path)
        ensure_output_dir(output_path)

        with scoped_html_file(html) as html_path:
            deadline = Deadline(self.timeout)
            pdf = self.print_to_pdf(html_path, deadline)

        write_pdf(pdf, output_path)
        return output_path


def export_pdf(html: str, output_path: Path | str, timeout: float = DEFAULT_TIMEOUT) -> Path:
    return PDFExporter(timeout=timeout).export(html, output_path)
