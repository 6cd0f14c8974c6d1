import asyncio
import json
from pathlib import Path

import pytest

from genresume.resume.models import Resume


SIMPLE_TEMPLATE = "<h1>{{ name }}</h1><p>{{ title }}</p>"


@pytest.fixture
def resume_data() -> dict:
    return {
        "name": "Jane Doe",
        "title": "Engineer",
        "email": "jane@example.com",
        "experience": [
            {
                "title": "Developer",
                "company": "Acme",
                "startDate": "2020-01",
                "endDate": "2023-06",
                "responsibilities": ["Built things", "Fixed things"],
            }
        ],
        "technicalSkills": [{"category": "Languages", "items": ["Python", "Go"]}],
        "languages": [{"name": "English", "proficiency": "Native"}],
    }


@pytest.fixture
def resume(resume_data) -> Resume:
    return Resume.model_validate(resume_data)


@pytest.fixture
def json_file(tmp_path, resume_data) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(resume_data))
    return path


@pytest.fixture
def template_file(tmp_path) -> Path:
    path = tmp_path / "template.html"
    path.write_text(SIMPLE_TEMPLATE)
    return path


class FakePage:
    """Stands in for a Playwright page."""

    def __init__(self, pdf: bytes = b"%PDF-1.7 fake", hang_on: str | None = None, fail_on: tuple[str, Exception] | None = None):
        self.pdf_bytes = pdf
        self.hang_on = hang_on
        self.fail_on = fail_on
        self.calls: list[tuple[str, tuple, dict]] = []
        self.loaded_html: str | None = None
        self.html_path: Path | None = None

    async def _step(self, name: str, *args, **kwargs) -> None:
        self.calls.append((name, args, kwargs))
        if self.hang_on == name:
            await asyncio.sleep(60)
        if self.fail_on is not None and self.fail_on[0] == name:
            raise self.fail_on[1]

    async def goto(self, url, **kwargs):
        self.html_path = Path(url.removeprefix("file://"))
        self.loaded_html = self.html_path.read_text()
        await self._step("goto", url, **kwargs)

    async def wait_for_selector(self, selector, **kwargs):
        await self._step("wait_for_selector", selector, **kwargs)

    def set_default_timeout(self, timeout):
        self.calls.append(("set_default_timeout", (timeout,), {}))

    async def pdf(self, **kwargs):
        await self._step("pdf", **kwargs)
        return self.pdf_bytes


class FakeBrowser:
    def __init__(self, page: FakePage):
        self.page = page
        self.closed = False

    async def new_page(self):
        return self.page

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser: FakeBrowser):
        self.browser = browser
        self.launch_kwargs: dict | None = None

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    """Replacement for ``async_playwright`` that never starts a browser."""

    def __init__(self, page: FakePage | None = None):
        self.page = page or FakePage()
        self.browser = FakeBrowser(self.page)
        self.chromium = FakeChromium(self.browser)
        self.stopped = False

    def __call__(self):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.stopped = True
        return False


@pytest.fixture
def fake_playwright(monkeypatch):
    """Patch the exporter to use a fake browser and return a factory for it."""

    def install(**page_kwargs) -> FakePlaywright:
        fake = FakePlaywright(FakePage(**page_kwargs))
        monkeypatch.setattr("genresume.resume.exporter.async_playwright", fake)
        return fake

    return install
