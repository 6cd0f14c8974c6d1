import sys
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


A4_WIDTH_IN = 8.27
A4_HEIGHT_IN = 11.69
DEFAULT_TIMEOUT = 30.0
DEFAULT_TEMPLATE = "template.html"
DEFAULT_OUTPUT = "resume.pdf"

# Headless mode itself is requested through Playwright's ``headless`` flag
CHROMIUM_ARGS = [
    "--disable-gpu",
    "--no-sandbox",
    "--disable-dev-shm-usage",
]


class Color(str, Enum):
    SUCCESS = "\033[92m"
    ERROR = "\033[91m"
    INFO = "\033[94m"
    WARNING = "\033[93m"
    RESET = "\033[0m"


def colored(text: str, color: Color) -> str:
    return f"{color.value}{text}{Color.RESET.value}"


def echo(text: str, color: Color = Color.INFO, err: bool = False) -> None:
    print(colored(text, color), file=sys.stderr if err else sys.stdout)


class ResumeError(Exception):
    stage = "generate"

    def __init__(self, message: str, stage: str | None = None):
        if stage is not None:
            self.stage = stage
        super().__init__(f"{self.stage}: {message}")


class ResumeIOError(ResumeError, OSError):
    def __init__(self, action: str, path: Path | str, cause: Exception, stage: str):
        self.path = Path(path)
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"failed to {action} {path}: {reason}", stage)


class ParseError(ResumeError, ValueError):
    stage = "load"

    def __init__(self, path: Path | str, detail: str):
        self.path = Path(path)
        super().__init__(f"failed to parse {path}: {detail}")


class TemplateSyntaxError(ResumeError):
    stage = "render"

    def __init__(self, path: Path | str, lineno: int | None, detail: str):
        self.path = Path(path)
        self.lineno = lineno
        where = f"{path}:{lineno}" if lineno else str(path)
        super().__init__(f"invalid template {where}: {detail}")


class TemplateExecutionError(ResumeError):
    stage = "render"

    def __init__(self, path: Path | str, detail: str):
        self.path = Path(path)
        super().__init__(f"failed to execute template {path}: {detail}")


class RenderTimeoutError(ResumeError, TimeoutError):
    stage = "export"

    def __init__(self, seconds: float, step: str):
        self.seconds = seconds
        self.step = step
        super().__init__(f"browser did not finish within {seconds:g}s (while trying to {step})")


class RenderError(ResumeError):
    stage = "export"

    def __init__(self, step: str, detail: str):
        self.step = step
        super().__init__(f"browser failed to {step}: {detail}")


class Deadline:
    """Absolute point in time shared by every step of one browser session.

    Playwright only knows per-call timeouts, so each call is handed whatever
    is left of the overall budget.
    """

    def __init__(self, seconds: float, clock=time.monotonic):
        self.seconds = seconds
        self._clock = clock
        self._expires_at = clock() + seconds

    def remaining(self) -> float:
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0

    def budget_ms(self, step: str) -> float:
        """Milliseconds left for ``step``; raises once the budget is spent.

        Playwright treats a timeout of 0 as "wait forever", so an exhausted
        deadline must never be passed through.
        """
        if self.expired:
            raise RenderTimeoutError(self.seconds, step)
        return max(1.0, self.remaining() * 1000)


@dataclass(frozen=True)
class BuildConfig:
    """Parsed command line options for one generation run."""

    json_path: Path
    template_path: Path = Path(DEFAULT_TEMPLATE)
    output_path: Path = Path(DEFAULT_OUTPUT)
    timeout: float = DEFAULT_TIMEOUT
    html_only: bool = False
    verbose: bool = False
