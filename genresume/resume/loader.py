"""Reading resume data files into :class:`Resume` records."""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from genresume.shared import ParseError, ResumeIOError
from genresume.resume.models import Resume


YAML_SUFFIXES = (".yaml", ".yml")


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = " -> ".join(str(x) for x in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


def parse_resume_data(raw: bytes, path: Path) -> Resume:
    """Decode raw file contents into a resume record."""
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(path, f"invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ParseError(path, f"invalid encoding: {e}") from e
    except yaml.YAMLError as e:
        raise ParseError(path, f"invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError(path, f"expected an object at top level, got {type(data).__name__}")

    try:
        return Resume.model_validate(data)
    except ValidationError as e:
        raise ParseError(path, _format_validation_error(e)) from e


def load_resume(path: Path | str) -> Resume:
    """Read and parse the resume file at ``path``."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ResumeIOError("read resume file", path, e, stage="load") from e

    return parse_resume_data(raw, path)
