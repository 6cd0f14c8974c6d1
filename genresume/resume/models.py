"""Pydantic models for the resume data file.

Every field is optional: missing keys and explicit nulls fall back to an
empty string or an empty sequence, and unknown keys are ignored. Keys are
matched to field names case-insensitively. Values of the wrong JSON type
are still rejected.

Records are immutable. Their scalars cannot be looped over from a template,
and neither can the records themselves; only the sequence fields iterate.
"""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator


class Text(str):
    """String field value that refuses iteration."""

    __slots__ = ()

    def __iter__(self):
        raise TypeError(f"can't iterate over {str(self)!r}")


def _as_text(value: str) -> Text:
    return Text(value)


TextField = Annotated[str, AfterValidator(_as_text)]

EMPTY = Text("")


class Record(BaseModel):
    """Base for all resume records."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        names = {name.lower(): name for name in cls.model_fields}
        normalized = {}
        for key, value in data.items():
            # null leaves the field at its default
            if value is None or not isinstance(key, str):
                continue
            name = key if key in cls.model_fields else names.get(key.lower())
            if name is not None:
                normalized[name] = value
        return normalized

    def __iter__(self):
        raise TypeError(f"can't iterate over {type(self).__name__} record")


class Experience(Record):
    """Work experience entry."""

    title: TextField = EMPTY
    company: TextField = EMPTY
    startDate: TextField = EMPTY
    endDate: TextField = EMPTY
    responsibilities: tuple[TextField, ...] = ()


class SkillCategory(Record):
    """Named group of skills."""

    category: TextField = EMPTY
    items: tuple[TextField, ...] = ()


class Education(Record):
    """Education entry."""

    degree: TextField = EMPTY
    school: TextField = EMPTY
    startDate: TextField = EMPTY
    endDate: TextField = EMPTY
    description: TextField = EMPTY


class Project(Record):
    """Personal or professional project."""

    name: TextField = EMPTY
    url: TextField = EMPTY
    date: TextField = EMPTY
    description: TextField = EMPTY
    highlights: tuple[TextField, ...] = ()


class Certification(Record):
    name: TextField = EMPTY
    issuer: TextField = EMPTY
    date: TextField = EMPTY


class Language(Record):
    name: TextField = EMPTY
    proficiency: TextField = EMPTY


class Resume(Record):
    """Root resume record, passed as-is to the HTML template."""

    name: TextField = EMPTY
    title: TextField = EMPTY
    email: TextField = EMPTY
    phone: TextField = EMPTY
    location: TextField = EMPTY
    linkedin: TextField = EMPTY
    github: TextField = EMPTY
    website: TextField = EMPTY
    summary: TextField = EMPTY
    experience: tuple[Experience, ...] = ()
    technicalSkills: tuple[SkillCategory, ...] = ()
    softSkills: tuple[SkillCategory, ...] = ()
    education: tuple[Education, ...] = ()
    projects: tuple[Project, ...] = ()
    certifications: tuple[Certification, ...] = ()
    languages: tuple[Language, ...] = ()

    def template_context(self) -> dict[str, Any]:
        """Expose fields as top-level template variables plus ``resume``."""
        context = {name: getattr(self, name) for name in type(self).model_fields}
        context["resume"] = self
        return context
