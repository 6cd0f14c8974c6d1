"""HTML rendering of resume records with Jinja2.

Templates see every resume field as a top-level variable and the whole
record as ``resume``::

    <h1>{{ name }}</h1>
    {% for job in experience %}<h2>{{ job.title }} at {{ job.company }}</h2>{% endfor %}
"""

from pathlib import Path

import jinja2
from jinja2 import Environment, StrictUndefined

from genresume.shared import ResumeIOError, TemplateExecutionError, TemplateSyntaxError
from genresume.resume.models import Resume


RENDER_ERRORS = (
    jinja2.TemplateError,
    TypeError,
    ValueError,
    LookupError,
    AttributeError,
    ArithmeticError,
)


def create_environment() -> Environment:
    """Build the Jinja2 environment used for resume templates."""
    return Environment(
        # Referencing a field the record does not have is an error
        undefined=StrictUndefined,
        autoescape=True,
        keep_trailing_newline=True,
    )


def render_string(
    source: str,
    resume: Resume,
    name: Path | str = "<template>",
    env: Environment | None = None,
) -> str:
    """Render template ``source`` against ``resume``."""
    env = env or create_environment()

    try:
        template = env.from_string(source)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateSyntaxError(name, e.lineno, e.message or str(e)) from e

    try:
        return template.render(resume.template_context())
    except RENDER_ERRORS as e:
        raise TemplateExecutionError(name, f"{type(e).__name__}: {e}") from e


def render_template(template_path: Path | str, resume: Resume) -> str:
    """Read the template at ``template_path`` and render it to HTML."""
    template_path = Path(template_path)
    try:
        source = template_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TemplateSyntaxError(template_path, None, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise ResumeIOError("read template file", template_path, e, stage="render") from e

    return render_string(source, resume, name=template_path)
