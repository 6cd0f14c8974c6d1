"""Generate PDF resumes from JSON data and an HTML template."""

__version__ = "0.1.0"
