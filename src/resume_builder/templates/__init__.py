"""Template registry for resume rendering."""

from __future__ import annotations

from resume_builder.errors import ValidationError
from resume_builder.templates.base import RenderedResume, ResumeTemplate, section_marker
from resume_builder.templates.classic import ClassicResumeTemplate
from resume_builder.templates.config import RenderConfig, ResumeFont, TemplateName
from resume_builder.templates.minimal import MinimalResumeTemplate
from resume_builder.templates.modern import ModernResumeTemplate

__all__ = [
    "RenderConfig",
    "RenderedResume",
    "ResumeFont",
    "ResumeTemplate",
    "TemplateName",
    "get_template",
    "list_templates",
    "section_marker",
]

_REGISTRY: dict[str, ResumeTemplate] = {
    TemplateName.MODERN: ModernResumeTemplate(),
    TemplateName.CLASSIC: ClassicResumeTemplate(),
    TemplateName.MINIMAL: MinimalResumeTemplate(),
}


def get_template(name: str) -> ResumeTemplate:
    """Return the template registered under *name*.

    Raises:
        ValidationError: If no template with that name exists.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValidationError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)
