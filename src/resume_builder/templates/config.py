"""Render configuration passed explicitly to every render call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pylatex import NoEscape, Package

from resume_builder.errors import ValidationError

__all__ = ["FONT_PACKAGES", "RenderConfig", "ResumeFont", "TemplateName"]


class TemplateName(StrEnum):
    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"


class ResumeFont(StrEnum):
    INTER = "inter"
    GEORGIA = "georgia"
    MERRIWEATHER = "merriweather"


# Georgia itself is not distributed with TeX; Gelasio is metric-compatible.
FONT_PACKAGES: dict[ResumeFont, Package] = {
    ResumeFont.INTER: Package("inter", options=NoEscape("sfdefault")),
    ResumeFont.GEORGIA: Package("gelasio"),
    ResumeFont.MERRIWEATHER: Package("merriweather"),
}


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Template and font choice for one render."""

    template: TemplateName = TemplateName.MODERN
    font: ResumeFont = ResumeFont.INTER

    @classmethod
    def from_names(cls, template: str | None = None, font: str | None = None) -> RenderConfig:
        """Build a config from user-supplied names; ``None`` keeps the default.

        Raises:
            ValidationError: If either name is unknown.
        """
        try:
            chosen_template = TemplateName(template) if template else TemplateName.MODERN
        except ValueError:
            available = ", ".join(t.value for t in TemplateName)
            raise ValidationError(
                f"Unknown template {template!r}. Available: {available}"
            ) from None
        try:
            chosen_font = ResumeFont(font) if font else ResumeFont.INTER
        except ValueError:
            available = ", ".join(f.value for f in ResumeFont)
            raise ValidationError(f"Unknown font {font!r}. Available: {available}") from None
        return cls(template=chosen_template, font=chosen_font)
