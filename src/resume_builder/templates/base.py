"""Abstract base class for pluggable resume templates.

Templates only decide how a section looks. Which sections appear, and in
what order, is decided here so every template renders the same data.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pylatex import Document, NoEscape

from resume_builder.templates.config import FONT_PACKAGES, ResumeFont, TemplateName

if TYPE_CHECKING:
    from collections.abc import Callable

    from resume_builder.models.resume_content import ResumeContent

__all__ = ["SECTION_ORDER", "RenderedResume", "ResumeTemplate", "section_marker"]

# Characters that have special meaning in LaTeX.
_LATEX_SPECIAL = re.compile(r"[&%$#_{}~^\\]")
_LATEX_WORDS = {
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "\\": r"\textbackslash{}",
}
_PROTOCOL = re.compile(r"^https?://(www\.)?", re.IGNORECASE)
# Characters that break an \href target, with their replacements.
_URL_SPECIAL = re.compile(r"[%#{}\\ ]")
_URL_ESCAPES = {
    "%": r"\%",
    "#": r"\#",
    "{": r"\%7B",
    "}": r"\%7D",
    "\\": r"\%5C",
    " ": r"\%20",
}

SECTION_ORDER: tuple[str, ...] = (
    "header",
    "summary",
    "experience",
    "projects",
    "education",
    "skills",
)

PLACEHOLDER_NAME = "Your Name"


def section_marker(section: str) -> str:
    """Return the LaTeX comment line that opens *section* in the output."""
    return f"% section: {section}"


@dataclass(frozen=True, slots=True)
class RenderedResume:
    """A built document plus the sections it contains."""

    template: TemplateName
    font: ResumeFont
    sections: tuple[str, ...]
    document: Document

    def dumps(self) -> str:
        """Return the complete LaTeX source."""
        return self.document.dumps()


class ResumeTemplate(ABC):
    """Interface that every resume template must implement."""

    @property
    @abstractmethod
    def name(self) -> TemplateName:
        """Registry name of the template."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable template name shown in the UI."""

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, content: ResumeContent, font: ResumeFont = ResumeFont.INTER) -> RenderedResume:
        """Construct the document for *content* set in *font*.

        Sections whose data is empty are omitted entirely.
        """
        doc = self._create_document()
        doc.packages.append(FONT_PACKAGES[ResumeFont(font)])

        writers: dict[str, Callable[[Document, ResumeContent], None]] = {
            "header": self._add_heading,
            "summary": self._add_summary,
            "experience": self._add_experience,
            "projects": self._add_projects,
            "education": self._add_education,
            "skills": self._add_skills,
        }

        included: list[str] = []
        for section in SECTION_ORDER:
            if not self.has_section(content, section):
                continue
            doc.append(NoEscape(section_marker(section)))
            writers[section](doc, content)
            included.append(section)

        return RenderedResume(
            template=self.name,
            font=ResumeFont(font),
            sections=tuple(included),
            document=doc,
        )

    @staticmethod
    def has_section(content: ResumeContent, section: str) -> bool:
        """Return True when *section* has data to show."""
        match section:
            case "header":
                return True
            case "summary":
                return bool(content.summary.strip())
            case "experience":
                return bool(content.experience)
            case "projects":
                return bool(content.projects)
            case "education":
                return bool(content.education)
            case "skills":
                return bool(content.skills)
        raise ValueError(f"Unknown section {section!r}")

    # ------------------------------------------------------------------
    # per-template layout
    # ------------------------------------------------------------------

    @abstractmethod
    def _create_document(self) -> Document: ...

    @abstractmethod
    def _add_heading(self, doc: Document, content: ResumeContent) -> None: ...

    @abstractmethod
    def _add_summary(self, doc: Document, content: ResumeContent) -> None: ...

    @abstractmethod
    def _add_experience(self, doc: Document, content: ResumeContent) -> None: ...

    @abstractmethod
    def _add_projects(self, doc: Document, content: ResumeContent) -> None: ...

    @abstractmethod
    def _add_education(self, doc: Document, content: ResumeContent) -> None: ...

    @abstractmethod
    def _add_skills(self, doc: Document, content: ResumeContent) -> None: ...

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def _new_document(options: list[str]) -> Document:
        doc = Document(
            documentclass="article",
            document_options=options,
            page_numbers=True,
            indent=True,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )
        doc.packages = [p for p in doc.packages if "lastpage" not in p.dumps()]
        return doc

    @staticmethod
    def escape_latex(text: str) -> str:
        r"""Escape LaTeX special characters in *text*.

        Handles: ``& % $ # _ { } ~ ^ \``
        """
        # Single pass so the braces of \textbackslash{} are not escaped again.
        return _LATEX_SPECIAL.sub(
            lambda m: _LATEX_WORDS.get(m.group(), "\\" + m.group()), text
        )

    @classmethod
    def format_date_range(cls, start: str, end: str) -> str:
        """Return ``start -- end``, or whichever side is present.

        Dates are free-form strings typed by the user, so each side is
        escaped before the separator is added.
        """
        start = cls.escape_latex(start.strip())
        end = cls.escape_latex(end.strip())
        if start and end:
            return f"{start} -- {end}"
        return start or end

    @staticmethod
    def _strip_protocol(url: str) -> str:
        """Drop the scheme and leading ``www.`` for display."""
        return _PROTOCOL.sub("", url.strip()).rstrip("/")

    @staticmethod
    def escape_url(url: str) -> str:
        r"""Make *url* safe as the first argument of ``\href``.

        Braces, backslashes and spaces are percent-encoded; ``%`` and ``#``
        get the backslash escapes hyperref expects.
        """
        return _URL_SPECIAL.sub(lambda m: _URL_ESCAPES[m.group()], url)

    @classmethod
    def _link_target(cls, url: str) -> str:
        url = url.strip()
        if not _PROTOCOL.match(url):
            url = f"https://{url}"
        return cls.escape_url(url)

    def _display_name(self, content: ResumeContent) -> str:
        return self.escape_latex(content.personal_info.full_name.strip() or PLACEHOLDER_NAME)

    def _contact_parts(self, content: ResumeContent) -> list[str]:
        """Escaped contact fields in display order, blanks dropped."""
        esc = self.escape_latex
        info = content.personal_info
        parts: list[str] = []
        if info.email.strip():
            email = info.email.strip()
            parts.append(rf"\href{{mailto:{self.escape_url(email)}}}{{{esc(email)}}}")
        if info.phone.strip():
            parts.append(esc(info.phone.strip()))
        if info.location.strip():
            parts.append(esc(info.location.strip()))
        if info.linkedin.strip():
            target = self._link_target(info.linkedin)
            parts.append(rf"\href{{{target}}}{{{esc(self._strip_protocol(info.linkedin))}}}")
        return parts
