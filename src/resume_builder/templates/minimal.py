"""Minimal resume template.

Uppercase bold section headers with a thin rule, native LaTeX
sectioning, 1-inch margins on A4 and a ``description`` list for skills.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from resume_builder.templates.base import ResumeTemplate
from resume_builder.templates.config import TemplateName

if TYPE_CHECKING:
    from resume_builder.models.resume_content import ResumeContent

__all__ = ["MinimalResumeTemplate"]

_PACKAGES: list[Package] = [
    Package("geometry", options=NoEscape("a4paper,margin=1in")),
    Package("titlesec"),
    Package("enumitem"),
    Package("hyperref", options=NoEscape("hidelinks")),
    Package("fontenc", options=NoEscape("T1")),
]

_PREAMBLE_SETUP = r"""
\setlength{\parindent}{0pt}
\setcounter{secnumdepth}{0}
\titleformat{\section}{\large\bfseries\uppercase}{}{}{}[\titlerule]
\titleformat{\subsection}{\bfseries}{}{0em}{}
\titleformat*{\subsubsection}{\itshape}
\titlespacing{\section}{0pt}{6pt}{4pt}
\titlespacing{\subsection}{0pt}{4pt}{0pt}
\titlespacing{\subsubsection}{0pt}{2pt}{0pt}
\setlist[itemize]{noitemsep, topsep=2pt, left=0pt .. 1.5em}
\setlist[description]{itemsep=0pt}
\pagestyle{empty}
\pdfgentounicode=1
"""


class MinimalResumeTemplate(ResumeTemplate):
    """Plain single-column resume with uppercase section headers."""

    @property
    def name(self) -> TemplateName:
        return TemplateName.MINIMAL

    @property
    def label(self) -> str:
        return "Minimal"

    def _create_document(self) -> Document:
        doc = self._new_document(["a4paper", "11pt"])
        for pkg in _PACKAGES:
            doc.packages.append(pkg)
        doc.preamble.append(NoEscape(_PREAMBLE_SETUP))
        return doc

    def _add_heading(self, doc: Document, content: ResumeContent) -> None:
        # Name on the left, contact lines stacked on the right
        parts = self._contact_parts(content)
        heading = r"\begin{center}" "\n"
        heading += r"\begin{minipage}[t]{0.5\textwidth}" "\n"
        heading += rf"{{\Huge\bfseries {self._display_name(content)}}}" "\n"
        heading += r"\end{minipage}%" "\n"
        heading += r"\hfill" "\n"
        heading += r"\begin{minipage}[t]{0.4\textwidth}" "\n"
        heading += r"\raggedleft" "\n"
        if parts:
            heading += r" \\ ".join(parts) + "\n"
        heading += r"\end{minipage}" "\n"
        heading += r"\end{center}"
        doc.append(NoEscape(heading))

    def _add_summary(self, doc: Document, content: ResumeContent) -> None:
        lines = [r"\section{Summary}", self.escape_latex(content.summary.strip())]
        doc.append(NoEscape("\n".join(lines)))

    def _add_experience(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Experience}"]

        for entry in content.experience:
            date_range = self.format_date_range(entry.start_date, entry.display_end_date())
            lines.append(rf"\subsection*{{{esc(entry.company)} \hfill {esc(entry.location)}}}")
            lines.append(rf"\subsubsection*{{{esc(entry.position)} \hfill {date_range}}}")

            bullets = entry.non_blank_bullets()
            if bullets:
                lines.append(r"\begin{itemize}")
                for bullet in bullets:
                    lines.append(rf"\item {esc(bullet)}")
                lines.append(r"\end{itemize}")

        doc.append(NoEscape("\n".join(lines)))

    def _add_projects(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Projects}"]

        for entry in content.projects:
            techs = entry.technologies
            tech_str = rf" $|$ {{\normalfont\itshape {esc(', '.join(techs))}}}" if techs else ""
            link = ""
            if entry.link and entry.link.strip():
                display = esc(self._strip_protocol(entry.link))
                link = rf" \hfill \href{{{self._link_target(entry.link)}}}{{{display}}}"
            lines.append(rf"\subsection*{{{esc(entry.name)}{tech_str}{link}}}")
            if entry.description.strip():
                lines.append(esc(entry.description.strip()))

        doc.append(NoEscape("\n".join(lines)))

    def _add_education(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Education}"]

        for entry in content.education:
            degree = esc(entry.degree)
            if entry.field_of_study:
                degree = f"{degree} in {esc(entry.field_of_study)}"
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            lines.append(
                rf"\subsection*{{{esc(entry.institution)}"
                rf" $|$ {{\normalfont\itshape {degree}}} \hfill {date_range}}}"
            )
            if entry.gpa:
                lines.append(r"\begin{itemize}")
                lines.append(rf"\item GPA: {esc(entry.gpa)}")
                lines.append(r"\end{itemize}")

        doc.append(NoEscape("\n".join(lines)))

    def _add_skills(self, doc: Document, content: ResumeContent) -> None:
        joined = self.escape_latex(", ".join(content.skills))
        lines = [
            r"\section{Skills}",
            r"\begin{description}",
            rf"\item[Skills] {joined}",
            r"\end{description}",
        ]
        doc.append(NoEscape("\n".join(lines)))
