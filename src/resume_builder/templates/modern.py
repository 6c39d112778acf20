"""Modern resume template.

Sans-serif body, no decorative rules on section headers, compact
10pt body, tight margins.  Clean and dense single-page layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from resume_builder.templates.base import ResumeTemplate
from resume_builder.templates.config import TemplateName

if TYPE_CHECKING:
    from resume_builder.models.resume_content import ResumeContent

__all__ = ["ModernResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("latexsym"),
    Package("fullpage", options=NoEscape("empty")),
    Package("titlesec"),
    Package("enumitem"),
    Package("hyperref", options=NoEscape("hidelinks")),
    Package("fancyhdr"),
    Package("fontenc", options=NoEscape("T1")),
    Package("tabularx"),
]

_PREAMBLE_SETUP = r"""
\pagestyle{fancy}
\fancyhf{}
\fancyfoot{}
\renewcommand{\headrulewidth}{0pt}
\renewcommand{\footrulewidth}{0pt}
\addtolength{\oddsidemargin}{-0.5in}
\addtolength{\evensidemargin}{-0.5in}
\addtolength{\textwidth}{1in}
\addtolength{\topmargin}{-.5in}
\addtolength{\textheight}{1.0in}
\urlstyle{same}
\raggedbottom
\raggedright
\setlength{\tabcolsep}{0in}
\setlength{\parindent}{0pt}
\titleformat{\section}{\large\bfseries}{}{0em}{}
\titlespacing{\section}{0pt}{8pt}{4pt}
\pdfgentounicode=1
"""

_CUSTOM_COMMANDS = r"""
\newcommand{\modernSubheading}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\modernItem}[1]{
  \item\small{
    {#1 \vspace{-2pt}}
  }
}
\newcommand{\modernProjectHeading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \small#1 & #2 \\
    \end{tabular*}\vspace{-7pt}
}
\renewcommand\labelitemii{$\vcenter{\hbox{\tiny$\bullet$}}$}
\newcommand{\modernListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\modernListEnd}{\end{itemize}}
\newcommand{\modernItemListStart}{\begin{itemize}[leftmargin=0.15in]}
\newcommand{\modernItemListEnd}{\end{itemize}\vspace{-5pt}}
"""


class ModernResumeTemplate(ResumeTemplate):
    """Modern sans-serif resume with compact layout."""

    @property
    def name(self) -> TemplateName:
        return TemplateName.MODERN

    @property
    def label(self) -> str:
        return "Modern"

    def _create_document(self) -> Document:
        doc = self._new_document(["letterpaper", "10pt"])
        for pkg in _PACKAGES:
            doc.packages.append(pkg)
        doc.preamble.append(NoEscape(_PREAMBLE_SETUP))
        doc.preamble.append(NoEscape(_CUSTOM_COMMANDS))
        return doc

    # -- heading -----------------------------------------------------------

    def _add_heading(self, doc: Document, content: ResumeContent) -> None:
        parts = self._contact_parts(content)
        separator = r" \textbar\ "
        heading = r"\begin{center}"
        heading += rf"{{\Large\bfseries {self._display_name(content)}}}"
        heading += r" \\ \vspace{1pt}"
        if parts:
            heading += rf"\small {separator.join(parts)}"
        heading += r"\end{center}"
        doc.append(NoEscape(heading))

    # -- summary -----------------------------------------------------------

    def _add_summary(self, doc: Document, content: ResumeContent) -> None:
        lines = [
            r"\section{Summary}",
            rf"\small{{{self.escape_latex(content.summary.strip())}}}",
        ]
        doc.append(NoEscape("\n".join(lines)))

    # -- experience --------------------------------------------------------

    def _add_experience(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Experience}", r"\modernListStart"]

        for entry in content.experience:
            date_range = self.format_date_range(entry.start_date, entry.display_end_date())
            lines.append(
                rf"\modernSubheading{{{esc(entry.position)}}}{{{date_range}}}"
                rf"{{{esc(entry.company)}}}{{{esc(entry.location)}}}"
            )

            bullets = entry.non_blank_bullets()
            if bullets:
                lines.append(r"\modernItemListStart")
                for bullet in bullets:
                    lines.append(rf"\modernItem{{{esc(bullet)}}}")
                lines.append(r"\modernItemListEnd")

        lines.append(r"\modernListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- projects ----------------------------------------------------------

    def _add_projects(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Projects}", r"\modernListStart"]

        for entry in content.projects:
            techs = entry.technologies
            tech_str = r" $|$ \emph{" + esc(", ".join(techs)) + "}" if techs else ""
            heading_text = rf"\textbf{{{esc(entry.name)}}}{tech_str}"
            link = ""
            if entry.link and entry.link.strip():
                link = rf"\href{{{self._link_target(entry.link)}}}"
                link += rf"{{{esc(self._strip_protocol(entry.link))}}}"
            lines.append(rf"\modernProjectHeading{{{heading_text}}}{{{link}}}")

            if entry.description.strip():
                lines.append(r"\modernItemListStart")
                lines.append(rf"\modernItem{{{esc(entry.description.strip())}}}")
                lines.append(r"\modernItemListEnd")

        lines.append(r"\modernListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- education ---------------------------------------------------------

    def _add_education(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Education}", r"\modernListStart"]

        for entry in content.education:
            degree = esc(entry.degree)
            if entry.field_of_study:
                degree = f"{degree} in {esc(entry.field_of_study)}"
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            gpa = rf"GPA: {esc(entry.gpa)}" if entry.gpa else ""
            lines.append(
                rf"\modernSubheading{{{esc(entry.institution)}}}{{{date_range}}}"
                rf"{{{degree}}}{{{gpa}}}"
            )

        lines.append(r"\modernListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- skills ------------------------------------------------------------

    def _add_skills(self, doc: Document, content: ResumeContent) -> None:
        joined = self.escape_latex(", ".join(content.skills))
        lines = [
            r"\section{Skills}",
            r"\begin{itemize}[leftmargin=0.15in, label={}]",
            rf"\small{{\item{{{joined}}}}}",
            r"\end{itemize}",
        ]
        doc.append(NoEscape("\n".join(lines)))
