"""Classic resume template.

Traditional ATS-friendly single-page layout: small-caps section headers
underlined with a full-width rule, two-line entry headings with the
dates flushed right.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from resume_builder.templates.base import ResumeTemplate
from resume_builder.templates.config import TemplateName

if TYPE_CHECKING:
    from resume_builder.models.resume_content import ResumeContent

__all__ = ["ClassicResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("latexsym"),
    Package("fullpage", options=NoEscape("empty")),
    Package("titlesec"),
    Package("color", options=NoEscape("usenames,dvipsnames")),
    Package("enumitem"),
    Package("hyperref", options=NoEscape("hidelinks")),
    Package("fancyhdr"),
    Package("babel", options=NoEscape("english")),
    Package("tabularx"),
    Package("fontenc", options=NoEscape("T1")),
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
\titleformat{\section}{
  \vspace{-4pt}\scshape\raggedright\large
}{}{0em}{}[\color{black}\titlerule \vspace{-5pt}]
\pdfgentounicode=1
"""

_CUSTOM_COMMANDS = r"""
\newcommand{\resumeItem}[1]{
  \item\small{
    {#1 \vspace{-2pt}}
  }
}
\newcommand{\resumeSubheading}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\resumeProjectHeading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \small#1 & #2 \\
    \end{tabular*}\vspace{-7pt}
}
\renewcommand\labelitemii{$\vcenter{\hbox{\tiny$\bullet$}}$}
\newcommand{\resumeSubHeadingListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\resumeSubHeadingListEnd}{\end{itemize}}
\newcommand{\resumeItemListStart}{\begin{itemize}}
\newcommand{\resumeItemListEnd}{\end{itemize}\vspace{-5pt}}
"""


class ClassicResumeTemplate(ResumeTemplate):
    """Serif resume with ruled small-caps section headers."""

    @property
    def name(self) -> TemplateName:
        return TemplateName.CLASSIC

    @property
    def label(self) -> str:
        return "Classic"

    def _create_document(self) -> Document:
        doc = self._new_document(["letterpaper", "11pt"])
        for pkg in _PACKAGES:
            doc.packages.append(pkg)
        doc.preamble.append(NoEscape(_PREAMBLE_SETUP))
        doc.preamble.append(NoEscape(_CUSTOM_COMMANDS))
        return doc

    def _add_heading(self, doc: Document, content: ResumeContent) -> None:
        parts = self._contact_parts(content)
        separator = r" $|$ "
        heading = (
            r"\begin{center}"
            rf"\textbf{{\Huge \scshape {self._display_name(content)}}} \\ \vspace{{1pt}}"
        )
        if parts:
            heading += rf"\small {separator.join(parts)}"
        heading += r"\end{center}"
        doc.append(NoEscape(heading))

    def _add_summary(self, doc: Document, content: ResumeContent) -> None:
        lines = [
            r"\section{Professional Summary}",
            rf"\small{{{self.escape_latex(content.summary.strip())}}}",
        ]
        doc.append(NoEscape("\n".join(lines)))

    def _add_experience(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Experience}", r"\resumeSubHeadingListStart"]

        for entry in content.experience:
            date_range = self.format_date_range(entry.start_date, entry.display_end_date())
            lines.append(
                rf"\resumeSubheading{{{esc(entry.position)}}}{{{date_range}}}"
                rf"{{{esc(entry.company)}}}{{{esc(entry.location)}}}"
            )
            bullets = entry.non_blank_bullets()
            if bullets:
                lines.append(r"\resumeItemListStart")
                for bullet in bullets:
                    lines.append(rf"\resumeItem{{{esc(bullet)}}}")
                lines.append(r"\resumeItemListEnd")

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    def _add_projects(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Projects}", r"\resumeSubHeadingListStart"]

        for entry in content.projects:
            techs = entry.technologies
            tech_str = r" $|$ \emph{" + esc(", ".join(techs)) + "}" if techs else ""
            link = ""
            if entry.link and entry.link.strip():
                display = esc(self._strip_protocol(entry.link))
                link = rf"\href{{{self._link_target(entry.link)}}}{{\underline{{{display}}}}}"
            lines.append(
                rf"\resumeProjectHeading{{\textbf{{{esc(entry.name)}}}{tech_str}}}{{{link}}}"
            )
            if entry.description.strip():
                lines.append(r"\resumeItemListStart")
                lines.append(rf"\resumeItem{{{esc(entry.description.strip())}}}")
                lines.append(r"\resumeItemListEnd")

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    def _add_education(self, doc: Document, content: ResumeContent) -> None:
        esc = self.escape_latex
        lines = [r"\section{Education}", r"\resumeSubHeadingListStart"]

        for entry in content.education:
            degree = esc(entry.degree)
            if entry.field_of_study:
                degree = f"{degree} in {esc(entry.field_of_study)}"
            date_range = self.format_date_range(entry.start_date, entry.end_date)
            gpa = rf"GPA: {esc(entry.gpa)}" if entry.gpa else ""
            lines.append(
                rf"\resumeSubheading{{{esc(entry.institution)}}}{{{date_range}}}"
                rf"{{{degree}}}{{{gpa}}}"
            )

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    def _add_skills(self, doc: Document, content: ResumeContent) -> None:
        joined = self.escape_latex(", ".join(content.skills))
        lines = [
            r"\section{Technical Skills}",
            r"\begin{itemize}[leftmargin=0.15in, label={}]",
            rf"\small{{\item{{\textbf{{Skills}}{{: {joined}}}}}}}",
            r"\end{itemize}",
        ]
        doc.append(NoEscape("\n".join(lines)))
