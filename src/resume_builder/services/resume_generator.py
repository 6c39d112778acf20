"""Resume rendering and export service.

Rendering is a pure function of ``(content, RenderConfig)``; exporting
hands the rendered document to a LaTeX compiler.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from resume_builder.templates import RenderConfig, RenderedResume, get_template

if TYPE_CHECKING:
    from resume_builder.models.resume_content import ResumeContent

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_COMPILER",
    "generate_resume_pdf",
    "generate_resume_tex",
    "render_resume",
]

DEFAULT_COMPILER = "pdflatex"


def render_resume(content: ResumeContent, config: RenderConfig | None = None) -> RenderedResume:
    """Render *content* with the template and font named in *config*."""
    config = config or RenderConfig()
    template = get_template(config.template)
    return template.build(content, config.font)


def generate_resume_tex(content: ResumeContent, config: RenderConfig | None = None) -> str:
    """Return the full ``.tex`` source for *content*."""
    return render_resume(content, config).dumps()


def generate_resume_pdf(
    rendered: RenderedResume,
    output_path: Path,
    *,
    compiler: str = DEFAULT_COMPILER,
) -> Path:
    """Compile *rendered* to PDF.

    Requires *compiler* (``pdflatex`` or ``latexmk``) to be installed
    on the system.

    Args:
        rendered: Output of :func:`render_resume`.
        output_path: Desired output file path **without** extension.
        compiler: LaTeX compiler to invoke.

    Returns:
        The ``Path`` of the generated ``.pdf``.

    Raises:
        pylatex.errors.CompilerError: If no LaTeX compiler is installed.
        FileNotFoundError: If *compiler* is not installed.
        subprocess.CalledProcessError: If compilation fails.
    """
    logger.info(
        "Compiling %s resume (%s) to %s.pdf", rendered.template, rendered.font, output_path
    )
    # PyLaTeX appends .pdf/.tex automatically
    rendered.document.generate_pdf(
        str(output_path),
        clean_tex=False,
        compiler=compiler,
    )
    return Path(f"{output_path}.pdf")

