"""Services"""

from resume_builder.services.ai_enhance import enhance
from resume_builder.services.content_warnings import ContentWarning, generate_warnings
from resume_builder.services.editor import ResumeEditor
from resume_builder.services.progress import ProgressReport, compute_progress
from resume_builder.services.resume import (
    create_resume,
    delete_resume,
    get_resume,
    list_resumes,
    update_resume,
)
from resume_builder.services.resume_generator import (
    generate_resume_pdf,
    generate_resume_tex,
    render_resume,
)

__all__ = [
    "ContentWarning",
    "ProgressReport",
    "ResumeEditor",
    "compute_progress",
    "create_resume",
    "delete_resume",
    "enhance",
    "generate_resume_pdf",
    "generate_resume_tex",
    "generate_warnings",
    "get_resume",
    "list_resumes",
    "render_resume",
    "update_resume",
]
