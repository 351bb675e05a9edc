"""
Resume Router - PDF upload and AI resume analysis (JSON API + HTML view)
"""
import os
from typing import Optional
from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..config import get_settings
from ..schemas.analysis import ResultEnvelope, UploadedDocument
from ..services.orchestrator import ResumeAnalyzer, get_resume_analyzer

router = APIRouter(tags=["Resume"])

templates = Jinja2Templates(
    directory=os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
)


# ============================================================================
# Helper Functions
# ============================================================================

async def read_upload(file: Optional[UploadFile]) -> Optional[UploadedDocument]:
    """Turn a multipart upload into an UploadedDocument (None if nothing was sent)."""
    if file is None:
        return None

    # Anything past the ceiling is rejected by size anyway
    content = await file.read(get_settings().max_upload_bytes + 1)
    if not file.filename and not content:
        # Empty file input submitted from the form
        return None

    return UploadedDocument(
        content=content,
        media_type=file.content_type or "",
        filename=file.filename,
    )


def render_analyzer(request: Request, envelope: Optional[ResultEnvelope] = None) -> HTMLResponse:
    settings = get_settings()
    return templates.TemplateResponse(
        request,
        "resume_analyzer.html",
        {
            "analysis": envelope.data if envelope and envelope.success else None,
            "error": envelope.error if envelope and not envelope.success else None,
            "max_upload_mb": settings.max_upload_mb,
        },
    )


# ============================================================================
# API Endpoints
# ============================================================================

@router.post("/api/resume/analyze", response_model=ResultEnvelope)
async def analyze_resume(
    resume: Optional[UploadFile] = File(None),
    analyzer: ResumeAnalyzer = Depends(get_resume_analyzer),
):
    """
    Analyze an uploaded PDF resume.

    Always answers 200 with a ResultEnvelope; failures are reported through
    success=false and a user-facing error message.
    """
    document = await read_upload(resume)
    return await analyzer.analyze(document)


# ============================================================================
# HTML View
# ============================================================================

@router.get("/resume-analyzer", response_class=HTMLResponse)
async def resume_analyzer_page(request: Request):
    """Upload form."""
    return render_analyzer(request)


@router.post("/resume-analyzer", response_class=HTMLResponse)
async def resume_analyzer_submit(
    request: Request,
    resume: Optional[UploadFile] = File(None),
    analyzer: ResumeAnalyzer = Depends(get_resume_analyzer),
):
    """
    Analyze and render the results, or the form again with the error.

    Other pages hand a selected file over by posting it here directly
    (form field "resume").
    """
    document = await read_upload(resume)
    envelope = await analyzer.analyze(document)
    return render_analyzer(request, envelope)
