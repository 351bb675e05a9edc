"""
Resume analysis orchestrator.

Validate upload -> extract text -> analyze -> wrap in a ResultEnvelope.
Every failure is converted to a failed envelope here.
"""
import logging
from typing import Optional

from ..config import Settings, get_settings
from ..exceptions import (
    EmptyExtraction,
    FileTooLarge,
    MissingFile,
    ResumeAnalysisError,
    UnknownAnalysisFailure,
    UnsupportedType,
)
from ..schemas.analysis import AnalysisResult, ResultEnvelope, UploadedDocument
from .pdf_extractor import PDF_MEDIA_TYPE, get_text_extractor
from .resume_analysis import GeminiResumeAnalyzer

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """
    Runs one resume through extraction and analysis.

    Holds no per-request state, so a single instance can serve any number
    of requests.
    """

    def __init__(self, extractor, engine, settings: Optional[Settings] = None):
        self.extractor = extractor
        self.engine = engine
        self.settings = settings or get_settings()

    def validate(self, document: Optional[UploadedDocument]) -> UploadedDocument:
        """Check presence, media type and size, in that order."""
        if document is None:
            raise MissingFile()

        if document.media_type != PDF_MEDIA_TYPE:
            raise UnsupportedType()

        if document.size > self.settings.max_upload_bytes:
            raise FileTooLarge(f"File size must be less than {self.settings.max_upload_mb}MB")

        return document

    async def extract(self, document: UploadedDocument) -> str:
        try:
            resume_text = await self.extractor.extract_text(document.content)
        except ResumeAnalysisError:
            raise
        except Exception as e:
            logger.exception("PDF text extraction error")
            raise UnknownAnalysisFailure(str(e)) from e

        if not resume_text or not resume_text.strip():
            raise EmptyExtraction()
        return resume_text

    async def run_analysis(self, resume_text: str) -> AnalysisResult:
        try:
            return await self.engine.generate_analysis(resume_text)
        except ResumeAnalysisError:
            raise
        except Exception as e:
            logger.exception("Resume analysis error")
            raise UnknownAnalysisFailure(str(e)) from e

    async def analyze(self, document: Optional[UploadedDocument]) -> ResultEnvelope:
        try:
            document = self.validate(document)
            resume_text = await self.extract(document)
            analysis = await self.run_analysis(resume_text)
        except ResumeAnalysisError as e:
            logger.warning(f"Resume analysis failed [{e.code}]: {e.message}")
            return ResultEnvelope.fail(e.message)

        logger.info(
            f"Resume analyzed: {document.filename or '<unnamed>'} "
            f"({document.size} bytes, {len(resume_text)} chars extracted)"
        )
        return ResultEnvelope.ok(analysis)


def get_resume_analyzer() -> ResumeAnalyzer:
    """FastAPI dependency building the production analyzer from settings."""
    settings = get_settings()
    return ResumeAnalyzer(
        extractor=get_text_extractor(settings),
        engine=GeminiResumeAnalyzer(settings=settings),
        settings=settings,
    )
