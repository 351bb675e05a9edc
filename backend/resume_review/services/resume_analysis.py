"""
Resume Analysis Service using Gemini structured output.
Sends extracted resume text to Gemini in a single call and validates the
JSON response against AnalysisResult.
"""
import logging
from typing import Optional

from google.genai import types
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..exceptions import AnalysisEngineUnavailable, SchemaViolation
from ..schemas.analysis import AnalysisResult
from .gemini import get_genai_client

logger = logging.getLogger(__name__)


# ============================================================================
# Resume Analysis Prompt
# ============================================================================

RESUME_ANALYSIS_PROMPT = """You are an expert career advisor and resume analyzer. Analyze the following resume and provide detailed insights.

Resume Content:
{resume_text}

Provide a comprehensive analysis including:
1. Key strengths and positive aspects of the candidate's profile (3-5 items)
2. Areas for improvement or weaknesses that could be addressed (3-5 items)
3. Specific course recommendations that would enhance their skills (include course titles, reasons, and suggested platforms like Coursera, Udemy, etc.)
4. Best fit internship opportunities based on their background (include role titles, industries, reasons for fit, and required skills)
5. An overall summary of the candidate's profile

Be specific, constructive, and actionable in your feedback."""


def build_analysis_prompt(resume_text: str) -> str:
    return RESUME_ANALYSIS_PROMPT.format(resume_text=resume_text)


def parse_analysis_response(response_text: Optional[str]) -> AnalysisResult:
    """
    Validate the raw JSON text returned by Gemini.

    Raises:
        SchemaViolation: empty response, invalid JSON, or any field missing,
            mistyped or empty. No repair is attempted.
    """
    if not response_text or not response_text.strip():
        raise SchemaViolation("The analysis service returned an empty response.")

    try:
        return AnalysisResult.model_validate_json(response_text)
    except ValidationError as e:
        logger.warning(f"Analysis response failed schema validation: {e.error_count()} error(s)")
        logger.debug(f"Raw response: {response_text[:500]}...")
        raise SchemaViolation() from e


class GeminiResumeAnalyzer:
    """
    Single-shot structured generation: one request, one validated response.
    """

    def __init__(self, client=None, settings: Optional[Settings] = None):
        self._client = client
        self.settings = settings or get_settings()

    @property
    def client(self):
        client = self._client or get_genai_client()
        if client is None:
            raise AnalysisEngineUnavailable()
        return client

    async def generate_analysis(self, resume_text: str) -> AnalysisResult:
        """
        Analyze resume text.

        Args:
            resume_text: Plain text extracted from the resume

        Returns:
            A fully populated AnalysisResult
        """
        response = await self.client.aio.models.generate_content(
            model=self.settings.gemini_model,
            contents=build_analysis_prompt(resume_text),
            config=types.GenerateContentConfig(
                temperature=self.settings.analysis_temperature,
                response_mime_type="application/json",
                response_schema=AnalysisResult,
            ),
        )
        return parse_analysis_response(response.text)
