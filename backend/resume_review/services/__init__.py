from .gemini import get_genai_client
from .pdf_extractor import (
    PDF_MEDIA_TYPE,
    GeminiTextExtractor,
    PyMuPDFTextExtractor,
    get_text_extractor,
    pdf_to_text,
)
from .resume_analysis import (
    RESUME_ANALYSIS_PROMPT,
    GeminiResumeAnalyzer,
    build_analysis_prompt,
    parse_analysis_response,
)
from .orchestrator import ResumeAnalyzer, get_resume_analyzer

__all__ = [
    # Gemini
    "get_genai_client",
    # PDF extraction
    "PDF_MEDIA_TYPE",
    "GeminiTextExtractor",
    "PyMuPDFTextExtractor",
    "get_text_extractor",
    "pdf_to_text",
    # Analysis
    "RESUME_ANALYSIS_PROMPT",
    "GeminiResumeAnalyzer",
    "build_analysis_prompt",
    "parse_analysis_response",
    # Orchestration
    "ResumeAnalyzer",
    "get_resume_analyzer",
]
