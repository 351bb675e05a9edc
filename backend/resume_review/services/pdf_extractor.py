"""
PDF Text Extraction Service.

Two strategies are available, picked by EXTRACTION_STRATEGY:
  - "text":   read the embedded text layer with PyMuPDF (default, no API calls)
  - "gemini": let a multimodal Gemini model read the PDF
A scanned PDF without a text layer yields empty text under "text".
"""
import asyncio
import logging
from typing import Optional

import fitz  # PyMuPDF
from google.genai import types

from ..config import Settings, get_settings
from ..exceptions import EmptyExtraction, AnalysisEngineUnavailable
from .gemini import get_genai_client

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"

TEXT_EXTRACTION_PROMPT = (
    "Extract all text content from this resume PDF. "
    "Provide the complete text in a structured format."
)


def pdf_to_text(pdf_bytes: bytes) -> str:
    """
    Read the text layer of every page using PyMuPDF.

    Args:
        pdf_bytes: Raw PDF file bytes

    Returns:
        Page texts joined by newlines (may be empty for image-only PDFs)
    """
    try:
        pdf_document = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        logger.warning(f"Could not open PDF: {e}")
        raise EmptyExtraction() from e

    try:
        pages = [page.get_text("text") for page in pdf_document]
    finally:
        pdf_document.close()

    return "\n".join(pages)


class PyMuPDFTextExtractor:
    """Extracts the embedded text layer, without any network calls."""

    async def extract_text(self, pdf_bytes: bytes) -> str:
        return await asyncio.to_thread(pdf_to_text, pdf_bytes)


class GeminiTextExtractor:
    """Extracts text by sending the PDF to a multimodal Gemini model."""

    def __init__(self, client=None, model: Optional[str] = None):
        self._client = client
        self.model = model or get_settings().extraction_model

    @property
    def client(self):
        client = self._client or get_genai_client()
        if client is None:
            raise AnalysisEngineUnavailable()
        return client

    async def extract_text(self, pdf_bytes: bytes) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=[
                types.Part.from_bytes(data=pdf_bytes, mime_type=PDF_MEDIA_TYPE),
                TEXT_EXTRACTION_PROMPT,
            ],
        )
        return response.text or ""


def get_text_extractor(settings: Optional[Settings] = None):
    """Return the extractor selected by settings.extraction_strategy."""
    settings = settings or get_settings()

    # Settings only admits "text" or "gemini"
    if settings.extraction_strategy == "gemini":
        return GeminiTextExtractor(model=settings.extraction_model)
    return PyMuPDFTextExtractor()
