"""
Shared Gemini client.
"""
import logging
from typing import Optional

from google import genai
from google.genai import types

from ..config import get_settings, Settings

logger = logging.getLogger(__name__)

# Lazy initialization of Gemini client
_genai_client = None
_genai_client_checked = False


def build_genai_client(settings: Settings) -> Optional[genai.Client]:
    """Create a Gemini client from settings, or None if no API key is configured."""
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set - resume analysis disabled")
        return None

    http_options = None
    if settings.gemini_timeout_ms:
        http_options = types.HttpOptions(timeout=settings.gemini_timeout_ms)
    return genai.Client(api_key=settings.gemini_api_key, http_options=http_options)


def get_genai_client() -> Optional[genai.Client]:
    """Get the Gemini client, initializing lazily if needed."""
    global _genai_client, _genai_client_checked
    if not _genai_client_checked:
        _genai_client = build_genai_client(get_settings())
        _genai_client_checked = True
    return _genai_client
