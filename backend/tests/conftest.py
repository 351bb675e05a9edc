from types import SimpleNamespace

import fitz  # PyMuPDF
import pytest
from fastapi.testclient import TestClient

from resume_review.config import Settings
from resume_review.main import app
from resume_review.schemas.analysis import AnalysisResult, UploadedDocument
from resume_review.services.orchestrator import ResumeAnalyzer, get_resume_analyzer

SAMPLE_RESUME_TEXT = """Jane Doe
Computer Science student, State University (GPA 3.8)
Skills: Python, SQL, React, Docker
Projects: Campus marketplace web app (React, FastAPI, PostgreSQL)
"""

SAMPLE_ANALYSIS = {
    "strengths": [
        "Solid full-stack project using React and FastAPI",
        "Strong academic record (GPA 3.8)",
        "Hands-on experience with Docker",
    ],
    "weaknesses": [
        "No professional work experience listed",
        "Project impact is not quantified",
        "No cloud platform experience",
    ],
    "courseSuggestions": [
        {"title": "AWS Cloud Practitioner Essentials", "reason": "Adds cloud fundamentals", "platform": "Coursera"},
        {"title": "Data Structures and Algorithms", "reason": "Prepares for technical interviews"},
    ],
    "internshipSuggestions": [
        {
            "role": "Backend Engineering Intern",
            "industry": "E-commerce",
            "reason": "Matches the marketplace project and FastAPI experience",
            "requiredSkills": ["Python", "SQL", "REST APIs"],
        },
    ],
    "overallSummary": "A CS student with full-stack project experience, ready for backend internships.",
}


def make_pdf(*lines: str) -> bytes:
    """Build a one-page PDF; with no lines the page has no text layer."""
    doc = fitz.open()
    page = doc.new_page()
    y = 72
    for line in lines:
        page.insert_text((72, y), line)
        y += 18
    data = doc.tobytes()
    doc.close()
    return data


class FakeExtractor:
    def __init__(self, text: str = SAMPLE_RESUME_TEXT, error: Exception = None):
        self.text = text
        self.error = error
        self.calls = []

    async def extract_text(self, pdf_bytes: bytes) -> str:
        self.calls.append(pdf_bytes)
        if self.error:
            raise self.error
        return self.text


class FakeEngine:
    def __init__(self, result: AnalysisResult = None, error: Exception = None):
        self.result = result
        self.error = error
        self.calls = []

    async def generate_analysis(self, resume_text: str) -> AnalysisResult:
        self.calls.append(resume_text)
        if self.error:
            raise self.error
        return self.result


class FakeModels:
    """Stands in for client.aio.models of google-genai."""

    def __init__(self, text=None, error: Exception = None):
        self.text = text
        self.error = error
        self.calls = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def make_genai_client(text=None, error: Exception = None):
    models = FakeModels(text=text, error=error)
    return SimpleNamespace(aio=SimpleNamespace(models=models)), models


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", max_upload_bytes=5 * 1024 * 1024)


@pytest.fixture
def sample_analysis():
    return AnalysisResult.model_validate(SAMPLE_ANALYSIS)


@pytest.fixture
def extractor():
    return FakeExtractor()


@pytest.fixture
def engine(sample_analysis):
    return FakeEngine(result=sample_analysis)


@pytest.fixture
def analyzer(extractor, engine, settings):
    return ResumeAnalyzer(extractor=extractor, engine=engine, settings=settings)


@pytest.fixture
def pdf_document():
    return UploadedDocument(
        content=make_pdf("Jane Doe", "Python developer"),
        media_type="application/pdf",
        filename="resume.pdf",
    )


@pytest.fixture
def client(analyzer):
    app.dependency_overrides[get_resume_analyzer] = lambda: analyzer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
