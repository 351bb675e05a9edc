"""
Analysis schemas - the typed contract shared by the Gemini call, the
orchestrator and the UI.

Field names on the wire are camelCase (courseSuggestions, requiredSkills, ...);
Python code uses the snake_case attribute names.
"""
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ============================================================================
# Structured Analysis Output
# ============================================================================

class CourseSuggestion(CamelModel):
    title: str
    reason: str
    platform: Optional[str] = None  # Coursera, Udemy, edX, ...


class InternshipSuggestion(CamelModel):
    role: str
    industry: str
    reason: str
    required_skills: List[str]


class AnalysisResult(CamelModel):
    """Complete resume analysis. Every section is required and non-empty."""
    strengths: List[str] = Field(
        min_length=1,
        description="List of key strengths identified in the resume (3-5 items)",
    )
    weaknesses: List[str] = Field(
        min_length=1,
        description="List of areas for improvement (3-5 items)",
    )
    course_suggestions: List[CourseSuggestion] = Field(
        min_length=1,
        description="Recommended courses to enhance skills (3-5 courses)",
    )
    internship_suggestions: List[InternshipSuggestion] = Field(
        min_length=1,
        description="Best fit internship opportunities (3-5 suggestions)",
    )
    overall_summary: str = Field(
        min_length=1,
        description="A brief overall summary of the candidate profile",
    )


# ============================================================================
# Request / Response
# ============================================================================

class UploadedDocument(BaseModel):
    """A single uploaded file, alive only for the duration of one request."""
    content: bytes
    media_type: str
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


class ResultEnvelope(CamelModel):
    success: bool
    data: Optional[AnalysisResult] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_branch(self):
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("successful envelope must carry data and no error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("failed envelope must carry an error and no data")
        return self

    @classmethod
    def ok(cls, data: AnalysisResult) -> "ResultEnvelope":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ResultEnvelope":
        return cls(success=False, error=error)
