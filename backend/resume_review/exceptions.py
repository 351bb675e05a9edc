"""
Error taxonomy for resume analysis.

Every error carries a user-facing message. The orchestrator turns each of
them into a failed ResultEnvelope, so none of these reach the HTTP client
as an unhandled fault.
"""


class ResumeAnalysisError(Exception):
    """Base class for all request-terminal analysis failures."""
    code = "analysis_error"
    default_message = "Failed to analyze resume. Please try again."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFile(ResumeAnalysisError):
    code = "missing_file"
    default_message = "No file provided"


class UnsupportedType(ResumeAnalysisError):
    code = "unsupported_type"
    default_message = "Please upload a PDF file"


class FileTooLarge(ResumeAnalysisError):
    code = "file_too_large"
    default_message = "File size must be less than 5MB"


class EmptyExtraction(ResumeAnalysisError):
    code = "empty_extraction"
    default_message = "Could not extract text from PDF. Please ensure the PDF contains readable text."


class SchemaViolation(ResumeAnalysisError):
    """The analysis service returned output that does not match AnalysisResult."""
    code = "schema_violation"
    default_message = "The analysis service returned an invalid response. Please try again."


class UnknownAnalysisFailure(ResumeAnalysisError):
    code = "analysis_failed"


class AnalysisEngineUnavailable(UnknownAnalysisFailure):
    code = "engine_unavailable"
    default_message = "Gemini API not configured. Please set GEMINI_API_KEY."
