"""
Generation pipeline errors.

Every failure that ends a generation request is one of these. Each carries the
HTTP status and the short message returned to the client as ``{"error": ...}``.
"""
from typing import Iterable, Optional


class GenerationError(Exception):
    """Base class for errors that terminate a generation request."""

    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.message}


class MethodNotAllowed(GenerationError):
    status_code = 405
    default_message = "Method not allowed"


class FormParseError(GenerationError):
    status_code = 400
    default_message = "Failed to parse form data"


class PdfReadError(GenerationError):
    """
    Raised when an uploaded file cannot be parsed as a PDF.

    Attributes:
        field: Form field the file came from ('resumeFile' or 'jobFile'),
            or None when raised outside a request
    """

    status_code = 400
    default_message = "Failed to read the PDF"

    FIELD_LABELS = {
        "resumeFile": "resume",
        "jobFile": "job description",
    }

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        self.field = field
        if message is None and field:
            label = self.FIELD_LABELS.get(field, field)
            message = f"Failed to read the {label} PDF"
        super().__init__(message)


class MissingCredential(GenerationError):
    status_code = 500
    default_message = "Missing OpenAI API key"


class MissingFields(GenerationError):
    status_code = 400
    default_message = "Missing input fields"

    def __init__(self, fields: Iterable[str] = ()):
        self.fields = list(fields)
        message = self.default_message
        if self.fields:
            message = f"{message}: {', '.join(self.fields)}"
        super().__init__(message)


class UpstreamError(GenerationError):
    """Raised when the completion endpoint fails or returns no content."""

    status_code = 500
    default_message = "No response from OpenAI"
