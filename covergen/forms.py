"""
Generation form parsing and normalization.
"""
from dataclasses import dataclass, field, replace
from typing import Optional

# Text fields, wire name -> attribute name
TEXT_FIELDS = {
    "name": "name",
    "email": "email",
    "reasonForApplying": "reason_for_applying",
    "toneDescription": "tone_description",
    "jobDescription": "job_description",
    "resume": "resume",
}

FILE_FIELDS = {
    "resumeFile": "resume_file",
    "jobFile": "job_file",
}

REQUIRED_FIELDS = ("name", "email", "toneDescription", "jobDescription", "resume")


@dataclass
class GenerationRequest:
    """One submitted generation form. Lives for a single HTTP request."""

    name: str = ""
    email: str = ""
    reason_for_applying: str = ""
    tone_description: str = ""
    job_description: str = ""
    resume: str = ""
    resume_file: Optional[bytes] = field(default=None, repr=False)
    job_file: Optional[bytes] = field(default=None, repr=False)

    @classmethod
    def from_form(cls, form, files) -> "GenerationRequest":
        """Build from werkzeug ``request.form`` / ``request.files`` mappings."""
        values = {attr: form.get(wire) or "" for wire, attr in TEXT_FIELDS.items()}
        for wire, attr in FILE_FIELDS.items():
            upload = files.get(wire)
            data = upload.read() if upload else b""
            # A file input submitted without a file arrives as an empty part
            values[attr] = data or None
        return cls(**values)

    def missing_fields(self):
        """Wire names of required fields that are empty."""
        return [
            wire for wire in REQUIRED_FIELDS
            if not (getattr(self, TEXT_FIELDS[wire]) or "").strip()
        ]


def merge_field(pasted: str, extracted: Optional[str]) -> str:
    """Prefer extracted PDF text over the pasted value when it has content."""
    if extracted:
        return extracted
    return pasted


def normalize(
    req: GenerationRequest,
    resume_text: Optional[str] = None,
    job_text: Optional[str] = None,
) -> GenerationRequest:
    return replace(
        req,
        resume=merge_field(req.resume, resume_text),
        job_description=merge_field(req.job_description, job_text),
    )
