"""
Test Configuration and Fixtures
"""
import io

import pytest
from PyPDF2 import PdfWriter

from covergen import create_app


def make_text_pdf(text: str) -> bytes:
    """Single-page PDF drawing ``text`` in Helvetica."""
    content = f"BT /F1 12 Tf 72 712 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = b"%PDF-1.4\n"
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_at
    return out


def make_blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


@pytest.fixture
def app(monkeypatch):
    """Create application for testing"""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def completions(monkeypatch):
    """Replace the completion client; records every prompt it receives"""
    calls = []

    def fake_generate_completion(prompt, api_key, **kwargs):
        calls.append({"prompt": prompt, "api_key": api_key, **kwargs})
        return "- Built Flask services\n\nDear Hiring Manager, ..."

    monkeypatch.setattr("covergen.api.generate_completion", fake_generate_completion)
    return calls


@pytest.fixture
def form_data():
    """A complete, valid generation form with no uploads"""
    return {
        'name': 'Ada Lovelace',
        'email': 'ada@example.com',
        'reasonForApplying': '',
        'toneDescription': 'professional and neutral',
        'jobDescription': 'Backend engineer to build Flask APIs for document processing.',
        'resume': 'Five years of Python, Flask and PostgreSQL experience.',
    }


@pytest.fixture
def text_pdf():
    return make_text_pdf


@pytest.fixture
def blank_pdf():
    return make_blank_pdf()
