"""Shared fixtures for the Legal Document Analyzer tests."""
import io
import json
import pytest
from unittest.mock import MagicMock

import fitz
from docx import Document

from app import create_app
from constants import PDF_MIME_TYPE, DOCX_MIME_TYPE
from store import InMemoryResultStore


SAMPLE_ANALYSIS = {
    "summary": "A one-year residential lease between the landlord and the tenant.",
    "risky_clauses": [
        {
            "title": "Forfeiture of deposit",
            "source_excerpt": "The security deposit shall be forfeited on any breach.",
            "explanation": "You could lose your whole deposit for a minor breach.",
            "risk_level": "HIGH",
        }
    ],
    "explanations": "Review the deposit clause carefully before signing.",
}


def make_pdf(text):
    """Build a single-page PDF containing ``text``."""
    pdf = fitz.open()
    page = pdf.new_page()
    if text:
        page.insert_text((72, 72), text)
    data = pdf.tobytes()
    pdf.close()
    return data


def make_docx(paragraphs):
    """Build a DOCX document with one paragraph per entry."""
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def make_llm(reply):
    """Mock chat model whose ``invoke`` returns a message with ``reply`` as content."""
    llm = MagicMock()
    llm.invoke.return_value = MagicMock(content=reply)
    return llm


@pytest.fixture
def pdf_bytes():
    return make_pdf("This Lease Agreement is made between the Landlord and the Tenant.")


@pytest.fixture
def docx_bytes():
    return make_docx([
        "SERVICE AGREEMENT",
        "The Provider shall deliver the services described in Schedule A.",
    ])


@pytest.fixture
def store():
    return InMemoryResultStore()


@pytest.fixture
def llm():
    return make_llm("```json\n" + json.dumps(SAMPLE_ANALYSIS) + "\n```")


@pytest.fixture
def app(store, llm, tmp_path):
    """Create Flask app for testing."""
    flask_app = create_app(store=store, llm=llm, upload_folder=str(tmp_path / "uploads"))
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    """Create Flask test client."""
    return app.test_client()


@pytest.fixture
def upload():
    """Build the multipart payload for the submit endpoint."""
    def _upload(data, filename="contract.pdf", mimetype=PDF_MIME_TYPE):
        return {"document": (io.BytesIO(data), filename, mimetype)}
    return _upload
