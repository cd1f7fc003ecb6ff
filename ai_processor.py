import logging
import docx
from langchain_community.document_loaders import PyMuPDFLoader
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import PromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

# Import configuration
from config import (
    LLM_PROVIDER, OPENAI_API_KEY, GEMINI_API_KEY,
    ANALYSIS_MODEL, ANALYSIS_TEMPERATURE, MAX_DOCUMENT_CHARS
)
from constants import ANALYSIS_PROMPT_TEMPLATE, SUPPORTED_FORMATS
from errors import UnsupportedFormat, ExtractionFailure, EmptyExtraction, ModelCallFailure
from schemas import StructuredAnalysis
from utils import parse_json_response

logger = logging.getLogger(__name__)

# --- PROMPT SETUP ---

analysis_parser = PydanticOutputParser(pydantic_object=StructuredAnalysis)

analysis_prompt = PromptTemplate(
    template=ANALYSIS_PROMPT_TEMPLATE,
    input_variables=["document_text"],
    partial_variables={"format_instructions": analysis_parser.get_format_instructions()},
)


def get_llm(provider=None):
    """Builds the chat model for the configured provider."""
    provider = (provider or LLM_PROVIDER).lower()

    if provider == "gemini":
        if not GEMINI_API_KEY:
            raise ModelCallFailure(details={"reason": "GEMINI_API_KEY is not configured"})
        return ChatGoogleGenerativeAI(
            google_api_key=GEMINI_API_KEY,
            model=ANALYSIS_MODEL,
            temperature=ANALYSIS_TEMPERATURE
        )

    if provider == "openai":
        if not OPENAI_API_KEY:
            raise ModelCallFailure(details={"reason": "OPENAI_API_KEY is not configured"})
        return ChatOpenAI(openai_api_key=OPENAI_API_KEY, model=ANALYSIS_MODEL, temperature=ANALYSIS_TEMPERATURE)

    raise ModelCallFailure(details={"reason": f"Unknown LLM provider '{provider}'"})


# --- HELPER FUNCTIONS FOR ANALYSIS ---

def _load_pdf(filepath):
    documents = PyMuPDFLoader(filepath).load()
    return " ".join([doc.page_content for doc in documents])


def _load_docx(filepath):
    document = docx.Document(filepath)
    return "\n".join(paragraph.text for paragraph in document.paragraphs if paragraph.text.strip())


_LOADERS = {
    "pdf": _load_pdf,
    "docx": _load_docx,
}


def extract_document_text(filepath, mime_type):
    """
    Extracts plain text from a stored upload according to its declared MIME type.
    """
    document_format = SUPPORTED_FORMATS.get(mime_type)
    if document_format is None:
        raise UnsupportedFormat(details={"mimetype": mime_type})

    try:
        text = _LOADERS[document_format](filepath)
    except Exception as e:
        logger.error(f"Failed to extract text from {document_format} file {filepath}: {str(e)}")
        raise ExtractionFailure(details={"format": document_format, "reason": str(e)}) from e

    logger.info(f"Extracted {len(text)} characters from {document_format} document")
    return text


def truncate_text(text, limit=None):
    """Keeps only the first ``limit`` characters (MAX_DOCUMENT_CHARS by default) of the document text."""
    if limit is None:
        limit = MAX_DOCUMENT_CHARS
    if len(text) <= limit:
        return text
    logger.info(f"Truncating document text from {len(text)} to {limit} characters")
    return text[:limit]


def build_analysis_prompt(document_text):
    return analysis_prompt.format(document_text=document_text)


def request_analysis(llm, prompt):
    """Sends the prompt to the model and returns its raw text reply."""
    try:
        logger.info("Requesting document analysis from the model")
        content = llm.invoke(prompt).content
    except Exception as e:
        logger.error(f"Model call failed: {str(e)}")
        raise ModelCallFailure(details={"reason": str(e)}) from e

    # Some chat models return a list of content parts
    if isinstance(content, list):
        content = "".join(
            part if isinstance(part, str) else part.get("text", "")
            for part in content
        )

    if not content or not content.strip():
        raise ModelCallFailure(details={"reason": "Model returned an empty response"})

    logger.info(f"Received model response ({len(content)} characters)")
    return content


# --- MAIN PUBLIC FUNCTIONS ---

def process_document(filepath, mime_type, store, llm):
    """
    Orchestrates extraction, analysis, normalization and storage for one upload.

    Args:
        filepath: Path to the uploaded document
        mime_type: Declared MIME type of the upload
        store: ResultStore receiving the analysis
        llm: Chat model used for the analysis

    Returns:
        str: Identifier of the stored analysis

    Raises:
        AnalysisError: Any pipeline stage failure. Nothing is stored in that case.
    """
    logger.info(f"Starting document processing for: {filepath}")

    document_text = extract_document_text(filepath, mime_type)
    if not document_text.strip():
        raise EmptyExtraction(details={"filepath": filepath})

    prompt = build_analysis_prompt(truncate_text(document_text))
    response_content = request_analysis(llm, prompt)
    analysis = parse_json_response(response_content)

    doc_id = store.put(analysis)
    logger.info(f"Analysis complete for doc_id: {doc_id}")
    return doc_id
