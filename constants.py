"""Constants and configuration values."""

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Declared upload MIME type -> document format
SUPPORTED_FORMATS = {
    PDF_MIME_TYPE: "pdf",
    DOCX_MIME_TYPE: "docx",
}

# Prompt template
ANALYSIS_PROMPT_TEMPLATE = """
You are an expert legal assistant specialized in Indian law.
Analyze the following legal document text. Provide a clear, simple summary,
identify any potentially risky or unfavorable clauses for the user,
and explain them in plain English.

Return ONLY a valid JSON object with three top-level keys: "summary", "risky_clauses", and "explanations". Do not add any text before or after the JSON.
The "risky_clauses" value is an array of objects, each with "title", "source_excerpt", "explanation", and "risk_level" (LOW, MEDIUM, or HIGH).
If no risky clauses are found, use an empty array [].

{format_instructions}

Document Text:
---
{document_text}
---
"""
