"""Integrations module - External service connectors."""

from proposal_analyzer.integrations.http import fetch_html, post_json
from proposal_analyzer.integrations.pdf import extract_pdf_text, is_pdf
from proposal_analyzer.integrations.openai_client import AnalysisClient

__all__ = [
    "fetch_html",
    "post_json",
    "extract_pdf_text",
    "is_pdf",
    "AnalysisClient",
]
