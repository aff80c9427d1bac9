"""Extraction module - Source classification and proposal extractors."""

import logging
from enum import Enum

from proposal_analyzer.core.config import Settings
from proposal_analyzer.extraction.base import ProposalExtractor, HtmlProposalExtractor
from proposal_analyzer.extraction.document import DocumentExtractor
from proposal_analyzer.extraction.html import UniswapAgoraExtractor, GenericHtmlExtractor
from proposal_analyzer.extraction.tally import TallyExtractor
from proposal_analyzer.models import ProposalContent

logger = logging.getLogger(__name__)


class SourceKind(str, Enum):
    """Extraction path selected for a proposal URL."""
    TALLY = "tally"
    UNISWAP_AGORA = "uniswap_agora"
    GENERIC_HTML = "generic_html"


# Checked in order against the URL
SOURCE_MARKERS = (
    ("tally.xyz", SourceKind.TALLY),
    ("vote.uniswapfoundation.org", SourceKind.UNISWAP_AGORA),
)

EXTRACTORS = {
    SourceKind.TALLY: TallyExtractor,
    SourceKind.UNISWAP_AGORA: UniswapAgoraExtractor,
    SourceKind.GENERIC_HTML: GenericHtmlExtractor,
}


def classify_source(url: str) -> SourceKind:
    """Pick the extraction path for a URL."""
    for marker, kind in SOURCE_MARKERS:
        if marker in url:
            return kind
    return SourceKind.GENERIC_HTML


def extractor_for_url(url: str, settings: Settings) -> ProposalExtractor:
    """Build the extractor matching a URL."""
    kind = classify_source(url)
    logger.info(f"Using {kind.value} extractor for {url}")
    return EXTRACTORS[kind](settings)


async def extract_from_url(url: str, settings: Settings) -> ProposalContent:
    """Extract a proposal from its URL."""
    return await extractor_for_url(url, settings).extract(url)


async def extract_from_document(path: str, settings: Settings) -> ProposalContent:
    """Extract a proposal from an uploaded document."""
    return await DocumentExtractor(settings).extract(path)


__all__ = [
    "SourceKind",
    "classify_source",
    "extractor_for_url",
    "extract_from_url",
    "extract_from_document",
    "ProposalExtractor",
    "HtmlProposalExtractor",
    "TallyExtractor",
    "UniswapAgoraExtractor",
    "GenericHtmlExtractor",
    "DocumentExtractor",
]
