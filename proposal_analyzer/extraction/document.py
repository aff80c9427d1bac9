"""Document extractor - uploaded PDF and plain-text proposals."""

import asyncio
import logging
from pathlib import Path

from proposal_analyzer.core.exceptions import UnreadableDocument
from proposal_analyzer.extraction.base import ProposalExtractor
from proposal_analyzer.integrations.pdf import extract_pdf_text, is_pdf
from proposal_analyzer.models import Platform, ProposalContent

logger = logging.getLogger(__name__)


class DocumentExtractor(ProposalExtractor):
    """
    Extracts text from an uploaded document on disk.

    The file is left in place; removing it is the caller's job.
    """

    async def extract(self, reference: str) -> ProposalContent:
        return await asyncio.to_thread(self.extract_file, reference)

    def extract_file(self, path: str) -> ProposalContent:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise UnreadableDocument(f"Failed to read uploaded document: {e}") from e

        if is_pdf(data):
            proposal = ProposalContent(
                title="PDF Proposal",
                content=extract_pdf_text(data),
                platform=Platform.PDF_DOCUMENT.value,
            )
        else:
            proposal = ProposalContent(
                title="Text Proposal",
                content=data.decode("utf-8", errors="replace"),
                platform=Platform.TEXT_DOCUMENT.value,
            )

        logger.info(f"{proposal.platform} extracted: {len(proposal.content)} chars")
        return proposal
