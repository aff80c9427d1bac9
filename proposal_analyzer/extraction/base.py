"""Base extractor contract and the shared HTML selector-chain strategy."""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Optional, Sequence

from bs4 import BeautifulSoup

from proposal_analyzer.core.config import Settings
from proposal_analyzer.integrations.http import fetch_html
from proposal_analyzer.models import ProposalContent
from proposal_analyzer.models.proposal import UNKNOWN_ORGANIZATION

logger = logging.getLogger(__name__)

INVISIBLE_TAGS = ("script", "style", "noscript", "template")


class ProposalExtractor(ABC):
    """Turns a proposal reference (URL or file path) into ProposalContent."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @abstractmethod
    async def extract(self, reference: str) -> ProposalContent:
        """Extract the proposal behind ``reference``."""


class HtmlProposalExtractor(ProposalExtractor):
    """
    Extractor for proposal pages scraped from HTML.

    Title: the first selector in ``title_selectors`` that matches a
    non-empty element wins.

    Content: each group in ``content_rules`` is tried in order; every
    element a group matches contributes its trimmed text, joined by blank
    lines. The first group producing text wins, otherwise the page's
    visible text is used.
    """

    title_selectors: ClassVar[Sequence[str]] = ("h1, h2",)
    content_rules: ClassVar[Sequence[str]] = ()
    organization: ClassVar[str] = UNKNOWN_ORGANIZATION
    platform: ClassVar[str] = ""
    request_headers: ClassVar[Dict[str, str]] = {}

    async def extract(self, reference: str) -> ProposalContent:
        html = await fetch_html(reference, self.settings, extra_headers=self.request_headers)
        proposal = self.parse(html)
        logger.info(
            f"{self.platform} proposal extracted: '{proposal.title}' "
            f"({len(proposal.content)} chars)"
        )
        return proposal

    def parse(self, html: str) -> ProposalContent:
        """Build ProposalContent from page HTML."""
        soup = BeautifulSoup(html, "lxml")
        return ProposalContent(
            title=self.select_title(soup),
            content=self.select_content(soup),
            organization=self.organization,
            platform=self.platform,
        )

    def select_title(self, soup: BeautifulSoup) -> Optional[str]:
        for selector in self.title_selectors:
            element = soup.select_one(selector)
            if element is None:
                continue
            text = element.get_text(" ", strip=True)
            if text:
                return text
        return None

    def select_content(self, soup: BeautifulSoup) -> Optional[str]:
        for selector in self.content_rules:
            text = _joined_text(soup, selector)
            if text:
                return text
            logger.debug(f"No content matched '{selector}'")
        return _visible_text(soup)


def _joined_text(soup: BeautifulSoup, selector: str) -> str:
    texts = (element.get_text(" ", strip=True) for element in soup.select(selector))
    return "\n\n".join(text for text in texts if text)


def _visible_text(soup: BeautifulSoup) -> str:
    root = soup.body or soup
    for tag in root.find_all(INVISIBLE_TAGS):
        tag.decompose()
    return root.get_text("\n", strip=True)
