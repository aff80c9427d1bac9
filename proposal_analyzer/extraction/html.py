"""HTML page extractors: Uniswap Agora and the generic fallback."""

from proposal_analyzer.extraction.base import HtmlProposalExtractor
from proposal_analyzer.models import Platform


class UniswapAgoraExtractor(HtmlProposalExtractor):
    """Proposals on vote.uniswapfoundation.org."""

    title_selectors = ("h2", "h1")
    content_rules = (
        "article, .proposal-content, .content",
        ".main-content, .proposal-details, .description",
    )
    organization = "Uniswap Foundation"
    platform = Platform.UNISWAP_AGORA.value
    request_headers = {"Pragma": "no-cache"}


class GenericHtmlExtractor(HtmlProposalExtractor):
    """Any other proposal page."""

    title_selectors = ("h1, h2",)
    content_rules = (
        "article, .content, .proposal-content, .description, .main-content",
    )
    platform = Platform.OTHER.value
