"""Tally extractor - proposals fetched through the Tally GraphQL API."""

import logging
import re
from typing import Any, Dict, Optional

from proposal_analyzer.core.exceptions import InvalidReference, UpstreamDataMissing
from proposal_analyzer.extraction.base import ProposalExtractor
from proposal_analyzer.integrations.http import post_json
from proposal_analyzer.models import Platform, ProposalContent
from proposal_analyzer.models.proposal import UNKNOWN_PROPOSER

logger = logging.getLogger(__name__)

PROPOSAL_ID_PATTERN = re.compile(r"proposal/([^/?#]+)")

PROPOSAL_QUERY = """
query GetProposal($proposalId: ID!) {
  proposal(input: { id: $proposalId }) {
    id
    title
    description
    body
    proposer {
      address
    }
    governor {
      name
      organization {
        name
      }
    }
    state
  }
}
"""


def parse_proposal_id(url: str) -> str:
    """
    Pull the proposal identifier out of a Tally URL.

    Raises:
        InvalidReference: When the URL has no segment after ``proposal/``
    """
    match = PROPOSAL_ID_PATTERN.search(url)
    if not match:
        raise InvalidReference(f"Invalid Tally URL format: {url}")
    return match.group(1)


class TallyExtractor(ProposalExtractor):
    """Proposals hosted on tally.xyz."""

    async def extract(self, reference: str) -> ProposalContent:
        proposal_id = parse_proposal_id(reference)
        payload = {
            "query": PROPOSAL_QUERY,
            "variables": {"proposalId": proposal_id},
        }

        logger.info(f"Tally API request: proposal_id={proposal_id}")
        data = await post_json(
            self.settings.TALLY_API_URL,
            payload,
            self.settings,
            headers={"Api-Key": self.settings.TALLY_API_KEY},
        )

        proposal = (data.get("data") or {}).get("proposal")
        if not proposal:
            logger.error(f"Tally API returned no proposal for {proposal_id}: {data}")
            raise UpstreamDataMissing(
                f"Failed to fetch Tally proposal data: {data.get('errors') or data}"
            )

        logger.info(f"Tally proposal received: {proposal.get('id', proposal_id)}")
        return self.to_content(proposal)

    @staticmethod
    def to_content(proposal: Dict[str, Any]) -> ProposalContent:
        """Map a Tally proposal payload onto ProposalContent."""
        body = "\n\n".join(
            part for part in (proposal.get("description"), proposal.get("body")) if part
        )
        governor = proposal.get("governor") or {}
        organization = (governor.get("organization") or {}).get("name")
        proposer: Optional[str] = (proposal.get("proposer") or {}).get("address")

        return ProposalContent(
            title=proposal.get("title"),
            content=body,
            organization=organization,
            platform=Platform.TALLY.value,
            proposer=proposer or UNKNOWN_PROPOSER,
        )
