"""Proposal-related models."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

UNTITLED_PROPOSAL = "Untitled Proposal"
NO_CONTENT_FOUND = "No content found"
UNKNOWN_ORGANIZATION = "Unknown Organization"
UNKNOWN_PROPOSER = "Unknown Proposer"


class ProposalContent(BaseModel):
    """Normalized proposal extracted from a URL or an uploaded document.

    Title, content and organization are never empty: blank values are
    replaced by placeholders because they are interpolated straight into
    the analysis prompt.
    """
    title: str = Field(UNTITLED_PROPOSAL, description="Human-readable proposal name")
    content: str = Field(NO_CONTENT_FOUND, description="Best-effort plain-text body")
    platform: str = Field(..., description="Extraction path that produced the record")
    organization: str = Field(UNKNOWN_ORGANIZATION, description="Sponsoring organization")
    proposer: Optional[str] = Field(
        None,
        description="Submitter address, when the source exposes it"
    )

    @field_validator("title", mode="before")
    @classmethod
    def _title_placeholder(cls, value):
        return _or_placeholder(value, UNTITLED_PROPOSAL)

    @field_validator("content", mode="before")
    @classmethod
    def _content_placeholder(cls, value):
        return _or_placeholder(value, NO_CONTENT_FOUND)

    @field_validator("organization", mode="before")
    @classmethod
    def _organization_placeholder(cls, value):
        return _or_placeholder(value, UNKNOWN_ORGANIZATION)


def _or_placeholder(value, placeholder: str) -> str:
    if value is None:
        return placeholder
    text = str(value).strip()
    return text or placeholder
