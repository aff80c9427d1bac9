"""Enumeration types for the proposal analyzer."""

from enum import Enum


class Platform(str, Enum):
    """Source a proposal was extracted from."""
    TALLY = "Tally"
    UNISWAP_AGORA = "Uniswap Agora"
    PDF_DOCUMENT = "PDF Document"
    TEXT_DOCUMENT = "Text Document"
    OTHER = "Other"


class Language(str, Enum):
    """Language of the prompt and of the model's answer."""
    JA = "ja"
    EN = "en"

    @classmethod
    def from_tag(cls, tag: str) -> "Language":
        """Map a request tag to a language; only "ja" selects Japanese."""
        return cls.JA if tag == cls.JA.value else cls.EN


class Vote(str, Enum):
    """Voting recommendation returned by the model."""
    FOR = "For"
    AGAINST = "Against"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None
