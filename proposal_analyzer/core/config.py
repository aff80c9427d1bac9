"""Configuration management for the DAO Proposal Analyzer."""

from functools import lru_cache
from typing import Dict, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ===========================================
    # OpenAI Configuration
    # ===========================================
    OPENAI_API_KEY: str = Field(default="", description="OpenAI API key")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini", description="Model used for proposal analysis")
    OPENAI_BASE_URL: Optional[str] = Field(
        default=None,
        description="Optional base URL for OpenAI-compatible endpoints"
    )

    # ===========================================
    # Tally Configuration
    # ===========================================
    TALLY_API_KEY: str = Field(default="", description="Tally API key")
    TALLY_API_URL: str = Field(
        default="https://api.tally.xyz/query",
        description="Tally GraphQL endpoint"
    )

    # ===========================================
    # Page Fetching
    # ===========================================
    HTTP_TIMEOUT: float = Field(default=10.0, description="Timeout in seconds for proposal fetches")
    HTTP_USER_AGENT: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
        ),
        description="User-Agent sent with page fetches"
    )

    # ===========================================
    # Server Configuration
    # ===========================================
    DEFAULT_LANGUAGE: str = Field(default="ja", description="Analysis language when none is given")
    UPLOAD_DIR: Optional[str] = Field(
        default=None,
        description="Directory for temporary uploads (system temp dir when unset)"
    )
    DEBUG: bool = Field(default=False, description="Debug mode")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# ===========================================
# Default Evaluation Policies
# ===========================================
# Rubric applied when the request does not carry its own policy

DEFAULT_POLICIES: Dict[str, str] = {
    "ja": """
1. プロポーザルの目的が明確で、コミュニティの利益に合致しているか
2. 技術的な実現可能性が十分に検討されているか
3. リスクとその対策が適切に考慮されているか
4. 資金使用の透明性と説明責任が確保されているか
5. コミュニティの長期的な発展に寄与するか
""",
    "en": """
1. Is the purpose of the proposal clear and aligned with the interests of the community?
2. Has the technical feasibility been sufficiently examined?
3. Are the risks and their mitigations properly considered?
4. Are transparency and accountability in the use of funds ensured?
5. Does it contribute to the long-term development of the community?
""",
}


def default_policy(language: str) -> str:
    """Return the default rubric for a language tag (English for anything but "ja")."""
    return DEFAULT_POLICIES["ja"] if language == "ja" else DEFAULT_POLICIES["en"]


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
