"""Pytest fixtures and configuration for DAO Proposal Analyzer tests."""

import json
import os
import pytest
from typing import Dict, Any, Generator, Optional
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("OPENAI_API_KEY", "sk-test")
os.environ.setdefault("TALLY_API_KEY", "tally-test")
os.environ.setdefault("DEBUG", "false")


# ===========================================
# Helpers
# ===========================================

def make_http_response(text: str = "", json_data: Optional[Any] = None) -> MagicMock:
    """Fake httpx.Response returned by a mocked AsyncClient."""
    response = MagicMock()
    response.text = text
    response.status_code = 200
    response.json.return_value = json_data
    return response


def make_completion(content: Optional[str]) -> MagicMock:
    """Fake chat completion whose first choice carries ``content``."""
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    completion = MagicMock()
    completion.choices = [choice]
    return completion


# ===========================================
# Sample Data Fixtures
# ===========================================

@pytest.fixture
def settings():
    """Settings built from the test environment."""
    from proposal_analyzer.core.config import Settings
    return Settings()


@pytest.fixture
def sample_agora_html() -> str:
    """Minimal Uniswap Agora proposal page."""
    return """
    <html>
      <head><title>Agora</title></head>
      <body>
        <h1>Test Proposal</h1>
        <div class="proposal-content">Body text</div>
      </body>
    </html>
    """


@pytest.fixture
def sample_generic_html() -> str:
    """Proposal page on an unknown forum."""
    return """
    <html>
      <body>
        <nav>Menu</nav>
        <h2>Treasury Diversification</h2>
        <article>
          <p>Sell 10% of the treasury for stablecoins.</p>
        </article>
        <div class="description">Discussion thread for the vote.</div>
        <script>var tracking = true;</script>
      </body>
    </html>
    """


@pytest.fixture
def sample_tally_proposal() -> Dict[str, Any]:
    """Tally GraphQL response with a full proposal payload."""
    return {
        "data": {
            "proposal": {
                "id": "2207",
                "title": "Deploy Uniswap v4 on Base",
                "description": "Summary of the deployment.",
                "body": "Full specification of the deployment.",
                "proposer": {"address": "0x1234567890abcdef1234567890abcdef12345678"},
                "governor": {
                    "name": "Uniswap Governor",
                    "organization": {"name": "Uniswap"}
                },
                "state": "active"
            }
        }
    }


@pytest.fixture
def sample_analysis() -> Dict[str, Any]:
    """Well-formed analysis as returned by the model."""
    return {
        "summary": {
            "overview": "Deploys the protocol on a new chain.",
            "sections": [
                {"title": "Background and Purpose", "content": "Expand reach."},
                {"title": "Technical Implementation and Feasibility", "content": "Audited contracts."},
                {"title": "Expected Effects and Impact", "content": "More volume."}
            ]
        },
        "opinion": {
            "conclusion": {
                "vote": "For",
                "reason": "The proposal is feasible and benefits the community."
            },
            "reasoning": "Clear goals, low risk and transparent funding."
        }
    }


# ===========================================
# Mock Fixtures
# ===========================================

@pytest.fixture
def mock_http():
    """Mock httpx.AsyncClient used for page fetches and Tally queries."""
    with patch("proposal_analyzer.integrations.http.httpx.AsyncClient") as mock:
        mock_instance = AsyncMock()
        mock_instance.get.return_value = make_http_response()
        mock_instance.post.return_value = make_http_response(json_data={})
        mock.return_value.__aenter__.return_value = mock_instance
        mock.return_value.__aexit__.return_value = None
        yield mock_instance


@pytest.fixture
def openai_class():
    """Patched AsyncOpenAI class; its instance is the ``mock_openai`` fixture."""
    with patch("proposal_analyzer.integrations.openai_client.AsyncOpenAI") as mock:
        yield mock


@pytest.fixture
def mock_openai(openai_class, sample_analysis):
    """Mock OpenAI client returning ``sample_analysis``."""
    mock_instance = MagicMock()
    mock_instance.chat.completions.create = AsyncMock(
        return_value=make_completion(json.dumps(sample_analysis))
    )
    mock_instance.close = AsyncMock()
    openai_class.return_value = mock_instance
    return mock_instance


@pytest.fixture
def mock_pdf_reader():
    """Mock pypdf reader yielding a single page of text."""
    with patch("proposal_analyzer.integrations.pdf.PdfReader") as mock:
        page = MagicMock()
        page.extract_text.return_value = "Hello world"
        mock.return_value.pages = [page]
        yield mock


# ===========================================
# Client Fixtures
# ===========================================

@pytest.fixture
def client(mock_http, mock_openai) -> Generator[TestClient, None, None]:
    """Test client with all external services mocked."""
    from proposal_analyzer.main import app
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Replace the settings dependency for one test."""
    from proposal_analyzer.core.config import Settings, get_settings
    from proposal_analyzer.main import app

    def _override(**values) -> Settings:
        overridden = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: overridden
        return overridden

    yield _override
    app.dependency_overrides.clear()


# ===========================================
# Pytest Configuration
# ===========================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
