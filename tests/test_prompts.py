"""Tests for prompt construction."""

import pytest

from proposal_analyzer.core.config import DEFAULT_POLICIES
from proposal_analyzer.intelligence.prompts import build_prompt, resolve_policy
from proposal_analyzer.models import ProposalContent


@pytest.fixture
def proposal() -> ProposalContent:
    return ProposalContent(
        title="Fund the {security} audit",
        content="Allocate 50k USDC to an external audit.",
        platform="Tally",
        organization="Example DAO",
    )


class TestBuildPrompt:
    """Tests for build_prompt."""

    def test_deterministic(self, proposal):
        first = build_prompt(proposal, "Be strict.", "en")
        second = build_prompt(proposal.model_copy(), "Be strict.", "en")

        assert first == second

    def test_japanese_template(self, proposal):
        prompt = build_prompt(proposal, "厳格に評価する", "ja")

        assert "以下のDAOプロポーザルを分析し" in prompt
        assert "回答は必ず日本語で行ってください" in prompt
        assert "提案の背景と目的" in prompt
        assert "Please analyze" not in prompt

    @pytest.mark.parametrize("language", ["en", "fr", "", "JA"])
    def test_non_ja_tags_use_english(self, proposal, language):
        prompt = build_prompt(proposal, "Be strict.", language)

        assert prompt.startswith("\nPlease analyze the following DAO proposal")
        assert "Response must be in English" in prompt
        assert "Background and Purpose" in prompt
        assert "Technical Implementation and Feasibility" in prompt
        assert "Expected Effects and Impact" in prompt

    def test_interpolates_fields_verbatim(self, proposal):
        prompt = build_prompt(proposal, "Policy {with} braces", "en")

        assert "Proposal Title:\nFund the {security} audit" in prompt
        assert "Proposal Content:\nAllocate 50k USDC to an external audit." in prompt
        assert "Platform: Tally" in prompt
        assert "Organization: Example DAO" in prompt
        assert "Policy:\nPolicy {with} braces" in prompt

    def test_requests_json_shape(self, proposal):
        prompt = build_prompt(proposal, "p", "en")

        assert '"summary": {' in prompt
        assert '"opinion": {' in prompt
        assert '"vote": "For or Against"' in prompt
        assert "{{" not in prompt


class TestResolvePolicy:
    """Tests for default policy selection."""

    def test_keeps_given_policy(self):
        assert resolve_policy("Only fund audited work.", "en") == "Only fund audited work."

    @pytest.mark.parametrize("policy", [None, "", "   \n"])
    def test_default_japanese(self, policy):
        assert resolve_policy(policy, "ja") == DEFAULT_POLICIES["ja"]

    def test_default_english_for_other_tags(self):
        assert resolve_policy(None, "en") == DEFAULT_POLICIES["en"]
        assert resolve_policy(None, "de") == DEFAULT_POLICIES["en"]
