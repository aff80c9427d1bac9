"""Prompt templates for proposal analysis."""

from typing import Optional

from proposal_analyzer.core.config import default_policy
from proposal_analyzer.models import Language, ProposalContent

SYSTEM_PROMPT = (
    "You are an expert in analyzing DAO proposals. "
    "Always respond in valid JSON format as specified in the prompt."
)


def resolve_policy(policy: Optional[str], language: str) -> str:
    """Return the caller's policy, or the default rubric for the language when blank."""
    if policy and policy.strip():
        return policy
    return default_policy(Language.from_tag(language).value)


def build_prompt(content: ProposalContent, policy: str, language: str) -> str:
    """
    Render the analysis prompt.

    Args:
        content: Extracted proposal
        policy: Evaluation policy, interpolated verbatim
        language: "ja" selects the Japanese template, anything else English

    Returns:
        Prompt text asking for the fixed JSON answer shape
    """
    if Language.from_tag(language) is Language.JA:
        return _japanese_prompt(content, policy)
    return _english_prompt(content, policy)


def _japanese_prompt(content: ProposalContent, policy: str) -> str:
    return f"""
以下のDAOプロポーザルを分析し、指定されたポリシーに基づいて評価してください。

プロポーザル タイトル:
{content.title}

プロポーザル 内容:
{content.content}

プラットフォーム: {content.platform}
組織: {content.organization}

ポリシー:
{policy}

以下の形式で回答してください。回答は必ず日本語で行ってください：

{{
  "summary": {{
    "overview": "プロポーザルの簡潔な概要（200-300文字）",
    "sections": [
      {{
        "title": "提案の背景と目的",
        "content": "背景と目的の説明（200-300文字）"
      }},
      {{
        "title": "技術的実装と実現可能性",
        "content": "技術的な詳細の説明（200-300文字）"
      }},
      {{
        "title": "期待される効果と影響",
        "content": "効果と影響の分析（200-300文字）"
      }}
    ]
  }},
  "opinion": {{
    "conclusion": {{
      "vote": "For または Against",
      "reason": "結論を1文で説明（100文字程度）"
    }},
    "reasoning": "ポリシーを踏まえた詳細な理由の説明（400-500文字）"
  }}
}}"""


def _english_prompt(content: ProposalContent, policy: str) -> str:
    return f"""
Please analyze the following DAO proposal based on the specified policy.

Proposal Title:
{content.title}

Proposal Content:
{content.content}

Platform: {content.platform}
Organization: {content.organization}

Policy:
{policy}

Please respond in the following format. Response must be in English:

{{
  "summary": {{
    "overview": "Brief overview of the proposal (200-300 characters)",
    "sections": [
      {{
        "title": "Background and Purpose",
        "content": "Brief explanation of the background and purpose (200-300 characters)"
      }},
      {{
        "title": "Technical Implementation and Feasibility",
        "content": "Detailed explanation of technical aspects (200-300 characters)"
      }},
      {{
        "title": "Expected Effects and Impact",
        "content": "Analysis of the expected effects and impact (200-300 characters)"
      }}
    ]
  }},
  "opinion": {{
    "conclusion": {{
      "vote": "For or Against",
      "reason": "Explain the conclusion in one sentence (about 100 characters)"
    }},
    "reasoning": "Detailed explanation based on the policy (400-500 characters)"
  }}
}}"""
