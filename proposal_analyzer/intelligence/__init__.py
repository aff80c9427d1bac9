"""Intelligence module - Prompt construction for proposal analysis."""

from proposal_analyzer.intelligence.prompts import SYSTEM_PROMPT, build_prompt, resolve_policy

__all__ = [
    "SYSTEM_PROMPT",
    "build_prompt",
    "resolve_policy",
]
