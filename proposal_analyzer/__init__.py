"""DAO Proposal Analyzer - proposal extraction and LLM-based voting analysis."""

__version__ = "1.0.0"
