"""Proposal Analysis Service - Orchestrates extraction, prompting and analysis."""

import logging
import os

from proposal_analyzer.core.config import Settings
from proposal_analyzer.core.exceptions import ClientInputError, ConfigurationError
from proposal_analyzer.extraction import extract_from_document, extract_from_url
from proposal_analyzer.integrations.openai_client import AnalysisClient
from proposal_analyzer.intelligence.prompts import build_prompt, resolve_policy
from proposal_analyzer.models import AnalysisRequest, AnalyzeResponse, ProposalContent

logger = logging.getLogger(__name__)


class ProposalAnalysisService:
    """
    Runs one analysis request end to end.

    Steps:
    1. Check the OpenAI credential
    2. Extract the proposal (uploaded document preferred over URL)
    3. Build the prompt for the requested language and policy
    4. Call the completion service and parse its answer
    5. Remove the uploaded document

    Stages are strictly sequential and any failure aborts the remaining
    ones. No request data is kept between requests; the completion client
    is owned by the caller.
    """

    def __init__(self, settings: Settings, analysis_client: AnalysisClient):
        """Initialize service with explicit settings."""
        self.settings = settings
        self.analysis_client = analysis_client

    async def analyze(self, request: AnalysisRequest) -> AnalyzeResponse:
        """
        Analyze a proposal.

        Args:
            request: Proposal reference, policy and language

        Returns:
            AnalyzeResponse with proposal metadata and the model's analysis

        Raises:
            ConfigurationError: When no OpenAI API key is configured
            ClientInputError: When neither a document nor a URL is given
            ExtractionError: When the proposal cannot be fetched or read
            AnalysisError: When the completion call fails or is unusable
        """
        if not self.settings.OPENAI_API_KEY:
            logger.error("OpenAI API key is not set")
            raise ConfigurationError()

        # Step 1: Extract proposal content
        proposal = await self._extract(request)

        # Step 2: Build prompt
        language = request.language or self.settings.DEFAULT_LANGUAGE
        policy = resolve_policy(request.policy, language)
        prompt = build_prompt(proposal, policy, language)
        logger.info(f"Prompt built for '{proposal.title}' (language={language})")

        # Step 3: Analyze
        analysis = await self.analysis_client.analyze(prompt)
        logger.info(
            f"Analysis complete for '{proposal.title}': "
            f"vote={analysis.opinion.conclusion.vote.value}"
        )

        result = AnalyzeResponse(
            proposal_title=proposal.title,
            organization=proposal.organization,
            platform=proposal.platform,
            proposer=proposal.proposer,
            analysis=analysis,
        )

        # Step 4: Clean up the upload
        if request.document_path:
            self._remove_document(request.document_path)

        return result

    async def _extract(self, request: AnalysisRequest) -> ProposalContent:
        if request.document_path:
            logger.info("Extracting proposal from uploaded document")
            return await extract_from_document(request.document_path, self.settings)
        if request.proposal_url:
            logger.info(f"Extracting proposal from {request.proposal_url}")
            return await extract_from_url(request.proposal_url, self.settings)
        raise ClientInputError()

    @staticmethod
    def _remove_document(path: str) -> None:
        try:
            os.unlink(path)
            logger.info(f"Removed uploaded document {path}")
        except FileNotFoundError:
            logger.warning(f"Uploaded document already removed: {path}")
