"""OpenAI integration for proposal analysis."""

import json
import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from proposal_analyzer.core.config import Settings
from proposal_analyzer.core.exceptions import (
    ServiceUnavailable,
    EmptyResponse,
    MalformedResponse,
)
from proposal_analyzer.intelligence.prompts import SYSTEM_PROMPT
from proposal_analyzer.models import AnalysisResult

logger = logging.getLogger(__name__)


class AnalysisClient:
    """
    Client for the chat completion call that analyzes a proposal.

    A single attempt is made per request; the SDK's own retries are
    disabled. One instance is shared by the whole process and closed at
    shutdown.
    """

    def __init__(self, settings: Settings):
        """Initialize client with settings."""
        self.settings = settings
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy initialize the OpenAI client."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.settings.OPENAI_API_KEY,
                base_url=self.settings.OPENAI_BASE_URL,
                max_retries=0,
            )
        return self._client

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("OpenAI client closed")

    async def complete(self, prompt: str) -> str:
        """
        Send the prompt and return the raw message content.

        Raises:
            ServiceUnavailable: When the API call fails
            EmptyResponse: When the reply carries no content
        """
        try:
            completion = await self.client.chat.completions.create(
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                model=self.settings.OPENAI_MODEL,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            logger.error(f"OpenAI API error: {e}")
            raise ServiceUnavailable(str(e)) from e

        choices = completion.choices or []
        content = choices[0].message.content if choices else None
        if not content:
            logger.error("OpenAI API returned no content")
            raise EmptyResponse("OpenAI API returned no content")

        logger.info(f"OpenAI completion received: {len(content)} chars")
        return content

    async def analyze(self, prompt: str) -> AnalysisResult:
        """
        Run the completion and parse it into an AnalysisResult.

        Raises:
            ServiceUnavailable: When the API call fails
            EmptyResponse: When the reply carries no content
            MalformedResponse: When the reply is not JSON of the expected shape
        """
        content = await self.complete(prompt)

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"OpenAI reply is not valid JSON: {e}")
            raise MalformedResponse(f"Failed to parse OpenAI response as JSON: {e}") from e

        try:
            return AnalysisResult.model_validate(payload)
        except ValidationError as e:
            logger.error(f"OpenAI reply does not match the analysis schema: {e}")
            raise MalformedResponse(
                f"OpenAI response does not match the expected format: {e}"
            ) from e
