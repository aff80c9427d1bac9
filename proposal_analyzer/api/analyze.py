"""Analysis API Routes - Entry point for proposal analysis requests."""

import asyncio
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, Dict, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from proposal_analyzer.core.config import Settings, get_settings
from proposal_analyzer.core.exceptions import ProposalAnalysisError
from proposal_analyzer.integrations.openai_client import AnalysisClient
from proposal_analyzer.models import AnalysisRequest, AnalyzeResponse, ErrorResponse
from proposal_analyzer.services.proposal_analyzer import ProposalAnalysisService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "No proposal content provided"},
    405: {"model": ErrorResponse, "description": "Method not allowed"},
    500: {"model": ErrorResponse, "description": "Configuration, extraction or analysis failure"},
}


def get_analysis_client(request: Request) -> AnalysisClient:
    """Process-wide completion client created in the app lifespan."""
    return request.app.state.analysis_client


# ===========================================
# Analyze Endpoint
# ===========================================

@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Analyze a DAO Proposal"
)
async def analyze_proposal(
    file: Optional[UploadFile] = File(None),
    proposal_url: Optional[str] = Form(None, alias="proposalUrl"),
    policy: Optional[str] = Form(None),
    language: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
    analysis_client: AnalysisClient = Depends(get_analysis_client)
):
    """
    Summarize a proposal and give a For/Against opinion against a policy.

    Exactly one of ``file`` (uploaded document) or ``proposalUrl`` is
    expected; the document wins when both are sent. Any other method on
    this path gets a 405 from the app's HTTP error handler.
    """
    document_path = None
    try:
        if file is not None and file.filename:
            document_path = _temp_upload_path(file, settings)
            await asyncio.to_thread(_write_upload, file.file, document_path)
            logger.info(f"Saved upload '{file.filename}' to {document_path}")

        service = ProposalAnalysisService(settings, analysis_client)
        return await service.analyze(
            AnalysisRequest(
                proposal_url=proposal_url or None,
                document_path=document_path,
                policy=policy,
                language=language or None,
            )
        )

    except ProposalAnalysisError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return error_response(e.status_code, ErrorResponse(**e.to_dict()))
    except Exception as e:
        logger.error(f"Analysis request failed: {e}", exc_info=True)
        return error_response(
            500,
            ErrorResponse(message="Internal server error", error=str(e) or type(e).__name__)
        )
    finally:
        if document_path and os.path.exists(document_path):
            os.unlink(document_path)
            logger.info(f"Discarded uploaded document {document_path} after failure")


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "dao-proposal-analyzer"}


# ===========================================
# Helpers
# ===========================================

def _temp_upload_path(file: UploadFile, settings: Settings) -> str:
    """Reserve an empty temporary file for an upload, keeping its suffix."""
    fd, path = tempfile.mkstemp(
        suffix=Path(file.filename or "").suffix,
        dir=settings.UPLOAD_DIR
    )
    os.close(fd)
    return path


def _write_upload(source: BinaryIO, path: str) -> None:
    with open(path, "wb") as target:
        shutil.copyfileobj(source, target)


def error_response(
    status_code: int,
    body: ErrorResponse,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """JSON error body in the ``{message, error?}`` shape."""
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers
    )
