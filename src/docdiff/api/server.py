"""
FastAPI server exposing document comparison over HTTP.
"""

from typing import Literal, Optional
import asyncio
import logging

from .. import __version__
from ..core.config import DiffConfig, get_config
from ..core.errors import DocumentParseError, InputTooLargeError
from ..diff.comparator import DocumentDiffEngine

logger = logging.getLogger(__name__)


def create_app(config: Optional[DiffConfig] = None):
    """
    Create FastAPI application.

    Args:
        config: Comparison limits (defaults to the global config)

    Returns:
        FastAPI application
    """
    try:
        from fastapi import FastAPI, HTTPException
        from fastapi.middleware.cors import CORSMiddleware
        from pydantic import BaseModel
    except ImportError:
        raise ImportError(
            "FastAPI is required for the web server. "
            "Install with: pip install 'docdiff[server]'"
        )

    engine = DocumentDiffEngine(config or get_config())

    app = FastAPI(
        title="DocDiff API",
        description="Structural diff for JSON and XML documents",
        version=__version__,
    )

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Models
    class CompareRequest(BaseModel):
        left: str
        right: str
        format: Literal["json", "xml"] = "json"

    class NormalizeRequest(BaseModel):
        text: str
        format: Literal["json", "xml"] = "json"

    # Routes
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "DocDiff API",
            "version": __version__,
            "docs": "/docs",
        }

    @app.post("/compare")
    async def compare_documents(request: CompareRequest):
        """Compare two documents."""
        result = await engine.diff_with_timeout(request.left, request.right, request.format)
        return result.to_dict()

    @app.post("/normalize")
    async def normalize_document(request: NormalizeRequest):
        """Return the canonical form of a document."""
        try:
            normalized = await engine.normalize_with_timeout(request.text, request.format)
        except InputTooLargeError as e:
            raise HTTPException(status_code=413, detail={"message": e.message})
        except DocumentParseError as e:
            raise HTTPException(status_code=400, detail=e.to_dict())
        except asyncio.TimeoutError:
            timeout = engine.config.timeout_seconds
            logger.warning(f"Normalization timed out after {timeout:g}s")
            raise HTTPException(
                status_code=504,
                detail={"message": f"Normalization timed out after {timeout:g}s"},
            )
        return {"normalized": normalized}

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info(f"DocDiff API created (timeout {engine.config.timeout_seconds:g}s)")
    return app
