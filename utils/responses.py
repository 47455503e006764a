import json
import logging
from typing import Optional

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def error_response(message: str, status: int = 400):
    return JSONResponse(
        status_code=status,
        content={"error": message},
    )


def log_endpoint_event(endpoint: str, username: Optional[str] = None, result: str = "success", details: Optional[dict] = None):
    """Log endpoint execution"""
    logger.info(f"{endpoint} | user={username or 'none'} | {result} | {json.dumps(details or {})}")
