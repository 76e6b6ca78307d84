"""Translation of service errors to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from ..errors import NotFound, PartialWriteFailure, StoreUnavailable

logger = logging.getLogger(__name__)


def http_error(exc: Exception, action: str) -> HTTPException:
    if isinstance(exc, NotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, PartialWriteFailure):
        logger.error(f"Failed to {action}: {exc}")
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": f"Failed to {action}: {exc}",
                "custom_id": exc.correlation_key,
                "neo_node_id": exc.graph_node_ref,
            },
        )
    if isinstance(exc, StoreUnavailable):
        logger.warning(f"Failed to {action}: {exc}")
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
    if isinstance(exc, ValueError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    logger.exception(f"Error trying to {action}: {exc}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {str(exc)}",
    )
