"""Emergency report endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from ...schemas.reference import EmergencyRequest, EmergencyResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["emergencias"])


@router.post("/enviar-emergencia", response_model=EmergencyResponse, status_code=status.HTTP_200_OK)
def send_emergency(payload: EmergencyRequest) -> EmergencyResponse:
    logger.info(f"Emergency reported: {payload.tipo}")
    return EmergencyResponse(
        message="Emergencia enviada correctamente",
        tipo=payload.tipo,
        descripcion=payload.descripcion,
    )
