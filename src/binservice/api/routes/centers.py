"""Collection center endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...models.domain import Center
from ...schemas.reference import CenterListResponse, CenterModel
from ...services.reference import ReferenceService
from ..dependencies import get_reference_service
from ..errors import http_error

router = APIRouter(prefix="/centros", tags=["centros"])


def _center_model(center: Center) -> CenterModel:
    return CenterModel(
        id_centro=center.center_id,
        nombre_tipo=center.type_name,
        id_neo=center.correlation_key,
        nombre=center.name,
        barrio=center.neighborhood,
        direccion=center.address,
        longitud=center.longitude,
        latitud=center.latitude,
    )


@router.get("", response_model=CenterListResponse, status_code=status.HTTP_200_OK)
def list_centers(reference: ReferenceService = Depends(get_reference_service)) -> CenterListResponse:
    try:
        centers = reference.list_centers()
    except Exception as exc:
        raise http_error(exc, "list centers") from exc
    return CenterListResponse(centros=[_center_model(center) for center in centers], total=len(centers))


@router.get("/{center_id}", response_model=CenterModel, status_code=status.HTTP_200_OK)
def get_center(center_id: int, reference: ReferenceService = Depends(get_reference_service)) -> CenterModel:
    try:
        return _center_model(reference.get_center(center_id))
    except Exception as exc:
        raise http_error(exc, f"get center {center_id}") from exc
