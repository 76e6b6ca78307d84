"""Truck endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...models.domain import Truck
from ...schemas.reference import TruckListResponse, TruckModel
from ...services.reference import ReferenceService
from ..dependencies import get_reference_service
from ..errors import http_error

router = APIRouter(prefix="/camiones", tags=["camiones"])


def _truck_model(truck: Truck) -> TruckModel:
    return TruckModel(
        id_camion=truck.truck_id,
        id_tipo=truck.type_id,
        nombre_tipo=truck.type_name,
        id_estado=truck.status_id,
        tipo_estado=truck.status_name,
    )


@router.get("", response_model=TruckListResponse, status_code=status.HTTP_200_OK)
def list_trucks(reference: ReferenceService = Depends(get_reference_service)) -> TruckListResponse:
    try:
        trucks = reference.list_trucks()
    except Exception as exc:
        raise http_error(exc, "list trucks") from exc
    return TruckListResponse(camiones=[_truck_model(truck) for truck in trucks], total=len(trucks))


@router.get("/{truck_id}", response_model=TruckModel, status_code=status.HTTP_200_OK)
def get_truck(truck_id: int, reference: ReferenceService = Depends(get_reference_service)) -> TruckModel:
    try:
        return _truck_model(reference.get_truck(truck_id))
    except Exception as exc:
        raise http_error(exc, f"get truck {truck_id}") from exc
