"""Bin (tacho) endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...models.domain import Bin
from ...schemas.bins import (
    BinListResponse,
    BinModel,
    CreateBinRequest,
    CreateBinResponse,
    DeleteBinResponse,
    UpdateCapacityRequest,
    UpdateCapacityResponse,
    UpdatePriorityRequest,
    UpdatePriorityResponse,
)
from ...services.bins.coordinator import BinCoordinator
from ...services.correlation import derive_key
from ..dependencies import get_coordinator
from ..errors import http_error

router = APIRouter(prefix="/tachos", tags=["tachos"])


def _bin_model(item: Bin) -> BinModel:
    return BinModel(
        id_tacho=item.bin_id,
        id_tipo=item.type_id,
        id_estado=item.status_id,
        capacidad=item.capacity,
        custom_id=item.correlation_key,
        barrio=item.neighborhood,
        direccion=item.address,
        latitude=item.latitude,
        longitude=item.longitude,
        prioridad=item.priority,
    )


@router.get("", response_model=BinListResponse, status_code=status.HTTP_200_OK)
def list_bins(coordinator: BinCoordinator = Depends(get_coordinator)) -> BinListResponse:
    try:
        bins = coordinator.list_bins()
    except Exception as exc:
        raise http_error(exc, "list bins") from exc
    return BinListResponse(tachos=[_bin_model(item) for item in bins], total=len(bins))


@router.get("/{bin_id}", response_model=BinModel, status_code=status.HTTP_200_OK)
def get_bin(bin_id: int, coordinator: BinCoordinator = Depends(get_coordinator)) -> BinModel:
    try:
        return _bin_model(coordinator.get_bin(bin_id))
    except Exception as exc:
        raise http_error(exc, f"get bin {bin_id}") from exc


@router.post("", response_model=CreateBinResponse, status_code=status.HTTP_201_CREATED)
def create_bin(
    payload: CreateBinRequest,
    coordinator: BinCoordinator = Depends(get_coordinator),
) -> CreateBinResponse:
    try:
        created = coordinator.create(payload)
    except Exception as exc:
        raise http_error(exc, "create bin") from exc
    return CreateBinResponse(
        message="Tacho creado exitosamente",
        tacho_id=created.bin_id,
        neo_node_id=created.graph_node_ref,
        custom_id=created.correlation_key,
    )


@router.delete("", response_model=DeleteBinResponse, status_code=status.HTTP_200_OK)
def delete_bin(
    custom_id: str | None = Query(default=None, description="Correlation key (direccion|barrio)"),
    direccion: str | None = Query(default=None, description="Address; requires barrio"),
    barrio: str | None = Query(default=None, description="Neighborhood; required with direccion"),
    coordinator: BinCoordinator = Depends(get_coordinator),
) -> DeleteBinResponse:
    """Delete a bin from both stores, by custom_id or by direccion + barrio."""
    if custom_id:
        key = custom_id
    elif direccion and barrio:
        key = derive_key(direccion, barrio)
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Provide 'custom_id' or both 'direccion' and 'barrio'.",
                "examples": {
                    "custom_id": "?custom_id=Av Corrientes 1234|CHACARITA",
                    "direccion_barrio": "?direccion=Av Corrientes 1234&barrio=CHACARITA",
                },
            },
        )

    try:
        deleted = coordinator.delete(key)
    except Exception as exc:
        raise http_error(exc, f"delete bin '{key}'") from exc
    return DeleteBinResponse(
        message="Tacho eliminado exitosamente",
        custom_id=key,
        relational_deleted=deleted.relational_deleted,
        graph_deleted=deleted.graph_deleted,
        partial=deleted.partial,
        warnings=deleted.warnings,
    )


@router.put("/{bin_id}/capacidad", response_model=UpdateCapacityResponse, status_code=status.HTTP_200_OK)
def update_capacity(
    bin_id: int,
    payload: UpdateCapacityRequest,
    coordinator: BinCoordinator = Depends(get_coordinator),
) -> UpdateCapacityResponse:
    try:
        capacity = coordinator.update_capacity(bin_id, payload.capacidad)
    except Exception as exc:
        raise http_error(exc, f"update capacity of bin {bin_id}") from exc
    return UpdateCapacityResponse(
        message="Capacidad actualizada correctamente",
        id_tacho=bin_id,
        capacidad=capacity,
    )


@router.put("/{bin_id}/prioridad", response_model=UpdatePriorityResponse, status_code=status.HTTP_200_OK)
def update_priority(
    bin_id: int,
    payload: UpdatePriorityRequest,
    coordinator: BinCoordinator = Depends(get_coordinator),
) -> UpdatePriorityResponse:
    try:
        record = coordinator.update_priority(bin_id, payload.prioridad)
    except Exception as exc:
        raise http_error(exc, f"update priority of bin {bin_id}") from exc
    return UpdatePriorityResponse(
        message="Prioridad actualizada correctamente",
        id_tacho=record.bin_id,
        id_neo=record.correlation_key,
        prioridad=payload.prioridad,
    )
