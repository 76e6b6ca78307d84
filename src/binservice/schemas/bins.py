"""Bin request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CreateBinRequest(BaseModel):
    # Relational attributes
    id_tipo: int
    id_estado: int
    capacidad: float = Field(..., ge=0, le=100)

    # Graph attributes
    barrio: str = Field(..., min_length=1)
    direccion: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    prioridad: int = 0


class CreateBinResponse(BaseModel):
    message: str
    tacho_id: int
    neo_node_id: str
    custom_id: str


class DeleteBinResponse(BaseModel):
    message: str
    custom_id: str
    relational_deleted: int
    graph_deleted: int
    partial: bool
    warnings: List[str] = Field(default_factory=list)


class BinModel(BaseModel):
    id_tacho: int
    id_tipo: int
    id_estado: int
    capacidad: float
    custom_id: str
    barrio: Optional[str] = None
    direccion: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    prioridad: Optional[int] = None


class BinListResponse(BaseModel):
    tachos: List[BinModel]
    total: int


class UpdateCapacityRequest(BaseModel):
    capacidad: float = Field(..., description="New fill level, between 0 and 100.")


class UpdateCapacityResponse(BaseModel):
    message: str
    id_tacho: int
    capacidad: float


class UpdatePriorityRequest(BaseModel):
    prioridad: int


class UpdatePriorityResponse(BaseModel):
    message: str
    id_tacho: int
    id_neo: str
    prioridad: int
