"""Reference entity schemas: centers, trucks and people."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CenterModel(BaseModel):
    id_centro: int
    nombre_tipo: Optional[str] = None
    id_neo: Optional[str] = None
    nombre: str = ""
    barrio: str = ""
    direccion: str = ""
    longitud: float = 0.0
    latitud: float = 0.0


class CenterListResponse(BaseModel):
    centros: List[CenterModel]
    total: int


class TruckModel(BaseModel):
    id_camion: int
    id_tipo: Optional[int] = None
    nombre_tipo: Optional[str] = None
    id_estado: Optional[int] = None
    tipo_estado: Optional[str] = None


class TruckListResponse(BaseModel):
    camiones: List[TruckModel]
    total: int


class PersonModel(BaseModel):
    id: str
    zona_id: str
    camion_id: str
    zona_nombre: Optional[str] = None
    nombre: Optional[str] = None
    estado: Optional[str] = None


class PersonListResponse(BaseModel):
    personas: List[PersonModel]
    total: int


class ZonePeopleResponse(PersonListResponse):
    zona: int


class EmergencyRequest(BaseModel):
    tipo: str = Field(..., min_length=1, examples=["incendio"])
    descripcion: str = Field(..., min_length=1, examples=["Incendio en edificio de oficinas"])


class EmergencyResponse(BaseModel):
    message: str
    tipo: str
    descripcion: str
