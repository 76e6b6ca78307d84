"""Route request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class PointModel(BaseModel):
    id: int
    lat: float
    lng: float


class RouteResponse(BaseModel):
    zone_id: int
    neighborhood: str
    points: List[PointModel]
    dropped: int = 0
    cached: bool = False


class PersonRouteResponse(BaseModel):
    email: str
    persona: str
    zona_id: int
    zona_name: Optional[str] = None
    routes: RouteResponse
