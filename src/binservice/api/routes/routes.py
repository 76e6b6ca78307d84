"""Zone route endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException, status

from ...schemas.routing import PersonRouteResponse, PointModel, RouteResponse
from ...services.people import PeopleService
from ...services.routing.models import RouteResult
from ...services.routing.planner import ZoneRoutePlanner
from ..dependencies import get_people_service, get_planner
from ..errors import http_error

router = APIRouter(prefix="/ruta-optima", tags=["rutas"])


def _route_response(result: RouteResult) -> RouteResponse:
    return RouteResponse(
        zone_id=result.zone_id,
        neighborhood=result.neighborhood,
        points=[PointModel(id=point.seq, lat=point.lat, lng=point.lng) for point in result.points],
        dropped=result.dropped,
        cached=result.cached,
    )


@router.get("", response_model=PersonRouteResponse, status_code=status.HTTP_200_OK)
def route_for_email(
    email: str | None = Header(default=None),
    people: PeopleService = Depends(get_people_service),
) -> PersonRouteResponse:
    """Route of the zone assigned to the person behind the ``email`` header."""
    if not email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Header 'email' is required")
    try:
        person_route = people.route_for_email(email)
    except Exception as exc:
        raise http_error(exc, f"get route for '{email}'") from exc
    return PersonRouteResponse(
        email=person_route.email,
        persona=person_route.person_number,
        zona_id=person_route.zone_id,
        zona_name=person_route.zone_name,
        routes=_route_response(person_route.route),
    )


@router.get("/{zone_id}", response_model=RouteResponse, status_code=status.HTTP_200_OK)
def route_for_zone(zone_id: int, planner: ZoneRoutePlanner = Depends(get_planner)) -> RouteResponse:
    try:
        return _route_response(planner.get_ordered_points(zone_id))
    except Exception as exc:
        raise http_error(exc, f"get route for zone {zone_id}") from exc
