"""Zone route ordering exports."""

from .models import PersonRoute, RouteResult
from .planner import ZoneRoutePlanner, route_cache_key

__all__ = ["PersonRoute", "RouteResult", "ZoneRoutePlanner", "route_cache_key"]
