"""Route group exports."""

from . import bins, centers, emergencies, health, people, routes, trucks

__all__ = ["bins", "centers", "emergencies", "health", "people", "routes", "trucks"]
