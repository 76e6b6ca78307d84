"""Relational store gateway backed by Supabase (PostgREST)."""

from __future__ import annotations

import logging
from typing import Any, Callable

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..errors import StoreError, StoreUnavailable
from ..models.domain import BinRecord, CenterRecord, Truck, ZoneRecord

logger = logging.getLogger(__name__)

STORE = "relational"

BIN_TABLE = "tacho"
BIN_COLUMNS = "id_tacho, id_tipo, id_estado, id_neo, capacidad"
CENTER_TABLE = "centro"
CENTER_COLUMNS = "id_centro, id_tipo, id_neo, tipo_centro(nombre_tipo)"
TRUCK_TABLE = "camiones"
TRUCK_COLUMNS = "id_camion, id_tipo, id_estado, tipo_camion(nombre_tipo), estado_camion(tipo_estado)"
ZONE_TABLE = "zona"
OPERATIONAL_TRUCK_STATUS = 1


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def _embedded(row: dict, table: str, column: str) -> Any:
    """Read a column from a PostgREST embedded (joined) resource."""
    related = row.get(table)
    if isinstance(related, list):
        related = related[0] if related else None
    if not isinstance(related, dict):
        return None
    return related.get(column)


def _bin_from_row(row: dict) -> BinRecord:
    return BinRecord(
        bin_id=int(row["id_tacho"]),
        type_id=int(row["id_tipo"]),
        status_id=int(row["id_estado"]),
        correlation_key=row.get("id_neo") or "",
        capacity=float(row.get("capacidad") or 0.0),
    )


def _center_from_row(row: dict) -> CenterRecord:
    return CenterRecord(
        center_id=int(row["id_centro"]),
        type_name=_embedded(row, "tipo_centro", "nombre_tipo"),
        correlation_key=row.get("id_neo") or None,
    )


def _truck_from_row(row: dict) -> Truck:
    return Truck(
        truck_id=int(row["id_camion"]),
        type_id=_optional_int(row.get("id_tipo")),
        type_name=_embedded(row, "tipo_camion", "nombre_tipo"),
        status_id=_optional_int(row.get("id_estado")),
        status_name=_embedded(row, "estado_camion", "tipo_estado"),
    )


class RelationalStore:
    """Parametrized reads and writes against the operational tables.

    Writes report the number of rows affected; a missing row is reported as
    zero rows (or None for single-row reads), never as an exception.
    """

    def __init__(self, client: Client | None) -> None:
        self._client = client

    def _execute(self, operation: str, build: Callable[[Client], Any]) -> list[dict]:
        if self._client is None:
            raise StoreUnavailable(STORE, operation, "Supabase is not configured")
        try:
            response = build(self._client).execute()
        except httpx.HTTPError as exc:
            raise StoreUnavailable(STORE, operation, str(exc)) from exc
        except APIError as exc:
            raise StoreError(STORE, operation, exc.message or str(exc)) from exc
        return list(response.data or [])

    def ping(self) -> bool:
        self._execute("ping", lambda db: db.table(BIN_TABLE).select("id_tacho").limit(1))
        return True

    # Bins

    def insert_bin(self, *, type_id: int, status_id: int, correlation_key: str, capacity: float) -> int:
        """Insert a bin row and return the id assigned by the store."""
        payload = {
            "id_tipo": type_id,
            "id_estado": status_id,
            "id_neo": correlation_key,
            "capacidad": capacity,
        }
        rows = self._execute("insert bin", lambda db: db.table(BIN_TABLE).insert(payload))
        if not rows or rows[0].get("id_tacho") is None:
            raise StoreError(STORE, "insert bin", "store did not return the inserted id")
        return int(rows[0]["id_tacho"])

    def delete_bins_matching(self, correlation_key: str) -> int:
        """Delete rows whose cross-reference contains the key (LIKE match)."""
        pattern = f"%{correlation_key}%"
        rows = self._execute(
            "delete bin",
            lambda db: db.table(BIN_TABLE).delete().like("id_neo", pattern),
        )
        return len(rows)

    def get_bin(self, bin_id: int) -> BinRecord | None:
        rows = self._execute(
            "get bin",
            lambda db: db.table(BIN_TABLE).select(BIN_COLUMNS).eq("id_tacho", bin_id).limit(1),
        )
        return _bin_from_row(rows[0]) if rows else None

    def list_bins(self) -> list[BinRecord]:
        rows = self._execute(
            "list bins",
            lambda db: db.table(BIN_TABLE).select(BIN_COLUMNS).order("id_tacho"),
        )
        return [_bin_from_row(row) for row in rows]

    def update_capacity(self, bin_id: int, capacity: float) -> int:
        rows = self._execute(
            "update capacity",
            lambda db: db.table(BIN_TABLE).update({"capacidad": capacity}).eq("id_tacho", bin_id),
        )
        return len(rows)

    # Reference entities

    def list_centers(self) -> list[CenterRecord]:
        rows = self._execute(
            "list centers",
            lambda db: db.table(CENTER_TABLE).select(CENTER_COLUMNS).order("id_centro"),
        )
        return [_center_from_row(row) for row in rows]

    def get_center(self, center_id: int) -> CenterRecord | None:
        rows = self._execute(
            "get center",
            lambda db: db.table(CENTER_TABLE).select(CENTER_COLUMNS).eq("id_centro", center_id).limit(1),
        )
        return _center_from_row(rows[0]) if rows else None

    def list_trucks(self) -> list[Truck]:
        rows = self._execute(
            "list trucks",
            lambda db: db.table(TRUCK_TABLE).select(TRUCK_COLUMNS).order("id_camion"),
        )
        return [_truck_from_row(row) for row in rows]

    def get_truck(self, truck_id: int) -> Truck | None:
        rows = self._execute(
            "get truck",
            lambda db: db.table(TRUCK_TABLE).select(TRUCK_COLUMNS).eq("id_camion", truck_id).limit(1),
        )
        return _truck_from_row(rows[0]) if rows else None

    def list_operational_trucks(self) -> list[Truck]:
        rows = self._execute(
            "list operational trucks",
            lambda db: db.table(TRUCK_TABLE)
            .select("id_camion, id_tipo, id_estado")
            .eq("id_estado", OPERATIONAL_TRUCK_STATUS),
        )
        logger.info(f"Found {len(rows)} operational trucks")
        return [_truck_from_row(row) for row in rows]

    def list_zones(self) -> list[ZoneRecord]:
        rows = self._execute(
            "list zones",
            lambda db: db.table(ZONE_TABLE).select("id_zona, nombre").order("id_zona"),
        )
        return [ZoneRecord(zone_id=int(row["id_zona"]), name=str(row.get("nombre") or "")) for row in rows]
