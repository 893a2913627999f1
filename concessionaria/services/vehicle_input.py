"""Validation and normalization of vehicle request input.

Presence of required fields is a truthiness check: ``None``, ``""``, ``0``
and ``False`` all count as missing, so a vehicle priced at 0 or dated year 0
is rejected. Numeric fields are parsed leniently from their leading digits,
the way a form posting ``"2022"`` or ``"95000.50"`` expects.
"""
import math
import re
from datetime import datetime
from typing import Any

from concessionaria.schemas.vehicle import VehicleInput

REQUIRED_FIELDS = ("modelo", "marca", "ano", "preco")

_NUMERIC_ID = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)")


class InvalidVehicleId(ValueError):
    pass


class InvalidVehicleField(ValueError):
    def __init__(self, field: str):
        super().__init__(field)
        self.field = field


def parse_vehicle_id(raw: str) -> int:
    """Numeric check on the whole string, then the leading integer is the key.

    ``"3.9"`` and ``"1e2"`` address records 3 and 1; ``".5"`` is numeric but
    has no leading integer and is rejected like ``"abc"``.
    """
    if not _NUMERIC_ID.match(raw):
        raise InvalidVehicleId(raw)
    match = _LEADING_INT.match(raw)
    if match is None:
        raise InvalidVehicleId(raw)
    return int(match.group(1))


def has_required_fields(payload: VehicleInput) -> bool:
    return all(getattr(payload, name) for name in REQUIRED_FIELDS)


def _text(field: str, value: Any) -> str:
    if isinstance(value, (dict, list)):
        raise InvalidVehicleField(field)
    return str(value).strip()


def _integer(field: str, value: Any) -> int:
    match = None if isinstance(value, bool) else _LEADING_INT.match(str(value))
    if match is None:
        raise InvalidVehicleField(field)
    return int(match.group(1))


def _decimal(field: str, value: Any) -> float:
    match = None if isinstance(value, bool) else _LEADING_FLOAT.match(str(value))
    if match is None:
        raise InvalidVehicleField(field)
    number = float(match.group(1))
    if not math.isfinite(number):
        raise InvalidVehicleField(field)
    return number


def normalize_vehicle_fields(payload: VehicleInput, now: datetime) -> dict[str, Any]:
    """Column values for an insert or full update.

    Assumes ``has_required_fields(payload)`` already passed. ``id`` and
    ``created_at`` are never taken from the caller.
    """
    return {
        "modelo": _text("modelo", payload.modelo),
        "marca": _text("marca", payload.marca),
        "ano": _integer("ano", payload.ano),
        "preco": _decimal("preco", payload.preco),
        "descricao": _text("descricao", payload.descricao) if payload.descricao else None,
        "updated_at": now,
    }
