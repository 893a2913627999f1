"""Outcomes returned by the vehicle record store.

Store calls never raise for expected conditions: a lookup, update or delete
that matches no row returns ``NotFound``, and any driver or connectivity
error comes back as ``StoreFailure`` carrying the driver's message text.
"""
from dataclasses import dataclass, field
from enum import Enum

from concessionaria.models.vehicle import Vehicle


class StoreErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


@dataclass(frozen=True)
class Found:
    record: Vehicle


@dataclass(frozen=True)
class Listed:
    records: list[Vehicle] = field(default_factory=list)


@dataclass(frozen=True)
class NotFound:
    kind: StoreErrorKind = StoreErrorKind.NOT_FOUND


@dataclass(frozen=True)
class StoreFailure:
    message: str
    kind: StoreErrorKind = StoreErrorKind.STORE_FAILURE


RecordOutcome = Found | NotFound | StoreFailure
ListOutcome = Listed | StoreFailure
