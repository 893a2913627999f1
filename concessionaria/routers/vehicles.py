import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from concessionaria.dependencies import get_vehicle_store
from concessionaria.models.vehicle import Vehicle
from concessionaria.schemas.vehicle import VehicleInput, VehicleResponse
from concessionaria.services.store_results import Found, RecordOutcome, StoreErrorKind, StoreFailure
from concessionaria.services.vehicle_input import (
    InvalidVehicleField,
    InvalidVehicleId,
    has_required_fields,
    normalize_vehicle_fields,
    parse_vehicle_id,
)
from concessionaria.services.vehicle_store import VehicleStore
from concessionaria.utils.exceptions import AppException
from concessionaria.utils.response import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/veiculos", tags=["veiculos"])

# Trailing-slash paths are registered as aliases: the static mount at "/"
# matches them before any slash redirect could run.

NOT_FOUND_MESSAGE = "Veículo não encontrado"


def _serialize(vehicle: Vehicle) -> dict:
    return VehicleResponse.model_validate(vehicle).model_dump(mode="json")


def _vehicle_id(raw: str) -> int:
    try:
        return parse_vehicle_id(raw)
    except InvalidVehicleId:
        logger.info("Rejected vehicle id %r", raw)
        raise AppException("ID inválido", status_code=400) from None


def _vehicle_fields(payload: VehicleInput | None, missing_message: str) -> dict:
    payload = payload or VehicleInput()
    if not has_required_fields(payload):
        raise AppException(missing_message, status_code=400)
    try:
        return normalize_vehicle_fields(payload, datetime.now(timezone.utc))
    except InvalidVehicleField as exc:
        raise AppException(f"Valor inválido para o campo: {exc.field}", status_code=400) from None


def _record_or_raise(outcome: RecordOutcome, vehicle_id: int | None = None) -> Vehicle:
    if isinstance(outcome, Found):
        return outcome.record
    if outcome.kind is StoreErrorKind.NOT_FOUND:
        logger.info("Vehicle %s not found", vehicle_id)
        raise AppException(NOT_FOUND_MESSAGE, status_code=404)
    raise AppException(error=outcome.message, status_code=500)


@router.get("")
@router.get("/", include_in_schema=False)
async def list_vehicles(store: VehicleStore = Depends(get_vehicle_store)):
    outcome = await store.list_all()
    if isinstance(outcome, StoreFailure):
        raise AppException("Erro ao buscar veículos", status_code=500, error=outcome.message)
    data = [_serialize(v) for v in outcome.records]
    return success_response(data=data, total=len(data))


@router.get("/{vehicle_id}")
@router.get("/{vehicle_id}/", include_in_schema=False)
async def get_vehicle(vehicle_id: str, store: VehicleStore = Depends(get_vehicle_store)):
    key = _vehicle_id(vehicle_id)
    vehicle = _record_or_raise(await store.get_by_key(key), key)
    return success_response(data=_serialize(vehicle))


@router.post("", status_code=201)
@router.post("/", status_code=201, include_in_schema=False)
async def create_vehicle(
    payload: VehicleInput | None = None,
    store: VehicleStore = Depends(get_vehicle_store),
):
    fields = _vehicle_fields(payload, "Campos obrigatórios: modelo, marca, ano, preco")
    vehicle = _record_or_raise(await store.insert(fields))
    logger.info("Vehicle %s created", vehicle.id)
    return success_response(data=_serialize(vehicle), message="Veículo cadastrado com sucesso!")


@router.put("/{vehicle_id}")
@router.put("/{vehicle_id}/", include_in_schema=False)
async def update_vehicle(
    vehicle_id: str,
    payload: VehicleInput | None = None,
    store: VehicleStore = Depends(get_vehicle_store),
):
    key = _vehicle_id(vehicle_id)
    fields = _vehicle_fields(payload, "Campos obrigatórios faltando: modelo, preco, marca, ano")
    vehicle = _record_or_raise(await store.update_by_key(key, fields), key)
    logger.info("Vehicle %s updated", key)
    return success_response(data=_serialize(vehicle), message="Veículo atualizado com sucesso!")


@router.delete("/{vehicle_id}")
@router.delete("/{vehicle_id}/", include_in_schema=False)
async def delete_vehicle(vehicle_id: str, store: VehicleStore = Depends(get_vehicle_store)):
    key = _vehicle_id(vehicle_id)
    vehicle = _record_or_raise(await store.delete_by_key(key), key)
    logger.info("Vehicle %s deleted", key)
    return success_response(data=_serialize(vehicle), message="Veículo excluído com sucesso!")
