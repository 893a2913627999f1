from concessionaria.database import async_session
from concessionaria.services.vehicle_store import VehicleStore

vehicle_store = VehicleStore(async_session)


async def get_vehicle_store() -> VehicleStore:
    return vehicle_store
