from datetime import datetime
from typing import Any

from pydantic import BaseModel


class VehicleInput(BaseModel):
    # Raw body values; presence and parsing are checked by the controller
    # so a missing field is a 400, not a framework 422.
    modelo: Any = None
    marca: Any = None
    ano: Any = None
    preco: Any = None
    descricao: Any = None


class VehicleResponse(BaseModel):
    id: int
    modelo: str
    marca: str
    ano: int
    preco: float
    descricao: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
