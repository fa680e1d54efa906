# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict


class Product(BaseModel):
    """Produkt w katalogu. Niezmienny po utworzeniu."""

    id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    name: str = Field(..., min_length=1, description="Nazwa produktu")
    description: str = Field(..., description="Opis produktu")
    price: float = Field(..., ge=0, description="Cena produktu (>= 0)")

    model_config = ConfigDict(frozen=True)


class HealthOut(BaseModel):
    status: str
    service: str
