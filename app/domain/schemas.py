# app/domain/schemas.py
import json
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def decode_image_binaries(value) -> dict:
    # formularz wysyla mape url -> base64 jako string JSON
    if value is None or value == "":
        return {}
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"imageBinaries is not valid JSON: {e}") from e
    return value


ImageBinaries = Annotated[Dict[str, str], BeforeValidator(decode_image_binaries)]


class ApiModel(BaseModel):
    """Klient wysyla camelCase (sellerId, quantityAvailable), w Pythonie snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductIn(ApiModel):
    """Schema dla tworzenia / edycji produktu."""

    seller_id: int = Field(..., gt=0, description="ID sprzedawcy (musi być > 0)")
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, description="Cena (>= 0, jak CHECK w bazie)")
    # INTEGER w postgresie, wieksza wartosc to DataError przy zapisie
    quantity_available: int = Field(
        ..., ge=0, le=2**31 - 1, description="Ilość (>= 0, jak CHECK w bazie)"
    )
    category: str = Field(..., min_length=1)
    images: List[str] = Field(..., min_length=1)
    image_binaries: ImageBinaries = Field(default_factory=dict)
    color_options: Optional[List[str]] = None
    variants: Optional[List[str]] = None



class ProductOut(ApiModel):
    """Schema dla produktu (response)."""

    id: int
    seller_id: int
    title: str
    description: str
    price: Decimal
    quantity_available: int
    category: str
    images: List[str]
    image_binaries: ImageBinaries = Field(default_factory=dict)
    color_options: Optional[List[str]] = None
    variants: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

