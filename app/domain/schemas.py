# app/domain/schemas.py
import math
from typing import Any, Dict, List, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError as PydanticValidationError,
    field_validator,
)

REQUIRED_PRODUCT_FIELDS = ("title", "description", "code", "price", "stock", "category")

FIELD_MESSAGES = {
    "title": "title must be a string",
    "description": "description must be a string",
    "code": "code must be a string",
    "category": "category must be a string",
    "price": "price must be a non-negative number",
    "stock": "stock must be a non-negative integer",
    "status": "status must be boolean",
    "thumbnails": "thumbnails must be an array of strings",
}


class ProductUpdate(BaseModel):
    """
    Partial product patch. Only keys present in the input are validated;
    read them back with `model_dump(exclude_unset=True)`.
    An explicit null is checked against the field type and rejected.
    """

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = None
    description: StrictStr = None
    code: StrictStr = None
    price: Union[StrictInt, StrictFloat] = None
    stock: Union[StrictInt, StrictFloat] = None
    category: StrictStr = None
    status: StrictBool = None
    thumbnails: List[StrictStr] = None

    @field_validator("price")
    @classmethod
    def _price_non_negative(cls, v):
        if not math.isfinite(v) or v < 0:
            raise ValueError(FIELD_MESSAGES["price"])
        return v

    @field_validator("stock")
    @classmethod
    def _stock_non_negative_integer(cls, v):
        # integral floats such as 2.0 are stored as 2
        if isinstance(v, float):
            if not v.is_integer():
                raise ValueError(FIELD_MESSAGES["stock"])
            v = int(v)
        if v < 0:
            raise ValueError(FIELD_MESSAGES["stock"])
        return v


class ProductCreate(ProductUpdate):
    """Full product input for create. `status` and `thumbnails` carry defaults."""

    title: StrictStr
    description: StrictStr
    code: StrictStr
    price: Union[StrictInt, StrictFloat]
    stock: Union[StrictInt, StrictFloat]
    category: StrictStr
    status: StrictBool = True
    thumbnails: List[StrictStr] = Field(default_factory=list)


def describe_validation_error(exc: PydanticValidationError) -> str:
    """Turn a pydantic error into the single message returned to clients."""
    errors = exc.errors()
    missing = [str(e["loc"][0]) for e in errors if e["type"] == "missing"]
    if missing:
        ordered = [f for f in REQUIRED_PRODUCT_FIELDS if f in missing]
        return f"Missing fields: {', '.join(ordered)}"

    field = str(errors[0]["loc"][0]) if errors[0]["loc"] else ""
    return FIELD_MESSAGES.get(field, errors[0]["msg"])


class ProductOut(BaseModel):
    id: str
    title: str
    description: str
    code: str
    price: Union[int, float]
    stock: int
    category: str
    status: bool = True
    thumbnails: List[str] = Field(default_factory=list)


class CartLineOut(BaseModel):
    product: str
    quantity: int = Field(..., ge=1)


class CartOut(BaseModel):
    id: str
    products: List[CartLineOut] = Field(default_factory=list)


class ProductEnvelope(BaseModel):
    status: str = "success"
    payload: ProductOut


class ProductListEnvelope(BaseModel):
    status: str = "success"
    payload: List[ProductOut]
    total: int


class CartEnvelope(BaseModel):
    status: str = "success"
    payload: CartOut


class CartLinesEnvelope(BaseModel):
    status: str = "success"
    payload: List[CartLineOut]
    total: int


class MessageEnvelope(BaseModel):
    status: str = "success"
    message: str


class ErrorEnvelope(BaseModel):
    status: str = "error"
    error: str


def error_body(message: str) -> Dict[str, Any]:
    return ErrorEnvelope(error=message).model_dump()
