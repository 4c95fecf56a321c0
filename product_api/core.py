import math
from typing import Any, Mapping

from .errors import ApiError

# Payload checks run before any create or update touches the store.

MISSING_FIELDS = "Missing required fields"
INVALID_PRICE = "Invalid price"


def _missing(value: Any) -> bool:
    return value is None or value == ""


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def validate_product(payload: Any) -> None:
    """Raise a validation ``ApiError`` for the first rule ``payload`` breaks.

    Order matters: required fields first, then price, then the types of
    the remaining fields.
    """
    if not isinstance(payload, Mapping):
        raise ApiError.validation("Request body must be a JSON object")

    name = payload.get("name")
    price = payload.get("price")
    category = payload.get("category")

    if _missing(name) or price is None or _missing(category):
        raise ApiError.validation(MISSING_FIELDS)
    if not _is_number(price) or price <= 0:
        raise ApiError.validation(INVALID_PRICE)
    if not isinstance(name, str):
        raise ApiError.validation("Invalid name")
    if not isinstance(category, str):
        raise ApiError.validation("Invalid category")

    description = payload.get("description")
    if description is not None and not isinstance(description, str):
        raise ApiError.validation("Invalid description")
    in_stock = payload.get("inStock")
    if in_stock is not None and not isinstance(in_stock, bool):
        raise ApiError.validation("Invalid inStock")
