from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import (
    InvalidInputError,
    MissingProductsError,
    MissingPurchaseRecordsError,
    MissingSellersError,
    SalesAnalysisError,
)

REQUIRED_COLLECTIONS: list[tuple[str, type[SalesAnalysisError]]] = [
    ("sellers", MissingSellersError),
    ("products", MissingProductsError),
    ("purchase_records", MissingPurchaseRecordsError),
]


@dataclass(slots=True, frozen=True)
class SalesDataset:
    sellers: Sequence[Any]
    products: Sequence[Any]
    purchase_records: Sequence[Any]


def validate_dataset(data: Any) -> SalesDataset:
    if not isinstance(data, Mapping):
        raise InvalidInputError()

    collections: dict[str, Sequence[Any]] = {}
    for key, error_cls in REQUIRED_COLLECTIONS:
        value = data.get(key)
        if not isinstance(value, (list, tuple)) or not value:
            raise error_cls()
        collections[key] = value

    return SalesDataset(**collections)
