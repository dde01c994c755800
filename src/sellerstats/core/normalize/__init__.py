from .coerce import get_field, is_numeric, round_money, to_number, to_quantity
from .models import (
    LineItem,
    Product,
    PurchaseRecord,
    Seller,
    SellerAccumulator,
    SellerSummary,
    TopProduct,
)

__all__ = [
    "LineItem",
    "Product",
    "PurchaseRecord",
    "Seller",
    "SellerAccumulator",
    "SellerSummary",
    "TopProduct",
    "get_field",
    "is_numeric",
    "round_money",
    "to_number",
    "to_quantity",
]
