from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .coerce import get_field, round_money, to_number, to_quantity


@dataclass(slots=True, frozen=True)
class Seller:
    id: Any
    first_name: str | None = None
    last_name: str | None = None

    @property
    def name(self) -> str:
        return " ".join(str(part) for part in (self.first_name, self.last_name) if part)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Seller:
        return cls(
            id=get_field(record, "id"),
            first_name=get_field(record, "first_name"),
            last_name=get_field(record, "last_name"),
        )


@dataclass(slots=True, frozen=True)
class Product:
    sku: Any
    sale_price: float = 0.0
    purchase_price: float = 0.0
    name: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Product:
        return cls(
            sku=get_field(record, "sku"),
            sale_price=to_number(get_field(record, "sale_price")),
            purchase_price=to_number(get_field(record, "purchase_price")),
            name=get_field(record, "name"),
        )


@dataclass(slots=True, frozen=True)
class LineItem:
    sku: Any
    sale_price: float = 0.0
    quantity: int | float = 0
    discount: float = 0.0

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> LineItem:
        return cls(
            sku=get_field(record, "sku"),
            sale_price=to_number(get_field(record, "sale_price")),
            quantity=to_quantity(get_field(record, "quantity")),
            discount=to_number(get_field(record, "discount")),
        )


@dataclass(slots=True, frozen=True)
class PurchaseRecord:
    seller_id: Any
    items: tuple[Mapping[str, Any], ...] = ()
    total_amount: Any = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> PurchaseRecord:
        """
        Чек может прийти с позициями (items) или плоским: sale_price/quantity/discount прямо в записи.
        Плоский чек считается одной позицией.
        """
        raw_items = get_field(record, "items")
        if isinstance(raw_items, (list, tuple)):
            items = tuple(raw_items)
        elif any(get_field(record, key) is not None for key in ("sale_price", "quantity")):
            items = (record,)
        else:
            items = ()
        return cls(
            seller_id=get_field(record, "seller_id"),
            items=items,
            total_amount=get_field(record, "total_amount"),
        )


@dataclass(slots=True, frozen=True)
class TopProduct:
    sku: Any
    quantity: int | float

    def as_dict(self) -> dict[str, Any]:
        return {"sku": self.sku, "quantity": self.quantity}


@dataclass(slots=True)
class SellerAccumulator:
    seller_id: Any
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    products_sold: dict[Any, int | float] = field(default_factory=dict)
    bonus: float = 0.0
    top_products: list[TopProduct] = field(default_factory=list)

    @classmethod
    def for_seller(cls, seller: Seller) -> SellerAccumulator:
        return cls(seller_id=seller.id, name=seller.name)

    def add_quantity(self, sku: Any, quantity: int | float) -> None:
        self.products_sold[sku] = self.products_sold.get(sku, 0) + quantity

    def copy(self) -> SellerAccumulator:
        return SellerAccumulator(
            seller_id=self.seller_id,
            name=self.name,
            revenue=self.revenue,
            profit=self.profit,
            sales_count=self.sales_count,
            products_sold=dict(self.products_sold),
        )

    def merged_with(self, other: SellerAccumulator) -> SellerAccumulator:
        merged = self.copy()
        merged.revenue += other.revenue
        merged.profit += other.profit
        merged.sales_count += other.sales_count
        for sku, quantity in other.products_sold.items():
            merged.add_quantity(sku, quantity)
        return merged

    def finalize(self, bonus: float, top_products_limit: int) -> None:
        ranked = sorted(self.products_sold.items(), key=lambda pair: pair[1], reverse=True)
        self.top_products = [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:top_products_limit]]
        self.bonus = round_money(bonus)
        self.revenue = round_money(self.revenue)
        self.profit = round_money(self.profit)

    def to_summary(self) -> SellerSummary:
        return SellerSummary(
            seller_id=self.seller_id,
            name=self.name,
            revenue=self.revenue,
            profit=self.profit,
            sales_count=self.sales_count,
            top_products=tuple(self.top_products),
            bonus=self.bonus,
        )


@dataclass(slots=True, frozen=True)
class SellerSummary:
    seller_id: Any
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: tuple[TopProduct, ...] = ()
    bonus: float = 0.0

    def as_dict(self) -> dict[str, Any]:
        return {
            "seller_id": self.seller_id,
            "name": self.name,
            "revenue": self.revenue,
            "profit": self.profit,
            "sales_count": self.sales_count,
            "top_products": [product.as_dict() for product in self.top_products],
            "bonus": self.bonus,
        }
