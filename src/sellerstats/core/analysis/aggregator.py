from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from sellerstats.core.metrics import RevenueFunction
from sellerstats.core.normalize import (
    LineItem,
    Product,
    PurchaseRecord,
    Seller,
    SellerAccumulator,
    SellerSummary,
    get_field,
    is_numeric,
    to_number,
)

from .options import AnalysisOptions, resolve_options
from .validation import validate_dataset


@dataclass(slots=True)
class AnalysisResult:
    summaries: list[SellerSummary]
    records_total: int = 0
    records_skipped: int = 0
    unknown_skus: list[Any] = field(default_factory=list)
    duplicate_seller_ids: list[Any] = field(default_factory=list)


def index_sellers(sellers: Iterable[Any]) -> tuple[dict[Any, Seller], list[Any]]:
    index: dict[Any, Seller] = {}
    duplicates: list[Any] = []
    for record in sellers:
        seller = Seller.from_record(record)
        if seller.id in index:
            duplicates.append(seller.id)
            continue
        index[seller.id] = seller
    return index, duplicates


def index_products(products: Iterable[Any]) -> dict[Any, Any]:
    # последняя карточка с тем же sku перекрывает предыдущие
    return {get_field(product, "sku"): product for product in products}


class PurchaseFolder:
    """Сворачивает чеки в частичные аккумуляторы продавцов."""

    def __init__(
        self,
        sellers: Mapping[Any, Seller],
        products: Mapping[Any, Any],
        calculate_revenue: RevenueFunction,
    ):
        self.sellers = sellers
        self.products = products
        self.calculate_revenue = calculate_revenue
        self.records_skipped = 0
        self.unknown_skus: dict[Any, None] = {}
        self._unit_costs: dict[Any, float] = {}

    def _unit_cost(self, sku: Any) -> float:
        if sku not in self._unit_costs:
            product = self.products.get(sku)
            self._unit_costs[sku] = Product.from_record(product).purchase_price if product is not None else 0.0
        return self._unit_costs[sku]

    def _item_revenue(self, item: Any, product: Any) -> float:
        return to_number(self.calculate_revenue(item, product))

    def fold(self, records: Iterable[Any]) -> dict[Any, SellerAccumulator]:
        accumulators: dict[Any, SellerAccumulator] = {}

        for raw_record in records:
            record = PurchaseRecord.from_record(raw_record)
            seller = self.sellers.get(record.seller_id)
            if seller is None:
                self.records_skipped += 1
                continue

            acc = accumulators.get(seller.id)
            if acc is None:
                acc = accumulators[seller.id] = SellerAccumulator.for_seller(seller)

            acc.sales_count += 1

            if is_numeric(record.total_amount):
                acc.revenue += to_number(record.total_amount)
            else:
                acc.revenue += sum(
                    self._item_revenue(item, self.products.get(get_field(item, "sku")))
                    for item in record.items
                )

            for item in record.items:
                line = LineItem.from_record(item)
                product = self.products.get(line.sku)
                if product is None:
                    self.unknown_skus.setdefault(line.sku, None)
                revenue = self._item_revenue(item, product)
                cost = self._unit_cost(line.sku) * line.quantity
                acc.profit += revenue - cost
                acc.add_quantity(line.sku, line.quantity)

        return accumulators


def fold_purchase_records(
    records: Iterable[Any],
    sellers: Mapping[Any, Seller],
    products: Mapping[Any, Any],
    calculate_revenue: RevenueFunction,
) -> dict[Any, SellerAccumulator]:
    return PurchaseFolder(sellers, products, calculate_revenue).fold(records)


def merge_accumulators(
    left: Mapping[Any, SellerAccumulator],
    right: Mapping[Any, SellerAccumulator],
) -> dict[Any, SellerAccumulator]:
    """Объединяет две частичные свёртки; входные словари не изменяются."""
    merged = {seller_id: acc.copy() for seller_id, acc in left.items()}
    for seller_id, acc in right.items():
        existing = merged.get(seller_id)
        merged[seller_id] = existing.merged_with(acc) if existing is not None else acc.copy()
    return merged


def _chunks(records: Sequence[Any], size: int) -> Iterator[Sequence[Any]]:
    for start in range(0, len(records), size):
        yield records[start : start + size]


class SalesAnalyzer:
    def __init__(self, options: Any, logger: logging.Logger | logging.LoggerAdapter | None = None):
        self.options = options
        self.logger = logger or logging.getLogger(__name__)

    def _fold(self, folder: PurchaseFolder, records: Sequence[Any], chunk_size: int | None) -> dict[Any, SellerAccumulator]:
        if chunk_size is None:
            return folder.fold(records)

        merged: dict[Any, SellerAccumulator] = {}
        for chunk in _chunks(records, chunk_size):
            merged = merge_accumulators(merged, folder.fold(chunk))
        return merged

    def run(self, data: Any) -> AnalysisResult:
        dataset = validate_dataset(data)
        options: AnalysisOptions = resolve_options(self.options)

        sellers, duplicate_ids = index_sellers(dataset.sellers)
        if duplicate_ids:
            self.logger.warning("Duplicate seller ids collapsed: %s", duplicate_ids)
        products = index_products(dataset.products)

        self.logger.info(
            "Sales analysis started: sellers=%s products=%s records=%s",
            len(sellers),
            len(products),
            len(dataset.purchase_records),
        )

        folder = PurchaseFolder(sellers, products, options.calculate_revenue)
        folded = self._fold(folder, dataset.purchase_records, options.chunk_size)

        # продавцы без чеков тоже попадают в итог, в исходном порядке
        ranked = [
            folded[seller_id] if seller_id in folded else SellerAccumulator.for_seller(seller)
            for seller_id, seller in sellers.items()
        ]
        ranked.sort(key=lambda acc: acc.profit, reverse=True)

        total = len(ranked)
        for index, acc in enumerate(ranked):
            bonus = to_number(options.calculate_bonus(index, total, acc))
            acc.finalize(bonus=bonus, top_products_limit=options.top_products_limit)

        if folder.records_skipped:
            self.logger.info("Records with unknown seller skipped: %s", folder.records_skipped)
        if folder.unknown_skus:
            self.logger.debug("Unknown product skus: %s", list(folder.unknown_skus))
        self.logger.info("Sales analysis finished: sellers=%s", total)

        return AnalysisResult(
            summaries=[acc.to_summary() for acc in ranked],
            records_total=len(dataset.purchase_records),
            records_skipped=folder.records_skipped,
            unknown_skus=list(folder.unknown_skus),
            duplicate_seller_ids=duplicate_ids,
        )


def analyze_sales_data(
    data: Any,
    options: Any,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> list[SellerSummary]:
    return SalesAnalyzer(options, logger=logger).run(data).summaries
