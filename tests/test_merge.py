from __future__ import annotations

from sellerstats import AnalysisOptions, analyze_sales_data
from sellerstats.core.analysis import (
    fold_purchase_records,
    index_products,
    index_sellers,
    merge_accumulators,
)
from sellerstats.core.metrics import calculate_simple_revenue


def _fold(dataset: dict, records: list) -> dict:
    sellers, _ = index_sellers(dataset["sellers"])
    products = index_products(dataset["products"])
    return fold_purchase_records(records, sellers, products, calculate_simple_revenue)


def test_fold_returns_only_touched_sellers(dataset) -> None:  # noqa: ANN001
    partial = _fold(dataset, dataset["purchase_records"][:2])
    assert set(partial) == {"seller_1", "seller_2"}
    assert partial["seller_1"].sales_count == 1
    assert partial["seller_1"].products_sold == {"SKU_001": 2}


def test_merge_sums_shards_without_mutating_inputs(dataset) -> None:  # noqa: ANN001
    records = dataset["purchase_records"]
    left = _fold(dataset, records[:2])
    right = _fold(dataset, records[2:])
    left_before = {key: acc.copy() for key, acc in left.items()}

    merged = merge_accumulators(left, right)

    assert left == left_before
    seller_1 = merged["seller_1"]
    assert seller_1.revenue == 300
    assert seller_1.profit == 140
    assert seller_1.sales_count == 2
    assert seller_1.products_sold == {"SKU_001": 2, "SKU_003": 5, "SKU_002": 1}
    assert merged["seller_2"].sales_count == 1


def test_merge_is_commutative_per_seller(dataset) -> None:  # noqa: ANN001
    records = dataset["purchase_records"]
    left = _fold(dataset, records[:1])
    right = _fold(dataset, records[1:])

    forward = merge_accumulators(left, right)
    backward = merge_accumulators(right, left)

    for seller_id in forward:
        assert forward[seller_id].revenue == backward[seller_id].revenue
        assert forward[seller_id].profit == backward[seller_id].profit
        assert forward[seller_id].sales_count == backward[seller_id].sales_count
        assert dict(sorted(forward[seller_id].products_sold.items())) == dict(
            sorted(backward[seller_id].products_sold.items())
        )


def test_chunked_analysis_matches_single_pass(dataset, options) -> None:  # noqa: ANN001
    single = analyze_sales_data(dataset, options)
    for chunk_size in (1, 2, 3, 100):
        chunked = analyze_sales_data(
            dataset,
            AnalysisOptions(
                calculate_revenue=options.calculate_revenue,
                calculate_bonus=options.calculate_bonus,
                chunk_size=chunk_size,
            ),
        )
        assert chunked == single
