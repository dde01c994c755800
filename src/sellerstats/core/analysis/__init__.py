from .aggregator import (
    AnalysisResult,
    PurchaseFolder,
    SalesAnalyzer,
    analyze_sales_data,
    fold_purchase_records,
    index_products,
    index_sellers,
    merge_accumulators,
)
from .errors import (
    InvalidInputError,
    InvalidOptionsError,
    MissingProductsError,
    MissingPurchaseRecordsError,
    MissingSellersError,
    SalesAnalysisError,
)
from .options import AnalysisOptions, resolve_options
from .validation import SalesDataset, validate_dataset

__all__ = [
    "AnalysisOptions",
    "AnalysisResult",
    "InvalidInputError",
    "InvalidOptionsError",
    "MissingProductsError",
    "MissingPurchaseRecordsError",
    "MissingSellersError",
    "PurchaseFolder",
    "SalesAnalysisError",
    "SalesAnalyzer",
    "SalesDataset",
    "analyze_sales_data",
    "fold_purchase_records",
    "index_products",
    "index_sellers",
    "merge_accumulators",
    "resolve_options",
    "validate_dataset",
]
