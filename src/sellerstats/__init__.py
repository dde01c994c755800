from sellerstats.core.analysis import (
    AnalysisOptions,
    InvalidInputError,
    InvalidOptionsError,
    MissingProductsError,
    MissingPurchaseRecordsError,
    MissingSellersError,
    SalesAnalysisError,
    analyze_sales_data,
)
from sellerstats.core.metrics import (
    calculate_bonus_by_profit,
    calculate_catalog_revenue,
    calculate_simple_revenue,
)
from sellerstats.core.normalize import SellerSummary, TopProduct

__all__ = [
    "AnalysisOptions",
    "InvalidInputError",
    "InvalidOptionsError",
    "MissingProductsError",
    "MissingPurchaseRecordsError",
    "MissingSellersError",
    "SalesAnalysisError",
    "SellerSummary",
    "TopProduct",
    "analyze_sales_data",
    "calculate_bonus_by_profit",
    "calculate_catalog_revenue",
    "calculate_simple_revenue",
]
