from __future__ import annotations


class SalesAnalysisError(Exception):
    """Входные данные не прошли проверку; агрегация не начиналась."""

    code = "SalesAnalysisError"
    default_message = "Ошибка анализа продаж"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidInputError(SalesAnalysisError):
    code = "InvalidInput"
    default_message = "Некорректные входные данные"


class MissingSellersError(SalesAnalysisError):
    code = "MissingSellers"
    default_message = "Нет данных о продавцах"


class MissingProductsError(SalesAnalysisError):
    code = "MissingProducts"
    default_message = "Нет данных о товарах"


class MissingPurchaseRecordsError(SalesAnalysisError):
    code = "MissingPurchaseRecords"
    default_message = "Нет данных о покупках"


class InvalidOptionsError(SalesAnalysisError):
    code = "InvalidOptions"
    default_message = "Не переданы функции расчёта"
