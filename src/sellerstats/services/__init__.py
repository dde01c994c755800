from .analysis import AnalysisService

__all__ = ["AnalysisService"]
