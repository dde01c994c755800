from .setup import CorrelationIdFilter, LogFiles, configure_logging, get_logger

__all__ = ["CorrelationIdFilter", "LogFiles", "configure_logging", "get_logger"]
