from .callrate import report_callrate

__all__ = ['report_callrate']
