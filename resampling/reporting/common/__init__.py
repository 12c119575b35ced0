from .report_errors import ReportError, error_marker, record_error

__all__ = ["ReportError", "error_marker", "record_error"]
