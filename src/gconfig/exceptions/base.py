"""Root of the gconfig error hierarchy."""
from typing import Optional, Dict, Any


class GConfigError(Exception):
    """Raised by ``load()`` and, in strict mode, by typed lookups.

    ``str(error)`` reads ``[ERROR_CODE] message``, followed by the wrapped
    OS or parse error when there is one.

    Args:
        message: What failed, including the path or key involved
        error_code: Stable code such as "CONFIG_FILE_REQUIRED"
        details: Key/line/path context for structured logs
        original: Underlying exception (OSError, ValueError, ...)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original: Optional[Exception] = None,
    ):
        self.message = message
        self.error_code = error_code or "GCONFIG_ERROR"
        self.details = details or {}
        self.original = original

        text = f"[{self.error_code}] {message}"
        if original is not None:
            text += f" ({type(original).__name__}: {original})"
        super().__init__(text)

    def to_dict(self) -> Dict[str, Any]:
        """Fields for a log record's ``extra=``.

        Has no ``message`` key, LogRecord reserves that name.
        """
        data: Dict[str, Any] = {
            "error_code": self.error_code,
            "error_type": type(self).__name__,
            "details": self.details,
        }
        if self.original is not None:
            data["cause"] = type(self.original).__name__
        return data
