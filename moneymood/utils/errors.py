"""Custom exception classes for MoneyMood."""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes surfaced to the presentation layer."""
    NETWORK_ERROR = "NETWORK_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    CURRENCY_NOT_SUPPORTED = "CURRENCY_NOT_SUPPORTED"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    SERVER_ERROR = "SERVER_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class MoneyMoodError(Exception):
    """Base exception for all MoneyMood errors."""

    code: ErrorCode = ErrorCode.SERVER_ERROR

    def __init__(self, message: str = "", details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "code": self.code.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.details:
            data["details"] = self.details
        return data


class ConfigurationError(MoneyMoodError):
    """Raised when there's a configuration error."""
    pass


class ServerError(MoneyMoodError):
    """Catch-all for unexpected internal failures."""
    pass


class ValidationError(MoneyMoodError):
    """Raised when an amount, date or other field fails validation."""
    code = ErrorCode.VALIDATION_ERROR


class InvalidInputError(MoneyMoodError):
    """Raised when a required field is missing or malformed."""
    code = ErrorCode.INVALID_INPUT


class ExpenseNotFoundError(InvalidInputError):
    """Raised when an expense id does not exist in the ledger."""
    pass


class CurrencyNotSupportedError(MoneyMoodError):
    """Raised when a currency is outside the supported set or has no rate."""
    code = ErrorCode.CURRENCY_NOT_SUPPORTED


class NetworkError(MoneyMoodError):
    """Raised when the rate source is unreachable and no fallback applies."""
    code = ErrorCode.NETWORK_ERROR


class RateLimitExceededError(MoneyMoodError):
    """Raised when the rate source throttles requests."""
    code = ErrorCode.RATE_LIMIT_EXCEEDED


class DataProviderError(MoneyMoodError):
    """Raised by the rate client when a fetch fails or returns bad data."""
    code = ErrorCode.NETWORK_ERROR


_SEVERITY = {
    ErrorCode.VALIDATION_ERROR: "low",
    ErrorCode.CURRENCY_NOT_SUPPORTED: "medium",
    ErrorCode.INVALID_INPUT: "medium",
    ErrorCode.NETWORK_ERROR: "high",
    ErrorCode.RATE_LIMIT_EXCEEDED: "high",
    ErrorCode.SERVER_ERROR: "critical",
}


def error_severity(error: Exception) -> str:
    """Return low | medium | high | critical for an error."""
    if isinstance(error, MoneyMoodError):
        return _SEVERITY.get(error.code, "medium")
    return "critical"
