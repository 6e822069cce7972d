"""Tests for custom errors."""
from moneymood.utils.errors import (
    MoneyMoodError,
    ConfigurationError,
    ValidationError,
    InvalidInputError,
    ExpenseNotFoundError,
    CurrencyNotSupportedError,
    NetworkError,
    RateLimitExceededError,
    DataProviderError,
    ErrorCode,
    error_severity,
)


def test_error_hierarchy():
    """Test error inheritance."""
    for cls in (ConfigurationError, ValidationError, InvalidInputError,
                CurrencyNotSupportedError, NetworkError, DataProviderError):
        assert issubclass(cls, MoneyMoodError)
    assert issubclass(ExpenseNotFoundError, InvalidInputError)


def test_error_codes():
    assert ValidationError("x").code == ErrorCode.VALIDATION_ERROR
    assert InvalidInputError("x").code == ErrorCode.INVALID_INPUT
    assert CurrencyNotSupportedError("x").code == ErrorCode.CURRENCY_NOT_SUPPORTED
    assert NetworkError("x").code == ErrorCode.NETWORK_ERROR
    assert RateLimitExceededError("x").code == ErrorCode.RATE_LIMIT_EXCEEDED


def test_error_messages():
    """Test error messages."""
    error = ConfigurationError("Test message")
    assert str(error) == "Test message"


def test_to_dict():
    data = NetworkError("offline", details="timeout").to_dict()
    assert data["code"] == "NETWORK_ERROR"
    assert data["message"] == "offline"
    assert data["details"] == "timeout"
    assert "timestamp" in data
    assert "details" not in ValidationError("bad").to_dict()


def test_error_severity():
    assert error_severity(ValidationError("x")) == "low"
    assert error_severity(CurrencyNotSupportedError("x")) == "medium"
    assert error_severity(NetworkError("x")) == "high"
    assert error_severity(ConfigurationError("x")) == "critical"
    assert error_severity(RuntimeError("x")) == "critical"
