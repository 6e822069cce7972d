"""Tests for decorator utilities."""
import logging

import pytest
from moneymood.utils.decorators import log_execution


@pytest.mark.asyncio
async def test_log_execution_async():
    """Test log_execution decorator."""
    @log_execution(log_args=True, log_result=True)
    async def logged_function(x, y):
        return x + y
    
    result = await logged_function(2, 3)
    assert result == 5
    assert logged_function.__name__ == "logged_function"


def test_log_execution_sync(caplog):
    @log_execution(log_args=False)
    def double(x):
        return x * 2

    with caplog.at_level(logging.DEBUG, logger="moneymood.utils.decorators"):
        assert double(4) == 8

    messages = [r.getMessage() for r in caplog.records]
    assert "Starting double" in messages
    assert "Completed double" in messages


@pytest.mark.asyncio
async def test_log_execution_reraises(caplog):
    @log_execution()
    async def broken():
        raise ValueError("boom")

    with caplog.at_level(logging.ERROR, logger="moneymood.utils.decorators"):
        with pytest.raises(ValueError, match="boom"):
            await broken()

    assert any(r.getMessage() == "Failed broken" for r in caplog.records)
