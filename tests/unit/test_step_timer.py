"""Tests for step timing and shared HTTP client lifecycle."""

from unittest.mock import MagicMock

import pytest

from src.config.constants import VerificationStep
from src.infrastructure.http.client import close_shared_client, get_shared_client
from src.orchestrator.step_timer import timed_step


@pytest.mark.asyncio
async def test_timed_step_logs_state():
    step_logger = MagicMock()

    async with timed_step(VerificationStep.RETRIEVING, step_logger) as step:
        step.set_state(route_count=3)

    step_logger.log_step.assert_called_once()
    args, kwargs = step_logger.log_step.call_args
    assert args == ("retrieving", {"route_count": 3})
    assert kwargs["duration_ms"] >= 0


@pytest.mark.asyncio
async def test_timed_step_logs_and_reraises_errors():
    step_logger = MagicMock()

    with pytest.raises(RuntimeError):
        async with timed_step(VerificationStep.CONNECTING, step_logger):
            raise RuntimeError("down")

    step_logger.log_error.assert_called_once()
    step_logger.log_step.assert_not_called()


@pytest.mark.asyncio
async def test_shared_client_reused_until_closed(settings):
    first = get_shared_client(settings)
    assert get_shared_client(settings) is first

    await close_shared_client()
    assert first.is_closed

    second = get_shared_client(settings)
    assert second is not first
    await close_shared_client()
