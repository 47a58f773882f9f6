"""Async context manager for timing and logging verification steps."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from src.config.constants import VerificationStep, log_verification_step
from src.infrastructure.logging.logger import StructuredLogger


class StepContext:
    """Mutable context for a timed verification step."""

    def __init__(self) -> None:
        self.state: dict[str, Any] = {}

    def set_state(self, **state: Any) -> None:
        self.state.update(state)


@asynccontextmanager
async def timed_step(
    step: VerificationStep,
    logger: StructuredLogger,
) -> AsyncGenerator[StepContext, None]:
    """Time a verification step and log the state it recorded."""
    log_verification_step(step)
    ctx = StepContext()
    start = time.time()
    try:
        yield ctx
    except Exception as e:
        logger.log_error(step.value, e, context=ctx.state or None)
        raise
    elapsed_ms = (time.time() - start) * 1000
    logger.log_step(step.value, ctx.state, duration_ms=elapsed_ms)
