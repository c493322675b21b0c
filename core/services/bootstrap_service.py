# =============================================================================
# core/services/bootstrap_service.py - Startup Dependency Sequence
# =============================================================================
# Connects external dependencies one after another at process start.
# The first failure stops the sequence; later steps are never attempted.
# There is no retry and no degraded mode: a failed outcome ends the process.
# =============================================================================

import logging
from typing import Awaitable, Callable, Sequence

from core.models.bootstrap import BootstrapOutcome

logger = logging.getLogger(__name__)

# (label, connect coroutine function)
BootstrapStep = tuple[str, Callable[[], Awaitable[None]]]


class Bootstrapper:
    """
    Runs bootstrap steps strictly in order.

    Each step is awaited to completion before the next one starts, so the
    log reads as a linear story and the failing dependency is always the
    last one mentioned.

    Example:
        bootstrapper = Bootstrapper([
            ("MongoDB", mongodb.connect),
            ("Cloudinary", cloudinary_storage.connect),
        ])
        outcome = await bootstrapper.initialize()
        if not outcome.success:
            sys.exit(outcome.exit_code)
    """

    def __init__(self, steps: Sequence[BootstrapStep]):
        self.steps = list(steps)

    async def initialize(self) -> BootstrapOutcome:
        """
        Connect every dependency.

        Never raises for a failing step; the failure is logged and returned
        as the outcome so the caller decides how the process ends.

        Returns:
            BootstrapOutcome describing which steps completed
        """
        logger.info("Starting server initialization...")
        completed: list[str] = []

        for label, connect in self.steps:
            logger.info(f"Connecting to {label}...")
            try:
                await connect()
            except Exception as e:
                message = getattr(e, "message", None) or str(e) or type(e).__name__
                logger.error(f"Initialization failed: {label}: {message}")
                return BootstrapOutcome.failed(tuple(completed), label, message)
            completed.append(label)
            logger.info(f"{label} connected successfully!")

        logger.info("All services initialized successfully!")
        return BootstrapOutcome.succeeded(tuple(completed))
