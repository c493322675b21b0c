# =============================================================================
# core/models/bootstrap.py - Startup Outcome
# =============================================================================
# The result of the one-time dependency bootstrap. A failed outcome is
# terminal: the process entry point turns it into a non-zero exit code.
# =============================================================================

from dataclasses import dataclass


@dataclass(frozen=True)
class BootstrapOutcome:
    """
    Result of running every bootstrap step.

    Attributes:
        success: True when every step completed
        completed_steps: Labels of the steps that finished, in order
        failed_step: Label of the step that raised (None on success)
        message: Error message of the failed step (None on success)
    """

    success: bool
    completed_steps: tuple[str, ...] = ()
    failed_step: str | None = None
    message: str | None = None

    @property
    def exit_code(self) -> int:
        """Process exit status that corresponds to this outcome."""
        return 0 if self.success else 1

    @classmethod
    def succeeded(cls, steps: tuple[str, ...]) -> "BootstrapOutcome":
        return cls(success=True, completed_steps=steps)

    @classmethod
    def failed(cls, steps: tuple[str, ...], step: str, message: str) -> "BootstrapOutcome":
        return cls(success=False, completed_steps=steps, failed_step=step, message=message)
