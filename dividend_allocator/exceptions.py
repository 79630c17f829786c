"""Errors raised while building or solving an allocation."""


class AllocationError(Exception):
    """Base class for allocation failures."""


class InvalidInputError(AllocationError, ValueError):
    """Problem parameters were rejected before reaching the solver."""


class SolverError(AllocationError):
    """The solver ran but did not produce an optimal solution."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InfeasibleError(SolverError):
    """No point satisfies all constraints."""


class UnboundedError(SolverError):
    """The objective can grow without limit."""


class SolverFailureError(SolverError):
    """The solver stopped without a definitive status (e.g. iteration limit)."""
