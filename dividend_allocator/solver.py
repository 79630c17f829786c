"""Thin adapter over scipy's HiGHS interface for dense linear programs.

Problem form:

    minimize (or maximize): c @ x

    subject to:
        lb[k] <= A[k] @ x <= ub[k]       (one LinearConstraint per block)
        lower <= x <= upper              (variable bounds)

All variables are continuous. Integer constraints are not supported.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp

from .config import SolverConfig
from .exceptions import InfeasibleError, SolverFailureError, UnboundedError

logger = logging.getLogger(__name__)


class LpStatus(Enum):
    """Outcome of a solve call."""

    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    SOLVER_FAILURE = "solver_failure"


# scipy.optimize.milp status codes
_SCIPY_STATUS = {
    0: LpStatus.OPTIMAL,
    1: LpStatus.SOLVER_FAILURE,  # iteration or time limit
    2: LpStatus.INFEASIBLE,
    3: LpStatus.UNBOUNDED,
}

_STATUS_ERRORS = {
    LpStatus.INFEASIBLE: InfeasibleError,
    LpStatus.UNBOUNDED: UnboundedError,
    LpStatus.SOLVER_FAILURE: SolverFailureError,
}


@dataclass(frozen=True)
class LinearProgram:
    """A dense LP in the form accepted by scipy.optimize.milp."""

    objective: np.ndarray
    constraints: list[LinearConstraint] = field(default_factory=list)
    bounds: Optional[Bounds] = None
    maximize: bool = False

    @property
    def num_variables(self) -> int:
        return int(self.objective.shape[0])


@dataclass(frozen=True)
class LpResult:
    """Solver status plus, when optimal, the primal solution."""

    status: LpStatus
    message: str
    x: Optional[np.ndarray] = None
    objective_value: Optional[float] = None

    @property
    def is_optimal(self) -> bool:
        return self.status is LpStatus.OPTIMAL

    def raise_for_status(self) -> None:
        """Raise the matching SolverError unless the result is optimal."""
        if self.is_optimal:
            return
        raise _STATUS_ERRORS[self.status](self.message)

    def solution(self) -> tuple[float, np.ndarray]:
        """Return (objective_value, x), raising if the solve was not optimal."""
        self.raise_for_status()
        if self.x is None or self.objective_value is None:
            raise SolverFailureError(f"Optimal result has no solution: {self.message}")
        return self.objective_value, self.x


def solve_linear_program(
    program: LinearProgram,
    config: Optional[SolverConfig] = None,
) -> LpResult:
    """Solve an LP and translate the solver's status.

    Args:
        program: Objective, constraint blocks and variable bounds.
        config: Solver options. Defaults to SolverConfig().

    Returns:
        LpResult. Callers must check ``status`` (or call ``solution()``)
        before reading ``x``.
    """
    config = config or SolverConfig()

    c = np.asarray(program.objective, dtype=float)
    if program.maximize:
        c = -c

    options: dict = {"presolve": config.PRESOLVE, "disp": False}
    if config.TIME_LIMIT_S is not None:
        options["time_limit"] = config.TIME_LIMIT_S

    logger.debug(
        "Solving LP with %d variables and %d constraint blocks",
        program.num_variables,
        len(program.constraints),
    )

    result = milp(
        c=c,
        constraints=program.constraints or None,
        bounds=program.bounds,
        options=options,
    )

    status = _SCIPY_STATUS.get(result.status, LpStatus.SOLVER_FAILURE)
    message = str(result.message)

    if status is LpStatus.OPTIMAL and result.x is None:
        status = LpStatus.SOLVER_FAILURE
        message = f"Solver reported success without a solution: {message}"

    if status is not LpStatus.OPTIMAL:
        logger.warning("LP solve did not reach optimality (%s): %s", status.value, message)
        return LpResult(status=status, message=message)

    objective_value = float(result.fun)
    if program.maximize:
        objective_value = -objective_value

    logger.debug("LP solved, objective value %s", objective_value)

    return LpResult(
        status=status,
        message=message,
        x=np.asarray(result.x, dtype=float),
        objective_value=objective_value,
    )
