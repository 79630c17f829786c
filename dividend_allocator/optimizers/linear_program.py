"""Dividend income maximization as a linear program.

Mathematical Formulation:

    maximize: sum(y[i] * x[i])

    subject to:
        sum(x[i] * p[i]) <= B                  (budget constraint)
        0 <= x[i] * p[i] <= c * B              (concentration band)
        x[i] >= 0                              (no shorting)

    where:
        x[i]     = shares of security i (decision variable, continuous)
        p[i]     = price per share of security i
        y[i]     = dividend yield of security i
        B        = budget
        c        = concentration limit (fraction of budget)

The lower edge of the concentration band repeats the non-negativity bound.
It is kept so the constraint rows match the usual textbook statement of the
problem; it never changes the optimum.
"""

import logging
from typing import Sequence

import numpy as np
from scipy.optimize import Bounds, LinearConstraint

from ..config import SolverConfig
from ..exceptions import InvalidInputError
from ..models import Allocation, Security
from ..solver import LinearProgram, solve_linear_program
from .base import AllocationStrategy, Number, to_decimal, validate_problem

logger = logging.getLogger(__name__)


def build_dividend_program(
    prices: np.ndarray,
    yields: np.ndarray,
    budget: float,
    concentration_limit: float,
) -> LinearProgram:
    """Build the dividend LP without validating its parameters."""
    n = len(prices)

    # Constraint 1: Budget
    # sum(x[i] * p[i]) <= B
    A_budget = prices.reshape(1, n)
    budget_constraint = LinearConstraint(A_budget, -np.inf, budget)

    # Constraints 2 and 3: Concentration band
    # 0 <= x[i] * p[i] <= c * B
    A_band = np.diag(prices)
    cap = budget * concentration_limit
    band_constraint = LinearConstraint(A_band, np.zeros(n), np.full(n, cap))

    # Bounds: x >= 0
    bounds = Bounds(np.zeros(n), np.full(n, np.inf))

    return LinearProgram(
        objective=yields,
        constraints=[budget_constraint, band_constraint],
        bounds=bounds,
        maximize=True,
    )


class LinearProgramStrategy(AllocationStrategy):
    """Maximize dividend income exactly with an LP solver."""

    name = "linear_program"

    def allocate(
        self,
        securities: Sequence[Security],
        budget: Number,
        concentration_limit: Number,
    ) -> Allocation:
        budget_d, limit_d = validate_problem(securities, budget, concentration_limit)
        prices, yields = self._collect_security_data(securities)

        program = build_dividend_program(prices, yields, float(budget_d), float(limit_d))
        result = solve_linear_program(program, self.config)
        objective_value, shares = result.solution()

        logger.debug(
            "Allocated %s across %d securities, income %.4f",
            budget_d,
            len(securities),
            objective_value,
        )

        return self._allocation_from_solution(
            securities, shares, objective_value, budget_d, limit_d
        )


def _as_securities(
    securities: Sequence[Security | tuple[Number, Number]],
) -> list[Security]:
    result: list[Security] = []
    for i, item in enumerate(securities):
        if isinstance(item, Security):
            result.append(item)
            continue
        try:
            price, dividend_yield = item
        except (TypeError, ValueError):
            raise InvalidInputError(
                f"Expected a Security or (price, dividend_yield) pair, got {item!r}"
            ) from None
        result.append(
            Security(
                symbol=f"S{i + 1}",
                price=to_decimal(price, f"price of S{i + 1}"),
                dividend_yield=to_decimal(dividend_yield, f"dividend yield of S{i + 1}"),
            )
        )
    return result


def solve(
    securities: Sequence[Security | tuple[Number, Number]],
    budget: Number,
    concentration_limit: Number,
    config: SolverConfig | None = None,
) -> tuple[float, np.ndarray]:
    """Maximize dividend income for a budget and concentration limit.

    Args:
        securities: Securities or (price, dividend_yield) pairs.
        budget: Total investable amount, must be positive.
        concentration_limit: Fraction of budget allowed per security, in (0, 1].
        config: Solver options.

    Returns:
        (objective_value, shares) with one share count per security, in input order.

    Raises:
        InvalidInputError: Parameters rejected before solving.
        InfeasibleError, UnboundedError, SolverFailureError: Solver outcome
            was not optimal.

    Example:
        >>> income, shares = solve([(26.8, 0.095), (10.5, 0.05)], 75000, 0.33)
    """
    allocation = LinearProgramStrategy(config).allocate(
        _as_securities(securities), budget, concentration_limit
    )
    return allocation.objective_value, np.array(allocation.shares)
