"""Greedy dividend-per-dollar allocation strategy."""

from decimal import Decimal
from typing import Sequence

import numpy as np

from ..models import Allocation, Security
from .base import AllocationStrategy, Number, to_decimal, validate_problem


class GreedyStrategy(AllocationStrategy):
    """Fill the best-paying securities first, each up to the concentration cap.

    Securities are ranked by dividend income per dollar invested. Each one in
    turn receives the smaller of the cap and the remaining budget. With only a
    budget and per-security caps this ordering reaches the same optimum as the
    linear program, without calling a solver.
    """

    name = "greedy"

    def allocate(
        self,
        securities: Sequence[Security],
        budget: Number,
        concentration_limit: Number,
    ) -> Allocation:
        budget_d, limit_d = validate_problem(securities, budget, concentration_limit)
        cap = budget_d * limit_d
        remaining = budget_d

        shares = np.zeros(len(securities))
        prices = [to_decimal(s.price, f"price of {s.symbol}") for s in securities]
        yields = [
            to_decimal(s.dividend_yield, f"dividend yield of {s.symbol}")
            for s in securities
        ]

        # Stable sort keeps input order among equally paying securities
        ranked = sorted(
            range(len(securities)),
            key=lambda i: yields[i] / prices[i],
            reverse=True,
        )

        for i in ranked:
            if remaining <= 0:
                break
            if yields[i] == 0:
                continue  # Nothing to earn

            invest = min(cap, remaining)
            shares[i] = float(invest / prices[i])
            remaining -= invest

        objective_value = sum(
            (Decimal(str(shares[i])) * yields[i] for i in range(len(securities))),
            start=Decimal("0"),
        )

        return self._allocation_from_solution(
            securities, shares, float(objective_value), budget_d, limit_d
        )
