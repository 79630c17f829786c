"""Abstract base class for allocation strategies."""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Sequence

import numpy as np

from ..config import SolverConfig
from ..exceptions import InvalidInputError
from ..models import Allocation, Position, Security

logger = logging.getLogger(__name__)

Number = Decimal | float | int


def to_decimal(value: Number, name: str) -> Decimal:
    """Convert a numeric parameter to a finite Decimal."""
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from None

    if not result.is_finite():
        raise InvalidInputError(f"{name} must be finite, got {value}")
    return result


def validate_problem(
    securities: Sequence[Security],
    budget: Number,
    concentration_limit: Number,
) -> tuple[Decimal, Decimal]:
    """Check problem parameters before any solver work.

    Returns:
        (budget, concentration_limit) as Decimals.

    Raises:
        InvalidInputError: If any parameter is out of range.
    """
    if not securities:
        raise InvalidInputError("At least one security is required")

    budget_d = to_decimal(budget, "budget")
    if budget_d <= 0:
        raise InvalidInputError(f"Budget must be positive, got {budget_d}")

    limit_d = to_decimal(concentration_limit, "concentration_limit")
    if limit_d <= 0 or limit_d > 1:
        raise InvalidInputError(
            f"Concentration limit must be in (0, 1], got {limit_d}"
        )

    for security in securities:
        price = to_decimal(security.price, f"price of {security.symbol}")
        if price <= 0:
            raise InvalidInputError(
                f"Price of {security.symbol} must be positive, got {price}"
            )
        dividend_yield = to_decimal(
            security.dividend_yield, f"dividend yield of {security.symbol}"
        )
        if dividend_yield < 0:
            raise InvalidInputError(
                f"Dividend yield of {security.symbol} must be non-negative, "
                f"got {dividend_yield}"
            )

    return budget_d, limit_d


class AllocationStrategy(ABC):
    """Abstract base class for dividend allocation strategies."""

    name: str = ""

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()

    @abstractmethod
    def allocate(
        self,
        securities: Sequence[Security],
        budget: Number,
        concentration_limit: Number,
    ) -> Allocation:
        """Choose share quantities that maximize dividend income.

        Args:
            securities: Candidate securities, in the order results are reported.
            budget: Total investable amount.
            concentration_limit: Maximum fraction of budget in any one security.

        Returns:
            Allocation with one position per security, in input order.
        """
        pass

    def _collect_security_data(
        self, securities: Sequence[Security]
    ) -> tuple[np.ndarray, np.ndarray]:
        """Extract prices and dividend yields as numpy arrays, in input order."""
        prices = np.array([float(s.price) for s in securities])
        yields = np.array([float(s.dividend_yield) for s in securities])
        return prices, yields

    def _allocation_from_solution(
        self,
        securities: Sequence[Security],
        shares: np.ndarray,
        objective_value: float,
        budget: Decimal,
        concentration_limit: Decimal,
    ) -> Allocation:
        """Convert a share vector into an Allocation, clipping solver noise."""
        shares = np.clip(shares, 0.0, None)
        prices, _ = self._collect_security_data(securities)
        exposures = shares * prices

        tol = self.config.CONSTRAINT_CHECK_TOLERANCE
        cap = float(budget * concentration_limit)
        if exposures.sum() > float(budget) + tol or np.any(exposures > cap + tol):
            logger.warning(
                "%s solution exceeds budget or concentration cap beyond %g",
                self.name,
                tol,
            )

        positions = tuple(
            Position(
                symbol=s.symbol,
                shares=float(shares[i]),
                price=to_decimal(s.price, f"price of {s.symbol}"),
            )
            for i, s in enumerate(securities)
        )
        return Allocation(
            objective_value=float(objective_value),
            positions=positions,
            strategy=self.name,
        )
