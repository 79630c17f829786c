"""Configuration constants for the dividend allocator."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for the HiGHS-backed LP solver."""

    TIME_LIMIT_S: Optional[float] = None
    PRESOLVE: bool = True
    # Slack allowed when re-checking a solution against budget and caps
    CONSTRAINT_CHECK_TOLERANCE: float = 1e-6


@dataclass(frozen=True)
class AllocationDefaults:
    """Default problem parameters for the reference instance."""

    BUDGET: Decimal = Decimal("75000")
    CONCENTRATION_LIMIT: Decimal = Decimal("0.33")
