from pathlib import Path
from typing import Literal, Optional

from .config import SolverConfig
from .exceptions import InvalidInputError
from .models import Allocation, Security
from .optimizers import GreedyStrategy, LinearProgramStrategy
from .optimizers.base import Number

StrategyName = Literal["linear_program", "greedy"]


class Portfolio:
    """A set of candidate securities that can be allocated a budget."""

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.holdings: dict[str, Security] = {}
        self.config = config or SolverConfig()

    def add_security(self, security: Security) -> None:
        self.holdings[security.symbol] = security

    def remove_security(self, symbol: str) -> Optional[Security]:
        return self.holdings.pop(symbol, None)

    @property
    def securities(self) -> list[Security]:
        return list(self.holdings.values())

    def allocate(
        self,
        budget: Number,
        concentration_limit: Number,
        strategy: StrategyName = "linear_program",
    ) -> Allocation:
        """Allocate a budget across the portfolio's securities.

        Args:
            budget: Total investable amount.
            concentration_limit: Maximum fraction of budget per security.
            strategy: Allocation strategy to use:
                - "linear_program": Solve the LP with HiGHS (default)
                - "greedy": Rank by dividend per dollar, no solver

        Returns:
            Allocation with positions in insertion order.
        """
        if not self.holdings:
            raise InvalidInputError("No securities in portfolio. Call add_security() first.")

        strategies = {
            "linear_program": LinearProgramStrategy,
            "greedy": GreedyStrategy,
        }

        strategy_cls = strategies.get(strategy)
        if strategy_cls is None:
            raise ValueError(f"Unknown strategy: {strategy}")

        strategy_instance = strategy_cls(self.config)
        return strategy_instance.allocate(self.securities, budget, concentration_limit)

    @classmethod
    def reference(cls) -> "Portfolio":
        """Create a Portfolio holding the four reference securities."""
        from .loaders import load_reference_securities

        portfolio = cls()
        for security in load_reference_securities():
            portfolio.add_security(security)
        return portfolio

    @classmethod
    def from_file(cls, path: str | Path) -> "Portfolio":
        """Create a Portfolio from a JSON securities file."""
        from .loaders import load_securities

        portfolio = cls()
        for security in load_securities(path):
            portfolio.add_security(security)
        return portfolio

    def __repr__(self) -> str:
        return f"Portfolio(securities={list(self.holdings.keys())})"
