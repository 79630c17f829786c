"""Data models for the dividend allocator."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Security:
    """A dividend-paying security available for purchase."""

    symbol: str
    price: Decimal
    dividend_yield: Decimal

    @property
    def dividend_per_dollar(self) -> Decimal:
        return self.dividend_yield / self.price


@dataclass(frozen=True)
class Position:
    """Solved holding of a single security."""

    symbol: str
    shares: float
    price: Decimal

    @property
    def exposure(self) -> Decimal:
        return Decimal(str(self.shares)) * self.price

    @property
    def whole_shares(self) -> int:
        return round(self.shares)

    @property
    def rounded_exposure(self) -> Decimal:
        return Decimal(self.whole_shares) * self.price

    def __str__(self) -> str:
        return (
            f"{self.symbol} {self.whole_shares} shares "
            f"(${self.rounded_exposure:.2f}, exact: {self.shares:.4f})"
        )


@dataclass(frozen=True)
class Allocation:
    """Optimal share quantities and the dividend income they produce."""

    objective_value: float
    positions: tuple[Position, ...]
    strategy: str = ""

    @property
    def shares(self) -> tuple[float, ...]:
        return tuple(p.shares for p in self.positions)

    @property
    def total_invested(self) -> Decimal:
        return sum((p.exposure for p in self.positions), start=Decimal("0"))

    def as_tuple(self) -> tuple[float, tuple[float, ...]]:
        return self.objective_value, self.shares

    def __str__(self) -> str:
        lines = [f"Dividend income: ${self.objective_value:.2f}"]
        lines.extend(f"  {p}" for p in self.positions)
        return "\n".join(lines)
