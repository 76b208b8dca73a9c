"""Data for compounding and drawdown projections."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ProjectionPhase(Enum):
    ACCUMULATING = "Accumulating"
    WITHDRAWING = "Withdrawing"
    EXHAUSTED = "Exhausted"
    SURVIVED = "Survived"


@dataclass(frozen=True)
class ProjectionPoint:
    """Account state at a year boundary of a projection."""
    year: int
    month: int
    balance: float
    principal_contributed: float
    interest_accrued: float


@dataclass
class DrawdownResult:
    points: List[ProjectionPoint]
    months_sustained: int
    max_months: int
    ending_balance: float
    total_withdrawn: float

    @property
    def exhausted(self) -> bool:
        return self.ending_balance <= 0

    @property
    def phase(self) -> ProjectionPhase:
        return ProjectionPhase.EXHAUSTED if self.exhausted else ProjectionPhase.SURVIVED


@dataclass
class LifetimeProjection:
    """Accumulation followed by a drawdown of the accumulated balance."""
    accumulation: List[ProjectionPoint] = field(default_factory=list)
    drawdown: Optional[DrawdownResult] = None

    @property
    def balance_at_retirement(self) -> float:
        return self.accumulation[-1].balance if self.accumulation else 0.0

    @property
    def principal_contributed(self) -> float:
        return self.accumulation[-1].principal_contributed if self.accumulation else 0.0

    @property
    def phase(self) -> ProjectionPhase:
        if self.drawdown is None:
            return ProjectionPhase.ACCUMULATING
        return self.drawdown.phase
