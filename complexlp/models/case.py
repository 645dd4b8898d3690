"""Operating modes of the complex and the coefficients each mode carries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Case(str, Enum):
    """Mutually exclusive operating modes.

    A: methanol runs at or above the threshold load and feeds the ammonia
       train (synergy credit, no CO2 limit on urea).
    B: methanol runs below the threshold or is shut down; ammonia loses more
       capacity, costs more, and urea is limited by the available CO2.
    """

    A = "A"
    B = "B"


@dataclass(frozen=True)
class CaseParameters:
    """Mode-specific coefficients resolved from a ProcessCoefficients set."""

    case: Case
    capacity_loss: float          # t NH3 per period
    ammonia_fuel: float           # Nm3 feedstock gas per t NH3
    synergy: float                # t NH3 credited per t methanol
    yield_ceiling: Optional[float]  # t urea per t NH3 throughput, None if unlimited
    ammonia_penalty: float        # extra cost per t NH3
