"""Process coefficients of the ammonia / methanol / urea complex.

The coefficients are configuration: they are passed explicitly into every
cost, consumption and constraint call so that alternate plant data can be
swapped in without touching the optimizer. The defaults reproduce the
reference plant calibration at a gas price of 5 $/MMBTU.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Dict

from complexlp.models.case import Case, CaseParameters


# Fields that must be strictly positive; every other field must be >= 0.
_POSITIVE_FIELDS = (
    "urea_ammonia_ratio",
    "urea_yield_ratio",
    "fuel_heating_factor",
    "flow_scale",
    "steam_fuel_ratio",
    "reference_gas_price",
)


@dataclass(frozen=True)
class ProcessCoefficients:
    """Stoichiometry, fuel, cost and mode-split coefficients of the complex."""

    # Stoichiometry and cross-product linkage
    urea_ammonia_ratio: float = 0.57         # t NH3 consumed per t urea
    methanol_synergy: float = 0.1092174534   # t NH3 credited per t methanol (case A)
    urea_yield_ratio: float = 1.660263       # t urea per t NH3 throughput (case B CO2 limit)

    # Ammonia capacity lost per period in each mode (t)
    capacity_loss_a: float = 4247.0
    capacity_loss_b: float = 5580.0

    # Specific feedstock gas consumption (Nm3/t)
    ammonia_fuel_a: float = 903.61
    ammonia_fuel_b: float = 1015.6794
    methanol_fuel: float = 1153.1574

    # Auxiliary boiler gas (Nm3/t)
    boiler_ammonia: float = 237.3583
    boiler_methanol: float = 110.0465
    boiler_urea: float = 104.1689

    # Fixed consumers (Nm3/day)
    turbine_fuel_per_day: float = 163000.0
    flare_fuel_per_day: float = 13700.0

    # Volume to flow conversion: flow = volume * factor / (scale * days)
    fuel_heating_factor: float = 37.325
    flow_scale: float = 1e6

    # Boiler gas per t of HP steam raised (Nm3/t)
    steam_fuel_ratio: float = 105.0

    # Unit variable costs at the reference gas price ($/t) and their gas share
    reference_gas_price: float = 5.0
    ammonia_base_cost: float = 198.60366
    methanol_base_cost: float = 205.34865
    urea_base_cost: float = 146.31378
    ammonia_gas_cost: float = 184.293
    methanol_gas_cost: float = 198.047
    urea_gas_cost: float = 124.72

    # Extra ammonia cost when methanol does not feed the ammonia train ($/t)
    case_b_ammonia_penalty: float = 15.0

    # Fixed costs per period ($)
    fixed_cost_ammonia: float = 2247735.682
    fixed_cost_methanol: float = 2327405.71
    fixed_cost_urea: float = 3703933.724

    # Mode split: fraction of methanol capacity separating case A from B
    methanol_threshold: float = 0.6
    shutdown_methanol: float = 0.0   # case B lower bound (t per period)
    case_b_margin: float = 1.0       # t below the threshold for case B

    @property
    def fixed_cost_total(self) -> float:
        return self.fixed_cost_ammonia + self.fixed_cost_methanol + self.fixed_cost_urea

    def case_parameters(self, case: Case) -> CaseParameters:
        """Resolve the coefficients that differ between the two modes."""
        if case is Case.A:
            return CaseParameters(
                case=Case.A,
                capacity_loss=self.capacity_loss_a,
                ammonia_fuel=self.ammonia_fuel_a,
                synergy=self.methanol_synergy,
                yield_ceiling=None,
                ammonia_penalty=0.0,
            )
        return CaseParameters(
            case=Case.B,
            capacity_loss=self.capacity_loss_b,
            ammonia_fuel=self.ammonia_fuel_b,
            synergy=0.0,
            yield_ceiling=self.urea_yield_ratio,
            ammonia_penalty=self.case_b_ammonia_penalty,
        )

    def validate(self) -> "ProcessCoefficients":
        """Raise ValueError if any coefficient is unusable; return self."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"Coefficient {f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"Coefficient {f.name} must be finite, got {value}")
            if f.name in _POSITIVE_FIELDS:
                if value <= 0.0:
                    raise ValueError(f"Coefficient {f.name} must be positive, got {value}")
            elif value < 0.0:
                raise ValueError(f"Coefficient {f.name} must be non-negative, got {value}")
        if not 0.0 < self.methanol_threshold <= 1.0:
            raise ValueError(
                f"methanol_threshold must lie in (0, 1], got {self.methanol_threshold}"
            )
        return self

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def with_overrides(self, **overrides: float) -> "ProcessCoefficients":
        return replace(self, **overrides).validate()

    @classmethod
    def from_dict(cls, d: Dict[str, float]) -> "ProcessCoefficients":
        """Build from a mapping; unknown keys are ignored, missing keys default."""
        valid_keys = {f.name for f in fields(cls)}
        return cls(**{k: float(v) for k, v in d.items() if k in valid_keys}).validate()


DEFAULT_COEFFICIENTS = ProcessCoefficients()
