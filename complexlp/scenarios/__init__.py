from complexlp.scenarios.sweeps import (
    GasSensitivityPoint,
    ShutdownPoint,
    ShutdownSweep,
    find_crossover,
    shutdown_solution,
    sweep_gas_sensitivity,
    sweep_shutdown,
)

__all__ = [
    "GasSensitivityPoint",
    "ShutdownPoint",
    "ShutdownSweep",
    "find_crossover",
    "shutdown_solution",
    "sweep_gas_sensitivity",
    "sweep_shutdown",
]
