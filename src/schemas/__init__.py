from .calculation import CalculationInputs, CalculationResult
from .notification import AlertPlan, AlertState, SchedulerStatus

__all__ = [
    "CalculationInputs",
    "CalculationResult",
    "AlertPlan",
    "AlertState",
    "SchedulerStatus",
]
