from .interface import (
    AnnouncementType,
    CalculationInput,
    CalculationResult,
    Currency,
    IFeeSchedule,
    Marketplace,
    MarketplaceFees,
    PriceBreakdown,
    TaxRegime,
)
from .errors import LandedCostError, DegenerateInputError
from .factory import FeeScheduleFactory
from .calculator import calculate_landed_cost, get_breakdown

__all__ = [
    "AnnouncementType",
    "CalculationInput",
    "CalculationResult",
    "Currency",
    "IFeeSchedule",
    "Marketplace",
    "MarketplaceFees",
    "PriceBreakdown",
    "TaxRegime",
    "LandedCostError",
    "DegenerateInputError",
    "FeeScheduleFactory",
    "calculate_landed_cost",
    "get_breakdown",
]
