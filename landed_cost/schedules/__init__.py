from .mercadolivre import MercadoLivreFeeSchedule
from .shopee import ShopeeFeeSchedule

__all__ = [
    "MercadoLivreFeeSchedule",
    "ShopeeFeeSchedule",
]
