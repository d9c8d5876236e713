from landed_cost.interface import AnnouncementType, Marketplace
from .base import BaseFeeSchedule


class ShopeeFeeSchedule(BaseFeeSchedule):
    """
    Tabela de taxas da Shopee.

    Características:
    - Taxa fixa por item vendido
    - Comissão padrão + transação, com adicional do programa de frete grátis
    - Comissão limitada a R$ 100 por item
    """

    COMMISSION_RATES = {
        AnnouncementType.SEM_FRETE_GRATIS: 0.14,
        AnnouncementType.COM_FRETE_GRATIS: 0.20,  # 14% + 6% do programa frete grátis
    }
    FIXED_FEE = 4.00
    FEE_CAP = 100.0

    def __init__(self):
        super().__init__(marketplace=Marketplace.SHOPEE)
