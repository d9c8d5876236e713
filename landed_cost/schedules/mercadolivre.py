from typing import Dict, Any, Optional

from config import settings
from landed_cost.interface import AnnouncementType, Marketplace
from .base import BaseFeeSchedule


class MercadoLivreFeeSchedule(BaseFeeSchedule):
    """
    Tabela de taxas do Mercado Livre.

    Características:
    - Comissão por tipo de anúncio (média das categorias)
    - Abaixo de R$ 79: taxa fixa por unidade, sem frete grátis
    - A partir de R$ 79: frete grátis obrigatório, custo estimado pago pelo vendedor
    """

    COMMISSION_RATES = {
        AnnouncementType.CLASSICO: 0.12,  # Clássico: 10-14%
        AnnouncementType.PREMIUM: 0.17,   # Premium: 15-19%
    }
    FIXED_FEE = 6.00
    FREE_SHIPPING_THRESHOLD = 79.0

    def __init__(self, shipping_support_estimate: Optional[float] = None):
        super().__init__(marketplace=Marketplace.MERCADO_LIVRE)
        # Estimativa fixa; o custo real varia por peso e região
        if shipping_support_estimate is None:
            shipping_support_estimate = settings.ml_shipping_support_estimate
        self.shipping_support_estimate = shipping_support_estimate

    def get_fixed_fee(self, sale_price: float) -> float:
        if sale_price < self.FREE_SHIPPING_THRESHOLD:
            return self.FIXED_FEE
        return 0.0

    def get_shipping_support(self, sale_price: float) -> float:
        if sale_price >= self.FREE_SHIPPING_THRESHOLD:
            return self.shipping_support_estimate
        return 0.0

    def describe(self) -> Dict[str, Any]:
        policy = super().describe()
        policy.update({
            "free_shipping_threshold": self.FREE_SHIPPING_THRESHOLD,
            "shipping_support_estimate": self.shipping_support_estimate,
        })
        return policy
