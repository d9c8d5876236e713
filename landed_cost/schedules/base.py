import math
from typing import Dict, Any

from landed_cost.interface import IFeeSchedule, AnnouncementType, MarketplaceFees


class BaseFeeSchedule(IFeeSchedule):
    """
    Classe base com a lógica comum de resolução de taxas.
    As subclasses só declaram as tabelas.
    """

    # Configurações padrão (sobrescritas por marketplace)
    COMMISSION_RATES: Dict[AnnouncementType, float] = {}
    FIXED_FEE = 0.0
    FEE_CAP = math.inf  # teto da comissão em R$

    def get_commission_rate(self, announcement_type: AnnouncementType) -> float:
        rate = self.COMMISSION_RATES.get(announcement_type)

        if rate is None:
            supported = ", ".join(a.value for a in self.COMMISSION_RATES)
            raise ValueError(
                f"Tipo de anúncio '{announcement_type}' não suportado em {self.marketplace.value}. "
                f"Tipos disponíveis: {supported}"
            )

        return rate

    def get_fixed_fee(self, sale_price: float) -> float:
        return self.FIXED_FEE

    def get_shipping_support(self, sale_price: float) -> float:
        return 0.0

    def calculate_commission(self, sale_price: float, commission_rate: float) -> float:
        """Comissão proporcional ao preço, limitada ao teto"""
        return min(sale_price * commission_rate, self.FEE_CAP)

    def get_fees(self, announcement_type: AnnouncementType, sale_price: float) -> MarketplaceFees:
        commission_rate = self.get_commission_rate(announcement_type)

        return MarketplaceFees(
            commission_rate=commission_rate,
            commission=self.calculate_commission(sale_price, commission_rate),
            fixed_fee=self.get_fixed_fee(sale_price),
            shipping_support=self.get_shipping_support(sale_price),
            fee_cap=None if math.isinf(self.FEE_CAP) else self.FEE_CAP,
        )

    def describe(self) -> Dict[str, Any]:
        return {
            "announcement_types": [a.value for a in self.announcement_types],
            "commission_rates": {a.value: rate for a, rate in self.COMMISSION_RATES.items()},
            "fixed_fee": self.FIXED_FEE,
            "fee_cap": None if math.isinf(self.FEE_CAP) else self.FEE_CAP,
        }
