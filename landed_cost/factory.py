from typing import Dict, Union

from landed_cost.interface import IFeeSchedule, Marketplace
from landed_cost.schedules import MercadoLivreFeeSchedule, ShopeeFeeSchedule


class FeeScheduleFactory:
    """
    Factory para instanciar tabelas de taxas por marketplace.

    Usa mapeamento centralizado marketplace -> classe para garantir
    consistência e facilitar manutenção.
    """

    # Mapeamento canônico: marketplace -> FeeSchedule class
    _SCHEDULES: Dict[Marketplace, type] = {
        Marketplace.MERCADO_LIVRE: MercadoLivreFeeSchedule,
        Marketplace.SHOPEE: ShopeeFeeSchedule,
    }

    @classmethod
    def _normalize(cls, marketplace: Union[Marketplace, str]) -> Union[Marketplace, None]:
        if isinstance(marketplace, Marketplace):
            return marketplace
        try:
            return Marketplace(str(marketplace).upper().strip())
        except ValueError:
            return None

    @classmethod
    def get(cls, marketplace: Union[Marketplace, str]) -> IFeeSchedule:
        """
        Retorna a tabela de taxas do marketplace especificado.

        Args:
            marketplace: Marketplace (enum ou string, case-insensitive)

        Returns:
            Instância de IFeeSchedule

        Raises:
            ValueError: Se o marketplace não for suportado
        """
        schedule_class = cls._SCHEDULES.get(cls._normalize(marketplace))

        if not schedule_class:
            supported = ", ".join(cls.get_supported_marketplaces())
            raise ValueError(
                f"Marketplace '{marketplace}' não suportado. "
                f"Marketplaces disponíveis: {supported}"
            )

        return schedule_class()

    @classmethod
    def get_supported_marketplaces(cls) -> list:
        """Retorna lista de marketplaces suportados"""
        return [m.value for m in cls._SCHEDULES]

    @classmethod
    def is_supported(cls, marketplace: Union[Marketplace, str]) -> bool:
        """Verifica se um marketplace é suportado"""
        return cls._normalize(marketplace) in cls._SCHEDULES
