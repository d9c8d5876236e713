from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Dict, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def _to_camel(name: str) -> str:
    """snake_case -> camelCase mantendo siglas de moeda (salePriceBRL, customsValueUSD)"""
    camel = to_camel(name)
    for suffix in ("Brl", "Usd"):
        if camel.endswith(suffix):
            camel = camel[: -len(suffix)] + suffix.upper()
    return camel


class Currency(str, Enum):
    USD = "USD"
    BRL = "BRL"


class TaxRegime(str, Enum):
    MEI = "MEI"
    SIMPLES_NACIONAL = "SIMPLES_NACIONAL"
    LUCRO_PRESUMIDO = "LUCRO_PRESUMIDO"


class Marketplace(str, Enum):
    MERCADO_LIVRE = "MERCADO_LIVRE"
    SHOPEE = "SHOPEE"


class AnnouncementType(str, Enum):
    CLASSICO = "CLASSICO"
    PREMIUM = "PREMIUM"
    SEM_FRETE_GRATIS = "SEM_FRETE_GRATIS"
    COM_FRETE_GRATIS = "COM_FRETE_GRATIS"


# Tipos de anúncio aceitos por marketplace
ANNOUNCEMENT_TYPES: Dict[Marketplace, tuple] = {
    Marketplace.MERCADO_LIVRE: (AnnouncementType.CLASSICO, AnnouncementType.PREMIUM),
    Marketplace.SHOPEE: (AnnouncementType.SEM_FRETE_GRATIS, AnnouncementType.COM_FRETE_GRATIS),
}


class CalculationInput(BaseModel):
    """
    Entrada da simulação de importação de um SKU.

    Valores percentuais (spread, IOF, ICMS, Simples) são informados em pontos
    percentuais (17 = 17%). Frete é o total da remessa, não por unidade.
    """
    model_config = ConfigDict(frozen=True, alias_generator=_to_camel, populate_by_name=True)

    # Identificação
    product_name: str = ""
    sku: str = ""

    # Dados do produto (fornecedor)
    product_cost_value: float = Field(..., ge=0, description="Custo unitário do produto")
    product_currency: Currency = Currency.USD
    quantity: int = Field(..., ge=1, description="Unidades na remessa")
    freight_value: float = Field(0.0, ge=0, description="Frete total da remessa")
    freight_currency: Currency = Currency.USD
    extra_expenses: float = Field(0.0, ge=0, description="Despesas extras em R$ (desembaraço etc)")

    # Parâmetros de câmbio
    exchange_rate: float = Field(..., gt=0, description="Dólar base (R$ por US$)")
    spread_percent: float = Field(0.0, ge=0)
    iof_percent: float = Field(0.0, ge=0)

    # Tributação
    icms_rate: float = Field(..., ge=0, lt=100, description="Alíquota ICMS do estado destino (%)")
    tax_regime: TaxRegime = TaxRegime.MEI
    simples_nacional_rate: float = Field(0.0, ge=0, description="Alíquota efetiva do Simples (%)")

    # Venda
    sale_price_brl: float = Field(..., ge=0, description="Preço de venda unitário em R$")
    marketplace: Marketplace = Marketplace.SHOPEE
    announcement_type: AnnouncementType = AnnouncementType.SEM_FRETE_GRATIS

    @model_validator(mode="after")
    def check_announcement_type(self) -> "CalculationInput":
        allowed = ANNOUNCEMENT_TYPES[self.marketplace]
        if self.announcement_type not in allowed:
            raise ValueError(
                f"Tipo de anúncio '{self.announcement_type.value}' inválido para {self.marketplace.value}. "
                f"Tipos disponíveis: {', '.join(a.value for a in allowed)}"
            )
        return self


class CalculationResult(BaseModel):
    """Resultado derivado da simulação (valores sem arredondamento)"""
    model_config = ConfigDict(alias_generator=_to_camel, populate_by_name=True)

    # Câmbio e custos iniciais
    effective_exchange_rate: float  # dólar final (spread + IOF)
    total_product_cost_brl: float
    total_freight_cost_brl: float
    customs_value_usd: float        # valor aduaneiro da remessa (produto + frete)

    # Tributação de importação
    import_tax: float
    icms_tax: float

    # Custo na prateleira
    landed_cost_unit: float
    landed_cost_total: float

    # Custos de venda
    marketplace_commission: float
    marketplace_fixed_fee: float
    marketplace_shipping_support: float
    output_tax: float
    selling_costs: float

    # Resultado
    total_cost_unit: float
    net_profit: float
    net_margin: float  # % do preço de venda
    roi: float         # % do custo landed unitário
    break_even_price: float


class MarketplaceFees(BaseModel):
    """Taxas de venda resolvidas para um preço e tipo de anúncio"""
    commission_rate: float
    commission: float
    fixed_fee: float
    shipping_support: float
    fee_cap: Optional[float] = None  # None = sem teto


class PriceBreakdown(BaseModel):
    """Breakdown detalhado do cálculo"""
    steps: List[Dict[str, Any]]
    notes: Optional[List[str]] = None


class IFeeSchedule(ABC):
    """
    Interface para tabelas de taxas por marketplace.

    Cada implementação declara suas faixas (comissão por tipo de anúncio,
    taxa fixa, subsídio de frete, teto) e resolve as taxas para um preço.
    """

    def __init__(self, marketplace: Marketplace):
        self.marketplace = marketplace

    @property
    def announcement_types(self) -> tuple:
        return ANNOUNCEMENT_TYPES[self.marketplace]

    @abstractmethod
    def get_commission_rate(self, announcement_type: AnnouncementType) -> float:
        """
        Percentual de comissão (fração, 0.12 = 12%) para o tipo de anúncio.

        Raises:
            ValueError: Se o tipo de anúncio não pertence ao marketplace
        """
        pass

    @abstractmethod
    def get_fixed_fee(self, sale_price: float) -> float:
        """Taxa fixa por unidade vendida em R$"""
        pass

    @abstractmethod
    def get_shipping_support(self, sale_price: float) -> float:
        """Custo de frete do marketplace assumido pelo vendedor em R$"""
        pass

    @abstractmethod
    def get_fees(self, announcement_type: AnnouncementType, sale_price: float) -> MarketplaceFees:
        """
        Resolve todas as taxas de venda.

        Args:
            announcement_type: Tipo de anúncio
            sale_price: Preço de venda unitário em R$

        Returns:
            MarketplaceFees com comissão já limitada ao teto
        """
        pass

    @abstractmethod
    def describe(self) -> Dict[str, Any]:
        """Tabela de taxas em formato serializável"""
        pass
