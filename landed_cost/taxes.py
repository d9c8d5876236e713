"""
Tributação: Imposto de Importação (Remessa Conforme), ICMS por dentro e imposto de saída.
"""
import math
from typing import Tuple

from pydantic import BaseModel

from landed_cost.errors import DegenerateInputError
from landed_cost.interface import TaxRegime


class DutyBracket(BaseModel):
    """Faixa do Imposto de Importação sobre o valor aduaneiro da remessa"""
    ceiling_usd: float  # limite superior inclusivo
    rate: float
    deduction_usd: float


# Regra 2025, por pacote (produto total + frete):
# até US$ 50 -> 20%; acima -> 60% com desconto de US$ 20
IMPORT_DUTY_BRACKETS: Tuple[DutyBracket, ...] = (
    DutyBracket(ceiling_usd=50.0, rate=0.20, deduction_usd=0.0),
    DutyBracket(ceiling_usd=math.inf, rate=0.60, deduction_usd=20.0),
)


def get_duty_bracket(customs_value_usd: float) -> DutyBracket:
    for bracket in IMPORT_DUTY_BRACKETS:
        if customs_value_usd <= bracket.ceiling_usd:
            return bracket
    return IMPORT_DUTY_BRACKETS[-1]


def calculate_import_duty_usd(customs_value_usd: float) -> float:
    """II em US$, nunca negativo"""
    bracket = get_duty_bracket(customs_value_usd)
    return max(0.0, customs_value_usd * bracket.rate - bracket.deduction_usd)


def calculate_icms(customs_value_brl: float, import_duty_brl: float, icms_rate: float) -> Tuple[float, float]:
    """
    ICMS "por dentro" (gross-up): a base já contém o próprio imposto.

    Base = (Valor aduaneiro R$ + II R$) / (1 - alíquota)

    Args:
        customs_value_brl: Valor aduaneiro convertido pelo dólar base
        import_duty_brl: II convertido pelo dólar base
        icms_rate: Alíquota em pontos percentuais (17 = 17%)

    Returns:
        Tupla (base de cálculo, valor do ICMS)
    """
    if icms_rate >= 100:
        raise DegenerateInputError("Alíquota de ICMS deve ser menor que 100%", field="icms_rate")

    icms_base = (customs_value_brl + import_duty_brl) / (1 - icms_rate / 100)
    return icms_base, icms_base * (icms_rate / 100)


def get_output_tax_rate(tax_regime: TaxRegime, simples_nacional_rate: float = 0.0) -> float:
    """
    Alíquota (fração) do imposto de saída sobre o preço de venda.

    MEI paga DAS fixo mensal, custo marginal zero por venda.
    Lucro Presumido ainda não é modelado e resulta em zero.
    """
    if tax_regime == TaxRegime.SIMPLES_NACIONAL:
        return simples_nacional_rate / 100
    return 0.0
