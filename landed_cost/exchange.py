"""
Conversões de moeda.

Dois câmbios distintos circulam no cálculo:
- exchange_rate: dólar base, usado para valor aduaneiro, II e ICMS
- effective_exchange_rate: dólar com spread e IOF, usado para o dinheiro que de fato sai do caixa
"""
from landed_cost.interface import Currency


def effective_exchange_rate(exchange_rate: float, spread_percent: float, iof_percent: float) -> float:
    """Spread e IOF compõem de forma multiplicativa (IOF incide sobre o valor já com spread)"""
    return exchange_rate * (1 + spread_percent / 100) * (1 + iof_percent / 100)


def to_usd(value: float, currency: Currency, exchange_rate: float) -> float:
    """Converte para US$ pelo dólar base"""
    if currency == Currency.USD:
        return value
    return value / exchange_rate


def to_brl(value: float, currency: Currency, effective_rate: float) -> float:
    """Converte para R$ pelo dólar efetivo; valores já em R$ não sofrem spread/IOF"""
    if currency == Currency.USD:
        return value * effective_rate
    return value
