"""
Cálculo do custo de importação (landed cost) e da viabilidade de venda de um SKU.
"""
import logging
from typing import Optional

from landed_cost.errors import DegenerateInputError
from landed_cost.exchange import effective_exchange_rate, to_usd, to_brl
from landed_cost.factory import FeeScheduleFactory
from landed_cost.interface import (
    CalculationInput,
    CalculationResult,
    IFeeSchedule,
    Marketplace,
    PriceBreakdown,
    TaxRegime,
)
from landed_cost.taxes import (
    calculate_icms,
    calculate_import_duty_usd,
    get_duty_bracket,
    get_output_tax_rate,
)

logger = logging.getLogger(__name__)


def calculate_landed_cost(data: CalculationInput, fee_schedule: Optional[IFeeSchedule] = None) -> CalculationResult:
    """
    Calcula o custo total e a viabilidade de importação de um SKU.

    Args:
        data: CalculationInput com custos, câmbio, tributação e dados de venda
        fee_schedule: Tabela de taxas opcional (padrão: a do marketplace da entrada)

    Returns:
        CalculationResult com todos os valores sem arredondamento

    Raises:
        DegenerateInputError: Quantidade, preço de venda ou custo unitário zero,
            ou comissão + imposto de saída >= 100% (break-even indefinido)
        ValueError: Tipo de anúncio não suportado pela tabela de taxas
    """
    if data.quantity == 0:
        raise _degenerate("Quantidade deve ser maior que zero", "quantity")
    if data.sale_price_brl == 0:
        raise _degenerate("Preço de venda zero torna a margem indefinida", "sale_price_brl")

    # 1. Dólar efetivo (custo real da moeda)
    effective_rate = effective_exchange_rate(data.exchange_rate, data.spread_percent, data.iof_percent)

    # 2. Valor aduaneiro pelo dólar base; frete é o total da remessa
    product_cost_usd = to_usd(data.product_cost_value, data.product_currency, data.exchange_rate)
    freight_cost_usd = to_usd(data.freight_value, data.freight_currency, data.exchange_rate)
    customs_value_usd = product_cost_usd * data.quantity + freight_cost_usd

    # 3. Imposto de Importação, pago no câmbio base
    import_duty_brl = calculate_import_duty_usd(customs_value_usd) * data.exchange_rate

    # 4. ICMS por dentro
    customs_value_brl = customs_value_usd * data.exchange_rate
    _, icms_brl = calculate_icms(customs_value_brl, import_duty_brl, data.icms_rate)

    # 5. Custo landed pelo dólar efetivo
    product_cost_real_brl = to_brl(data.product_cost_value * data.quantity, data.product_currency, effective_rate)
    freight_cost_real_brl = to_brl(data.freight_value, data.freight_currency, effective_rate)

    landed_cost_total = (
        product_cost_real_brl + freight_cost_real_brl + import_duty_brl + icms_brl + data.extra_expenses
    )
    landed_cost_unit = landed_cost_total / data.quantity

    if landed_cost_unit == 0:
        raise _degenerate("Custo landed unitário zero torna o ROI indefinido", "product_cost_value")

    # 6. Custos de venda
    if fee_schedule is None:
        fee_schedule = FeeScheduleFactory.get(data.marketplace)
    fees = fee_schedule.get_fees(data.announcement_type, data.sale_price_brl)

    # 7. Imposto de saída
    output_tax_rate = get_output_tax_rate(data.tax_regime, data.simples_nacional_rate)
    output_tax = data.sale_price_brl * output_tax_rate

    # 8. Resultado unitário
    selling_costs = fees.commission + fees.fixed_fee + fees.shipping_support + output_tax
    net_profit = data.sale_price_brl - landed_cost_unit - selling_costs

    # X = Landed + Fixa + Frete + X*Comissão + X*Imposto
    denominator = 1 - fees.commission_rate - output_tax_rate
    if denominator <= 0:
        raise _degenerate(
            f"Comissão + imposto de saída somam {(1 - denominator) * 100:.1f}%; break-even indefinido",
            "simples_nacional_rate",
        )
    break_even_price = (landed_cost_unit + fees.fixed_fee + fees.shipping_support) / denominator

    logger.debug(
        f"[{data.sku or '-'}] {data.marketplace.value}/{data.announcement_type.value}: "
        f"aduaneiro US$ {customs_value_usd:.2f}, landed unit R$ {landed_cost_unit:.2f}, lucro R$ {net_profit:.2f}"
    )

    return CalculationResult(
        effective_exchange_rate=effective_rate,
        total_product_cost_brl=product_cost_real_brl,
        total_freight_cost_brl=freight_cost_real_brl,
        customs_value_usd=customs_value_usd,
        import_tax=import_duty_brl,
        icms_tax=icms_brl,
        landed_cost_unit=landed_cost_unit,
        landed_cost_total=landed_cost_total,
        marketplace_commission=fees.commission,
        marketplace_fixed_fee=fees.fixed_fee,
        marketplace_shipping_support=fees.shipping_support,
        output_tax=output_tax,
        selling_costs=selling_costs,
        total_cost_unit=landed_cost_unit + selling_costs,
        net_profit=net_profit,
        net_margin=net_profit / data.sale_price_brl * 100,
        roi=net_profit / landed_cost_unit * 100,
        break_even_price=break_even_price,
    )


def _degenerate(message: str, field: str) -> DegenerateInputError:
    logger.warning(f"Entrada degenerada ({field}): {message}")
    return DegenerateInputError(message, field=field)


def get_breakdown(data: CalculationInput, result: CalculationResult) -> PriceBreakdown:
    """
    Retorna breakdown do resultado por unidade, no formato exibido ao usuário.
    Valores arredondados em 2 casas; o cálculo em si não arredonda.
    """
    quantity = data.quantity
    bracket = get_duty_bracket(result.customs_value_usd)

    steps = [
        {"label": "💵 Dólar efetivo (spread + IOF)", "value": round(result.effective_exchange_rate, 4)},
        {"label": "📦 Produto + frete (por unidade)",
         "value": round((result.total_product_cost_brl + result.total_freight_cost_brl) / quantity, 2)},
        {"label": "🧾 Impostos de importação (II + ICMS, por unidade)",
         "value": round((result.import_tax + result.icms_tax) / quantity, 2)},
        {"label": "➕ Despesas extras (por unidade)", "value": round(data.extra_expenses / quantity, 2)},
        {"label": "🏷️ Custo landed unitário", "value": round(result.landed_cost_unit, 2)},
        {"label": "─────────────────────", "value": 0},
        {"label": "🏪 Comissão marketplace", "value": round(result.marketplace_commission, 2)},
        {"label": "🚚 Taxa fixa + frete marketplace",
         "value": round(result.marketplace_fixed_fee + result.marketplace_shipping_support, 2)},
        {"label": "🧾 Imposto de saída", "value": round(result.output_tax, 2)},
        {"label": "─────────────────────", "value": 0},
        {"label": "💰 Lucro líquido", "value": round(result.net_profit, 2)},
        {"label": "📊 Margem líquida (%)", "value": round(result.net_margin, 2)},
        {"label": "📈 ROI (%)", "value": round(result.roi, 1)},
        {"label": "⚖️ Preço de break-even", "value": round(result.break_even_price, 2)},
    ]

    notes = [
        f"Canal: {data.marketplace.value} ({data.announcement_type.value})",
        f"Imposto de Importação: {bracket.rate * 100:.0f}% sobre US$ {result.customs_value_usd:.2f}"
        + (f" com desconto de US$ {bracket.deduction_usd:.2f}" if bracket.deduction_usd else ""),
    ]

    if result.net_profit < 0:
        notes.append(
            f"Prejuízo de R$ {abs(result.net_profit):.2f} por unidade. "
            f"Preço mínimo sem prejuízo: R$ {result.break_even_price:.2f}"
        )

    if data.marketplace == Marketplace.MERCADO_LIVRE and result.marketplace_shipping_support > 0:
        notes.append(
            f"Frete grátis obrigatório acima de R$ 79: custo estimado de "
            f"R$ {result.marketplace_shipping_support:.2f} (varia por peso e região)"
        )

    if data.tax_regime == TaxRegime.LUCRO_PRESUMIDO:
        notes.append("Lucro Presumido: imposto de saída não modelado (considerado zero)")

    return PriceBreakdown(steps=steps, notes=notes)
