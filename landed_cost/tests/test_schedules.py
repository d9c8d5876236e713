import pytest
from landed_cost import AnnouncementType, FeeScheduleFactory, IFeeSchedule, Marketplace
from landed_cost.schedules import MercadoLivreFeeSchedule, ShopeeFeeSchedule
from config import Settings, settings


def test_factory_returns_correct_schedule_for_each_marketplace():
    """Testa se Factory retorna a tabela correta para cada marketplace"""
    ml = FeeScheduleFactory.get(Marketplace.MERCADO_LIVRE)
    shopee = FeeScheduleFactory.get(Marketplace.SHOPEE)

    assert isinstance(ml, IFeeSchedule)
    assert isinstance(ml, MercadoLivreFeeSchedule)
    assert isinstance(shopee, ShopeeFeeSchedule)
    assert ml.marketplace == Marketplace.MERCADO_LIVRE
    assert shopee.marketplace == Marketplace.SHOPEE


def test_factory_is_case_insensitive():
    """Testa se Factory aceita strings em qualquer caixa"""
    calc1 = FeeScheduleFactory.get("SHOPEE")
    calc2 = FeeScheduleFactory.get("shopee")
    calc3 = FeeScheduleFactory.get(" Mercado_Livre ")

    assert calc1.marketplace == calc2.marketplace == Marketplace.SHOPEE
    assert calc3.marketplace == Marketplace.MERCADO_LIVRE


def test_factory_raises_error_for_unsupported_marketplace():
    """Testa se Factory levanta erro para marketplace não suportado"""
    with pytest.raises(ValueError) as exc_info:
        FeeScheduleFactory.get("amazon")

    assert "não suportado" in str(exc_info.value)


def test_factory_supported_marketplaces():
    """Testa get_supported_marketplaces e is_supported"""
    assert FeeScheduleFactory.get_supported_marketplaces() == ["MERCADO_LIVRE", "SHOPEE"]
    assert FeeScheduleFactory.is_supported("mercado_livre") is True
    assert FeeScheduleFactory.is_supported(Marketplace.SHOPEE) is True
    assert FeeScheduleFactory.is_supported("magalu") is False


def test_mercado_livre_fixed_fee_below_threshold():
    """Testa taxa fixa de R$ 6,00 abaixo de R$ 79 e sem frete"""
    fees = MercadoLivreFeeSchedule().get_fees(AnnouncementType.CLASSICO, 78.99)

    assert fees.fixed_fee == 6.00
    assert fees.shipping_support == 0.0
    assert fees.commission_rate == 0.12
    assert fees.commission == pytest.approx(78.99 * 0.12)
    assert fees.fee_cap is None


def test_mercado_livre_shipping_support_from_threshold():
    """Testa frete estimado a partir de R$ 79, sem taxa fixa"""
    fees = MercadoLivreFeeSchedule().get_fees(AnnouncementType.PREMIUM, 79.0)

    assert fees.fixed_fee == 0.0
    assert fees.shipping_support == pytest.approx(settings.ml_shipping_support_estimate)
    assert fees.commission_rate == 0.17


def test_mercado_livre_shipping_support_is_configurable(monkeypatch):
    """Testa estimativa de frete configurável por parâmetro e por variável de ambiente"""
    assert MercadoLivreFeeSchedule(shipping_support_estimate=30.0).get_shipping_support(100.0) == 30.0

    monkeypatch.setenv("ML_SHIPPING_SUPPORT_ESTIMATE", "25.5")
    assert Settings().ml_shipping_support_estimate == 25.5


def test_shopee_fees_and_cap():
    """Testa taxa fixa, comissões e teto de R$ 100 da Shopee"""
    schedule = ShopeeFeeSchedule()

    sem_frete = schedule.get_fees(AnnouncementType.SEM_FRETE_GRATIS, 50.0)
    com_frete = schedule.get_fees(AnnouncementType.COM_FRETE_GRATIS, 50.0)
    capped = schedule.get_fees(AnnouncementType.COM_FRETE_GRATIS, 1000.0)

    assert sem_frete.fixed_fee == 4.0
    assert sem_frete.commission == pytest.approx(7.0)
    assert com_frete.commission == pytest.approx(10.0)
    assert com_frete.shipping_support == 0.0
    assert capped.commission == 100.0
    assert capped.commission_rate == 0.20
    assert capped.fee_cap == 100.0


def test_schedule_rejects_foreign_announcement_type():
    """Testa tipo de anúncio de outro marketplace"""
    with pytest.raises(ValueError):
        ShopeeFeeSchedule().get_commission_rate(AnnouncementType.PREMIUM)

    with pytest.raises(ValueError):
        MercadoLivreFeeSchedule().get_fees(AnnouncementType.COM_FRETE_GRATIS, 100.0)


def test_describe_lists_fee_table():
    """Testa se describe expõe a tabela de taxas"""
    ml_policy = MercadoLivreFeeSchedule(shipping_support_estimate=20.90).describe()
    shopee_policy = ShopeeFeeSchedule().describe()

    assert ml_policy["announcement_types"] == ["CLASSICO", "PREMIUM"]
    assert ml_policy["commission_rates"]["PREMIUM"] == 0.17
    assert ml_policy["free_shipping_threshold"] == 79.0
    assert ml_policy["shipping_support_estimate"] == 20.90
    assert ml_policy["fee_cap"] is None
    assert shopee_policy["fixed_fee"] == 4.0
    assert shopee_policy["fee_cap"] == 100.0
