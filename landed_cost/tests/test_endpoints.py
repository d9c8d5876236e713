"""
Testes de integração para endpoints de landed cost.

Para executar:
    pytest landed_cost/tests/test_endpoints.py -v
"""
import pytest
from fastapi.testclient import TestClient
from app import app

client = TestClient(app)


def _payload(**overrides):
    data = {
        "productName": "Fone Bluetooth",
        "sku": "FONE-001",
        "productCostValue": 10.0,
        "productCurrency": "USD",
        "quantity": 10,
        "freightValue": 20.0,
        "freightCurrency": "USD",
        "exchangeRate": 5.0,
        "icmsRate": 17.0,
        "taxRegime": "MEI",
        "salePriceBRL": 50.0,
        "marketplace": "SHOPEE",
        "announcementType": "SEM_FRETE_GRATIS",
    }
    data.update(overrides)
    return data


def test_calculate_success():
    """Testa endpoint POST /landed-cost/calculate com dados válidos"""
    response = client.post("/landed-cost/calculate", json=_payload())

    assert response.status_code == 200
    data = response.json()

    assert "result" in data
    assert "breakdown" in data

    result = data["result"]
    assert result["customsValueUSD"] == pytest.approx(120.0)
    assert result["importTax"] == pytest.approx(260.0)
    assert result["landedCostUnit"] == pytest.approx(103.6145, abs=1e-4)
    assert result["netProfit"] == pytest.approx(-64.6145, abs=1e-4)
    assert isinstance(data["breakdown"]["steps"], list)
    assert len(data["breakdown"]["notes"]) >= 2


def test_calculate_accepts_snake_case():
    """Testa corpo em snake_case"""
    payload = {
        "product_cost_value": 10.0,
        "quantity": 10,
        "freight_value": 20.0,
        "exchange_rate": 5.0,
        "icms_rate": 17.0,
        "sale_price_brl": 50.0,
    }
    response = client.post("/landed-cost/calculate", json=payload)

    assert response.status_code == 200
    assert response.json()["result"]["importTax"] == pytest.approx(260.0)


def test_calculate_zero_sale_price():
    """Testa endpoint com preço de venda zero (entrada degenerada)"""
    response = client.post("/landed-cost/calculate", json=_payload(salePriceBRL=0.0))

    assert response.status_code == 422
    assert response.json()["detail"]["field"] == "sale_price_brl"


def test_calculate_invalid_announcement_type():
    """Testa endpoint com tipo de anúncio de outro marketplace"""
    response = client.post(
        "/landed-cost/calculate",
        json=_payload(marketplace="MERCADO_LIVRE", announcementType="COM_FRETE_GRATIS"),
    )

    assert response.status_code == 422


def test_policies():
    """Testa endpoint GET /landed-cost/policies"""
    response = client.get("/landed-cost/policies")

    assert response.status_code == 200
    data = response.json()

    assert data["supported_marketplaces"] == ["MERCADO_LIVRE", "SHOPEE"]
    assert data["policies"]["SHOPEE"]["fee_cap"] == 100.0
    assert len(data["import_duty_brackets"]) == 2
    assert data["import_duty_brackets"][-1]["ceiling_usd"] is None
    assert "SIMPLES_NACIONAL" in data["tax_regimes"]


def test_validate_success():
    """Testa endpoint POST /landed-cost/validate com dados válidos"""
    response = client.post("/landed-cost/validate", json=_payload())

    assert response.status_code == 200
    assert response.json()["valid"] is True


def test_validate_invalid():
    """Testa endpoint POST /landed-cost/validate com dados inválidos"""
    response = client.post(
        "/landed-cost/validate",
        json=_payload(quantity=0, marketplace="AMAZON"),
    )

    assert response.status_code == 422
    data = response.json()
    assert "errors" in data["detail"]
    assert len(data["detail"]["errors"]) >= 2  # quantity E marketplace inválidos


def test_validate_degenerate():
    """Testa validação de comissão + imposto de saída >= 100%"""
    response = client.post(
        "/landed-cost/validate",
        json=_payload(taxRegime="SIMPLES_NACIONAL", simplesNacionalRate=95.0),
    )

    assert response.status_code == 422
    assert any("simples_nacional_rate" in e for e in response.json()["detail"]["errors"])


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
