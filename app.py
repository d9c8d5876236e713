# -*- coding: utf-8 -*-
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ValidationError

from config import settings
from landed_cost import (
    CalculationInput,
    CalculationResult,
    DegenerateInputError,
    FeeScheduleFactory,
    TaxRegime,
    calculate_landed_cost,
    get_breakdown,
)
from landed_cost.taxes import IMPORT_DUTY_BRACKETS

# Configuração de logging estruturado
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Landed Cost API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok", "app": settings.app_slug}


# ============================================================================
# LANDED COST ENDPOINTS
# ============================================================================

class CalculateResponse(BaseModel):
    """Resultado do cálculo com breakdown para exibição"""
    result: CalculationResult
    breakdown: Dict[str, Any]


@app.post("/landed-cost/calculate", response_model=CalculateResponse, response_model_by_alias=True)
async def landed_cost_calculate(request: CalculationInput):
    """
    Calcula custo landed, custos de venda, lucro, margem, ROI e break-even de um SKU.

    Args:
        request: CalculationInput (camelCase ou snake_case)

    Returns:
        CalculateResponse com o resultado sem arredondamento e o breakdown

    Raises:
        422: Entrada degenerada (preço zero, custo zero, comissão + imposto >= 100%)
    """
    try:
        result = calculate_landed_cost(request)
        breakdown = get_breakdown(request, result)

        return CalculateResponse(result=result, breakdown=breakdown.model_dump())

    except DegenerateInputError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "field": e.field}
        )
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "supported_marketplaces": FeeScheduleFactory.get_supported_marketplaces()
            }
        )
    except Exception as e:
        logger.error(f"Erro ao calcular custo landed: {e}")
        raise HTTPException(
            status_code=500,
            detail={"message": f"Erro ao calcular custo landed: {str(e)}"}
        )


@app.get("/landed-cost/policies")
async def landed_cost_policies():
    """
    Lista as tabelas de taxas por marketplace e as faixas do Imposto de Importação.
    """
    supported = FeeScheduleFactory.get_supported_marketplaces()

    policies = {
        marketplace: FeeScheduleFactory.get(marketplace).describe()
        for marketplace in supported
    }

    duty_brackets = [
        {
            "ceiling_usd": None if b.ceiling_usd == float("inf") else b.ceiling_usd,
            "rate": b.rate,
            "deduction_usd": b.deduction_usd,
        }
        for b in IMPORT_DUTY_BRACKETS
    ]

    return {
        "supported_marketplaces": supported,
        "policies": policies,
        "import_duty_brackets": duty_brackets,
        "tax_regimes": [r.value for r in TaxRegime],
    }


@app.post("/landed-cost/validate")
async def landed_cost_validate(payload: Dict[str, Any]):
    """
    Valida uma entrada sem exigir o formato completo no corpo da requisição.

    Returns:
        200: Válido
        422: Inválido (com a lista de erros)
    """
    errors: List[str] = []
    data: Optional[CalculationInput] = None

    marketplace = payload.get("marketplace")
    if marketplace is not None and not FeeScheduleFactory.is_supported(marketplace):
        errors.append(
            f"Marketplace '{marketplace}' não suportado. "
            f"Marketplaces disponíveis: {', '.join(FeeScheduleFactory.get_supported_marketplaces())}"
        )

    try:
        data = CalculationInput.model_validate(payload)
    except ValidationError as e:
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"]) or "input"
            errors.append(f"{location}: {err['msg']}")

    if data is not None:
        try:
            calculate_landed_cost(data)
        except DegenerateInputError as e:
            errors.append(f"{e.field}: {e}")

    if errors:
        raise HTTPException(
            status_code=422,
            detail={"errors": errors}
        )

    return {"valid": True, "message": "Entrada válida"}


# ========= MAIN PARA RODAR DEBUGANDO =========


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=5002, reload=settings.dev_mode)
