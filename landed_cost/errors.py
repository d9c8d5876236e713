from typing import Optional


class LandedCostError(Exception):
    """Base exception para erros do cálculo de custo de importação"""
    pass


class DegenerateInputError(LandedCostError):
    """Entrada válida no formato mas que torna o resultado indefinido (divisão por zero)"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
