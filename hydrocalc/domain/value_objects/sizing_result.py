"""
Value Object: Resultado do dimensionamento
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class SizingResult:
    """
    Métricas derivadas de um SizingInput, sem arredondamento

    Volumes em litros, economia em R$ por mês.
    """
    tank_volume_liters: float
    monthly_savings: float
    monthly_capture_avg_liters: float
    monthly_demand_liters: float
    autonomy_days: float
    annual_capture_liters: float
    annual_demand_liters: float

    @property
    def is_demand_limited(self) -> bool:
        """True quando a demanda anual (e não a captação) define o volume"""
        return self.annual_demand_liters <= self.annual_capture_liters
