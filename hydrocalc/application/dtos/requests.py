"""Request DTOs - Contratos de entrada para use cases"""

from dataclasses import dataclass
from typing import Optional, Union

# Valores chegam do formulário como texto ou já convertidos
FormValue = Union[str, int, float, None]


@dataclass(frozen=True)
class CalculateSizingRequest:
    """Request para dimensionar o reservatório"""
    region_id: Optional[str]
    catchment_area_m2: FormValue
    daily_demand_liters: FormValue


@dataclass(frozen=True)
class ExportReportRequest:
    """Request para gerar o relatório técnico em PDF"""
    sizing: CalculateSizingRequest
    output_path: Optional[str] = None
