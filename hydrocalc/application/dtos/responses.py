"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass
from typing import Dict, Any, List

from domain.constants import Display
from domain.entities.region import RegionRainfall
from domain.value_objects.sizing_input import SizingInput
from domain.value_objects.sizing_result import SizingResult
from shared.utils.number_formatter import BrazilianFormatter


@dataclass(frozen=True)
class RegionOptionResponse:
    """Opção do seletor de regiões"""
    region_id: str
    name: str
    annual_rainfall_mm: float
    rainfall_info: str

    @staticmethod
    def from_entity(region: RegionRainfall) -> 'RegionOptionResponse':
        """Converte RegionRainfall para opção de exibição"""
        return RegionOptionResponse(
            region_id=region.id,
            name=region.name,
            annual_rainfall_mm=region.annual_rainfall_mm,
            rainfall_info=Display.RAINFALL_INFO.format(
                annual=BrazilianFormatter.format_input_number(region.annual_rainfall_mm)
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário"""
        return {
            'id': self.region_id,
            'name': self.name,
            'annualRainfallMm': self.annual_rainfall_mm,
            'rainfallInfo': self.rainfall_info
        }


@dataclass(frozen=True)
class SizingResponse:
    """
    Resultado formatado para exibição (pt-BR) com eco dos dados de entrada

    É também o conteúdo consumido pelo exportador de relatório: as
    decisões de formatação tomadas aqui ficam gravadas no PDF.
    """
    region_id: str
    region_name: str
    annual_rainfall_mm: str
    catchment_area_m2: str
    daily_demand_liters: str
    tank_volume: str
    monthly_savings: str
    monthly_capture: str
    monthly_demand: str
    autonomy: str

    @staticmethod
    def from_result(
        result: SizingResult,
        region: RegionRainfall,
        sizing_input: SizingInput
    ) -> 'SizingResponse':
        """
        Converte SizingResult para DTO de exibição

        Args:
            result: Resultado bruto do calculador
            region: Região utilizada no cálculo
            sizing_input: Entrada validada (eco no relatório)

        Returns:
            SizingResponse DTO
        """
        fmt = BrazilianFormatter
        return SizingResponse(
            region_id=region.id,
            region_name=region.name,
            annual_rainfall_mm=fmt.format_input_number(region.annual_rainfall_mm),
            catchment_area_m2=fmt.format_input_number(sizing_input.catchment_area_m2),
            daily_demand_liters=fmt.format_input_number(sizing_input.daily_demand_liters),
            tank_volume=fmt.format_tank_volume(result.tank_volume_liters),
            monthly_savings=fmt.format_currency(result.monthly_savings),
            monthly_capture=fmt.format_monthly_volume(result.monthly_capture_avg_liters),
            monthly_demand=fmt.format_monthly_volume(result.monthly_demand_liters),
            autonomy=fmt.format_days(result.autonomy_days)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário"""
        return {
            'regionId': self.region_id,
            'regionName': self.region_name,
            'annualRainfallMm': self.annual_rainfall_mm,
            'catchmentAreaM2': self.catchment_area_m2,
            'dailyDemandLiters': self.daily_demand_liters,
            'tankVolume': self.tank_volume,
            'savings': self.monthly_savings,
            'monthlyCapture': self.monthly_capture,
            'monthlyDemand': self.monthly_demand,
            'autonomyDays': self.autonomy
        }

    def display_lines(self) -> List[str]:
        """Linhas do cartão de resultados"""
        return [
            f"Volume do Tanque Recomendado: {self.tank_volume}",
            f"Economia Estimada Mensal: {self.monthly_savings}",
            f"Potencial de Captação: {self.monthly_capture}",
            f"Demanda Mensal: {self.monthly_demand}",
            f"Autonomia: {self.autonomy}",
        ]
