"""Sizing Calculator - Dimensionamento de reservatório de água de chuva (Método Alemão adaptado)"""
from domain.constants import Sizing
from domain.value_objects.rainfall_table import RainfallTable
from domain.value_objects.sizing_input import SizingInput
from domain.value_objects.sizing_result import SizingResult


class SizingCalculator:
    """
    Calcula volume do reservatório e métricas secundárias

    Fórmula: V = 0.06 × min(captação anual, demanda anual)

    A captação anual é o potencial bruto (precipitação × área), sem
    coeficiente de escoamento. Nenhum arredondamento é aplicado aqui;
    formatação é responsabilidade da camada de apresentação.
    """

    def __init__(self, rainfall_table: RainfallTable):
        self.rainfall_table = rainfall_table

    def compute(
        self,
        region_id: str,
        catchment_area_m2: float,
        daily_demand_liters: float
    ) -> SizingResult:
        """
        Valida as entradas e calcula o dimensionamento

        Args:
            region_id: Chave da região na tabela pluviométrica
            catchment_area_m2: Área de captação em m²
            daily_demand_liters: Demanda diária não potável em litros

        Returns:
            SizingResult com valores não arredondados

        Raises:
            InvalidInputException: Área/demanda <= 0, não numéricas ou não finitas
            RegionNotFoundException: Região fora da tabela
        """
        sizing_input = SizingInput(
            region_id=region_id,
            catchment_area_m2=catchment_area_m2,
            daily_demand_liters=daily_demand_liters
        )
        return self.compute_from_input(sizing_input)

    def compute_from_input(self, sizing_input: SizingInput) -> SizingResult:
        """Calcula a partir de um SizingInput já validado"""
        region = self.rainfall_table.get(sizing_input.region_id)
        area = sizing_input.catchment_area_m2
        daily_demand = sizing_input.daily_demand_liters

        # 1 mm sobre 1 m² = 1 L
        annual_capture = region.annual_rainfall_mm * area
        monthly_capture_avg = annual_capture / Sizing.MONTHS_PER_YEAR

        annual_demand = daily_demand * Sizing.DAYS_PER_YEAR
        monthly_demand = annual_demand / Sizing.MONTHS_PER_YEAR

        limiting_factor = min(annual_capture, annual_demand)
        tank_volume = Sizing.TANK_VOLUME_COEFFICIENT * limiting_factor

        monthly_volume_used = min(monthly_capture_avg, monthly_demand)
        monthly_savings = monthly_volume_used * Sizing.WATER_PRICE_PER_LITER

        autonomy = tank_volume / daily_demand

        return SizingResult(
            tank_volume_liters=tank_volume,
            monthly_savings=monthly_savings,
            monthly_capture_avg_liters=monthly_capture_avg,
            monthly_demand_liters=monthly_demand,
            autonomy_days=autonomy,
            annual_capture_liters=annual_capture,
            annual_demand_liters=annual_demand
        )
