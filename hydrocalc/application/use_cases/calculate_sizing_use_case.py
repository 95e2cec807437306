"""
Use Case: Calculate Sizing
Converte os campos do formulário e delega o cálculo ao serviço de domínio
"""
from typing import Tuple

from application.dtos.requests import CalculateSizingRequest
from application.dtos.responses import SizingResponse
from application.ports.input.calculate_sizing_port import ICalculateSizingUseCase
from domain.services.sizing_calculator import SizingCalculator
from domain.value_objects.sizing_input import SizingInput
from domain.value_objects.sizing_result import SizingResult
from shared.config.logger_config import get_logger
from shared.utils.validators import GenericValidator

logger = get_logger(child=True)


class CalculateSizingUseCase(ICalculateSizingUseCase):
    """Use case: dimensionar reservatório para uma região, área e demanda"""

    def __init__(self, calculator: SizingCalculator):
        self.calculator = calculator

    @staticmethod
    def build_input(request: CalculateSizingRequest) -> SizingInput:
        """
        Converte o request em SizingInput validado

        Raises:
            InvalidInputException: Campo vazio, não numérico, não finito ou <= 0
        """
        area = GenericValidator.parse_decimal(request.catchment_area_m2, "catchment_area_m2")
        demand = GenericValidator.parse_decimal(request.daily_demand_liters, "daily_demand_liters")

        return SizingInput(
            region_id=request.region_id,
            catchment_area_m2=area,
            daily_demand_liters=demand
        )

    def calculate(self, request: CalculateSizingRequest) -> Tuple[SizingInput, SizingResult]:
        """
        Valida o request uma única vez e calcula

        Returns:
            (SizingInput validado, SizingResult não arredondado)

        Raises:
            InvalidInputException: Se algum campo for inválido
            RegionNotFoundException: Se a região não existir
        """
        sizing_input = self.build_input(request)
        result = self.calculator.compute_from_input(sizing_input)

        logger.info(
            "Sizing calculated",
            region_id=sizing_input.region_id,
            catchment_area_m2=sizing_input.catchment_area_m2,
            daily_demand_liters=sizing_input.daily_demand_liters,
            tank_volume_liters=result.tank_volume_liters,
            demand_limited=result.is_demand_limited
        )

        return sizing_input, result

    def execute(self, request: CalculateSizingRequest) -> SizingResult:
        """
        Execute use case

        Args:
            request: Região, área (m²) e demanda diária (L)

        Returns:
            SizingResult com valores não arredondados

        Raises:
            InvalidInputException: Se algum campo for inválido
            RegionNotFoundException: Se a região não existir
        """
        _, result = self.calculate(request)
        return result

    def build_response(self, request: CalculateSizingRequest) -> SizingResponse:
        """Calcula e formata para exibição (pt-BR), com eco da entrada validada"""
        sizing_input, result = self.calculate(request)
        region = self.calculator.rainfall_table.get(sizing_input.region_id)
        return SizingResponse.from_result(result, region, sizing_input)
