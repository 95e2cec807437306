"""
Input Port: Interface para dimensionar o reservatório
"""
from abc import ABC, abstractmethod

from application.dtos.requests import CalculateSizingRequest
from domain.value_objects.sizing_result import SizingResult


class ICalculateSizingUseCase(ABC):
    """Interface para caso de uso de dimensionamento"""

    @abstractmethod
    def execute(self, request: CalculateSizingRequest) -> SizingResult:
        """
        Calcula volume do tanque e métricas secundárias

        Args:
            request: Região, área de captação e demanda diária

        Returns:
            SizingResult: Métricas não arredondadas

        Raises:
            InvalidInputException: Se algum campo for inválido
        """
        pass
