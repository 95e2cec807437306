"""
Validators Utility
Input validation with domain exceptions
"""
import math
from numbers import Real
from typing import Any, Type

from domain.exceptions import DomainException, InvalidInputException


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_not_empty(
        value: Any,
        param_name: str,
        exception_class: Type[DomainException] = InvalidInputException
    ) -> str:
        """
        Valida se string não está vazia

        Args:
            value: String a validar
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            String validada e trimmed

        Raises:
            exception_class: Se string vazia ou não for string
        """
        if not isinstance(value, str) or not value.strip():
            raise exception_class(
                f"{param_name} cannot be empty",
                details={param_name: value}
            )
        return value.strip()

    @staticmethod
    def validate_positive_number(
        value: Any,
        param_name: str,
        exception_class: Type[DomainException] = InvalidInputException
    ) -> float:
        """
        Valida se valor é um número real finito e estritamente positivo

        Args:
            value: Valor a validar (int ou float; bool é rejeitado)
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            Valor validado como float

        Raises:
            exception_class: Se não numérico, não finito ou <= 0
        """
        if isinstance(value, bool) or not isinstance(value, Real):
            raise exception_class(
                f"{param_name} must be a number",
                details={param_name: repr(value)}
            )

        number = float(value)
        if not math.isfinite(number):
            raise exception_class(
                f"{param_name} must be a finite number",
                details={param_name: repr(value)}
            )
        if number <= 0:
            raise exception_class(
                f"{param_name} must be greater than zero",
                details={param_name: number}
            )
        return number

    @staticmethod
    def parse_decimal(
        value: Any,
        param_name: str,
        exception_class: Type[DomainException] = InvalidInputException
    ) -> float:
        """
        Converte entrada de formulário em float

        Aceita números ou strings com ponto ou vírgula decimal ("100,5").
        Separador de milhar não é aceito ("1.000,5" é inválido).

        Args:
            value: Valor digitado pelo usuário
            param_name: Nome do parâmetro
            exception_class: Classe de exceção a lançar

        Returns:
            Valor convertido (ainda não validado quanto ao sinal)

        Raises:
            exception_class: Se vazio ou não numérico
        """
        if isinstance(value, str):
            trimmed = GenericValidator.validate_not_empty(value, param_name, exception_class)
            if trimmed.count(',') == 1 and '.' not in trimmed:
                trimmed = trimmed.replace(',', '.')
            try:
                return float(trimmed)
            except ValueError:
                raise exception_class(
                    f"Invalid {param_name} format: {value}",
                    details={param_name: value}
                )
        if value is None:
            raise exception_class(
                f"{param_name} cannot be empty",
                details={param_name: value}
            )
        return value


class SizingInputValidator:
    """Validate sizing fields (região, área de captação, demanda diária)"""

    @staticmethod
    def validate_region_id(region_id: Any) -> str:
        """
        Validate region key is selected

        Raises:
            InvalidInputException: If region is blank or missing
        """
        return GenericValidator.validate_not_empty(
            value=region_id,
            param_name="region",
            exception_class=InvalidInputException
        )

    @staticmethod
    def validate_catchment_area(area: Any) -> float:
        """
        Validate catchment area (m²)

        Raises:
            InvalidInputException: If area is not a finite number > 0
        """
        return GenericValidator.validate_positive_number(
            value=area,
            param_name="catchment_area_m2",
            exception_class=InvalidInputException
        )

    @staticmethod
    def validate_daily_demand(demand: Any) -> float:
        """
        Validate daily demand (liters)

        Raises:
            InvalidInputException: If demand is not a finite number > 0
        """
        return GenericValidator.validate_positive_number(
            value=demand,
            param_name="daily_demand_liters",
            exception_class=InvalidInputException
        )
