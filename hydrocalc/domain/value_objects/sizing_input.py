"""
Value Object para os dados de entrada do dimensionamento
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass

from shared.utils.validators import SizingInputValidator


@dataclass(frozen=True)
class SizingInput:
    """
    Value Object com os três campos informados pelo usuário

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__ (InvalidInputException)
    - Área e demanda normalizadas para float
    """
    region_id: str
    catchment_area_m2: float
    daily_demand_liters: float

    def __post_init__(self):
        """Valida os campos no momento da criação"""
        object.__setattr__(
            self, 'region_id', SizingInputValidator.validate_region_id(self.region_id)
        )
        object.__setattr__(
            self, 'catchment_area_m2',
            SizingInputValidator.validate_catchment_area(self.catchment_area_m2)
        )
        object.__setattr__(
            self, 'daily_demand_liters',
            SizingInputValidator.validate_daily_demand(self.daily_demand_liters)
        )
