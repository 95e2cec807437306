"""
Region Entity - Entidade de domínio que representa uma região com média pluviométrica
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class RegionRainfall:
    """Entidade Região (chave, nome de exibição e precipitação média anual)"""
    id: str
    name: str
    annual_rainfall_mm: float

    def to_dict(self) -> dict:
        """Converte para dicionário"""
        return {
            'id': self.id,
            'name': self.name,
            'annualRainfallMm': self.annual_rainfall_mm
        }
