"""
Output Port: Interface do exportador de relatório
"""
from abc import ABC, abstractmethod
from datetime import datetime

from application.dtos.responses import SizingResponse


class IReportExporter(ABC):
    """Interface para renderização do relatório técnico"""

    @abstractmethod
    def render(self, report: SizingResponse, generated_at: datetime) -> bytes:
        """
        Renderiza o relatório a partir dos valores já formatados

        Args:
            report: Resultado formatado com eco dos dados de entrada
            generated_at: Momento de geração (rodapé)

        Returns:
            Conteúdo do documento

        Raises:
            ReportExportException: Se a renderização falhar
        """
        pass

    @abstractmethod
    def save(self, report: SizingResponse, generated_at: datetime, path: str) -> str:
        """
        Renderiza e grava o relatório em disco

        Returns:
            Caminho do arquivo gravado

        Raises:
            ReportExportException: Se a gravação falhar
        """
        pass
