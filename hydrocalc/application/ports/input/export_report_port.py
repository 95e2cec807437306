"""
Input Port: Interface para exportar o relatório técnico
"""
from abc import ABC, abstractmethod
from typing import Union

from application.dtos.requests import ExportReportRequest


class IExportReportUseCase(ABC):
    """Interface para caso de uso de exportação de relatório"""

    @abstractmethod
    def execute(self, request: ExportReportRequest) -> Union[str, bytes]:
        """
        Gera o relatório em PDF

        Args:
            request: Dados de dimensionamento e caminho de saída opcional

        Returns:
            Caminho do arquivo gravado, ou bytes do PDF se output_path for None

        Raises:
            InvalidInputException: Se algum campo for inválido
            ReportExportException: Se o PDF não puder ser gerado ou gravado
        """
        pass
