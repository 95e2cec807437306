"""
Use Case: Export Report
Recalcula o dimensionamento, formata em pt-BR e delega a renderização ao exportador
"""
from datetime import datetime
from typing import Callable, Optional, Union
from zoneinfo import ZoneInfo

from application.dtos.requests import ExportReportRequest
from application.dtos.responses import SizingResponse
from application.ports.input.export_report_port import IExportReportUseCase
from application.ports.output.report_exporter_port import IReportExporter
from application.use_cases.calculate_sizing_use_case import CalculateSizingUseCase
from domain.services.sizing_calculator import SizingCalculator
from shared.config.logger_config import get_logger
from shared.config.settings import TIMEZONE

logger = get_logger(child=True)


def _now() -> datetime:
    return datetime.now(tz=ZoneInfo(TIMEZONE))


class ExportReportUseCase(IExportReportUseCase):
    """Use case: gerar relatório técnico de dimensionamento"""

    def __init__(
        self,
        calculator: SizingCalculator,
        report_exporter: IReportExporter,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.calculator = calculator
        self.report_exporter = report_exporter
        self.clock = clock or _now

    def build_report(self, request: ExportReportRequest) -> SizingResponse:
        """
        Calcula e formata o conteúdo do relatório

        Raises:
            InvalidInputException: Se algum campo for inválido
        """
        return CalculateSizingUseCase(self.calculator).build_response(request.sizing)

    def export(self, report: SizingResponse, output_path: Optional[str] = None) -> Union[str, bytes]:
        """
        Renderiza um relatório já calculado, sem revalidar a entrada

        Returns:
            Caminho gravado (output_path informado) ou bytes do PDF

        Raises:
            ReportExportException: Se o PDF não puder ser gerado ou gravado
        """
        generated_at = self.clock()

        if output_path is None:
            content = self.report_exporter.render(report, generated_at)
            logger.info("Report rendered", region_id=report.region_id, size_bytes=len(content))
            return content

        path = self.report_exporter.save(report, generated_at, output_path)
        logger.info("Report saved", region_id=report.region_id, path=path)
        return path

    def execute(self, request: ExportReportRequest) -> Union[str, bytes]:
        """
        Execute use case

        Args:
            request: Dados de dimensionamento e caminho de saída opcional

        Returns:
            Caminho gravado (output_path informado) ou bytes do PDF

        Raises:
            InvalidInputException: Se algum campo for inválido
            ReportExportException: Se o PDF não puder ser gerado ou gravado
        """
        return self.export(self.build_report(request), request.output_path)
