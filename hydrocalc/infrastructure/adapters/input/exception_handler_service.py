"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
from dataclasses import dataclass

from domain.constants import Display
from domain.exceptions import (
    InvalidInputException,
    RegionNotFoundException,
    ReportExportException,
)
from shared.config.logger_config import logger as app_logger

EXIT_OK = 0
EXIT_EXPORT_ERROR = 1
EXIT_INVALID_INPUT = 2
EXIT_UNEXPECTED_ERROR = 70


@dataclass(frozen=True)
class CliResponse:
    """Aviso exibido ao usuário e código de saída do processo"""
    exit_code: int
    message: str


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em avisos bloqueantes e códigos de saída
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def handle_region_not_found(ex: RegionNotFoundException) -> CliResponse:
        """Região fora da tabela pluviométrica"""
        ExceptionHandlerService.logger.warning("Region not found", error=str(ex), details=ex.details)
        return CliResponse(exit_code=EXIT_INVALID_INPUT, message=Display.INVALID_INPUT_NOTICE)

    @staticmethod
    def handle_invalid_input(ex: InvalidInputException) -> CliResponse:
        """Campo vazio, não numérico ou não positivo"""
        ExceptionHandlerService.logger.warning("Invalid input", error=str(ex), details=ex.details)
        return CliResponse(exit_code=EXIT_INVALID_INPUT, message=Display.INVALID_INPUT_NOTICE)

    @staticmethod
    def handle_report_export(ex: ReportExportException) -> CliResponse:
        """Falha ao gerar ou gravar o PDF"""
        ExceptionHandlerService.logger.error("Report export failed", error=str(ex), details=ex.details)
        return CliResponse(
            exit_code=EXIT_EXPORT_ERROR,
            message=f"Não foi possível gerar o relatório: {ex.details.get('error', ex.message)}"
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> CliResponse:
        """Erros inesperados"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return CliResponse(exit_code=EXIT_UNEXPECTED_ERROR, message="Erro inesperado.")

    def handle(self, ex: Exception) -> CliResponse:
        """Despacha para o handler mais específico"""
        if isinstance(ex, RegionNotFoundException):
            return self.handle_region_not_found(ex)
        if isinstance(ex, InvalidInputException):
            return self.handle_invalid_input(ex)
        if isinstance(ex, ReportExportException):
            return self.handle_report_export(ex)
        return self.handle_unexpected_error(ex)
