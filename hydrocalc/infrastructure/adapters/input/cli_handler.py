"""
Input Adapter: Interface de linha de comando
Presentation Layer: coleta os campos do formulário e delega para use cases

Uso:
    hydrocalc regions
    hydrocalc calculate --region SP --area 100 --demand 300
    hydrocalc calculate --region SP --area 100,5 --demand 300 --pdf relatorio.pdf
"""
import argparse
import json
import os
import sys
from typing import List, Optional, TextIO

# Application Layer - Use Cases
from application.dtos.requests import CalculateSizingRequest
from application.dtos.responses import RegionOptionResponse
from application.use_cases.calculate_sizing_use_case import CalculateSizingUseCase
from application.use_cases.export_report_use_case import ExportReportUseCase
from application.use_cases.list_regions_use_case import ListRegionsUseCase

# Domain Layer
from domain.constants import Display
from domain.services.sizing_calculator import SizingCalculator

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import (
    EXIT_OK,
    ExceptionHandlerService,
)
from infrastructure.adapters.output.pdf_report_exporter import PdfReportExporter
from infrastructure.adapters.output.regions_repository import get_repository

# Shared Layer
from shared.config.logger_config import get_logger
from shared.config.settings import REPORT_FILENAME, REPORT_OUTPUT_DIR

logger = get_logger()

exception_service = ExceptionHandlerService()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hydrocalc",
        description="Dimensionamento de reservatório de água de chuva (Método Alemão adaptado)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("regions", help="Lista regiões e médias pluviométricas")

    calculate = subparsers.add_parser("calculate", help="Calcula o volume do reservatório")
    calculate.add_argument("--region", required=True, help="Chave da região (ex: SP)")
    calculate.add_argument("--area", required=True, help="Área de captação em m²")
    calculate.add_argument("--demand", required=True, help="Demanda diária não potável em litros")
    calculate.add_argument(
        "--pdf",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help=f"Gera o relatório em PDF (padrão: {REPORT_FILENAME} em REPORT_OUTPUT_DIR)"
    )
    calculate.add_argument("--json", action="store_true", help="Saída em JSON")

    return parser


def list_regions(out: TextIO) -> int:
    use_case = ListRegionsUseCase(get_repository())
    for region in use_case.execute():
        option = RegionOptionResponse.from_entity(region)
        print(f"{option.region_id:<10} {option.name:<22} {option.rainfall_info}", file=out)
    return EXIT_OK


def calculate(args: argparse.Namespace, out: TextIO) -> int:
    repository = get_repository()
    calculator = SizingCalculator(repository.rainfall_table)

    request = CalculateSizingRequest(
        region_id=args.region,
        catchment_area_m2=args.area,
        daily_demand_liters=args.demand
    )

    response = CalculateSizingUseCase(calculator).build_response(request)

    if args.json:
        print(json.dumps(response.to_dict(), ensure_ascii=False, indent=2), file=out)
    else:
        rainfall_info = Display.RAINFALL_INFO.format(annual=response.annual_rainfall_mm)
        print(f"{response.region_name} - {rainfall_info}", file=out)
        for line in response.display_lines():
            print(line, file=out)

    if args.pdf is not None:
        output_path = args.pdf or os.path.join(REPORT_OUTPUT_DIR, REPORT_FILENAME)
        export = ExportReportUseCase(calculator, PdfReportExporter())
        saved = export.export(response, output_path)
        print(f"Relatório gravado em: {saved}", file=out)

    return EXIT_OK


def main(argv: Optional[List[str]] = None, out: TextIO = None, err: TextIO = None) -> int:
    """
    Ponto de entrada da CLI

    Returns:
        Código de saída (0 sucesso, 2 entrada inválida, 1 falha no relatório)
    """
    out = out or sys.stdout
    err = err or sys.stderr

    args = build_parser().parse_args(argv)
    logger.debug("Comando recebido", command=args.command)

    try:
        if args.command == "regions":
            return list_regions(out)
        return calculate(args, out)
    except Exception as ex:
        response = exception_service.handle(ex)
        print(response.message, file=err)
        return response.exit_code


if __name__ == "__main__":
    sys.exit(main())
