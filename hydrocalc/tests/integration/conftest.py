"""
Fixtures compartilhadas para testes de integração
"""
import io
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from infrastructure.adapters.input.cli_handler import main


class CliRun:
    """Resultado de uma execução da CLI"""
    def __init__(self, exit_code: int, stdout: str, stderr: str):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


@pytest.fixture
def run_cli():
    """
    Executa a CLI em processo capturando stdout/stderr

    Usage:
        def test_something(run_cli):
            run = run_cli("calculate", "--region", "SP", "--area", "100", "--demand", "300")
    """
    def _run(*argv: str) -> CliRun:
        out, err = io.StringIO(), io.StringIO()
        exit_code = main(list(argv), out=out, err=err)
        return CliRun(exit_code, out.getvalue(), err.getvalue())

    return _run
