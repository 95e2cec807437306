"""
HydroCalc CLI - Clean Architecture
Delega para o adapter de linha de comando
"""
import sys

from infrastructure.adapters.input.cli_handler import main

__all__ = ['main']

if __name__ == '__main__':
    sys.exit(main())
