"""
Testes Unitários - BrazilianFormatter (formatação pt-BR)
"""
from datetime import datetime

import pytest

from shared.utils.number_formatter import BrazilianFormatter


class TestRoundHalfUp:
    """Arredondamento igual ao Math.round (0,5 sempre para cima)"""

    @pytest.mark.parametrize("value,expected", [
        (21.9, 22),
        (21.4, 21),
        (0.5, 1),
        (2.5, 3),
        (22.5, 23),
        (13333.333, 13333),
    ])
    def test_round_half_up(self, value, expected):
        assert BrazilianFormatter.round_half_up(value) == expected


class TestDisplayFormats:
    """Formatos exibidos no cartão de resultados"""

    @pytest.mark.parametrize("value,expected", [
        (0, "0"),
        (999, "999"),
        (1000, "1.000"),
        (13333, "13.333"),
        (1234567, "1.234.567"),
    ])
    def test_format_integer(self, value, expected):
        assert BrazilianFormatter.format_integer(value) == expected

    def test_tank_volume_uses_ceiling(self):
        assert BrazilianFormatter.format_tank_volume(6570.0) == "6.570 L"
        assert BrazilianFormatter.format_tank_volume(6570.01) == "6.571 L"
        assert BrazilianFormatter.format_tank_volume(988.8) == "989 L"

    @pytest.mark.parametrize("value,expected", [
        (73.0, "R$ 73,00"),
        (40, "R$ 40,00"),
        (5.555, "R$ 5,55"),
        (1234.5, "R$ 1234,50"),
        (1.125, "R$ 1,13"),
        (0.005, "R$ 0,01"),
        (2.675, "R$ 2,67"),
    ])
    def test_format_currency(self, value, expected):
        """Duas casas, vírgula decimal, sem separador de milhar"""
        assert BrazilianFormatter.format_currency(value) == expected

    def test_format_monthly_volume(self):
        assert BrazilianFormatter.format_monthly_volume(160000 / 12) == "13.333 L/mês"
        assert BrazilianFormatter.format_monthly_volume(9125.0) == "9.125 L/mês"

    def test_format_days(self):
        assert BrazilianFormatter.format_days(21.9) == "22 dias"
        assert BrazilianFormatter.format_days(12.0) == "12 dias"

    @pytest.mark.parametrize("value,expected", [
        (100.0, "100"),
        (1600, "1600"),
        (87.5, "87,5"),
        (0.25, "0,25"),
        (0.00001, "0,00001"),
        (1234567.125, "1234567,125"),
    ])
    def test_format_input_number(self, value, expected):
        assert BrazilianFormatter.format_input_number(value) == expected

    def test_format_date(self):
        assert BrazilianFormatter.format_date(datetime(2025, 3, 7, 15, 30)) == "07/03/2025"

    def test_currency_tie_from_calculated_savings(self, calculator):
        """Economia exatamente em x,xx5 sobe como no formulário (R$ 1,125 -> R$ 1,13)"""
        result = calculator.compute("SP", 1.0546875, 300)

        assert result.monthly_savings == 1.125
        assert BrazilianFormatter.format_currency(result.monthly_savings) == "R$ 1,13"

    def test_currency_large_value(self):
        assert BrazilianFormatter.format_currency(1e30) == f"R$ {int(1e30)},00"

    def test_input_number_never_scientific(self):
        assert "e" not in BrazilianFormatter.format_input_number(1.5e-07)
        assert BrazilianFormatter.format_input_number(1.5e-07) == "0,00000015"
