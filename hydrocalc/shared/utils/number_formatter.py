"""
Number Formatter Utility
Formatação pt-BR dos resultados para exibição e relatório
"""
import math
from decimal import Context, Decimal, ROUND_HALF_UP
from datetime import datetime

from domain.constants import Display


class BrazilianFormatter:
    """Formata números no padrão brasileiro (milhar com ponto, decimal com vírgula)"""

    @staticmethod
    def round_half_up(value: float) -> int:
        """
        Arredonda para o inteiro mais próximo, .5 sempre para cima

        Diferente do round() do Python (arredondamento bancário):
            >>> BrazilianFormatter.round_half_up(21.5)
            22
            >>> round(22.5)
            22
        """
        return math.floor(value + 0.5)

    @staticmethod
    def format_integer(value: int) -> str:
        """
        Formata inteiro com separador de milhar

        Examples:
            >>> BrazilianFormatter.format_integer(13333)
            '13.333'
        """
        return f"{value:,}".replace(",", ".")

    @staticmethod
    def format_tank_volume(liters: float) -> str:
        """Volume do tanque arredondado para cima (ex: '6.570 L')"""
        return f"{BrazilianFormatter.format_integer(math.ceil(liters))} {Display.UNIT_LITERS}"

    @staticmethod
    def format_currency(value: float) -> str:
        """
        Valor monetário com duas casas e vírgula decimal (ex: 'R$ 73,00')

        Sem separador de milhar: 'R$ 1234,50'. Empates sobem (1.125 -> 'R$ 1,13'),
        arredondando o valor binário exato.
        """
        exact = Decimal(value)
        context = Context(prec=max(28, exact.adjusted() + 3))
        cents = exact.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP, context=context)
        return f"{Display.CURRENCY_SYMBOL} {cents}".replace(".", ",")

    @staticmethod
    def format_monthly_volume(liters: float) -> str:
        """Volume mensal arredondado (ex: '13.333 L/mês')"""
        rounded = BrazilianFormatter.round_half_up(liters)
        return f"{BrazilianFormatter.format_integer(rounded)} {Display.UNIT_LITERS_PER_MONTH}"

    @staticmethod
    def format_days(days: float) -> str:
        """Autonomia em dias inteiros (ex: '22 dias')"""
        return f"{BrazilianFormatter.round_half_up(days)} {Display.UNIT_DAYS}"

    @staticmethod
    def format_input_number(value: float) -> str:
        """
        Eco de um valor digitado pelo usuário

        Inteiros sem casas decimais, demais valores com vírgula:
            >>> BrazilianFormatter.format_input_number(100.0)
            '100'
            >>> BrazilianFormatter.format_input_number(87.5)
            '87,5'
            >>> BrazilianFormatter.format_input_number(0.00001)
            '0,00001'
        """
        if float(value).is_integer():
            return str(int(value))
        return format(Decimal(repr(float(value))), "f").replace(".", ",")

    @staticmethod
    def format_date(moment: datetime) -> str:
        """Data no formato dd/mm/aaaa"""
        return moment.strftime("%d/%m/%Y")
