"""
Domain Constants - Todas as constantes da aplicação centralizadas
Coeficientes do método de dimensionamento, tabela pluviométrica e textos do relatório
"""


class Sizing:
    """Constantes do dimensionamento (Método Alemão adaptado)"""

    # V = 0.06 × min(captação anual, demanda anual)
    TANK_VOLUME_COEFFICIENT = 0.06

    DAYS_PER_YEAR = 365
    MONTHS_PER_YEAR = 12

    # R$ 8,00 / m³ = R$ 0,008 / L
    WATER_PRICE_PER_LITER = 0.008

    # Citado na metodologia, não aplicado na fórmula calculada
    DOCUMENTED_RUNOFF_COEFFICIENT = 0.85


class Rainfall:
    """
    Precipitação média anual (mm) por região
    Fonte: normais climatológicas INMET (valores aproximados)

    A ordem de inserção é a ordem de exibição no seletor.
    """

    REGIONS = {
        "SP": ("São Paulo (SP)", 1600),
        "RJ": ("Rio de Janeiro (RJ)", 1200),
        "BH": ("Belo Horizonte (MG)", 1500),
        "Curitiba": ("Curitiba (PR)", 1500),
        "Brasília": ("Brasília (DF)", 1500),
    }


class Display:
    """Textos e sufixos da interface (pt-BR)"""

    CURRENCY_SYMBOL = "R$"
    UNIT_LITERS = "L"
    UNIT_LITERS_PER_MONTH = "L/mês"
    UNIT_DAYS = "dias"

    RAINFALL_INFO = "Média Pluviométrica Anual: {annual} mm"
    INVALID_INPUT_NOTICE = "Por favor, preencha todos os campos com valores válidos."


class Report:
    """Conteúdo fixo do relatório técnico em PDF"""

    TITLE = "Relatório Técnico de Dimensionamento"
    SUBTITLE = "Sistema de Aproveitamento de Água de Chuva"

    SECTION_PARAMETERS = "1. Parâmetros do Projeto"
    SECTION_RESULTS = "2. Resultados do Dimensionamento"
    SECTION_RECOMMENDATION = "3. Recomendação Técnica"

    RECOMMENDATION_TEXT = (
        "Recomenda-se a instalação de um sistema de pré-filtragem para remoção de "
        "detritos sólidos (folhas, galhos) antes do armazenamento. O reservatório deve "
        "ser protegido contra a entrada de luz solar para evitar a proliferação de algas "
        "e mantido fechado para impedir o acesso de vetores. A água armazenada "
        "destina-se EXCLUSIVAMENTE para fins não potáveis (irrigação, lavagem de pisos, "
        "descarga sanitária)."
    )

    FOOTER = "Gerado em: {date} via {app_name}"

    DEFAULT_FILENAME = "Relatorio_Dimensionamento_Agua_Chuva.pdf"

    # Cores RGB (0-255)
    COLOR_PRIMARY = (2, 132, 199)  # Sky-600
    COLOR_SAVINGS = (22, 163, 74)  # Green-600
    COLOR_HIGHLIGHT_BOX = (240, 249, 255)  # Sky-50
    COLOR_SUBTITLE = (100, 100, 100)
    COLOR_FOOTER = (150, 150, 150)


class App:
    """Constantes da aplicação"""

    NAME = "HydroCalc Pro"

    # Timezone padrão
    TIMEZONE = "America/Sao_Paulo"
