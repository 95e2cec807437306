"""
Testes para Value Objects (RainfallTable, SizingInput e SizingResult)
"""
import pytest

from domain.entities.region import RegionRainfall
from domain.exceptions import InvalidInputException, RegionNotFoundException
from domain.value_objects.rainfall_table import RainfallTable
from domain.value_objects.sizing_input import SizingInput
from domain.value_objects.sizing_result import SizingResult


class TestRainfallTable:
    """Testes para Value Object RainfallTable"""

    def test_default_regions(self, rainfall_table):
        """Tabela padrão contém as cinco regiões na ordem de exibição"""
        assert list(rainfall_table) == ["SP", "RJ", "BH", "Curitiba", "Brasília"]
        assert len(rainfall_table) == 5

    def test_default_values(self, rainfall_table):
        assert rainfall_table.get("SP") == RegionRainfall("SP", "São Paulo (SP)", 1600)
        assert rainfall_table.get("RJ").annual_rainfall_mm == 1200
        assert rainfall_table.get("BH").name == "Belo Horizonte (MG)"
        assert rainfall_table.get("Curitiba").annual_rainfall_mm == 1500
        assert rainfall_table.get("Brasília").name == "Brasília (DF)"

    def test_contains(self, rainfall_table):
        assert "SP" in rainfall_table
        assert "sp" not in rainfall_table

    def test_get_unknown_region(self, rainfall_table):
        with pytest.raises(RegionNotFoundException) as exc_info:
            rainfall_table.get("Manaus")

        assert exc_info.value.details["region_id"] == "Manaus"
        assert "SP" in exc_info.value.details["available"]

    def test_get_non_string_key(self, rainfall_table):
        with pytest.raises(RegionNotFoundException):
            rainfall_table.get(None)

    def test_mapping_is_read_only(self, rainfall_table):
        """Testa que o mapeamento não pode ser alterado"""
        with pytest.raises(TypeError):
            rainfall_table.regions["SP"] = RegionRainfall("SP", "Outro", 1)

    def test_immutability(self, rainfall_table):
        with pytest.raises(Exception):  # FrozenInstanceError
            rainfall_table.regions = {}

    def test_source_dict_changes_do_not_leak(self):
        source = {"A": RegionRainfall("A", "Região A", 900)}
        table = RainfallTable(regions=source)
        source["B"] = RegionRainfall("B", "Região B", 800)

        assert "B" not in table

    def test_inconsistent_key_rejected(self):
        with pytest.raises(ValueError, match="inconsistente"):
            RainfallTable(regions={"X": RegionRainfall("Y", "Região Y", 1000)})

    def test_non_positive_rainfall_rejected(self):
        with pytest.raises(ValueError, match="Precipitação inválida"):
            RainfallTable.from_tuples({"Z": ("Região Z", 0)})

    def test_all_preserves_order(self, rainfall_table):
        assert [r.id for r in rainfall_table.all()] == list(rainfall_table)


class TestSizingInput:
    """Testes para Value Object SizingInput"""

    def test_valid_input(self):
        sizing_input = SizingInput(region_id="SP", catchment_area_m2=100, daily_demand_liters=300)

        assert sizing_input.region_id == "SP"
        assert sizing_input.catchment_area_m2 == 100.0
        assert isinstance(sizing_input.catchment_area_m2, float)
        assert isinstance(sizing_input.daily_demand_liters, float)

    def test_region_is_trimmed(self):
        sizing_input = SizingInput(region_id="  RJ ", catchment_area_m2=1, daily_demand_liters=1)
        assert sizing_input.region_id == "RJ"

    def test_zero_area(self):
        with pytest.raises(InvalidInputException, match="greater than zero"):
            SizingInput(region_id="SP", catchment_area_m2=0, daily_demand_liters=300)

    def test_zero_demand(self):
        with pytest.raises(InvalidInputException, match="greater than zero"):
            SizingInput(region_id="SP", catchment_area_m2=100, daily_demand_liters=0)

    def test_string_area(self):
        with pytest.raises(InvalidInputException, match="must be a number"):
            SizingInput(region_id="SP", catchment_area_m2="100", daily_demand_liters=300)

    def test_immutability(self):
        sizing_input = SizingInput(region_id="SP", catchment_area_m2=100, daily_demand_liters=300)

        with pytest.raises(Exception):  # FrozenInstanceError
            sizing_input.catchment_area_m2 = 200


class TestSizingResult:
    """Testes para Value Object SizingResult"""

    @pytest.fixture
    def result(self):
        return SizingResult(
            tank_volume_liters=6570.0,
            monthly_savings=73.0,
            monthly_capture_avg_liters=13333.33,
            monthly_demand_liters=9125.0,
            autonomy_days=21.9,
            annual_capture_liters=160000.0,
            annual_demand_liters=109500.0
        )

    def test_is_demand_limited(self, result):
        assert result.is_demand_limited is True

    def test_immutability(self, result):
        with pytest.raises(Exception):  # FrozenInstanceError
            result.tank_volume_liters = 0
