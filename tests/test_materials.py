import pytest

from sciantix.materials import (
    Entity,
    Gas,
    InputVariable,
    InvalidOptionError,
    Matrix,
    ScalingFactors,
    krypton_gases,
)


def test_entity_holds_name_and_reference():
    entity = Entity(name="UO2", reference="ref")
    assert entity.name == "UO2"
    assert entity.reference == "ref"


def test_input_variable_value():
    setting = InputVariable(name="iGrainGrowth", value=1.0)
    assert setting.value == 1.0
    assert setting.name == "iGrainGrowth"


def test_krypton_gases_names_and_order():
    gases = krypton_gases()
    assert [g.name for g in gases] == ["Kr", "Kr85m"]


def test_krypton_stable_properties():
    kr = krypton_gases()[0]
    assert kr.atomic_number == 36
    assert kr.van_der_waals_volume == pytest.approx(6.61e-29)
    assert kr.decay_rate == 0.0
    assert kr.precursor_factor == 1.0
    assert kr.mass_number is None


def test_krypton_85m_properties():
    kr85m = krypton_gases()[1]
    assert kr85m.atomic_number == 36
    assert kr85m.mass_number == 85
    assert kr85m.decay_rate == pytest.approx(4.3e-5)
    assert kr85m.precursor_factor == pytest.approx(1.31)


def test_krypton_gases_returns_fresh_objects():
    first = krypton_gases()
    first[0].decay_rate = 5.0
    assert krypton_gases()[0].decay_rate == 0.0


def test_scaling_factors_default_to_one():
    factors = ScalingFactors()
    assert all(
        value == 1.0
        for value in (
            factors.resolution_rate,
            factors.trapping_rate,
            factors.nucleation_rate,
            factors.diffusivity,
            factors.screw_parameter,
            factors.span_parameter,
            factors.cent_parameter,
            factors.helium_production_rate,
            factors.temperature,
            factors.fission_rate,
        )
    )


def test_mobility_option_zero():
    matrix = Matrix(name="UO2", grain_boundary_mobility=3.0)
    assert matrix.set_grain_boundary_mobility(0, 1500.0) == 0.0
    assert matrix.grain_boundary_mobility == 0.0
    assert matrix.reference == "no grain-boundary mobility.\n\t"


@pytest.mark.parametrize(
    "option, prefactor", [(1, 1.455e-8), (2, 1.360546875e-15)]
)
def test_mobility_tends_to_prefactor_at_high_temperature(option, prefactor):
    matrix = Matrix()
    value = matrix.set_grain_boundary_mobility(option, 1e12)
    assert value == pytest.approx(prefactor, rel=1e-6)
    assert matrix.grain_boundary_mobility == value


@pytest.mark.parametrize("option", [1, 2])
def test_mobility_increases_with_temperature(option):
    matrix = Matrix()
    low = matrix.set_grain_boundary_mobility(option, 1200.0)
    high = matrix.set_grain_boundary_mobility(option, 1800.0)
    assert 0.0 < low < high


def test_mobility_references():
    matrix = Matrix()
    matrix.set_grain_boundary_mobility(1, 1500.0)
    assert "Ainscough et al., JNM, 49 (1973) 117-128." in matrix.reference
    matrix.set_grain_boundary_mobility(2, 1500.0)
    assert matrix.reference.endswith("Van Uffelen et al. JNM, 434 (2013) 287–29.\n\t")


def test_mobility_invalid_option():
    matrix = Matrix()
    with pytest.raises(InvalidOptionError) as info:
        matrix.set_grain_boundary_mobility(3, 1500.0)
    assert info.value.variable_name == "iGrainGrowth"
    assert info.value.value == 3
    assert matrix.reference == ""


def test_vacancy_diffusivity_option_zero():
    matrix = Matrix()
    assert matrix.set_grain_boundary_vacancy_diffusivity(0, 1500.0) == 1e-30
    assert matrix.grain_boundary_vacancy_diffusivity == 1e-30
    assert "constant value (1e-30 m^2/s)" in matrix.reference


@pytest.mark.parametrize("option, prefactor", [(1, 6.9e-04), (2, 8.86e-6)])
def test_vacancy_diffusivity_tends_to_prefactor(option, prefactor):
    matrix = Matrix()
    value = matrix.set_grain_boundary_vacancy_diffusivity(option, 1e12)
    assert value == pytest.approx(prefactor, rel=1e-6)


@pytest.mark.parametrize("option", [1, 2])
def test_vacancy_diffusivity_increases_with_temperature(option):
    matrix = Matrix()
    low = matrix.set_grain_boundary_vacancy_diffusivity(option, 1000.0)
    high = matrix.set_grain_boundary_vacancy_diffusivity(option, 2000.0)
    assert 0.0 < low < high


def test_vacancy_diffusivity_invalid_option():
    matrix = Matrix()
    with pytest.raises(InvalidOptionError) as info:
        matrix.set_grain_boundary_vacancy_diffusivity(-1, 1500.0)
    assert info.value.variable_name == "iGrainBoundaryVacancyDiffusivity"
    assert isinstance(info.value, ValueError)


def test_references_accumulate():
    matrix = Matrix(reference="base\n\t")
    matrix.set_grain_boundary_mobility(0, 1000.0)
    matrix.set_grain_boundary_vacancy_diffusivity(0, 1000.0)
    assert matrix.reference.startswith("base\n\tno grain-boundary mobility.")
    assert matrix.reference.count("\n\t") == 3


def test_gas_defaults():
    gas = Gas(name="Xe")
    assert gas.precursor_factor == 1.0
    assert gas.decay_rate == 0.0