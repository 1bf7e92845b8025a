import importlib
import math

import pytest

catalog = importlib.import_module('leafwater.domain.catalog')
CropProfile = importlib.import_module('leafwater.domain.crop_profile').CropProfile
InputForm = importlib.import_module('leafwater.domain.input_form').InputForm
references = importlib.import_module('leafwater.domain.references')
formulas = importlib.import_module('leafwater.core.formulas')
validation = importlib.import_module('leafwater.core.validation')
formatting = importlib.import_module('leafwater.core.formatting')
calculator = importlib.import_module('leafwater.core.calculator')

VolumeUnit = formatting.VolumeUnit


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def test_catalog_values():
    rows = [
        (c.id, c.display_name, c.biomass_factor, c.moisture_content_percent)
        for c in catalog.CROP_CATALOG
    ]
    assert rows == [
        ('tunisian-olive', 'Tunisian Olive', 0.175, 72.5),
        ('koroneiki-olive', 'Koroneiki Olive', 0.20, 70),
        ('leccino-olive', 'Leccino Olive', 0.16, 72.5),
        ('apple-tree', 'Apple Tree', 0.12, 80),
    ]


def test_lookup_unknown_and_default():
    assert catalog.lookup('apple-tree').scientific_name == 'Malus domestica'
    assert catalog.lookup('banana') is None
    assert catalog.lookup_or_default('banana') is catalog.CROP_CATALOG[0]
    assert catalog.crop_ids()[0] == 'tunisian-olive'


def test_crop_profile_is_immutable_and_checked():
    crop = catalog.lookup('koroneiki-olive')
    with pytest.raises(Exception):
        crop.biomass_factor = 1.0
    with pytest.raises(ValueError):
        CropProfile('x', 'X', 'X x', 0.0, 50)
    with pytest.raises(ValueError):
        CropProfile('x', 'X', 'X x', 0.1, 100.5)


def test_fruit_label():
    assert catalog.lookup('apple-tree').fruit_label == 'apple'
    assert catalog.lookup('leccino-olive').fruit_label == 'olive'


def test_sources_for_crop():
    labels = [c.label for c in references.sources_for_crop('koroneiki-olive')]
    assert labels == ['Ben Hassine et al., 2017', 'MDPI Antioxidants Journal']
    assert references.sources_for_crop('apple-tree') == ()


# ---------------------------------------------------------------------------
# Form defaults
# ---------------------------------------------------------------------------

def test_default_form(default_form):
    assert default_form.selected_crop_id == 'tunisian-olive'
    assert default_form.total_mass_kg is None
    assert default_form.loss_fraction_percent == 20
    assert default_form.processing_factor == 1.0
    assert default_form.recovery_efficiency_percent == 50
    assert default_form.biomass_factor == 0.175
    assert default_form.moisture_content_percent == 72.5


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_valid_form_has_no_errors(olive_form):
    result = validation.validate(olive_form)
    assert result.is_valid
    assert dict(result) == {}
    assert result.values['total_mass_kg'] == 100.0


@pytest.mark.parametrize('mass', [None, '', '   ', 'abc', '0', 0, -5, 'nan', float('inf'), True])
def test_invalid_mass(default_form, mass):
    default_form.total_mass_kg = mass
    result = validation.validate(default_form)
    assert list(result) == ['total_mass_kg']
    assert result['total_mass_kg'] == 'Please enter a valid positive mass value'


@pytest.mark.parametrize(
    'field', ['loss_fraction_percent', 'moisture_content_percent', 'recovery_efficiency_percent']
)
def test_percentage_boundaries(olive_form, field):
    for ok in (0, 100, '0', '100.0'):
        setattr(olive_form, field, ok)
        assert field not in validation.validate(olive_form)
    for bad in (-0.0001, 100.0001, 'x', None):
        setattr(olive_form, field, bad)
        assert field in validation.validate(olive_form)


@pytest.mark.parametrize('field', ['processing_factor', 'biomass_factor'])
def test_positive_factors(olive_form, field):
    setattr(olive_form, field, '0.0001')
    assert field not in validation.validate(olive_form)
    for bad in (0, -1, '', 'one'):
        setattr(olive_form, field, bad)
        assert field in validation.validate(olive_form)


def test_all_errors_reported_together(default_form):
    default_form.total_mass_kg = ''
    default_form.loss_fraction_percent = 150
    default_form.processing_factor = 0
    default_form.moisture_content_percent = -1
    default_form.recovery_efficiency_percent = 'high'
    default_form.biomass_factor = -0.1
    result = validation.validate(default_form)
    assert len(result) == 6
    assert [e.field for e in result.errors] == [
        'total_mass_kg',
        'loss_fraction_percent',
        'processing_factor',
        'moisture_content_percent',
        'recovery_efficiency_percent',
        'biomass_factor',
    ]


def test_loss_out_of_range_only_affects_loss(olive_form):
    olive_form.loss_fraction_percent = 150
    result = validation.validate(olive_form)
    assert dict(result) == {'loss_fraction_percent': 'Loss fraction must be between 0 and 100%'}


def test_parse_number():
    assert validation.parse_number(' 12.5 ') == 12.5
    assert validation.parse_number(3) == 3.0
    assert validation.parse_number('12abc') is None
    assert validation.parse_number(False) is None
    assert validation.parse_number('-inf') is None


# ---------------------------------------------------------------------------
# Formula
# ---------------------------------------------------------------------------

def test_scenario_olive_100kg(olive_form):
    volume = calculator.calculate(olive_form)
    assert math.isclose(volume, 5.075, rel_tol=1e-12)
    assert formatting.format_volume(volume) == '5.08 L'


def test_scenario_olive_10kg(olive_form):
    olive_form.total_mass_kg = 10
    volume = calculator.calculate(olive_form)
    assert math.isclose(volume, 0.5075, rel_tol=1e-12)
    assert formatting.format_volume(volume) == '508 mL'


def test_calculate_rejects_invalid_form(olive_form):
    olive_form.total_mass_kg = 0
    with pytest.raises(validation.InvalidFormError) as info:
        calculator.calculate(olive_form)
    assert list(info.value.result) == ['total_mass_kg']


def test_formula_is_pure():
    args = (123.4, 0.16, 12.5, 1.3, 72.5, 61.0)
    first = formulas.compute_water_volume(*args)
    assert all(formulas.compute_water_volume(*args) == first for _ in range(10))


def test_zero_factors_give_zero_volume():
    assert formulas.compute_water_volume(50, 0.2, 100, 1.0, 70, 50) == 0.0
    assert formulas.compute_water_volume(50, 0.2, 20, 1.0, 0, 50) == 0.0
    assert formatting.format_volume(0.0) == '0.00 mL'


def test_array_formula_matches_scalar():
    masses = [0.5, 1, 10, 100, 2500.25]
    arr = formulas.compute_water_volume_array(masses, 0.175, 20, 1.0, 72.5, 50)
    for m, v in zip(masses, arr):
        assert float(v) == formulas.compute_water_volume(m, 0.175, 20, 1.0, 72.5, 50)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    'volume, unit',
    [
        (0.0009999, VolumeUnit.MILLILITER_FINE),
        (0.001, VolumeUnit.MILLILITER),
        (0.999, VolumeUnit.MILLILITER),
        (1.0, VolumeUnit.LITER),
        (999.999, VolumeUnit.LITER),
        (1000.0, VolumeUnit.CUBIC_METER),
    ],
)
def test_unit_boundaries(volume, unit):
    assert formatting.classify_volume(volume) is unit


def test_format_examples():
    assert formatting.format_volume(0.00005) == '0.05 mL'
    assert formatting.format_volume(0.0009999) == '1.00 mL'
    assert formatting.format_volume(0.001) == '1 mL'
    assert formatting.format_volume(0.5) == '500 mL'
    assert formatting.format_volume(1.0) == '1.00 L'
    assert formatting.format_volume(12.34) == '12.34 L'
    assert formatting.format_volume(999.999) == '1000.00 L'
    assert formatting.format_volume(1000.0) == '1.00 m³'
    assert formatting.format_volume(1500) == '1.50 m³'


def test_format_rounds_half_up():
    assert formatting.format_volume(1.125) == '1.13 L'
    assert formatting.to_fixed(0.5, 0) == '1'
    assert formatting.to_fixed(2.5, 0) == '3'


def test_format_huge_volume():
    assert formatting.format_volume(1e33) == '999999999999999879147136483328.00 m³'


def test_format_non_finite_does_not_raise():
    assert formatting.to_fixed(float('inf'), 2) == 'inf'
    assert formatting.format_volume(float('inf')) == 'inf m³'


def test_negative_zero_formats_without_sign():
    assert formatting.to_fixed(-0.0, 2) == '0.00'
    assert formatting.format_volume(-0.0) == '0.00 mL'


def test_negative_zero_input_is_normalised(olive_form):
    olive_form.moisture_content_percent = '-0'
    result = validation.validate(olive_form)
    assert result.is_valid
    assert math.copysign(1.0, result.values['moisture_content_percent']) == 1.0
    volume = calculator.calculate(olive_form)
    assert formatting.format_volume(volume) == '0.00 mL'


def test_overflowing_product_is_rejected(olive_form):
    olive_form.total_mass_kg = '1e308'
    olive_form.processing_factor = '1e308'
    result = validation.validate(olive_form)
    assert not result.is_valid
    assert result['total_mass_kg'] == validation.RESULT_OUT_OF_RANGE
    with pytest.raises(validation.InvalidFormError):
        calculator.calculate(olive_form)


def test_overflow_to_nan_is_rejected(olive_form):
    olive_form.total_mass_kg = 1e308
    olive_form.biomass_factor = 1e308
    olive_form.loss_fraction_percent = 100
    assert list(validation.validate(olive_form)) == ['total_mass_kg']
