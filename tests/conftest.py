import importlib
import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

InputForm = importlib.import_module('leafwater.domain.input_form').InputForm
ExtractionCalculator = importlib.import_module('leafwater.core.calculator').ExtractionCalculator


@pytest.fixture
def default_form():
    return InputForm.default()


@pytest.fixture
def olive_form():
    # Tunisian olive, 100 kg, default loss/processing/efficiency
    form = InputForm.default('tunisian-olive')
    form.total_mass_kg = '100'
    return form


@pytest.fixture
def calculator(olive_form):
    return ExtractionCalculator(olive_form)
