# leafwater/__init__.py
"""Пакет **leafwater** (Leaf Water Extraction Calculator).

Оценивает объём воды, который можно извлечь из листовой биомассы,
собранной вместе с урожаем оливок или яблок. Инициализационный модуль
упрощает импорт «ключевых сущностей» для внешних пользователей:

--- from leafwater import ExtractionCalculator, InputForm, format_volume ---

Экспортируемые объекты перечислены в ``__all__``: это *public API*
пакета.
"""

from __future__ import annotations

from .domain.crop_profile import CropProfile
from .domain.catalog import CROP_CATALOG, DEFAULT_CROP, crop_ids, lookup
from .domain.input_form import InputForm
from .core.validation import InvalidFormError, InvalidInput, ValidationResult, validate
from .core.formatting import format_volume
from .core.calculator import ExtractionCalculator, calculate
from .facade.analyzer import WaterYieldAnalyzer

__all__ = [
    "CropProfile",        # профиль культуры (F_b, MC)
    "CROP_CATALOG",       # неизменяемый каталог культур
    "DEFAULT_CROP",       # первая культура каталога
    "crop_ids",
    "lookup",             # культура по идентификатору или None
    "InputForm",          # форма ввода сессии
    "InvalidInput",       # ошибка одного поля
    "InvalidFormError",   # расчёт по некорректной форме
    "ValidationResult",   # поле → сообщение
    "validate",
    "calculate",          # чистая формула V_w
    "format_volume",      # mL / L / m³
    "ExtractionCalculator",  # интерактивная сессия
    "WaterYieldAnalyzer",    # фасад: сравнения, серии, графики
]
