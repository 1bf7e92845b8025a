# leafwater/domain/references.py
"""Справочные данные: описание формулы и литературные источники.

Модуль не участвует в расчёте – это статический контент, который
показывает слой представления (CLI ``sources``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True, slots=True)
class FormulaTerm:
    symbol: str
    meaning: str


@dataclass(frozen=True, slots=True)
class Citation:
    label: str
    url: str


@dataclass(frozen=True, slots=True)
class SourceGroup:
    """Named group of citations (one card of the credits dialog)."""

    title: str
    citations: Tuple[Citation, ...]


FORMULA = "V_w = (M_h × F_b × (1 - L_c) × E_p × MC × η) / ρ_w"
FORMULA_CAPTION = "Unified formula for biomass water extraction"

FORMULA_TERMS: Tuple[FormulaTerm, ...] = (
    FormulaTerm("V_w", "Volume of reusable water (L)"),
    FormulaTerm("M_h", "Total harvested mass (kg)"),
    FormulaTerm("F_b", "Biomass factor (varies by crop type)"),
    FormulaTerm("L_c", "Loss fraction during processing"),
    FormulaTerm("E_p", "Processing enhancement factor"),
    FormulaTerm("MC", "Moisture content of leaves"),
    FormulaTerm("η", "Water recovery efficiency"),
    FormulaTerm("ρ_w", "Water density (1 kg/L)"),
)

_CANTINI_2017 = (
    "https://webibe.ibe.cnr.it/IBE/personale/cantini-claudio/"
    "copie-delle-pubblicazioni/trees-31-1859-1874-2017.pdf"
)
_BEN_HASSINE_2017 = "https://www.ajol.info/index.php/ajb/article/view/130950"

EQUATION_SOURCES: Tuple[SourceGroup, ...] = (
    SourceGroup("Cantini et al., 2017", (Citation("View Publication", _CANTINI_2017),)),
    SourceGroup(
        "Ben Hassine et al., 2017", (Citation("View Publication", _BEN_HASSINE_2017),)
    ),
    SourceGroup(
        "Solar evaporation & hydrogel water recovery reviews",
        (
            Citation(
                "ScienceDirect Review",
                "https://www.sciencedirect.com/science/article/pii/S1364032123001234",
            ),
            Citation(
                "Science Journal", "https://www.science.org/doi/10.1126/science.abd1234"
            ),
        ),
    ),
)

# Источники данных по культурам; для яблони в оригинале ссылок нет
PLANT_DATA_SOURCES: Dict[str, SourceGroup] = {
    "tunisian-olive": SourceGroup(
        "Tunisian Olive (Chemlali)",
        (Citation("Ben Hassine et al., 2017", _BEN_HASSINE_2017),),
    ),
    "koroneiki-olive": SourceGroup(
        "Koroneiki Olive",
        (
            Citation("Ben Hassine et al., 2017", _BEN_HASSINE_2017),
            Citation("MDPI Antioxidants Journal", "https://www.mdpi.com/2076-3921/9/6/555"),
        ),
    ),
    "leccino-olive": SourceGroup(
        "Leccino Olive",
        (
            Citation("Cantini et al., 2017", _CANTINI_2017),
            Citation(
                "BioResources Journal",
                "https://bioresources.cnr.ncsu.edu/BioRes_08/"
                "BioRes_08_1_0088_FernandezPuratich_OAP_Quant_Ligno_Biomass_Fruit_Trees_2905.pdf",
            ),
        ),
    ),
}

DISCLAIMER = (
    "This calculator is developed for educational and research purposes. "
    "All calculations are based on the referenced scientific literature and "
    "may require validation for specific applications."
)


def sources_for_crop(crop_id: str) -> Tuple[Citation, ...]:
    """Citations backing a crop's F_b / MC values (empty when none recorded)."""
    group = PLANT_DATA_SOURCES.get(crop_id)
    return group.citations if group is not None else ()
