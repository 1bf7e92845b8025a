# leafwater/domain/catalog.py
"""Каталог культур.

Упорядоченный неизменяемый кортеж профилей. Значения *F_b* и *MC* взяты
из литературы (см. ``references``) и должны совпадать бит в бит.
Первый элемент каталога – культура по умолчанию: на неё откатывается
выбор, если идентификатор не найден.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .crop_profile import CropProfile

logger = logging.getLogger(__name__)

CROP_CATALOG: Tuple[CropProfile, ...] = (
    CropProfile(
        id="tunisian-olive",
        display_name="Tunisian Olive",
        scientific_name="Olea europaea L. cv. Chemlali",
        biomass_factor=0.175,
        moisture_content_percent=72.5,
    ),
    CropProfile(
        id="koroneiki-olive",
        display_name="Koroneiki Olive",
        scientific_name="Olea europaea L. cv. Koroneiki",
        biomass_factor=0.20,
        moisture_content_percent=70.0,
    ),
    CropProfile(
        id="leccino-olive",
        display_name="Leccino Olive",
        scientific_name="Olea europaea L. cv. Leccino",
        biomass_factor=0.16,
        moisture_content_percent=72.5,
    ),
    CropProfile(
        id="apple-tree",
        display_name="Apple Tree",
        scientific_name="Malus domestica",
        biomass_factor=0.12,
        moisture_content_percent=80.0,
    ),
)

DEFAULT_CROP: CropProfile = CROP_CATALOG[0]

_BY_ID = {crop.id: crop for crop in CROP_CATALOG}


def lookup(crop_id: str) -> Optional[CropProfile]:
    """Return the profile for *crop_id* or ``None`` when it is not catalogued."""
    return _BY_ID.get(crop_id)


def lookup_or_default(crop_id: str) -> CropProfile:
    """Like :func:`lookup`, but fall back to the first catalog entry."""
    crop = lookup(crop_id)
    if crop is None:
        logger.warning(
            "Unknown crop id %r; falling back to %r.", crop_id, DEFAULT_CROP.id
        )
        return DEFAULT_CROP
    return crop


def crop_ids() -> Tuple[str, ...]:
    return tuple(crop.id for crop in CROP_CATALOG)
