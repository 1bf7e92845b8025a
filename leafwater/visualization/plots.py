# leafwater/visualization/plots.py
"""Мини‑обёртки над matplotlib для отображения результатов.

Функции строят *интерактивные* графики (``plt.show()``) и не возвращают
объекты Figure/Axes, чтобы оставить API как можно более простым.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import pandas as pd

# ---------------------------------------------------------------------------
# 1) Сравнение культур
# ---------------------------------------------------------------------------

def plot_crop_comparison(df: pd.DataFrame) -> None:
    """Bar chart of the water volume per crop (``compare_crops`` output)."""
    bars = plt.bar(df["crop"], df["volume_l"])
    plt.bar_label(bars, labels=list(df["formatted"]))
    plt.title("Объём извлекаемой воды по культурам")
    plt.xlabel("Культура")
    plt.ylabel("V_w, л")
    plt.grid(True, axis="y")
    plt.show()

# ---------------------------------------------------------------------------
# 2) Зависимость от массы урожая
# ---------------------------------------------------------------------------

def plot_mass_sweep(df: pd.DataFrame) -> None:
    """Линия V_w(M_h) (``sweep_mass`` output)."""
    plt.plot(df["total_mass_kg"], df["volume_l"], marker="o")
    plt.title("Объём воды в зависимости от массы урожая")
    plt.xlabel("M_h, кг")
    plt.ylabel("V_w, л")
    plt.grid(True)
    plt.show()
