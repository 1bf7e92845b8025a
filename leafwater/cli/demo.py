# leafwater/cli/demo.py   (терминальный интерфейс)
"""Command-line front-end of the leaf water extraction calculator."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from leafwater import (
    CROP_CATALOG,
    ExtractionCalculator,
    InputForm,
    WaterYieldAnalyzer,
    crop_ids,
)
from leafwater.core.validation import InvalidFormError
from leafwater.domain import references

app = typer.Typer(
    name="leafwater",
    help="Estimate the water recoverable from olive and apple leaf biomass.",
    add_completion=False,
)
console = Console()

_CROP_HELP = "Crop id: " + ", ".join(crop_ids())


@app.callback()
def _setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def _build_form(
    crop: str,
    mass: Optional[str],
    loss: Optional[str],
    processing: Optional[str],
    efficiency: Optional[str],
    moisture: Optional[str],
    biomass_factor: Optional[str],
) -> ExtractionCalculator:
    calc = ExtractionCalculator(InputForm.default())
    calc.select_crop(crop)
    calc.update_field("total_mass_kg", mass)
    # незаданные опции оставляют значения формы по умолчанию
    for name, value in (
        ("loss_fraction_percent", loss),
        ("processing_factor", processing),
        ("recovery_efficiency_percent", efficiency),
        ("moisture_content_percent", moisture),
        ("biomass_factor", biomass_factor),
    ):
        if value is not None:
            calc.update_field(name, value)
    return calc


def _print_errors(errors: dict) -> None:
    for field, message in errors.items():
        console.print(f"[red]✗ {field}[/red]: {message}")


@app.command()
def calculate(
    mass: Optional[str] = typer.Option(
        None, "--mass", "-m", help="Total harvested mass of olives or apples (kg)"
    ),
    crop: str = typer.Option(CROP_CATALOG[0].id, "--crop", "-c", help=_CROP_HELP),
    loss: Optional[str] = typer.Option(None, "--loss", help="Loss fraction (%), default 20"),
    processing: Optional[str] = typer.Option(
        None, "--processing", help="Processing factor E_p, default 1.0"
    ),
    efficiency: Optional[str] = typer.Option(
        None, "--efficiency", help="Recovery efficiency (%), default 50"
    ),
    moisture: Optional[str] = typer.Option(
        None, "--moisture", help="Moisture content (%), default from crop"
    ),
    biomass_factor: Optional[str] = typer.Option(
        None, "--biomass-factor", help="Biomass factor F_b, default from crop"
    ),
) -> None:
    """Estimate the water volume for one set of inputs."""
    calc = _build_form(crop, mass, loss, processing, efficiency, moisture, biomass_factor)
    selected = calc.selected_crop
    if calc.calculate() is None:
        _print_errors(calc.errors)
        if calc.form.total_mass_kg is None:
            console.print(f"Enter {selected.fruit_label} mass in kg with --mass")
        raise typer.Exit(code=1)

    console.print(f"[bold]Estimated Water Volume[/bold]: {calc.formatted_result}")
    console.print(
        f"{selected.display_name} ([italic]{selected.scientific_name}[/italic]) | "
        f"F_b: {calc.form.biomass_factor} kg leaves/kg {selected.fruit_label}s | "
        f"MC: {calc.form.moisture_content_percent}%"
    )
    citations = references.sources_for_crop(selected.id)
    if citations:
        console.print("Sources:")
        for citation in citations:
            console.print(f"  {citation.label}: {citation.url}")


@app.command()
def crops() -> None:
    """List the crop catalog."""
    table = Table(title="Crop catalog")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Scientific name", style="italic")
    table.add_column("F_b", justify="right")
    table.add_column("MC, %", justify="right")
    for crop in CROP_CATALOG:
        table.add_row(
            crop.id,
            crop.display_name,
            crop.scientific_name,
            str(crop.biomass_factor),
            str(crop.moisture_content_percent),
        )
    console.print(table)


@app.command()
def compare(
    mass: Optional[str] = typer.Option(None, "--mass", "-m", help="Total harvested mass (kg)"),
    loss: Optional[str] = typer.Option(None, "--loss", help="Loss fraction (%)"),
    processing: Optional[str] = typer.Option(None, "--processing", help="Processing factor E_p"),
    efficiency: Optional[str] = typer.Option(None, "--efficiency", help="Recovery efficiency (%)"),
    plot: bool = typer.Option(False, "--plot", help="Show a bar chart"),
) -> None:
    """Compare the water volume across all catalogued crops."""
    calc = _build_form(CROP_CATALOG[0].id, mass, loss, processing, efficiency, None, None)
    analyzer = WaterYieldAnalyzer(calc.form)
    try:
        df = analyzer.compare_crops()
    except InvalidFormError as exc:
        _print_errors(dict(exc.result))
        raise typer.Exit(code=1)

    table = Table(title=f"Water yield for {calc.form.total_mass_kg} kg")
    for column in ("Crop", "F_b", "MC, %", "Volume"):
        table.add_column(column, justify="left" if column == "Crop" else "right")
    for row in df.itertuples(index=False):
        table.add_row(
            row.crop,
            str(row.biomass_factor),
            str(row.moisture_content_percent),
            row.formatted,
        )
    console.print(table)
    if plot:
        analyzer.plot_crop_comparison()


@app.command()
def sources() -> None:
    """Show the formula and its literature sources."""
    console.print(f"[bold]{references.FORMULA}[/bold]")
    console.print(references.FORMULA_CAPTION)
    for term in references.FORMULA_TERMS:
        console.print(f"  [bold]{term.symbol}[/bold]: {term.meaning}")

    console.print("\n[bold]Equation Sources[/bold]")
    for group in references.EQUATION_SOURCES:
        console.print(f"  {group.title}")
        for citation in group.citations:
            console.print(f"    {citation.label}: {citation.url}")

    console.print("\n[bold]Plant Data Sources[/bold]")
    for group in references.PLANT_DATA_SOURCES.values():
        console.print(f"  {group.title}")
        for citation in group.citations:
            console.print(f"    {citation.label}: {citation.url}")

    console.print(f"\n[italic]Note: {references.DISCLAIMER}[/italic]")


def main(argv: Optional[List[str]] = None) -> None:
    app(args=argv)


if __name__ == "__main__":
    main()
