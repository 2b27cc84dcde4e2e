"""Static recipe breakdown for printing and export."""

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

from pe_calculator.domain.recipe import (
    UNNAMED_INGREDIENT,
    Ingredient,
    MacroTotals,
    RowSnapshot,
)
from pe_calculator.services.quantities import format_number, format_ratio, parse_quantity

DEFAULT_TITLE = "Recipe breakdown"


@dataclass(frozen=True)
class RecipeReport:
    """Everything the printed breakdown shows."""

    title: str
    rows: list[RowSnapshot]
    totals: MacroTotals
    ratio: str


def row_snapshot(ingredient: Ingredient) -> RowSnapshot:
    """Build the sanitized display view of a row."""
    return RowSnapshot(
        id=ingredient.id,
        name=ingredient.name if ingredient.name.strip() else UNNAMED_INGREDIENT,
        per_protein=parse_quantity(ingredient.protein),
        per_fat=parse_quantity(ingredient.fat),
        per_net_carbs=parse_quantity(ingredient.net_carbs),
        servings=parse_quantity(ingredient.servings),
    )


def build_report(
    name: str, ingredients: Iterable[Ingredient], totals: MacroTotals
) -> RecipeReport:
    """Assemble a report from a ledger snapshot and its computed totals."""
    return RecipeReport(
        title=name if name.strip() else DEFAULT_TITLE,
        rows=[row_snapshot(ingredient) for ingredient in ingredients],
        totals=totals,
        ratio=format_ratio(totals.as_tuple()),
    )


def format_report_text(report: RecipeReport) -> str:
    """Format a report as plain text."""
    lines = [report.title, ""]
    for row in report.rows:
        lines.append(
            f"- {row.name}: {_macros(row.per_protein, row.per_fat, row.per_net_carbs)}"
            f" x {format_number(row.servings)}"
            f" = {_macros(*row.totals.as_tuple())}"
            f" (P:E {format_ratio(row.totals.as_tuple())})"
        )
    lines.extend(
        [
            "",
            f"Total protein: {format_number(report.totals.protein)} g",
            f"Total fat: {format_number(report.totals.fat)} g",
            f"Total net carbs: {format_number(report.totals.net_carbs)} g",
            f"P:E ratio: {report.ratio}",
        ]
    )
    return "\n".join(lines)


def render_report_html(report: RecipeReport) -> str:
    """Render a report as a standalone printable HTML page."""
    rows = "\n".join(
        "        <tr>"
        f"<td>{escape(row.name)}</td>"
        f"<td>{_macros(row.per_protein, row.per_fat, row.per_net_carbs)}</td>"
        f"<td>{format_number(row.servings)}</td>"
        f"<td>{_macros(*row.totals.as_tuple())}</td>"
        f"<td>{format_ratio(row.totals.as_tuple())}</td>"
        "</tr>"
        for row in report.rows
    )
    return _REPORT_HTML.format(
        title=escape(report.title),
        rows=rows,
        protein=format_number(report.totals.protein),
        fat=format_number(report.totals.fat),
        net_carbs=format_number(report.totals.net_carbs),
        ratio=report.ratio,
    )


def _macros(protein: float, fat: float, net_carbs: float) -> str:
    return (
        f"P {format_number(protein)} / F {format_number(fat)}"
        f" / C {format_number(net_carbs)}"
    )


_REPORT_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <style>
      body {{ font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }}
      table {{ border-collapse: collapse; width: 100%; }}
      th, td {{ border: 1px solid #ccc; padding: 0.4rem 0.6rem; text-align: left; }}
      .totals div {{ margin-top: 0.4rem; }}
    </style>
  </head>
  <body>
    <h1>{title}</h1>
    <table>
      <thead>
        <tr>
          <th>Ingredient</th>
          <th>Per serving (g)</th>
          <th>Servings used</th>
          <th>In recipe (g)</th>
          <th>P:E ratio</th>
        </tr>
      </thead>
      <tbody>
{rows}
      </tbody>
    </table>
    <div class="totals">
      <div><span>Total protein</span> <strong>{protein} g</strong></div>
      <div><span>Total fat</span> <strong>{fat} g</strong></div>
      <div><span>Total net carbs</span> <strong>{net_carbs} g</strong></div>
      <div><span>P:E ratio</span> <strong>{ratio}</strong></div>
    </div>
  </body>
</html>
"""
