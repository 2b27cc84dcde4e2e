"""Tests for the printable recipe breakdown."""

from pe_calculator.domain.recipe import Ingredient
from pe_calculator.services.report import (
    DEFAULT_TITLE,
    build_report,
    format_report_text,
    render_report_html,
)
from pe_calculator.services.totals import compute_grand_totals


def _report(name: str, rows: list[Ingredient]):  # type: ignore[no-untyped-def]
    return build_report(name, rows, compute_grand_totals(rows))


def test_blank_names_fall_back(chicken: Ingredient) -> None:
    report = _report("  ", [chicken, Ingredient.empty(1)])

    assert report.title == DEFAULT_TITLE
    assert [row.name for row in report.rows] == ["Chicken", "Unnamed ingredient"]
    assert report.ratio == "2.86"


def test_row_snapshot_sanitizes_quantities() -> None:
    report = _report("", [Ingredient(id=3, protein="-2", fat="x", servings="2")])

    row = report.rows[0]
    assert (row.per_protein, row.per_fat, row.servings) == (0.0, 0.0, 2.0)
    assert row.totals.protein == 0.0


def test_format_report_text(chicken: Ingredient) -> None:
    text = format_report_text(_report("Chili", [chicken]))

    assert text.splitlines()[0] == "Chili"
    assert "- Chicken: P 20.00 / F 5.00 / C 2.00 x 1.00" in text
    assert "Total protein: 20.00 g" in text
    assert text.endswith("P:E ratio: 2.86")


def test_render_report_html_escapes_names() -> None:
    rows = [Ingredient(id=0, name="<b>Eggs</b>", protein="6", fat="5")]

    html = render_report_html(_report("Mac & cheese", rows))

    assert "<title>Mac &amp; cheese</title>" in html
    assert "&lt;b&gt;Eggs&lt;/b&gt;" in html
    assert "<strong>1.20</strong>" in html
