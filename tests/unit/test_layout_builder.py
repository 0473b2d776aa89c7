"""Unit tests for page layout construction."""

import pytest

from folio.contexts.compiling import build_page_layout, resolve_tokens
from folio.contexts.compiling.layout_builder import build_columns, map_column_to_id
from folio.contexts.schema import validate_or_throw

LAYOUT_TYPES = ["single-column", "two-column", "sidebar-left", "sidebar-right", "magazine", "compact"]
DISTRIBUTIONS = [None, "50-50", "60-40", "65-35", "70-30"]


def make_dsl(layout, tokens=None):
    return validate_or_throw(
        {
            "version": "1.0.0",
            "layout": layout,
            "tokens": tokens or {},
            "sections": [],
        }
    )


@pytest.mark.unit
@pytest.mark.parametrize("layout_type", LAYOUT_TYPES)
@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_column_widths_sum_to_100(layout_type, distribution):
    """Test that every layout's column widths add up to exactly 100."""
    columns = build_columns(layout_type, distribution)
    assert sum(column.width_percentage for column in columns) == 100


@pytest.mark.unit
@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_magazine_always_60_40(distribution):
    """Test that magazine ignores the requested distribution."""
    columns = build_columns("magazine", distribution)
    assert [(c.id, c.width_percentage) for c in columns] == [("main", 60), ("sidebar", 40)]


@pytest.mark.unit
@pytest.mark.parametrize("layout_type", ["single-column", "compact", "unknown-layout"])
def test_single_column_layouts(layout_type):
    columns = build_columns(layout_type, "50-50")
    assert [(c.id, c.width_percentage, c.order) for c in columns] == [("main", 100, 0)]


@pytest.mark.unit
def test_two_column_default_distribution():
    columns = build_columns("two-column")
    assert [(c.id, c.width_percentage, c.order) for c in columns] == [
        ("main", 70, 0),
        ("sidebar", 30, 1),
    ]


@pytest.mark.unit
def test_sidebar_left_puts_sidebar_first():
    columns = build_columns("sidebar-left", "65-35")
    assert [(c.id, c.width_percentage, c.order) for c in columns] == [
        ("sidebar", 35, 0),
        ("main", 65, 1),
    ]


@pytest.mark.unit
@pytest.mark.parametrize(
    "paper,margins,size,margin_mm",
    [
        ("a4", "normal", (210, 297), 15),
        ("letter", "compact", (216, 279), 10),
        ("legal", "wide", (216, 356), 25),
        ("a4", "relaxed", (210, 297), 20),
    ],
)
def test_page_geometry(paper, margins, size, margin_mm):
    """Test paper sizes and uniform margins."""
    dsl = make_dsl({"type": "single-column", "paperSize": paper, "margins": margins})

    page = build_page_layout(dsl, resolve_tokens(dsl.tokens))

    assert (page.width_mm, page.height_mm) == size
    assert page.margin_top_mm == page.margin_bottom_mm == margin_mm
    assert page.margin_left_mm == page.margin_right_mm == margin_mm


@pytest.mark.unit
def test_column_gap_from_section_gap():
    """Test that the column gap is a quarter of the resolved section gap."""
    dsl = make_dsl(
        {"type": "two-column", "paperSize": "a4", "margins": "normal"},
        tokens={"spacing": {"sectionGap": "xl", "density": "spacious"}},
    )

    page = build_page_layout(dsl, resolve_tokens(dsl.tokens))

    assert page.column_gap_mm == 10.0


@pytest.mark.unit
def test_map_column_to_id():
    assert map_column_to_id("sidebar") == "sidebar"
    assert map_column_to_id("main") == "main"
    assert map_column_to_id("full-width") == "main"
