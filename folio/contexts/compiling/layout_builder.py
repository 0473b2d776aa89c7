"""
Page layout construction.

Derives page geometry and the column set from a document's layout selection
and its resolved spacing. Column width percentages always sum to 100.
"""

from typing import List, Optional

from folio.contexts.compiling import token_tables as tables
from folio.contexts.compiling.ast_data_structure import Column, PageLayout
from folio.contexts.compiling.token_resolver import ResolvedTokens
from folio.contexts.schema.dsl_data_structure import ResumeDsl

SIDEBAR_RIGHT_LAYOUTS = ("two-column", "sidebar-right")


def _distribution(key: Optional[str]):
    return tables.COLUMN_DISTRIBUTIONS.get(
        key or tables.DEFAULT_COLUMN_DISTRIBUTION,
        tables.COLUMN_DISTRIBUTIONS[tables.DEFAULT_COLUMN_DISTRIBUTION],
    )


def build_columns(layout_type: str, distribution: Optional[str] = None) -> List[Column]:
    """
    Column set for a layout type.

    Args:
        layout_type: DSL layout type
        distribution: Requested main/sidebar split (e.g., "65-35"); ignored for
            single-column layouts and for "magazine", which is always 60/40

    Returns:
        Columns ordered as they appear left to right
    """
    if layout_type in SIDEBAR_RIGHT_LAYOUTS:
        main, sidebar = _distribution(distribution)
        return [
            Column(id="main", width_percentage=main, order=0),
            Column(id="sidebar", width_percentage=sidebar, order=1),
        ]

    if layout_type == "sidebar-left":
        main, sidebar = _distribution(distribution)
        return [
            Column(id="sidebar", width_percentage=sidebar, order=0),
            Column(id="main", width_percentage=main, order=1),
        ]

    if layout_type == "magazine":
        main, sidebar = tables.MAGAZINE_COLUMN_DISTRIBUTION
        return [
            Column(id="main", width_percentage=main, order=0),
            Column(id="sidebar", width_percentage=sidebar, order=1),
        ]

    # single-column, compact and anything unrecognized
    return [Column(id="main", width_percentage=100, order=0)]


def build_page_layout(dsl: ResumeDsl, tokens: ResolvedTokens) -> PageLayout:
    """
    Page geometry for a document.

    Margins are uniform on all four sides. The column gap is the resolved
    section gap (px) divided by four, recorded in millimetres.
    """
    layout = dsl.layout
    width, height = tables.PAPER_SIZES.get(
        layout.paper_size, tables.PAPER_SIZES[tables.DEFAULT_PAPER_SIZE]
    )
    margin = tables.MARGINS.get(layout.margins, tables.MARGINS[tables.DEFAULT_MARGIN])

    return PageLayout(
        width_mm=width,
        height_mm=height,
        margin_top_mm=margin,
        margin_bottom_mm=margin,
        margin_left_mm=margin,
        margin_right_mm=margin,
        columns=build_columns(layout.type, layout.column_distribution),
        column_gap_mm=tokens.spacing.section_gap_px / 4,
    )


def map_column_to_id(column: str) -> str:
    """Map a section's column selection to an AST column id (full-width sits in main)."""
    return "sidebar" if column == "sidebar" else "main"
