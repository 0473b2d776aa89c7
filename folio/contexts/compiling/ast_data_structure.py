"""
Resume AST Data Structures

Defines the compiled, renderer-ready tree produced from a DSL document:
page geometry, placed and styled sections, and global styles.

The AST is pure structural data. Layout is fully decided and tokens are
resolved; renderers (HTML, PDF) only draw it. Section data is a tagged mapping
({"type": ..., "items": [...]} or {"type": ..., "data": {...}}) produced by
section_compilers.py.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Column:
    """
    Column within a page.

    Attributes:
        id: Column identifier ("main" or "sidebar")
        width_percentage: Share of the content width (all columns sum to 100)
        order: Left-to-right position (0 first)
    """

    id: str
    width_percentage: int
    order: int


@dataclass
class PageLayout:
    """Page geometry in millimetres."""

    width_mm: int
    height_mm: int
    margin_top_mm: int
    margin_bottom_mm: int
    margin_left_mm: int
    margin_right_mm: int
    columns: List[Column] = field(default_factory=list)
    column_gap_mm: float = 0.0


@dataclass
class ContainerStyle:
    background_color: str
    border_color: str
    border_width_px: int
    border_radius_px: int
    padding_px: int
    margin_bottom_px: int
    shadow: Optional[str] = None


@dataclass
class TextStyle:
    font_family: str
    font_size_px: int
    line_height: float
    font_weight: int
    text_transform: str
    text_decoration: str = "none"
    border_bottom: Optional[str] = None
    border_left: Optional[str] = None
    padding_left_px: int = 0


@dataclass
class SectionStyles:
    container: ContainerStyle
    title: TextStyle
    content: TextStyle


@dataclass
class PlacedSection:
    """
    A section placed into a layout column.

    Attributes:
        section_id: Section identifier from the DSL (e.g., "experience")
        column_id: Target column ("main" or "sidebar")
        order: Display order from the DSL
        data: Tagged section data ({"type": ..., "items"|"data": ...})
        styles: Visual style blocks for container, title and content
    """

    section_id: str
    column_id: str
    order: int
    data: Dict[str, Any]
    styles: SectionStyles


@dataclass
class AstMeta:
    version: str
    target: str


@dataclass
class GlobalStyles:
    background: str
    text_primary: str
    text_secondary: str
    accent: str


@dataclass
class ResumeAst:
    """Root of the compiled tree."""

    meta: AstMeta
    page: PageLayout
    sections: List[PlacedSection]
    global_styles: GlobalStyles

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict form (JSON-serializable)."""
        return asdict(self)

    def get_section(self, section_id: str) -> Optional[PlacedSection]:
        """First placed section with the given id, or None."""
        for section in self.sections:
            if section.section_id == section_id:
                return section
        return None
