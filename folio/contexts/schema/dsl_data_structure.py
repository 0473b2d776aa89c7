"""
Resume DSL Data Structures

Defines the versioned, declarative resume document: page layout, design-token
selections, section configuration and per-item overrides.

Documents arrive as plain mappings with camelCase keys (e.g. ``paperSize``,
``itemOverrides``). Models accept either the camelCase alias or the snake_case
attribute name, and are frozen: compiler stages never mutate a document, and
migrations produce new ones via ``model_copy``.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

CURRENT_DSL_VERSION = "1.0.0"
VERSION_PATTERN = r"^\d+\.\d+\.\d+$"
# Hex, rgb()/rgba()/hsl()/hsla() with numeric arguments, or a bare CSS colour name
COLOR_PATTERN = r"^(#[0-9a-fA-F]{3,8}|(rgb|rgba|hsl|hsla)\([0-9.,%\s]+\)|[a-zA-Z]+)$"

LayoutType = Literal[
    "single-column", "two-column", "sidebar-left", "sidebar-right", "magazine", "compact"
]
PaperSize = Literal["a4", "letter", "legal"]
MarginSize = Literal["compact", "normal", "relaxed", "wide"]
ColumnDistribution = Literal["50-50", "60-40", "65-35", "70-30"]
PageBreakBehavior = Literal["auto", "section-aware", "manual"]
PageNumberPosition = Literal["bottom-center", "bottom-right", "top-right"]

FontSize = Literal["sm", "base", "lg"]
HeadingStyle = Literal["bold", "underline", "uppercase", "accent-border", "minimal"]
BorderRadius = Literal["none", "sm", "md", "lg", "full"]
Shadow = Literal["none", "subtle", "medium", "strong"]
GradientDirection = Literal["to-right", "to-bottom", "to-bottom-right"]
Density = Literal["compact", "comfortable", "spacious"]
SpacingSize = Literal["sm", "md", "lg", "xl"]

SectionColumn = Literal["main", "sidebar", "full-width"]

ColorValue = Annotated[str, Field(pattern=COLOR_PATTERN)]


class DslModel(BaseModel):
    """Base for all DSL models: alias-or-name population, immutable."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


# =============================================================================
# Layout
# =============================================================================


class LayoutConfig(DslModel):
    type: LayoutType
    paper_size: PaperSize = Field(alias="paperSize")
    margins: MarginSize
    column_distribution: Optional[ColumnDistribution] = Field(
        default=None, alias="columnDistribution"
    )
    page_break_behavior: PageBreakBehavior = Field(default="auto", alias="pageBreakBehavior")
    show_page_numbers: bool = Field(default=False, alias="showPageNumbers")
    page_number_position: PageNumberPosition = Field(
        default="bottom-center", alias="pageNumberPosition"
    )


# =============================================================================
# Design tokens (selections, not values)
# =============================================================================


class TypographyTokens(DslModel):
    # Font keys are free-form; unknown families fall back at resolution time
    heading_font: str = Field(default="inter", alias="headingFont", min_length=1)
    body_font: str = Field(default="inter", alias="bodyFont", min_length=1)
    font_size: FontSize = Field(default="base", alias="fontSize")
    heading_style: HeadingStyle = Field(default="bold", alias="headingStyle")


class TextPalette(DslModel):
    primary: ColorValue = "#1E293B"
    secondary: ColorValue = "#64748B"
    accent: ColorValue = "#3B82F6"


class ColorPalette(DslModel):
    primary: ColorValue = "#3B82F6"
    secondary: ColorValue = "#64748B"
    background: ColorValue = "#FFFFFF"
    surface: ColorValue = "#F8FAFC"
    text: TextPalette = Field(default_factory=TextPalette)
    border: ColorValue = "#E2E8F0"
    divider: ColorValue = "#F1F5F9"


class GradientConfig(DslModel):
    enabled: bool = False
    direction: GradientDirection = "to-right"


class ColorTokens(DslModel):
    palette: ColorPalette = Field(default_factory=ColorPalette)
    border_radius: BorderRadius = Field(default="md", alias="borderRadius")
    shadows: Shadow = "none"
    gradients: Optional[GradientConfig] = None


class SpacingTokens(DslModel):
    density: Density = "comfortable"
    section_gap: SpacingSize = Field(default="lg", alias="sectionGap")
    item_gap: SpacingSize = Field(default="md", alias="itemGap")
    content_padding: SpacingSize = Field(default="md", alias="contentPadding")


class DesignTokens(DslModel):
    typography: TypographyTokens = Field(default_factory=TypographyTokens)
    colors: ColorTokens = Field(default_factory=ColorTokens)
    spacing: SpacingTokens = Field(default_factory=SpacingTokens)


# =============================================================================
# Sections and overrides
# =============================================================================


class SectionConfig(DslModel):
    id: str = Field(min_length=1)
    visible: bool
    order: int
    column: SectionColumn


class ItemOverride(DslModel):
    item_id: str = Field(alias="itemId", min_length=1)
    visible: bool = True
    order: Optional[int] = None


# =============================================================================
# Document
# =============================================================================


class ResumeDsl(DslModel):
    """
    A complete resume DSL document.

    Attributes:
        version: Schema version tag (MAJOR.MINOR.PATCH)
        layout: Page layout selection
        tokens: Design-token selections
        sections: Section configuration (ids unique, see validator)
        item_overrides: Per-section item visibility/order adjustments
    """

    version: str = Field(pattern=VERSION_PATTERN)
    layout: LayoutConfig
    tokens: DesignTokens
    sections: List[SectionConfig]
    item_overrides: Dict[str, List[ItemOverride]] = Field(
        default_factory=dict, alias="itemOverrides"
    )

    def overrides_for(self, section_id: str) -> List[ItemOverride]:
        """Item overrides registered for a section (empty when none)."""
        return list(self.item_overrides.get(section_id, []))

    def section_ids(self) -> List[str]:
        return [section.id for section in self.sections]

    def to_document(self) -> Dict[str, Any]:
        """Plain camelCase mapping, the form documents are stored and exchanged in."""
        return self.model_dump(by_alias=True, exclude_none=True)
