"""
Design Token Resolution

Expands a document's compact token selections into concrete values:

    spacing.density "compact" + sectionGap "md"  ->  section_gap_px 12
    colors.borderRadius "lg"                      ->  border_radius_px 12
    typography.fontSize "base"                    ->  base_font_size_px 16

Resolution is pure and total: unrecognized selections fall back to the table's
default entry instead of failing.
"""

from dataclasses import dataclass
from typing import Optional

from folio.contexts.compiling import token_tables as tables
from folio.contexts.schema.dsl_data_structure import DesignTokens


@dataclass(frozen=True)
class ResolvedTypography:
    heading_font_family: str
    body_font_family: str
    base_font_size_px: int
    heading_font_size_px: int
    line_height: float
    heading_font_weight: int
    body_font_weight: int
    heading_text_transform: str
    heading_border_bottom: Optional[str]
    heading_border_left: Optional[str]
    heading_padding_left_px: int


@dataclass(frozen=True)
class ResolvedColors:
    primary: str
    secondary: str
    background: str
    surface: str
    text_primary: str
    text_secondary: str
    text_accent: str
    border: str
    divider: str


@dataclass(frozen=True)
class ResolvedSpacing:
    section_gap_px: int
    item_gap_px: int
    content_padding_px: int
    density_factor: float


@dataclass(frozen=True)
class ResolvedEffects:
    border_radius_px: int
    box_shadow: str
    background_gradient: Optional[str] = None


@dataclass(frozen=True)
class ResolvedTokens:
    """Concrete token values; downstream stages need no further lookups."""

    typography: ResolvedTypography
    colors: ResolvedColors
    spacing: ResolvedSpacing
    effects: ResolvedEffects


def _scaled_spacing(key: str, default_px: int, density_factor: float) -> int:
    return int(round(tables.SPACING_SIZES.get(key, default_px) * density_factor))


def _resolve_typography(tokens: DesignTokens) -> ResolvedTypography:
    typography = tokens.typography
    default_family = tables.FONT_FAMILIES[tables.DEFAULT_FONT_FAMILY]
    font_size = tables.FONT_SIZES.get(
        typography.font_size, tables.FONT_SIZES[tables.DEFAULT_FONT_SIZE]
    )
    heading = tables.HEADING_STYLES.get(
        typography.heading_style, tables.HEADING_STYLES[tables.DEFAULT_HEADING_STYLE]
    )
    accent = tokens.colors.palette.primary

    def decorate(border: Optional[str]) -> Optional[str]:
        return border.format(accent=accent) if border else None

    return ResolvedTypography(
        heading_font_family=tables.FONT_FAMILIES.get(typography.heading_font, default_family),
        body_font_family=tables.FONT_FAMILIES.get(typography.body_font, default_family),
        base_font_size_px=font_size["base"],
        heading_font_size_px=font_size["heading"],
        line_height=tables.LINE_HEIGHT,
        heading_font_weight=heading["font_weight"],
        body_font_weight=tables.BODY_FONT_WEIGHT,
        heading_text_transform=heading["text_transform"],
        heading_border_bottom=decorate(heading["border_bottom"]),
        heading_border_left=decorate(heading["border_left"]),
        heading_padding_left_px=heading["padding_left_px"],
    )


def _resolve_colors(tokens: DesignTokens) -> ResolvedColors:
    palette = tokens.colors.palette
    return ResolvedColors(
        primary=palette.primary,
        secondary=palette.secondary,
        background=palette.background,
        surface=palette.surface,
        text_primary=palette.text.primary,
        text_secondary=palette.text.secondary,
        text_accent=palette.text.accent,
        border=palette.border,
        divider=palette.divider,
    )


def _resolve_spacing(tokens: DesignTokens) -> ResolvedSpacing:
    spacing = tokens.spacing
    density_factor = tables.DENSITY_FACTORS.get(spacing.density, tables.DEFAULT_DENSITY_FACTOR)
    return ResolvedSpacing(
        section_gap_px=_scaled_spacing(
            spacing.section_gap, tables.DEFAULT_SECTION_GAP_PX, density_factor
        ),
        item_gap_px=_scaled_spacing(spacing.item_gap, tables.DEFAULT_ITEM_GAP_PX, density_factor),
        content_padding_px=_scaled_spacing(
            spacing.content_padding, tables.DEFAULT_CONTENT_PADDING_PX, density_factor
        ),
        density_factor=density_factor,
    )


def _resolve_effects(tokens: DesignTokens) -> ResolvedEffects:
    colors = tokens.colors
    gradient = None
    if colors.gradients is not None and colors.gradients.enabled:
        direction = tables.GRADIENT_DIRECTIONS.get(
            colors.gradients.direction, tables.DEFAULT_GRADIENT_DIRECTION
        )
        palette = colors.palette
        gradient = f"linear-gradient({direction}, {palette.primary}, {palette.secondary})"

    return ResolvedEffects(
        border_radius_px=tables.BORDER_RADII.get(
            colors.border_radius, tables.DEFAULT_BORDER_RADIUS_PX
        ),
        box_shadow=tables.SHADOWS.get(colors.shadows, tables.DEFAULT_SHADOW),
        background_gradient=gradient,
    )


def resolve_tokens(tokens: DesignTokens) -> ResolvedTokens:
    """
    Resolve token selections to concrete values.

    Args:
        tokens: Token selections from a validated document

    Returns:
        ResolvedTokens with pixel sizes, colors, font stacks and CSS effect strings
    """
    return ResolvedTokens(
        typography=_resolve_typography(tokens),
        colors=_resolve_colors(tokens),
        spacing=_resolve_spacing(tokens),
        effects=_resolve_effects(tokens),
    )
