"""Section style blocks derived from resolved tokens."""

from folio.contexts.compiling.ast_data_structure import ContainerStyle, SectionStyles, TextStyle
from folio.contexts.compiling.token_resolver import ResolvedTokens


def build_section_styles(tokens: ResolvedTokens) -> SectionStyles:
    """
    Container, title and content styles shared by every section.

    A shadow token of "none" yields no shadow (None) on the container.
    """
    typography = tokens.typography
    shadow = tokens.effects.box_shadow

    container = ContainerStyle(
        background_color="transparent",
        border_color=tokens.colors.border,
        border_width_px=0,
        border_radius_px=tokens.effects.border_radius_px,
        padding_px=tokens.spacing.content_padding_px,
        margin_bottom_px=tokens.spacing.section_gap_px,
        shadow=None if shadow == "none" else shadow,
    )

    title = TextStyle(
        font_family=typography.heading_font_family,
        font_size_px=typography.heading_font_size_px,
        line_height=typography.line_height,
        font_weight=typography.heading_font_weight,
        text_transform=typography.heading_text_transform,
        border_bottom=typography.heading_border_bottom,
        border_left=typography.heading_border_left,
        padding_left_px=typography.heading_padding_left_px,
    )

    content = TextStyle(
        font_family=typography.body_font_family,
        font_size_px=typography.base_font_size_px,
        line_height=typography.line_height,
        font_weight=typography.body_font_weight,
        text_transform="none",
    )

    return SectionStyles(container=container, title=title, content=content)
