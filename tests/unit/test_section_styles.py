"""Unit tests for section style construction."""

import pytest

from folio.contexts.compiling import build_section_styles, resolve_tokens
from folio.contexts.schema import DesignTokens


def styles_for(tokens):
    return build_section_styles(resolve_tokens(DesignTokens.model_validate(tokens)))


@pytest.mark.unit
def test_container_style():
    """Test container spacing, radius and border from resolved tokens."""
    styles = styles_for(
        {
            "colors": {"palette": {"border": "#ABCDEF"}, "borderRadius": "lg"},
            "spacing": {"sectionGap": "xl", "contentPadding": "sm"},
        }
    )

    container = styles.container
    assert container.background_color == "transparent"
    assert container.border_color == "#ABCDEF"
    assert container.border_width_px == 0
    assert container.border_radius_px == 12
    assert container.padding_px == 12
    assert container.margin_bottom_px == 32
    assert container.shadow is None


@pytest.mark.unit
def test_container_shadow_when_set():
    styles = styles_for({"colors": {"shadows": "medium"}})
    assert styles.container.shadow == "0 4px 6px -1px rgba(0, 0, 0, 0.1)"


@pytest.mark.unit
def test_title_and_content_styles():
    """Test heading and body text styles."""
    styles = styles_for(
        {
            "typography": {
                "headingFont": "playfair-display",
                "bodyFont": "lato",
                "fontSize": "lg",
                "headingStyle": "uppercase",
            }
        }
    )

    assert styles.title.font_family.startswith("Playfair Display")
    assert styles.title.font_size_px == 26
    assert styles.title.font_weight == 600
    assert styles.title.text_transform == "uppercase"
    assert styles.title.text_decoration == "none"

    assert styles.content.font_family.startswith("Lato")
    assert styles.content.font_size_px == 18
    assert styles.content.font_weight == 400
    assert styles.content.text_transform == "none"
    assert styles.content.line_height == 1.5
