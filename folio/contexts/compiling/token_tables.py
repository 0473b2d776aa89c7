"""
Static lookup tables for design tokens and page geometry.

Maps enumerated token selections to concrete values. Each table has a default
entry used when a selection is not recognized, so resolution never fails.

Used by:
- token_resolver.py (typography, spacing, effects)
- layout_builder.py (paper, margins, column distributions)
"""

from typing import Dict, Tuple

# Font family key -> CSS font stack
FONT_FAMILIES = {
    "inter": "Inter, system-ui, sans-serif",
    "merriweather": "Merriweather, Georgia, serif",
    "roboto": "Roboto, Arial, sans-serif",
    "open-sans": "Open Sans, Arial, sans-serif",
    "playfair-display": "Playfair Display, Georgia, serif",
    "source-serif": "Source Serif Pro, Georgia, serif",
    "lato": "Lato, Arial, sans-serif",
    "poppins": "Poppins, Arial, sans-serif",
}
DEFAULT_FONT_FAMILY = "inter"

# Font size key -> base/heading sizes in px
FONT_SIZES = {
    "sm": {"base": 14, "heading": 18},
    "base": {"base": 16, "heading": 22},
    "lg": {"base": 18, "heading": 26},
}
DEFAULT_FONT_SIZE = "base"

LINE_HEIGHT = 1.5
BODY_FONT_WEIGHT = 400

# Heading style key -> weight, transform, decorations
# Border values use "{accent}" as a placeholder for the palette's primary color
HEADING_STYLES = {
    "bold": {
        "font_weight": 700,
        "text_transform": "none",
        "border_bottom": None,
        "border_left": None,
        "padding_left_px": 0,
    },
    "underline": {
        "font_weight": 600,
        "text_transform": "none",
        "border_bottom": "2px solid {accent}",
        "border_left": None,
        "padding_left_px": 0,
    },
    "uppercase": {
        "font_weight": 600,
        "text_transform": "uppercase",
        "border_bottom": None,
        "border_left": None,
        "padding_left_px": 0,
    },
    "accent-border": {
        "font_weight": 700,
        "text_transform": "none",
        "border_bottom": None,
        "border_left": "4px solid {accent}",
        "padding_left_px": 12,
    },
    "minimal": {
        "font_weight": 500,
        "text_transform": "none",
        "border_bottom": None,
        "border_left": None,
        "padding_left_px": 0,
    },
}
DEFAULT_HEADING_STYLE = "bold"

# Spacing key -> px
SPACING_SIZES = {
    "sm": 12,
    "md": 16,
    "lg": 24,
    "xl": 32,
}
DEFAULT_SECTION_GAP_PX = 24
DEFAULT_ITEM_GAP_PX = 16
DEFAULT_CONTENT_PADDING_PX = 16

# Density key -> multiplicative factor applied to spacing
DENSITY_FACTORS = {
    "compact": 0.75,
    "comfortable": 1.0,
    "spacious": 1.25,
}
DEFAULT_DENSITY_FACTOR = 1.0

# Border radius key -> px
BORDER_RADII = {
    "none": 0,
    "sm": 4,
    "md": 8,
    "lg": 12,
    "full": 9999,
}
DEFAULT_BORDER_RADIUS_PX = 8

# Shadow key -> CSS box-shadow
SHADOWS = {
    "none": "none",
    "subtle": "0 1px 2px rgba(0, 0, 0, 0.05)",
    "medium": "0 4px 6px -1px rgba(0, 0, 0, 0.1)",
    "strong": "0 10px 15px -3px rgba(0, 0, 0, 0.1)",
}
DEFAULT_SHADOW = "none"

# Gradient direction key -> CSS direction
GRADIENT_DIRECTIONS = {
    "to-right": "to right",
    "to-bottom": "to bottom",
    "to-bottom-right": "135deg",
}
DEFAULT_GRADIENT_DIRECTION = "to right"

# Paper size key -> (width, height) in mm
PAPER_SIZES: Dict[str, Tuple[int, int]] = {
    "a4": (210, 297),
    "letter": (216, 279),
    "legal": (216, 356),
}
DEFAULT_PAPER_SIZE = "a4"

# Margin key -> mm, applied to all four sides
MARGINS = {
    "compact": 10,
    "normal": 15,
    "relaxed": 20,
    "wide": 25,
}
DEFAULT_MARGIN = "normal"

# Column distribution key -> (main, sidebar) width percentages
COLUMN_DISTRIBUTIONS: Dict[str, Tuple[int, int]] = {
    "50-50": (50, 50),
    "60-40": (60, 40),
    "65-35": (65, 35),
    "70-30": (70, 30),
}
DEFAULT_COLUMN_DISTRIBUTION = "70-30"
MAGAZINE_COLUMN_DISTRIBUTION = (60, 40)
