"""
Theme layering for stored resumes.

A stored resume's effective DSL is its active theme's document with the
owner's customizations layered on top:

    theme:   {"layout": {"type": "two-column", "margins": "normal"}, ...}
    custom:  {"layout": {"margins": "wide"}}
    result:  {"layout": {"type": "two-column", "margins": "wide"}, ...}

Mappings merge recursively with the custom value winning; lists (sections,
item overrides) are replaced as a whole rather than merged element-wise.
"""

from typing import Any, Dict, Optional

from omegaconf import OmegaConf


def merge_dsl(
    base: Optional[Dict[str, Any]], overrides: Optional[Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Deep-merge a custom DSL over a theme DSL.

    Args:
        base: Theme document (None treated as empty)
        overrides: Customizations (None treated as empty)

    Returns:
        New plain dict; neither input is modified
    """
    merged = OmegaConf.merge(OmegaConf.create(base or {}), OmegaConf.create(overrides or {}))
    return OmegaConf.to_container(merged, resolve=False)
