"""
Diagram renderers.
"""

from logseq.rendering.plantuml import render_plantuml, render_activity

__all__ = ["render_plantuml", "render_activity"]
