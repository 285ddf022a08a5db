"""
PlantUML sequence diagram renderer.
"""

from typing import Iterable

from logseq.core.config import DEFAULT_TITLE
from logseq.core.models import Activity

__all__ = ["render_plantuml", "render_activity"]


def render_activity(activity: Activity) -> str:
    """Render one activity as a PlantUML arrow."""
    return f"{activity.source} -> {activity.target}: {activity.message}"


def render_plantuml(activities: Iterable[Activity], title: str = DEFAULT_TITLE) -> str:
    """
    Render activities as a PlantUML document.

    Args:
        activities: Activities in diagram order
        title: Diagram title

    Returns:
        Markup from `@startuml` to `@enduml`, without a trailing newline
    """
    lines = ["@startuml", "", f"title {title}", ""]
    lines.extend(render_activity(activity) for activity in activities)
    lines.extend(["", "@enduml"])
    return "\n".join(lines)
