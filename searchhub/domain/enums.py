"""Domain enumerations for searchhub.

Enums represent fixed sets of domain values (result content types,
workspace resource kinds).
"""

from enum import Enum


class ContentType(str, Enum):
    """Kind of item a search result points at.

    PLANNER is only produced by the workspace search variant; the unified
    search path filters it out before responding.
    """

    FILE = "file"
    FOLDER = "folder"
    EMAIL = "email"
    TEAMS_MESSAGE = "teams-message"
    PLANNER = "planner"


class ResourceType(str, Enum):
    """Kind of Microsoft 365 resource a workspace can be linked to."""

    SHAREPOINT = "sharepoint"
    TEAMS = "teams"
    PLANNER = "planner"
