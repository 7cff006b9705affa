"""Expose the Ideas FastAPI router."""

from .router import router
from .workspace import IdeaWorkspace, get_workspace, reset_workspaces

__all__ = ["router", "IdeaWorkspace", "get_workspace", "reset_workspaces"]
