"""
Ambient application context.

Holds what the browser used to keep in globals: the clock, the sidebar
flag and the open board sessions. One instance is created at startup and
handed to the routers through `get_app_context`.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from fastapi import Request

from bedboard.services.session_service import BoardSessionStore

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local time (naive)."""
    return datetime.now()


@dataclass
class UIContext:
    """Layout state shared by every tab."""
    sidebar_collapsed: bool = False


@dataclass
class AppContext:
    """
    Process-wide context.

    Tests build their own instance with a fixed clock.
    """
    clock: Clock = system_clock
    ui: UIContext = field(default_factory=UIContext)
    sessions: BoardSessionStore = field(default_factory=BoardSessionStore)

    def now(self) -> datetime:
        return self.clock()


def get_app_context(request: Request) -> AppContext:
    """
    FastAPI dependency returning the context stored on the application.

    Usage:
        @router.get("/endpoint")
        def endpoint(ctx: AppContext = Depends(get_app_context)):
            ...
    """
    return request.app.state.context
