"""
Ambient UI context endpoints.
"""
from fastapi import APIRouter, Depends

from bedboard.core.context import AppContext, get_app_context
from bedboard.schemas.session import SidebarRequest, UIContextView

router = APIRouter()


def _context_view(ctx: AppContext) -> UIContextView:
    return UIContextView(
        sidebar_collapsed=ctx.ui.sidebar_collapsed,
        now=ctx.now().isoformat(),
        open_sessions=len(ctx.sessions),
    )


@router.get("/context", response_model=UIContextView)
def get_ui_context(ctx: AppContext = Depends(get_app_context)):
    """Sidebar flag, server clock and open session count."""
    return _context_view(ctx)


@router.put("/sidebar", response_model=UIContextView)
def set_sidebar(
    request: SidebarRequest,
    ctx: AppContext = Depends(get_app_context)
):
    """Collapses or expands the sidebar."""
    ctx.ui.sidebar_collapsed = request.collapsed
    return _context_view(ctx)
