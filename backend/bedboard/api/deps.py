"""
Shared router dependencies.
"""
from fastapi import Depends, HTTPException

from bedboard.core.context import AppContext, get_app_context
from bedboard.core.exceptions import SessionNotFoundError
from bedboard.services.session_service import BoardSession


def get_board(
    session_id: str,
    ctx: AppContext = Depends(get_app_context)
) -> BoardSession:
    """Board session named in the path; 404 when closed or unknown."""
    try:
        return ctx.sessions.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
