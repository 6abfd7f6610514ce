"""
API Router.

Aggregates all endpoint routers. The archive router is included before
the notes router so `/notes/archive` is never captured by `/notes/{note_id}`.
"""

from fastapi import APIRouter

from notepad.api import health
from notepad.api.endpoints import archive, auth, notes

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(archive.router, prefix="/notes/archive", tags=["archive"])
router.include_router(notes.router, prefix="/notes", tags=["notes"])
