"""
Top‑level router for version 1 of the API.

This router aggregates the per‑resource routers (users, posts,
displays, incognito sessions, profiles and reactions) under a unified
prefix.  When a new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    users,
    posts,
    displays,
    incognitos,
    profiles,
    reactions,
)

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(displays.router, prefix="/displays", tags=["displays"])
router.include_router(incognitos.router, prefix="/incognitos", tags=["incognitos"])
router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
router.include_router(reactions.router, prefix="/reactions", tags=["reactions"])
