from fastapi import APIRouter

from labelsheet.interfaces.http.routers import auth, templates


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(templates.router, prefix="/templates", tags=["templates"])
    return router


__all__ = [
    "create_api_router",
]
