"""Template related dependency providers."""

from fastapi import Depends, Request

from labelsheet.core.container import ApplicationContainer
from labelsheet.core.security import get_current_owner
from labelsheet.modules.templates import TemplateRepository


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_template_repository(
    owner_id: str = Depends(get_current_owner),
    container: ApplicationContainer = Depends(get_container),
) -> TemplateRepository:
    return container.template_repository(owner_id)


__all__ = [
    "get_container",
    "get_template_repository",
]
