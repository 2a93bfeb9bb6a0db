"""Label sheet template endpoints scoped to the signed-in user."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from labelsheet.interfaces.http.deps import get_template_repository
from labelsheet.modules.templates import (
    TemplateNotFoundError,
    TemplatePersistenceError,
    TemplateRepository,
    TemplateSyncError,
    TemplateValidationError,
    validate_template,
)
from labelsheet.modules.templates.form import (
    DELETE_FAILED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    SYNC_FAILED_MESSAGE,
)
from labelsheet.schemas import (
    TemplateCreatedResponse,
    TemplateFormRequest,
    TemplateListResponse,
    TemplateResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=TemplateListResponse, summary="List own templates")
async def list_templates(
    repository: TemplateRepository = Depends(get_template_repository),
) -> TemplateListResponse:
    try:
        await repository.refresh()
    except TemplatePersistenceError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=SYNC_FAILED_MESSAGE) from exc
    return _to_list_response(repository)


@router.post(
    "",
    response_model=TemplateCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a template from raw form values",
)
async def create_template(
    payload: TemplateFormRequest,
    repository: TemplateRepository = Depends(get_template_repository),
) -> TemplateCreatedResponse:
    template_payload = _validate(payload)
    try:
        template_id = await repository.create(template_payload)
    except TemplateSyncError as exc:
        logger.warning("Template %s created but list reload failed", exc.template_id)
        template_id = exc.template_id
    except TemplatePersistenceError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=SAVE_FAILED_MESSAGE) from exc
    listing = _to_list_response(repository)
    return TemplateCreatedResponse(id=template_id, total=listing.total, templates=listing.templates)


@router.put("/{template_id}", response_model=TemplateListResponse, summary="Overwrite a template")
async def update_template(
    payload: TemplateFormRequest,
    template_id: str = Path(..., description="Template id"),
    repository: TemplateRepository = Depends(get_template_repository),
) -> TemplateListResponse:
    template_payload = _validate(payload)
    try:
        await repository.update(template_id, template_payload)
    except TemplateNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found") from exc
    except TemplatePersistenceError as exc:
        if not exc.committed:
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=SAVE_FAILED_MESSAGE) from exc
        logger.warning("Template %s updated but list reload failed", template_id)
    return _to_list_response(repository)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a template")
async def delete_template(
    template_id: str = Path(..., description="Template id"),
    repository: TemplateRepository = Depends(get_template_repository),
) -> Response:
    try:
        await repository.delete(template_id)
    except TemplatePersistenceError as exc:
        if not exc.committed:
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=DELETE_FAILED_MESSAGE) from exc
        logger.warning("Template %s deleted but list reload failed", template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _validate(payload: TemplateFormRequest):
    try:
        return validate_template(payload.to_fields())
    except TemplateValidationError as exc:
        detail = ValidationErrorResponse(message=exc.message, fields=list(exc.fields))
        raise HTTPException(
            status_code=422,
            detail=detail.model_dump(),
        ) from exc


def _to_list_response(repository: TemplateRepository) -> TemplateListResponse:
    templates = [TemplateResponse.from_domain(template) for template in repository.templates]
    return TemplateListResponse(total=len(templates), templates=templates)
