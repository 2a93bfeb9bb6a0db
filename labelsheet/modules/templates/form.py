"""Create/edit state machine behind the template form."""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Any, Optional

from labelsheet.modules.notifications import NotificationKind, Notifier

from .exceptions import TemplatePersistenceError, TemplateValidationError
from .models import FormFields, Template
from .repository import TemplateRepository
from .validation import validate_template

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Template saved successfully!"
UPDATED_MESSAGE = "Template updated successfully!"
DELETED_MESSAGE = "Template deleted successfully!"
SAVE_FAILED_MESSAGE = "A problem occurred while saving the template."
DELETE_FAILED_MESSAGE = "A problem occurred while deleting the template."
SYNC_FAILED_MESSAGE = "A problem occurred while loading templates."


class FormMode(str, Enum):
    CREATING = "creating"
    EDITING = "editing"


class TemplateForm:
    """Transient editing state for one user session.

    ``editing`` holds the edit target; ``None`` means the form creates a new
    template on submit. ``error`` keeps the last failure message until the
    next submit or delete.
    """

    def __init__(self, repository: TemplateRepository, notifier: Notifier) -> None:
        self.repository = repository
        self.notifier = notifier
        self.fields = FormFields()
        self.editing: Optional[Template] = None
        self.error: Optional[str] = None
        self._submitting = False

    @property
    def mode(self) -> FormMode:
        return FormMode.CREATING if self.editing is None else FormMode.EDITING

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def update_fields(self, **changes: Any) -> FormFields:
        self.fields = replace(self.fields, **changes)
        return self.fields

    def reset(self) -> None:
        self.fields = FormFields()
        self.editing = None

    def edit(self, template: Template) -> None:
        self.editing = template
        self.fields = FormFields.from_template(template)

    def cancel(self) -> None:
        if self.editing is None:
            return
        self.reset()

    async def submit(self) -> bool:
        if self._submitting:
            logger.warning("Ignoring submit while another submit is in flight")
            return False

        self.error = None
        try:
            payload = validate_template(self.fields)
        except TemplateValidationError as exc:
            logger.info("Template form rejected, invalid fields: %s", ", ".join(exc.fields))
            self.error = exc.message
            return False

        target = self.editing
        self._submitting = True
        try:
            if target is not None:
                await self.repository.update(target.id, payload)
            else:
                await self.repository.create(payload)
        except TemplatePersistenceError as exc:
            if not exc.committed:
                logger.error("Saving template failed: %s", exc)
                self.error = SAVE_FAILED_MESSAGE
                return False
            logger.error("Template saved but list reload failed: %s", exc)
            self.error = SYNC_FAILED_MESSAGE
        finally:
            self._submitting = False

        self.notifier.show(UPDATED_MESSAGE if target is not None else SAVED_MESSAGE, NotificationKind.SUCCESS)
        self.reset()
        return True

    async def delete(self, template_id: str, *, confirmed: bool) -> bool:
        if not confirmed:
            return False

        self.error = None
        try:
            await self.repository.delete(template_id)
        except TemplatePersistenceError as exc:
            if not exc.committed:
                logger.error("Deleting template %s failed: %s", template_id, exc)
                self.error = DELETE_FAILED_MESSAGE
                return False
            logger.error("Template %s deleted but list reload failed: %s", template_id, exc)
            self.error = SYNC_FAILED_MESSAGE

        self.notifier.show(DELETED_MESSAGE, NotificationKind.SUCCESS)
        if self.editing is not None and self.editing.id == template_id:
            self.reset()
        return True
