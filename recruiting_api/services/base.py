"""
Shared orchestration for every entity service.

insert:  DTO -> entity -> validate -> repository.insert -> children -> id written back on the DTO
update:  DTO -> entity -> validate -> repository.update -> children (new ones inserted, known ones updated)
delete:  existence check -> repository.delete -> dependent children

Every failure is pushed to the request's NotificationCollector and
returned as a ServiceResult; nothing raises out of a write operation.
Children are processed one at a time, after the parent, each through its
own service. There is no rollback: if a child fails, the parent and the
children already written stay stored and the failure is reported.
"""

import logging

from pydantic import BaseModel

from recruiting_api.domain import messages
from recruiting_api.domain.rules import Rule, validate
from recruiting_api.mapping import to_dto, to_dtos, to_entity
from recruiting_api.notification import NotificationCollector
from recruiting_api.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CrudService:
    entity = None           # domain dataclass
    dto = None              # pydantic schema
    rules: tuple[Rule, ...] = ()

    def __init__(self, notifier: NotificationCollector, repository):
        self.notifier = notifier
        self.repository = repository

    # ─── Reads ───────────────────────────────────────────────────────

    def select_all(self) -> list:
        return to_dtos(self.dto, self.repository.select_all())

    def select_by_id(self, id: int):
        return to_dto(self.dto, self.repository.select_by_id(id))

    # ─── Writes ──────────────────────────────────────────────────────

    def insert(self, dto: BaseModel) -> ServiceResult:
        try:
            entity = to_entity(self.entity, dto)
            failure = self._validate(entity)
            if failure is not None:
                return failure

            new_id = self.repository.insert(entity)
            if not new_id:
                return self._persistence_failed(messages.SAVE_FAILED)

            self._insert_children(dto, new_id)

            dto.id = new_id
            return ServiceResult.ok(new_id)
        except Exception as exc:
            return self._unexpected(exc)

    def update(self, dto: BaseModel) -> ServiceResult:
        try:
            entity = to_entity(self.entity, dto)
            failure = self._validate(entity)
            if failure is not None:
                return failure

            if not self.repository.update(entity):
                return self._persistence_failed(messages.UPDATE_FAILED)

            self._update_children(dto)

            return ServiceResult.ok(entity.id)
        except Exception as exc:
            return self._unexpected(exc)

    def delete(self, id: int) -> ServiceResult:
        try:
            if self.repository.select_by_id(id) is None:
                self.notifier.handle(messages.RECORD_NOT_FOUND)
                return ServiceResult.not_found(messages.RECORD_NOT_FOUND)

            if not self.repository.delete(id):
                return self._persistence_failed(messages.DELETE_FAILED)

            self._delete_children(id)

            return ServiceResult.ok(1)
        except Exception as exc:
            return self._unexpected(exc)

    # ─── Child hooks (aggregate roots override these) ────────────────

    def _insert_children(self, dto, parent_id: int) -> None:
        pass

    def _update_children(self, dto) -> None:
        pass

    def _delete_children(self, parent_id: int) -> None:
        pass

    # ─── Helpers ─────────────────────────────────────────────────────

    def _validate(self, entity) -> ServiceResult | None:
        errors = validate(self.rules, entity)
        if not errors:
            return None
        for message in errors:
            self.notifier.handle(message)
        logger.debug("%s rejected: %s", type(entity).__name__, errors)
        return ServiceResult.validation_failed(errors)

    def _persistence_failed(self, message: str) -> ServiceResult:
        self.notifier.handle(message)
        return ServiceResult.persistence_failed(message)

    def _unexpected(self, exc: Exception) -> ServiceResult:
        logger.exception("%s operation failed", type(self).__name__)
        message = messages.UNEXPECTED_ERROR.format(exc)
        self.notifier.handle(message)
        return ServiceResult.persistence_failed(message, cause=exc)


def insert_children(children: list, service: CrudService, link: str, parent_id: int) -> None:
    """Insert every child of a freshly stored parent, pointing it at the parent first."""
    for child in children:
        setattr(child, link, parent_id)
        result = service.insert(child)
        _log_child(child, parent_id, "insert", result)


def upsert_children(children: list, service: CrudService, link: str, parent_id: int,
                    updatable: bool = True) -> None:
    """
    Split children on their id: 0 means new (inserted), anything else
    means already stored (updated). New ones go first. Every child is
    pointed at this parent, whatever owner it carried.
    """
    for child in children:
        setattr(child, link, parent_id)

    new = [c for c in children if not c.id]
    existing = [c for c in children if c.id]

    for child in new:
        _log_child(child, parent_id, "insert", service.insert(child))
    if updatable:
        for child in existing:
            _log_child(child, parent_id, "update", service.update(child))


def _log_child(child, parent_id: int, operation: str, result: ServiceResult) -> None:
    logger.debug("%s of child %s of #%s: %s", operation, type(child).__name__, parent_id, result.kind.value)
