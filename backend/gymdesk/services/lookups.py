"""Reusable existence checks and the domain errors raised by the service layer."""

from __future__ import annotations

from typing import Any, Optional, Tuple, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class GymServiceError(RuntimeError):
    """Base class for failures raised by gym back office services."""


class EntityNotFoundError(GymServiceError):
    """Raised when an id, or a referenced foreign key, does not exist."""

    def __init__(self, kind: str, entity_id: Any) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} with id {entity_id} not found")


class ConflictError(GymServiceError):
    """Raised when a record would duplicate an existing one."""


class ConstraintViolationError(GymServiceError):
    """Raised when the store rejects a write because of an integrity constraint."""


class InvalidStateError(GymServiceError):
    """Raised when referenced records exist but cannot be used for the operation."""


def require_entity(db: Session, model: Type[ModelT], entity_id: Any, kind: str) -> ModelT:
    """Return the row of ``model`` identified by ``entity_id`` or raise ``EntityNotFoundError``."""

    instance = db.get(model, entity_id)
    if instance is None:
        raise EntityNotFoundError(kind, entity_id)
    return instance


def ensure_entities(db: Session, *checks: Tuple[Type[Any], Optional[Any], str]) -> None:
    """Validate several references in order; ``None`` ids are optional and skipped."""

    for model, entity_id, kind in checks:
        if entity_id is None:
            continue
        require_entity(db, model, entity_id, kind)


def describe_integrity_error(error: IntegrityError) -> str:
    original = getattr(error, "orig", None)
    message = str(original) if original is not None else str(error)
    return message.strip() or "Integrity constraint violated"


def apply_partial_update(instance: Any, changes: dict, *, nullable: frozenset = frozenset()) -> bool:
    """Copy ``changes`` onto ``instance``.

    ``None`` is only written to fields listed in ``nullable``; for the rest it
    means "leave unchanged". Returns whether any attribute was assigned.
    """

    updated = False
    for field, value in changes.items():
        if value is None and field not in nullable:
            continue
        setattr(instance, field, value)
        updated = True
    return updated
