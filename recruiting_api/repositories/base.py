"""
Generic SQLAlchemy repository.

Contract every repository keeps (services rely on it):
- insert(entity)  -> new id, or 0 on failure
- update(entity)  -> entity id, or 0 on failure / no row matched
- delete(id)      -> 1, or 0 on failure (deleting a missing row still returns 1)
- select_by_id(id) -> entity or None
- select_all()     -> list of entities, possibly empty

Writes never raise SQLAlchemy errors: the session is rolled back, the
error is logged and the 0 sentinel is returned. Each write commits on
its own; there is no transaction spanning several repository calls.
"""

import logging
from dataclasses import fields

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class Repository:
    model = None            # SQLAlchemy model class
    entity = None           # domain dataclass

    # Foreign keys stored as NULL when unset; the domain uses 0 instead
    nullable_links: tuple[str, ...] = ()

    def __init__(self, db: Session):
        self.db = db

    # ─── Row <-> entity ──────────────────────────────────────────────

    def _to_entity(self, row):
        values = {}
        for f in fields(self.entity):
            value = getattr(row, f.name, None)
            if value is None and f.name in self.nullable_links:
                value = 0
            values[f.name] = value
        return self.entity(**values)

    def _to_columns(self, entity) -> dict:
        columns = self.model.__table__.columns.keys()
        values = {}
        for f in fields(entity):
            if f.name == "id" or f.name not in columns:
                continue
            value = getattr(entity, f.name)
            if f.name in self.nullable_links and not value:
                value = None
            values[f.name] = value
        return values

    # ─── Reads ───────────────────────────────────────────────────────

    def select_by_id(self, id: int):
        row = self.db.get(self.model, id)
        return self._to_entity(row) if row is not None else None

    def select_all(self) -> list:
        rows = self.db.query(self.model).order_by(self.model.id).all()
        return [self._to_entity(r) for r in rows]

    def _select_where(self, **criteria) -> list:
        rows = self.db.query(self.model).filter_by(**criteria).order_by(self.model.id).all()
        return [self._to_entity(r) for r in rows]

    # ─── Writes ──────────────────────────────────────────────────────

    def insert(self, entity) -> int:
        try:
            row = self.model(**self._to_columns(entity))
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return row.id
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Insert into %s failed", self.model.__tablename__)
            return 0

    def update(self, entity) -> int:
        values = self._to_columns(entity)
        values.pop("created_at", None)      # set once, on insert
        try:
            result = self.db.execute(
                update(self.model).where(self.model.id == entity.id).values(**values)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Update of %s #%s failed", self.model.__tablename__, entity.id)
            return 0
        return entity.id if result.rowcount else 0

    def delete(self, id: int) -> int:
        return self._delete_where(self.model.id == id)

    def _delete_where(self, *conditions) -> int:
        try:
            self.db.execute(delete(self.model).where(*conditions))
            self.db.commit()
            return 1
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Delete from %s failed", self.model.__tablename__)
            return 0
