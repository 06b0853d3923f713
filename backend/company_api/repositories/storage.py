"""Storage for companies and users.

``Repository`` is the port the service layer depends on; ``SqlAlchemyStorage``
implements it over a SQLAlchemy session. A query that matches no rows raises
``NotFoundError``; any other database error propagates unchanged after the
session is rolled back.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Protocol
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from company_api.core.errors import NotFoundError
from company_api.models.company import Company
from company_api.models.user import User

logger = logging.getLogger(__name__)


class Repository(Protocol):
    def create(self, company: Company) -> Company:
        ...

    def get(self, company_id: UUID) -> Company:
        ...

    def update(self, company_id: UUID, fields: dict[str, Any]) -> Company:
        ...

    def delete(self, company_id: UUID) -> None:
        ...

    def create_user(self, user: User) -> User:
        ...

    def find_one_user(self, name: str) -> User:
        ...


class SqlAlchemyStorage:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        try:
            yield
            self.db.commit()
        except SQLAlchemyError as e:
            logger.debug("rolling back transaction: %s", e)
            self.db.rollback()
            raise

    def create(self, company: Company) -> Company:
        with self._transaction():
            self.db.add(company)
        self.db.refresh(company)
        return company

    def get(self, company_id: UUID) -> Company:
        company = self.db.get(Company, company_id)
        if company is None:
            raise NotFoundError(f"company {company_id} not found")
        return company

    def update(self, company_id: UUID, fields: dict[str, Any]) -> Company:
        company = self.get(company_id)
        with self._transaction():
            for key, value in fields.items():
                setattr(company, key, value)
        self.db.refresh(company)
        return company

    def delete(self, company_id: UUID) -> None:
        with self._transaction():
            result = self.db.execute(delete(Company).where(Company.id == company_id))
        if result.rowcount == 0:
            raise NotFoundError(f"company {company_id} not found")

    def create_user(self, user: User) -> User:
        with self._transaction():
            self.db.add(user)
        self.db.refresh(user)
        return user

    def find_one_user(self, name: str) -> User:
        user = self.db.scalars(select(User).where(User.name == name)).first()
        if user is None:
            raise NotFoundError(f"user {name!r} not found")
        return user
