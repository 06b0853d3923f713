import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from company_api.core.errors import (
    CreateCompanyError,
    CreateTokenError,
    CreateUserError,
    DeleteCompanyError,
    FindOneUserError,
    GetCompanyError,
    UpdateCompanyError,
    WrongPasswordError,
)
from company_api.core.security import TokenManager, get_password_hash, get_token_manager, verify_password
from company_api.models.company import Company
from company_api.models.user import User
from company_api.repositories.storage import Repository
from company_api.schemas.auth import UserRequest
from company_api.schemas.company import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)


class CompanyService:
    """Business operations over companies and users.

    Storage failures are logged and re-raised as the matching domain error,
    chained to the original exception. The token manager is only built when a
    token is issued, so user registration works without a signing key.
    """

    def __init__(
        self,
        storage: Repository,
        token_manager_factory: Callable[[], TokenManager] = get_token_manager,
    ):
        self.storage = storage
        self.token_manager_factory = token_manager_factory

    def create_company(self, data: CompanyCreate) -> Company:
        company = Company(**data.model_dump())
        try:
            return self.storage.create(company)
        except Exception as e:
            logger.error("failed to create company: %s", e)
            raise CreateCompanyError() from e

    def update_company(self, data: CompanyUpdate) -> Company:
        try:
            return self.storage.update(data.id, data.changes())
        except Exception as e:
            logger.error("failed to update company: %s", e)
            raise UpdateCompanyError() from e

    def delete_company(self, company_id: UUID) -> None:
        try:
            self.storage.delete(company_id)
        except Exception as e:
            logger.error("failed to delete company: %s", e)
            raise DeleteCompanyError() from e

    def get_company(self, company_id: UUID) -> Company:
        try:
            return self.storage.get(company_id)
        except Exception as e:
            logger.error("failed to get company: %s", e)
            raise GetCompanyError() from e

    def create_user(self, request: UserRequest) -> User:
        user = User(name=request.name, password_hash=get_password_hash(request.password))
        try:
            return self.storage.create_user(user)
        except Exception as e:
            logger.error("failed to create user %s: %s", request.name, e)
            raise CreateUserError() from e

    def login(self, request: UserRequest) -> User:
        try:
            user = self.storage.find_one_user(request.name)
        except Exception as e:
            logger.error("failed find user with error: %s", e)
            raise FindOneUserError() from e

        if not verify_password(request.password, user.password_hash):
            logger.warning("user %s used wrong password", request.name)
            raise WrongPasswordError()
        return user

    def issue_token(self, user_id: str) -> tuple[str, datetime]:
        """Return a signed token for ``user_id`` and its expiry time."""
        try:
            return self.token_manager_factory().issue(user_id)
        except Exception as e:
            logger.error("problems with creating jwt token: %s", e)
            raise CreateTokenError() from e

    def create_token(self, user_id: str) -> str:
        token, _ = self.issue_token(user_id)
        return token
