from fastapi import Depends
from sqlalchemy.orm import Session

from company_api.db.session import get_db
from company_api.repositories.storage import SqlAlchemyStorage
from company_api.services.company_service import CompanyService


def get_storage(db: Session = Depends(get_db)) -> SqlAlchemyStorage:
    return SqlAlchemyStorage(db)


def get_service(storage: SqlAlchemyStorage = Depends(get_storage)) -> CompanyService:
    return CompanyService(storage)
