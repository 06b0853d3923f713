from typing import Any, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

from company_api.models.company import CompanyType


class CompanyBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CompanyCreate(CompanyBase):
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(default="", max_length=3000)
    amount_of_employees: int = Field(alias="amountOfEmployees", ge=0)
    registered: bool = False
    type: CompanyType


class CompanyUpdate(CompanyBase):
    """PUT body. Fields left out (or sent as null) keep their stored value."""

    id: UUID
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=3000)
    amount_of_employees: Optional[int] = Field(default=None, alias="amountOfEmployees", ge=0)
    registered: Optional[bool] = None
    type: Optional[CompanyType] = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude={"id"}, exclude_unset=True, exclude_none=True)


class CompanyOut(CompanyBase):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    name: str
    description: str
    amount_of_employees: int = Field(alias="amountOfEmployees")
    registered: bool
    type: CompanyType
