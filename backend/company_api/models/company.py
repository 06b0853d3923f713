import enum
import uuid

from sqlalchemy import String, Integer, Boolean, Enum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from company_api.models.base import Base


class CompanyType(str, enum.Enum):
    corporations = "Corporations"
    non_profit = "NonProfit"
    cooperative = "Cooperative"
    sole_proprietorship = "Sole Proprietorship"


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    description: Mapped[str] = mapped_column(String(3000), default="")
    amount_of_employees: Mapped[int] = mapped_column(Integer, index=True)
    registered: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    # Stored as the wire value ("Sole Proprietorship"), not the member name
    type: Mapped[CompanyType] = mapped_column(
        Enum(CompanyType, name="company_type", values_callable=lambda e: [m.value for m in e]),
        index=True,
    )
