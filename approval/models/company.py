"""Company ORM model."""
from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from approval.models.base import Base, IdentifierMixin, TimestampMixin
from approval.models.enums import CompanyType


class Company(IdentifierMixin, TimestampMixin, Base):
    """A legal entity whose governance bodies hold meetings."""

    __tablename__ = "companies"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    inn: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True)
    company_type: Mapped[CompanyType] = mapped_column(
        SAEnum(CompanyType, name="company_type"), nullable=False
    )
    has_board_of_directors: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    participants = relationship(
        "Participant", back_populates="company", cascade="all, delete-orphan"
    )
    meetings = relationship("Meeting", back_populates="company", cascade="all, delete-orphan")


__all__ = ["Company"]
