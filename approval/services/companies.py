"""Company registry."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from approval.core.exceptions import CompanyAlreadyExistsError, CompanyNotFoundError, require
from approval.models import Company, CompanyType

logger = logging.getLogger(__name__)


def get_company(session: Session, company_id: str) -> Company:
    require(company_id, "Company ID")
    company = session.get(Company, company_id)
    if company is None:
        raise CompanyNotFoundError(company_id)
    return company


def _flush_or_conflict(session: Session, inn: int) -> None:
    try:
        session.flush()
    except IntegrityError as exc:
        session.rollback()
        raise CompanyAlreadyExistsError(f"Company with INN '{inn}' already exists") from exc


def create_company(
    session: Session,
    *,
    title: str,
    inn: int,
    company_type: CompanyType,
    has_board_of_directors: bool = False,
) -> Company:
    company = Company(
        title=title,
        inn=inn,
        company_type=company_type,
        has_board_of_directors=has_board_of_directors,
    )
    session.add(company)
    _flush_or_conflict(session, inn)
    logger.info("Registered company %s (INN %s)", company.id, inn)
    return company


def list_companies(session: Session, *, query: str | None = None) -> list[Company]:
    """Return companies ordered by title, optionally filtered by a title substring."""

    statement = select(Company).order_by(Company.title)
    if query is not None and query.strip():
        statement = statement.where(func.lower(Company.title).contains(query.strip().lower()))
    return list(session.scalars(statement).all())


def update_company(session: Session, company_id: str, *, changes: Mapping[str, Any]) -> Company:
    company = get_company(session, company_id)
    for field_name, value in changes.items():
        setattr(company, field_name, value)
    _flush_or_conflict(session, company.inn)
    return company


def delete_company(session: Session, company_id: str) -> None:
    company = get_company(session, company_id)
    session.delete(company)
    session.flush()
    logger.info("Deleted company %s", company_id)


__all__ = [
    "create_company",
    "delete_company",
    "get_company",
    "list_companies",
    "update_company",
]
