"""Company CRUD endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from approval.api.deps import get_db_session
from approval.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from approval.services import companies as company_service

router = APIRouter()


@router.post("", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
def create_company(
    payload: CompanyCreate,
    session: Session = Depends(get_db_session),
) -> CompanyRead:
    company = company_service.create_company(
        session,
        title=payload.title,
        inn=payload.inn,
        company_type=payload.company_type,
        has_board_of_directors=payload.has_board_of_directors,
    )
    session.commit()
    session.refresh(company)
    return CompanyRead.model_validate(company)


@router.get("", response_model=list[CompanyRead])
def list_companies(
    q: str | None = Query(default=None, description="Case-insensitive title search."),
    session: Session = Depends(get_db_session),
) -> list[CompanyRead]:
    results = company_service.list_companies(session, query=q)
    return [CompanyRead.model_validate(item) for item in results]


@router.get("/{company_id}", response_model=CompanyRead)
def get_company(company_id: str, session: Session = Depends(get_db_session)) -> CompanyRead:
    return CompanyRead.model_validate(company_service.get_company(session, company_id))


@router.put("/{company_id}", response_model=CompanyRead)
def update_company(
    company_id: str,
    payload: CompanyUpdate,
    session: Session = Depends(get_db_session),
) -> CompanyRead:
    company = company_service.update_company(
        session, company_id, changes=payload.model_dump(exclude_unset=True)
    )
    session.commit()
    session.refresh(company)
    return CompanyRead.model_validate(company)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(company_id: str, session: Session = Depends(get_db_session)) -> None:
    company_service.delete_company(session, company_id)
    session.commit()


__all__ = [
    "create_company",
    "delete_company",
    "get_company",
    "list_companies",
    "router",
    "update_company",
]
