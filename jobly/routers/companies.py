# companies.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from jobly.api.errors import http_errors
from jobly.models.user import User
from jobly.routers.dependencies import require_admin
from jobly.schemas.company import (
    CompanyDeletedResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyNew,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services import company_service


router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=CompanyListResponse)
def list_companies(
    name: str | None = Query(default=None, max_length=255),
    min_employees: int | None = Query(default=None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(default=None, alias="maxEmployees", ge=0),
) -> CompanyListResponse:
    filters: dict[str, Any] = {
        "name": name,
        "minEmployees": min_employees,
        "maxEmployees": max_employees,
    }
    with http_errors():
        companies = company_service.find_all_companies({k: v for k, v in filters.items() if v is not None})
    return CompanyListResponse(companies=companies)


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str) -> CompanyDetailResponse:
    with http_errors():
        company = company_service.get_company(handle)
    return CompanyDetailResponse(company=company)


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(payload: CompanyNew, _admin: User = Depends(require_admin)) -> CompanyResponse:
    with http_errors():
        company = company_service.create_company(payload)
    return CompanyResponse(company=company)


@router.patch("/{handle}", response_model=CompanyResponse)
def update_company(
    handle: str,
    payload: CompanyUpdate,
    _admin: User = Depends(require_admin),
) -> CompanyResponse:
    with http_errors():
        company = company_service.update_company(handle, payload.model_dump(exclude_unset=True, by_alias=True))
    return CompanyResponse(company=company)


@router.delete("/{handle}", response_model=CompanyDeletedResponse)
def delete_company(handle: str, _admin: User = Depends(require_admin)) -> CompanyDeletedResponse:
    with http_errors():
        company_service.remove_company(handle)
    return CompanyDeletedResponse(deleted=handle)
