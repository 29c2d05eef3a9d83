# company.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobly.schemas.job import JobRead


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompanyNew(_CamelModel):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None

    model_config = ConfigDict(extra="forbid")


class CompanyUpdate(_CamelModel):
    # handle is the identity of a company and cannot be patched.
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None

    model_config = ConfigDict(extra="forbid")


class CompanyRead(_CamelModel):
    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyDetail(CompanyRead):
    jobs: list[JobRead] = Field(default_factory=list)


class CompanyResponse(BaseModel):
    company: CompanyRead


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: list[CompanyRead]


class CompanyDeletedResponse(BaseModel):
    deleted: str
