# job.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JobNew(BaseModel):
    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class JobUpdate(BaseModel):
    # id and companyHandle are fixed once a job exists.
    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class JobRead(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: float | None = None
    company_handle: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobResponse(BaseModel):
    job: JobRead


class JobListResponse(BaseModel):
    jobs: list[JobRead]


class JobDeletedResponse(BaseModel):
    deleted: int
