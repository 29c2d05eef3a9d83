# jobs.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from jobly.api.errors import http_errors
from jobly.models.user import User
from jobly.routers.dependencies import require_admin
from jobly.schemas.job import JobDeletedResponse, JobListResponse, JobNew, JobResponse, JobUpdate
from jobly.services import job_service


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: str | None = Query(default=None, max_length=255),
    min_salary: int | None = Query(default=None, alias="minSalary", ge=0),
    has_equity: bool | None = Query(default=None, alias="hasEquity"),
) -> JobListResponse:
    filters: dict[str, Any] = {
        "title": title,
        "minSalary": min_salary,
        "hasEquity": has_equity,
    }
    with http_errors():
        jobs = job_service.find_all_jobs({k: v for k, v in filters.items() if v is not None})
    return JobListResponse(jobs=jobs)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int) -> JobResponse:
    with http_errors():
        job = job_service.get_job(job_id)
    return JobResponse(job=job)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(payload: JobNew, _admin: User = Depends(require_admin)) -> JobResponse:
    with http_errors():
        job = job_service.create_job(payload)
    return JobResponse(job=job)


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(job_id: int, payload: JobUpdate, _admin: User = Depends(require_admin)) -> JobResponse:
    with http_errors():
        job = job_service.update_job(job_id, payload.model_dump(exclude_unset=True, by_alias=True))
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(job_id: int, _admin: User = Depends(require_admin)) -> JobDeletedResponse:
    with http_errors():
        job_service.remove_job(job_id)
    return JobDeletedResponse(deleted=job_id)
