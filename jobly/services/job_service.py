# job_service.py
from __future__ import annotations

import logging
from typing import Any, Mapping

from jobly.core.filters import build_job_filters
from jobly.core.sql import build_set_clause, next_placeholder
from jobly.db import sql as db
from jobly.errors import ConflictError, InvalidRequestError, NotFoundError
from jobly.schemas.job import JobNew, JobRead


logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "salary", "equity"})

_SELECT_JOB = """
SELECT id,
       title,
       salary,
       equity,
       company_handle AS "companyHandle"
FROM jobs
""".strip()


def create_job(data: JobNew) -> JobRead:
    """Insert a job; ConflictError when the company already lists a job with this title."""

    company = db.query_one("SELECT handle FROM companies WHERE handle = $1", [data.company_handle])
    if not company:
        raise InvalidRequestError(f"No company: {data.company_handle}")

    duplicate = db.query_one(
        "SELECT id FROM jobs WHERE title = $1 AND company_handle = $2",
        [data.title, data.company_handle],
    )
    if duplicate:
        logger.info("job.create duplicate title=%s company=%s", data.title, data.company_handle)
        raise ConflictError(f"Duplicate job: {data.title} at {data.company_handle}")

    try:
        result = db.execute(
            """
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            """.strip(),
            [data.title, data.salary, data.equity, data.company_handle],
        )
    except db.DatabaseIntegrityError as exc:
        # The company was removed after the existence check above.
        logger.info("job.create missing company=%s", data.company_handle)
        raise InvalidRequestError(f"No company: {data.company_handle}") from exc

    if result.lastrowid is not None:
        job_id = result.lastrowid
    else:
        row = db.query_one(
            "SELECT MAX(id) AS id FROM jobs WHERE title = $1 AND company_handle = $2",
            [data.title, data.company_handle],
        )
        job_id = row["id"]

    logger.info("job.create id=%s title=%s company=%s", job_id, data.title, data.company_handle)
    return get_job(job_id)


def find_all_jobs(filters: Mapping[str, Any] | None = None) -> list[JobRead]:
    """List jobs ordered by title (ties by id), optionally narrowed by `title`, `minSalary`, `hasEquity`."""

    where = build_job_filters(filters)
    rows = db.query(f"{_SELECT_JOB}{where.sql} ORDER BY title, id", where.values)
    return [JobRead.model_validate(row) for row in rows]


def get_job(job_id: int) -> JobRead:
    row = db.query_one(f"{_SELECT_JOB} WHERE id = $1", [job_id])
    if not row:
        logger.info("job.get not found id=%s", job_id)
        raise NotFoundError(f"No job: {job_id}")
    return JobRead.model_validate(row)


def update_job(job_id: int, data: Mapping[str, Any]) -> JobRead:
    """Partial update of title, salary and/or equity."""

    unknown = sorted(set(data) - UPDATABLE_FIELDS)
    if unknown:
        raise InvalidRequestError(f"Cannot update field(s): {', '.join(unknown)}")

    set_clause, values = build_set_clause(data)
    id_idx = next_placeholder(values)
    try:
        db.execute(f"UPDATE jobs SET {set_clause} WHERE id = {id_idx}", [*values, job_id])
    except db.DatabaseIntegrityError as exc:
        raise InvalidRequestError(f"Invalid update for job: {job_id}") from exc

    job = get_job(job_id)
    logger.info("job.update id=%s fields=%s", job_id, ",".join(data))
    return job


def remove_job(job_id: int) -> None:
    result = db.execute("DELETE FROM jobs WHERE id = $1", [job_id])
    if result.rowcount == 0:
        logger.info("job.remove not found id=%s", job_id)
        raise NotFoundError(f"No job: {job_id}")
    logger.info("job.remove id=%s", job_id)
