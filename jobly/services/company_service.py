# company_service.py
from __future__ import annotations

import logging
from typing import Any, Mapping

from jobly.core.filters import build_company_filters
from jobly.core.sql import build_set_clause, next_placeholder
from jobly.db import sql as db
from jobly.errors import ConflictError, InvalidRequestError, NotFoundError
from jobly.schemas.company import CompanyDetail, CompanyNew, CompanyRead
from jobly.schemas.job import JobRead


logger = logging.getLogger(__name__)

# External (camelCase) name -> column. Fields absent here are stored under the same name.
COMPANY_COLUMNS: dict[str, str] = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}
UPDATABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})

_SELECT_COMPANY = """
SELECT handle,
       name,
       description,
       num_employees AS "numEmployees",
       logo_url AS "logoUrl"
FROM companies
""".strip()


def create_company(data: CompanyNew) -> CompanyRead:
    """Insert a company; ConflictError when the handle or the name is already taken."""

    duplicate = db.query_one("SELECT handle FROM companies WHERE handle = $1", [data.handle])
    if duplicate:
        logger.info("company.create duplicate handle=%s", data.handle)
        raise ConflictError(f"Duplicate company: {data.handle}")

    try:
        db.execute(
            """
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            """.strip(),
            [data.handle, data.name, data.description, data.num_employees, data.logo_url],
        )
    except db.DatabaseIntegrityError as exc:
        # Either a concurrent create took the handle, or another company already has this name.
        if db.query_one("SELECT handle FROM companies WHERE handle = $1", [data.handle]):
            raise ConflictError(f"Duplicate company: {data.handle}") from exc
        logger.info("company.create duplicate name=%s", data.name)
        raise ConflictError(f"Duplicate company name: {data.name}") from exc

    logger.info("company.create handle=%s", data.handle)
    return _get_company_row(data.handle)


def find_all_companies(filters: Mapping[str, Any] | None = None) -> list[CompanyRead]:
    """List companies ordered by name, optionally narrowed by `name`, `minEmployees`, `maxEmployees`."""

    where = build_company_filters(filters)
    rows = db.query(f"{_SELECT_COMPANY}{where.sql} ORDER BY name", where.values)
    return [CompanyRead.model_validate(row) for row in rows]


def get_company(handle: str) -> CompanyDetail:
    company = db.query_one(f"{_SELECT_COMPANY} WHERE handle = $1", [handle])
    if not company:
        logger.info("company.get not found handle=%s", handle)
        raise NotFoundError(f"No company: {handle}")

    jobs = db.query(
        """
        SELECT id, title, salary, equity, company_handle AS "companyHandle"
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """.strip(),
        [handle],
    )
    return CompanyDetail.model_validate({**company, "jobs": [JobRead.model_validate(j) for j in jobs]})


def update_company(handle: str, data: Mapping[str, Any]) -> CompanyRead:
    """Partial update: only the fields present in `data` change.

    `data` uses external names (name, description, numEmployees, logoUrl).
    """

    unknown = sorted(set(data) - UPDATABLE_FIELDS)
    if unknown:
        raise InvalidRequestError(f"Cannot update field(s): {', '.join(unknown)}")

    set_clause, values = build_set_clause(data, COMPANY_COLUMNS)
    handle_idx = next_placeholder(values)
    try:
        db.execute(f"UPDATE companies SET {set_clause} WHERE handle = {handle_idx}", [*values, handle])
    except db.DatabaseIntegrityError as exc:
        # Duplicate name, or null for a required column.
        raise InvalidRequestError(f"Invalid update for company: {handle}") from exc

    company = _get_company_row(handle)
    logger.info("company.update handle=%s fields=%s", handle, ",".join(data))
    return company


def remove_company(handle: str) -> None:
    result = db.execute("DELETE FROM companies WHERE handle = $1", [handle])
    if result.rowcount == 0:
        logger.info("company.remove not found handle=%s", handle)
        raise NotFoundError(f"No company: {handle}")
    logger.info("company.remove handle=%s", handle)


def _get_company_row(handle: str) -> CompanyRead:
    row = db.query_one(f"{_SELECT_COMPANY} WHERE handle = $1", [handle])
    if not row:
        logger.info("company.get not found handle=%s", handle)
        raise NotFoundError(f"No company: {handle}")
    return CompanyRead.model_validate(row)
