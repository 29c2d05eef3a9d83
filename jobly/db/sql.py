from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Sequence

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from jobly.database import engine


logger = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    pass


class DatabaseQueryError(RuntimeError):
    pass


class DatabaseIntegrityError(DatabaseQueryError):
    """A statement was rejected by a unique/foreign-key/check constraint."""


@dataclass(frozen=True)
class ExecuteResult:
    rowcount: int
    lastrowid: int | None = None


_POSITIONAL_PARAM_RE = re.compile(r"\$(\d+)")


def _compile_positional_params(sql: str, params: Sequence[Any] | None) -> tuple[str, dict[str, Any]]:
    """Rewrite `$1, $2, ...` placeholders into SQLAlchemy bind names.

    `$n` refers to `params[n - 1]`; a placeholder may appear more than once.
    Example: `UPDATE companies SET "name"=$1 WHERE handle = $2`
      -> `UPDATE companies SET "name"=:p1 WHERE handle = :p2`, {"p1": ..., "p2": ...}
    """

    values = list(params or [])
    binds: dict[str, Any] = {}

    def repl(match: re.Match[str]) -> str:
        position = int(match.group(1))
        if position < 1 or position > len(values):
            raise DatabaseQueryError(f"Missing SQL parameter: ${position} (got {len(values)} values)")
        name = f"p{position}"
        binds[name] = values[position - 1]
        return f":{name}"

    compiled_sql = _POSITIONAL_PARAM_RE.sub(repl, sql)
    return compiled_sql, binds


def _connect():
    try:
        return engine.connect()
    except SQLAlchemyError as exc:
        raise DatabaseConnectionError(f"Failed to connect to database: {type(exc).__name__}: {exc}") from exc


def query(sql: str, params: Sequence[Any] | None = None) -> list[dict[str, Any]]:
    """Run a SELECT and return rows as dicts keyed by column label."""

    compiled_sql, binds = _compile_positional_params(sql, params)
    try:
        with _connect() as conn:
            result = conn.execute(text(compiled_sql), binds)
            return [dict(row._mapping) for row in result]
    except (DatabaseConnectionError, DatabaseQueryError):
        raise
    except SQLAlchemyError as exc:
        logger.warning("query failed: %s", exc)
        raise DatabaseQueryError("Database query failed") from exc


def query_one(sql: str, params: Sequence[Any] | None = None) -> dict[str, Any] | None:
    rows = query(sql, params)
    return rows[0] if rows else None


def execute(sql: str, params: Sequence[Any] | None = None) -> ExecuteResult:
    """Run a single INSERT/UPDATE/DELETE in its own transaction."""

    compiled_sql, binds = _compile_positional_params(sql, params)
    try:
        with _connect() as conn:
            result = conn.execute(text(compiled_sql), binds)
            outcome = ExecuteResult(rowcount=result.rowcount, lastrowid=result.lastrowid)
            conn.commit()
            return outcome
    except (DatabaseConnectionError, DatabaseQueryError):
        raise
    except IntegrityError as exc:
        raise DatabaseIntegrityError("Database constraint violated") from exc
    except SQLAlchemyError as exc:
        logger.warning("statement failed: %s", exc)
        raise DatabaseQueryError("Database statement failed") from exc
