"""
Host Query Builder

Accumulates options into a HostQuery and renders it into SQL text.

Only the fields a caller explicitly specified take part in rendering, in
the order they were specified. Values are interpolated as literals; the
admin interface does not take bound parameters.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..host import Host, default_host
from .validators import (
    MYSQL_SERVERS,
    VALIDATION_RULES,
    require_hostname,
    validate_host_query,
    validate_text_fields,
)

logger = logging.getLogger(__name__)


@dataclass
class HostQuery:
    """A Host plus the target table and the fields that were specified."""
    table: str = MYSQL_SERVERS
    host: Host = field(default_factory=default_host)
    specified_fields: list[str] = field(default_factory=list)

    def specify(self, column: str) -> "HostQuery":
        # duplicates are kept so validation can reject them
        self.specified_fields.append(column)
        return self


HostOpt = Callable[[HostQuery], HostQuery]


def default_host_query() -> HostQuery:
    return HostQuery()


def build(*opts: HostOpt) -> HostQuery:
    """Apply options left to right to a default query, without validating."""
    query = default_host_query()
    for opt in opts:
        opt(query)
    return query


def build_and_parse(*opts: HostOpt) -> HostQuery:
    """
    Apply options left to right to a default query and validate the result.

    Raises:
        ConfigError: the first validation rule that failed
    """
    query = build(*opts)
    validate_host_query(query, VALIDATION_RULES)
    validate_text_fields(query)
    return query


def build_and_parse_require_hostname(*opts: HostOpt) -> HostQuery:
    """Same as build_and_parse, but the query must name a hostname."""
    query = build_and_parse(*opts)
    require_hostname(query)
    return query


# =============================================================================
# Rendering
# =============================================================================

def render_columns(specified_fields: list[str]) -> str:
    return "(" + ", ".join(specified_fields) + ")"


def render_values(query: HostQuery) -> str:
    return "(" + ", ".join(query.host.render_literal(c) for c in query.specified_fields) + ")"


def render_conditions(query: HostQuery, separator: str = " and ") -> str:
    return separator.join(
        f"{column} = {query.host.render_literal(column)}" for column in query.specified_fields
    )


def _where(query: HostQuery) -> str:
    # no specified fields matches every row
    if not query.specified_fields:
        return ""
    return f" where {render_conditions(query)}"


def render_insert(query: HostQuery) -> str:
    statement = (
        f"insert into {query.table} {render_columns(query.specified_fields)} "
        f"values {render_values(query)}"
    )
    logger.debug(f"Rendered insert: {statement}")
    return statement


def render_select(query: HostQuery) -> str:
    statement = f"select * from {query.table}{_where(query)}"
    logger.debug(f"Rendered select: {statement}")
    return statement


def render_delete(query: HostQuery) -> str:
    statement = f"delete from {query.table}{_where(query)}"
    logger.debug(f"Rendered delete: {statement}")
    return statement


def render_count(query: HostQuery) -> str:
    statement = f"select count(*) from {query.table}{_where(query)}"
    logger.debug(f"Rendered count: {statement}")
    return statement


def render_update(query: HostQuery, match: Optional[HostQuery] = None) -> str:
    """
    Render an update of the fields specified on `query`.

    The rows to update are selected by the fields specified on `match`;
    without a match (or with an empty one) every row in the table is updated.
    """
    statement = f"update {query.table} set {render_conditions(query, ', ')}"
    if match is not None:
        statement += _where(match)
    logger.debug(f"Rendered update: {statement}")
    return statement


def render_delete_except(query: HostQuery, keep: HostQuery) -> str:
    """
    Render a delete of the rows matching `query`, except the rows matching
    `keep`. `keep` must specify at least one field.
    """
    where = f"not ({render_conditions(keep)})"
    if query.specified_fields:
        where = f"{render_conditions(query)} and {where}"
    statement = f"delete from {query.table} where {where}"
    logger.debug(f"Rendered delete: {statement}")
    return statement
