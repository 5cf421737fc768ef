"""
Host query engine for ProxySQL's mysql_servers tables

Options build a HostQuery, validators check it, the builder renders it.
"""

from .builder import (
    HostOpt,
    HostQuery,
    build,
    build_and_parse,
    build_and_parse_require_hostname,
    default_host_query,
    render_count,
    render_delete,
    render_delete_except,
    render_insert,
    render_select,
    render_update,
)
from .validators import (
    MYSQL_SERVERS,
    RUNTIME_MYSQL_SERVERS,
    VALID_TABLES,
    VALIDATION_RULES,
    require_hostname,
    validate_host_query,
    validate_text_fields,
)

__all__ = [
    'HostOpt',
    'HostQuery',
    'build',
    'build_and_parse',
    'build_and_parse_require_hostname',
    'default_host_query',
    'render_count',
    'render_delete',
    'render_delete_except',
    'render_insert',
    'render_select',
    'render_update',
    'MYSQL_SERVERS',
    'RUNTIME_MYSQL_SERVERS',
    'VALID_TABLES',
    'VALIDATION_RULES',
    'require_hostname',
    'validate_host_query',
    'validate_text_fields',
]
