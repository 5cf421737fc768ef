"""
ProxySQL admin client

Manage the mysql_servers configuration of a ProxySQL instance through its
admin interface: add, remove and list hosts, keep a single writer per
writer hostgroup, and persist changes to disk and runtime.
"""

from .client import ProxySQL
from .config import ProxySQLConfig
from .database import PyMySQLExecutor, SQLExecutor, open_executor
from .errors import (
    BadCommentError,
    BadCompressionError,
    BadHostgroupIDError,
    BadHostnameError,
    BadMaxConnectionsError,
    BadMaxLatencyMSError,
    BadMaxReplicationLagError,
    BadPortError,
    BadStatusError,
    BadTableError,
    BadUseSSLError,
    BadWeightError,
    ConfigError,
    DuplicateSpecError,
    NoHostnameError,
    NoRowsError,
    OnlyTableAllowedError,
    ProxySQLError,
    ScanError,
)
from .host import Host, default_host
from .query.options import (
    comment,
    compression,
    hostgroup_id,
    hostname,
    max_connections,
    max_latency_ms,
    max_replication_lag,
    port,
    status,
    table,
    use_ssl,
    weight,
)

__version__ = "1.0.0"

__all__ = [
    'ProxySQL',
    'ProxySQLConfig',
    'PyMySQLExecutor',
    'SQLExecutor',
    'open_executor',
    'Host',
    'default_host',
    # options
    'comment',
    'compression',
    'hostgroup_id',
    'hostname',
    'max_connections',
    'max_latency_ms',
    'max_replication_lag',
    'port',
    'status',
    'table',
    'use_ssl',
    'weight',
    # errors
    'ProxySQLError',
    'ConfigError',
    'BadTableError',
    'BadHostgroupIDError',
    'BadPortError',
    'BadMaxConnectionsError',
    'BadStatusError',
    'BadWeightError',
    'BadCompressionError',
    'BadMaxReplicationLagError',
    'BadUseSSLError',
    'BadMaxLatencyMSError',
    'DuplicateSpecError',
    'NoHostnameError',
    'BadHostnameError',
    'BadCommentError',
    'OnlyTableAllowedError',
    'NoRowsError',
    'ScanError',
]
