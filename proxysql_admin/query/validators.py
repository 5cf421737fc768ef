"""
Host Query Validators

Each rule inspects one concern of a HostQuery and raises its own
ConfigError subclass. Rules look at the Host fields whether or not they
were specified, so the defaults have to pass too.
"""

from typing import TYPE_CHECKING, Callable, Sequence

from ..errors import (
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
    DuplicateSpecError,
    NoHostnameError,
)
from ..host import VALID_STATUSES

if TYPE_CHECKING:
    from .builder import HostQuery

MYSQL_SERVERS = "mysql_servers"
RUNTIME_MYSQL_SERVERS = "runtime_mysql_servers"

VALID_TABLES = (MYSQL_SERVERS, RUNTIME_MYSQL_SERVERS)

MAX_HOSTGROUP_ID = 2147483648
MAX_PORT = 65535
MAX_COMPRESSION = 102400
MAX_REPLICATION_LAG = 126144000

Rule = Callable[["HostQuery"], None]


def _in_range(value, low: int, high: int = None) -> bool:
    # bool is an int subclass but never a valid column value
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    if value < low:
        return False
    return high is None or value <= high


def validate_table(query: "HostQuery") -> None:
    if query.table not in VALID_TABLES:
        raise BadTableError()


def validate_hostgroup_id(query: "HostQuery") -> None:
    if not _in_range(query.host.hostgroup_id, 0, MAX_HOSTGROUP_ID):
        raise BadHostgroupIDError()


def validate_port(query: "HostQuery") -> None:
    if not _in_range(query.host.port, 0, MAX_PORT):
        raise BadPortError()


def validate_max_connections(query: "HostQuery") -> None:
    if not _in_range(query.host.max_connections, 0):
        raise BadMaxConnectionsError()


def validate_status(query: "HostQuery") -> None:
    if query.host.status not in VALID_STATUSES:
        raise BadStatusError()


def validate_weight(query: "HostQuery") -> None:
    if not _in_range(query.host.weight, 0):
        raise BadWeightError()


def validate_compression(query: "HostQuery") -> None:
    if not _in_range(query.host.compression, 0, MAX_COMPRESSION):
        raise BadCompressionError()


def validate_max_replication_lag(query: "HostQuery") -> None:
    if not _in_range(query.host.max_replication_lag, 0, MAX_REPLICATION_LAG):
        raise BadMaxReplicationLagError()


def validate_use_ssl(query: "HostQuery") -> None:
    if not _in_range(query.host.use_ssl, 0, 1):
        raise BadUseSSLError()


def validate_max_latency_ms(query: "HostQuery") -> None:
    if not _in_range(query.host.max_latency_ms, 0):
        raise BadMaxLatencyMSError()


def validate_specified_fields(query: "HostQuery") -> None:
    """Raises DuplicateSpecError if any field was specified twice."""
    encountered = set()
    for column in query.specified_fields:
        if column in encountered:
            raise DuplicateSpecError()
        encountered.add(column)


def require_hostname(query: "HostQuery") -> None:
    """
    Only applied by operations that create rows. An empty hostname is a
    valid "any hostname" filter for reads and deletes.
    """
    if not query.host.hostname:
        raise NoHostnameError()


# Evaluated in order, stopping at the first failure
VALIDATION_RULES: tuple[Rule, ...] = (
    validate_table,
    validate_hostgroup_id,
    validate_port,
    validate_max_connections,
    validate_status,
    validate_weight,
    validate_compression,
    validate_max_replication_lag,
    validate_use_ssl,
    validate_max_latency_ms,
    validate_specified_fields,
)


def validate_host_query(query: "HostQuery", rules: Sequence[Rule] = VALIDATION_RULES) -> None:
    """
    Run each rule against the query.

    Raises:
        ConfigError: the error of the first rule that failed
    """
    for rule in rules:
        rule(query)


def validate_text_fields(query: "HostQuery") -> None:
    """
    Reject hostname and comment values that are not strings. Runs after
    the rule pipeline, which only covers the numeric and enum columns.
    """
    if not isinstance(query.host.hostname, str):
        raise BadHostnameError()
    if not isinstance(query.host.comment, str):
        raise BadCommentError()
