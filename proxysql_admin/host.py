"""
Host - one row of ProxySQL's mysql_servers config table

Maps each column to its literal type so statement rendering never has to
inspect values at runtime. Rendering is the only thing this module does;
validation lives in query/validators.py.
"""

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, Callable, Mapping

from .errors import ScanError

ONLINE = "ONLINE"
SHUNNED = "SHUNNED"
OFFLINE_SOFT = "OFFLINE_SOFT"
OFFLINE_HARD = "OFFLINE_HARD"

VALID_STATUSES = (ONLINE, SHUNNED, OFFLINE_SOFT, OFFLINE_HARD)


@dataclass
class FieldDef:
    """Maps a mysql_servers column to its literal type."""
    column: str
    type: str  # integer, string
    get: Callable[[Any], Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.get = attrgetter(self.column)


# Column order matches the mysql_servers table definition
HOST_FIELDS: dict[str, FieldDef] = {
    f.column: f for f in (
        FieldDef("hostgroup_id", "integer"),
        FieldDef("hostname", "string"),
        FieldDef("port", "integer"),
        FieldDef("status", "string"),
        FieldDef("weight", "integer"),
        FieldDef("compression", "integer"),
        FieldDef("max_connections", "integer"),
        FieldDef("max_replication_lag", "integer"),
        FieldDef("use_ssl", "integer"),
        FieldDef("max_latency_ms", "integer"),
        FieldDef("comment", "string"),
    )
}

HOST_COLUMNS = tuple(HOST_FIELDS)


def quote(value: str) -> str:
    """Render a string as a single-quoted SQL literal."""
    return "'" + str(value).replace("'", "''") + "'"


@dataclass
class Host:
    """Represents a row in ProxySQL's mysql_servers config table."""
    hostgroup_id: int = 0
    hostname: str = ""
    port: int = 3306
    status: str = ONLINE
    weight: int = 1
    compression: int = 0
    max_connections: int = 1000
    max_replication_lag: int = 0
    use_ssl: int = 0
    max_latency_ms: int = 0
    comment: str = ""

    # Chaining setters. Nothing is validated here.

    def set_hostgroup_id(self, hostgroup_id: int) -> "Host":
        self.hostgroup_id = hostgroup_id
        return self

    def set_hostname(self, hostname: str) -> "Host":
        self.hostname = hostname
        return self

    def set_port(self, port: int) -> "Host":
        self.port = port
        return self

    def set_status(self, status: str) -> "Host":
        self.status = status
        return self

    def set_weight(self, weight: int) -> "Host":
        self.weight = weight
        return self

    def set_compression(self, compression: int) -> "Host":
        self.compression = compression
        return self

    def set_max_connections(self, max_connections: int) -> "Host":
        self.max_connections = max_connections
        return self

    def set_max_replication_lag(self, max_replication_lag: int) -> "Host":
        self.max_replication_lag = max_replication_lag
        return self

    def set_use_ssl(self, use_ssl: int) -> "Host":
        self.use_ssl = use_ssl
        return self

    def set_max_latency_ms(self, max_latency_ms: int) -> "Host":
        self.max_latency_ms = max_latency_ms
        return self

    def set_comment(self, comment: str) -> "Host":
        self.comment = comment
        return self

    def validate(self) -> None:
        """
        Run the full validation pipeline against this host.

        Raises:
            ConfigError: the first rule the host violates
        """
        from .query.builder import default_host_query
        from .query.validators import validate_host_query, validate_text_fields

        query = default_host_query()
        query.host = self
        validate_host_query(query)
        validate_text_fields(query)

    def render_literal(self, column: str) -> str:
        """
        Render one column of this host as a SQL literal.

        Integers are left bare, strings are quoted. A column with an
        unrecognised type renders as an empty literal.
        """
        field_def = HOST_FIELDS[column]
        value = field_def.get(self)
        if field_def.type == "integer":
            return str(int(value))
        if field_def.type == "string":
            return quote(value)
        return ""

    def render_values(self) -> str:
        return "(" + ", ".join(self.render_literal(c) for c in HOST_COLUMNS) + ")"

    @staticmethod
    def render_columns() -> str:
        return "(" + ", ".join(HOST_COLUMNS) + ")"

    def render_where(self) -> str:
        """Equality over all eleven columns, for exact-match lookups."""
        return " and ".join(f"{c} = {self.render_literal(c)}" for c in HOST_COLUMNS)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Host":
        """
        Build a Host from a result row keyed by column name.

        The admin interface reports every column as text, so integer
        columns are converted here. Columns this class does not know about
        (gtid_port on ProxySQL 2.x) are ignored.

        Raises:
            ScanError: a column is missing or an integer column is not numeric
        """
        values = {}
        for column, field_def in HOST_FIELDS.items():
            if column not in row:
                raise ScanError(f"column {column} missing from result row")
            value = row[column]
            if field_def.type == "integer":
                try:
                    value = int(value)
                except (TypeError, ValueError) as e:
                    raise ScanError(f"column {column}: cannot convert {value!r} to int") from e
            elif value is None:
                value = ""
            else:
                value = str(value)
            values[column] = value
        return cls(**values)


def default_host() -> Host:
    """
    Default host in terms of the mysql_servers table.
    Note that hostname is left empty.
    """
    return Host()
