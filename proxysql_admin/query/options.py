"""
Query options

Each option returns a function that sets one Host field on a HostQuery and
records the column as specified. Options are applied left to right, so the
order they are passed in is the order the columns are rendered in.

    add_host(hostname("db-1"), hostgroup_id(1), port(3307))
"""

from .builder import HostOpt, HostQuery


def table(name: str) -> HostOpt:
    """Select the target table. The table is never a specified field."""
    def apply(query: HostQuery) -> HostQuery:
        query.table = name
        return query
    return apply


def hostgroup_id(value: int) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_hostgroup_id(value)
        return query.specify("hostgroup_id")
    return apply


def hostname(value: str) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_hostname(value)
        return query.specify("hostname")
    return apply


def port(value: int) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_port(value)
        return query.specify("port")
    return apply


def status(value: str) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_status(value)
        return query.specify("status")
    return apply


def weight(value: int) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_weight(value)
        return query.specify("weight")
    return apply


def compression(value: int) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_compression(value)
        return query.specify("compression")
    return apply


def max_connections(value: int) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_max_connections(value)
        return query.specify("max_connections")
    return apply


def max_replication_lag(value: int) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_max_replication_lag(value)
        return query.specify("max_replication_lag")
    return apply


def use_ssl(value: int) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_use_ssl(value)
        return query.specify("use_ssl")
    return apply


def max_latency_ms(value: int) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_max_latency_ms(value)
        return query.specify("max_latency_ms")
    return apply


def comment(value: str) -> HostOpt:
    def apply(query: HostQuery) -> HostQuery:
        query.host.set_comment(value)
        return query.specify("comment")
    return apply
