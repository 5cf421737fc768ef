"""
Error types for the ProxySQL admin client

Configuration errors are raised before anything is sent to ProxySQL.
Store errors (pymysql.MySQLError and friends) are never wrapped; the only
store-side types defined here are the "no row" sentinel and scan failures.
"""


class ProxySQLError(Exception):
    """Base class for every error raised by this package."""

    message = "ProxySQL admin error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


# =============================================================================
# Configuration / validation errors
# =============================================================================

class ConfigError(ProxySQLError, ValueError):
    """A host query failed validation. Nothing was sent to ProxySQL."""


class BadTableError(ConfigError):
    message = "Bad table value, must be one of 'mysql_servers', 'runtime_mysql_servers'"


class BadHostgroupIDError(ConfigError):
    message = "Bad hostgroup value, must be in [0, 2147483648]"


class BadPortError(ConfigError):
    message = "Bad port value, must be in [0, 65535]"


class BadMaxConnectionsError(ConfigError):
    message = "Bad max_connections value, must be >= 0"


class BadStatusError(ConfigError):
    message = "Bad status value, must be one of 'ONLINE', 'SHUNNED', 'OFFLINE_SOFT', 'OFFLINE_HARD'"


class BadWeightError(ConfigError):
    message = "Bad weight value, must be >= 0"


class BadCompressionError(ConfigError):
    message = "Bad compression value, must be in [0, 102400]"


class BadMaxReplicationLagError(ConfigError):
    message = "Bad max_replication_lag value, must be in [0, 126144000]"


class BadUseSSLError(ConfigError):
    message = "Bad use_ssl value, must be one of 0, 1"


class BadMaxLatencyMSError(ConfigError):
    message = "Bad max_latency_ms value, must be >= 0"


class DuplicateSpecError(ConfigError):
    message = "Bad function call, a value was specified twice"


class NoHostnameError(ConfigError):
    message = "Bad hostname, must not be empty"


class BadHostnameError(ConfigError):
    message = "Bad hostname value, must be a string"


class BadCommentError(ConfigError):
    message = "Bad comment value, must be a string"


class OnlyTableAllowedError(ConfigError):
    message = "Bad function call, only table() may be passed to all()"


# =============================================================================
# Store-side errors
# =============================================================================

class NoRowsError(ProxySQLError):
    """A single-row lookup matched nothing."""

    message = "no rows in result set"


class ScanError(ProxySQLError):
    """A result row could not be converted into a Host."""

    message = "could not scan row into host"
