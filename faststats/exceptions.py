class FastStatsError(Exception):
    """Base class for errors raised by the result queries."""


class ValidationError(FastStatsError):
    """The caller supplied an unusable search input."""


class NotFoundError(FastStatsError):
    """No results exist for the requested lifter and hometown."""


class QueryError(FastStatsError):
    """The database failed to execute or read a query."""
