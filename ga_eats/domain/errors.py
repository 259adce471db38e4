"""
Error taxonomy of the proximity core.

* ``InvalidArgument``   -- out-of-contract input (non-positive radius/limit,
  unsupported filter).  Local and synchronous, never retried.
* ``NotFound``          -- a named-location lookup resolved to nothing.  An
  empty result set is *not* an error.
* ``DataAccessFailure`` -- the store could not be reached or the query
  failed.  Always raised ``from`` the underlying driver error.
"""


class ProximityError(Exception):
    """Base class for errors raised by the proximity core."""


class InvalidArgument(ProximityError):
    """Raised when a query violates the operation's contract."""


class NotFound(ProximityError):
    """Raised when a named location cannot be resolved."""


class DataAccessFailure(ProximityError):
    """Raised when the underlying data store fails."""
