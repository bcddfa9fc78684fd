"""
Application-level errors raised by use cases.

All of them are ValueError subclasses, so callers that only care about
"the request could not be served" can keep catching ValueError. Controllers
map each class to an HTTP status.
"""


class ValidationError(ValueError):
    """Request data is missing or invalid (400)"""


class AuthenticationError(ValueError):
    """Credentials or token could not be verified (401)"""


class NotFoundError(ValueError):
    """User, product or cart line does not exist (404)"""


class ConflictError(ValueError):
    """Username or email is already used by another account (409)"""


class PersistenceError(ValueError):
    """The user store refused a write (500)"""
