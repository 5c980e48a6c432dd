"""
Domain exceptions.

Every error raised by the service layer derives from `DaiaraError` and
carries the HTTP status and a client-safe `detail`.  The app factory
registers a single handler that turns them into JSON responses.

Verification failures keep their specific cause in `reason` — that
value is for server logs only and never reaches the client.
"""


class DaiaraError(Exception):
    status_code: int = 500
    detail: str = "Unexpected error"

    def __init__(self, detail: str | None = None, *, reason: str | None = None):
        if detail is not None:
            self.detail = detail
        self.reason = reason or self.detail
        super().__init__(self.reason)


class InvalidRequest(DaiaraError):
    status_code = 400
    detail = "Invalid request"


class ScreenNotFound(DaiaraError):
    status_code = 404
    detail = "Invalid device code"


class InvalidCredential(DaiaraError):
    """The credential is malformed or its signature does not verify."""

    status_code = 401
    detail = "Wrong session token provided"


class Unauthorized(DaiaraError):
    """Uniform client-facing denial for every session verification failure."""

    status_code = 403
    detail = "Session token is invalid or expired"


class NoActiveSession(Unauthorized):
    pass


class SessionExpired(Unauthorized):
    pass


class CredentialMismatch(Unauthorized):
    pass


class InvalidWallet(DaiaraError):
    status_code = 400
    detail = "Invalid wallet address"


class StoreUnavailable(DaiaraError):
    """A store, validator or other collaborator failed unexpectedly."""

    status_code = 500
    detail = "Unexpected error"
