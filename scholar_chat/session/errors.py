"""Error taxonomy for the conversation session."""


class InvariantViolation(Exception):
    """Raised when a session invariant is broken (e.g. duplicate turn id)."""

    pass


class GatewayFailure(Exception):
    """Raised when the assistant gateway cannot produce a reply."""

    pass


class GatewayTimeout(GatewayFailure):
    """Raised when the assistant gateway does not settle in time."""

    pass
