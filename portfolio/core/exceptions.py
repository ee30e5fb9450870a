"""
Exception classes for the Portfolio API pipelines.

Pipeline errors are plain exceptions raised by the validator, the gateway
adapters and their collaborators. Route handlers translate them into the
JSON error envelope; none of them carries client-facing text.
"""


class GatewayError(Exception):
    """Base class for every error raised inside a request pipeline."""


class ValidationError(GatewayError):
    """A required request field is missing or empty."""

    def __init__(self, message: str = "required fields missing"):
        super().__init__(message)


class StoreError(GatewayError):
    """The document store rejected or failed to persist a record."""


class TransportError(GatewayError):
    """The mail transport failed to accept a message."""


class DeliveryError(GatewayError):
    """A notification or auto-reply could not be sent after persisting."""


class UpstreamError(GatewayError):
    """The generative-text service call failed or was unreachable."""


class MethodError(GatewayError):
    """The endpoint was called with a disallowed HTTP method."""


class CorsRejection(GatewayError):
    """The request Origin is not on the configured allow-list."""

    def __init__(self, origin: str):
        self.origin = origin
        super().__init__(f"Origin not allowed: {origin}")
