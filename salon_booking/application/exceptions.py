class DirectoryReadError(RuntimeError):
    """Raised when a catalog, location or stylist read fails (network errors, bad responses)."""
    pass


class BookingGatewayError(RuntimeError):
    """Raised when the external scheduler rejects or fails a booking write."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class FlowStateError(RuntimeError):
    """Raised when an action is not allowed at the flow's current step."""
    pass
