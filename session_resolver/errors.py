"""Error types for the session resolver.

Nothing in the engine is fatal to a running session. Missing data falls back to
defaults, mapping falls back to table defaults, and validation reports errors as
field-keyed messages. The only raised error is for remote muscle persistence,
and the synchronizer catches and logs it.

Standard error codes:
- NETWORK_ERROR: The muscle endpoint could not be reached or timed out
- HTTP_ERROR: The muscle endpoint answered with a non-2xx status
- INVALID_RESPONSE: The body was not the expected {success, data} envelope
"""


class MuscleSyncError(Exception):
    """Raised when the remote muscle-selection store fails.

    Attributes:
        code: Error code (e.g., "NETWORK_ERROR", "HTTP_ERROR", "INVALID_RESPONSE")
        message: Human-readable description
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")
