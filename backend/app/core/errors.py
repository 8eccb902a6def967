"""Domain errors raised below the HTTP layer."""


class ValidationError(ValueError):
    """Untrusted input failed sanitation; ``field`` names the offending key."""

    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class AiAssistantError(RuntimeError):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
