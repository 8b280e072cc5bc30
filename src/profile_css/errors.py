class ProfileCssError(Exception):
    """Base class for fatal build errors."""


class SourceReadError(ProfileCssError):
    def __init__(self, identity: str, reason: str) -> None:
        super().__init__(f"Error reading {identity}: {reason}")
        self.identity = identity
        self.reason = reason


class MinificationError(ProfileCssError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Error minifying CSS: {message}")
        self.engine_message = message
