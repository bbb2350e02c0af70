"""
Custom exceptions for the stats command with user-friendly error messages.
"""

class StatsBotException(Exception):
    """Base exception for stats command errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class UsageError(StatsBotException):
    """Raised when a command is missing its required arguments."""
    def __init__(self, reason: str):
        super().__init__(f"Bad command usage: {reason}", reason)

class PlayerLookupError(StatsBotException):
    """Raised when the stats provider cannot return a player."""
    def __init__(self, handle: str, details: str = None):
        super().__init__(
            f"Lookup failed for '{handle}': {details}",
            "Unable to find player"
        )
        self.handle = handle

class PlayerNotFoundError(PlayerLookupError):
    """Raised when the stats provider has no account for the handle."""
    def __init__(self, handle: str, platform: str):
        super().__init__(handle, f"no account on platform '{platform}'")
        self.platform = platform

class StatsProviderError(PlayerLookupError):
    """Raised when the stats provider is unreachable or returns garbage."""
    def __init__(self, handle: str, details: str, status: int = None):
        super().__init__(handle, details)
        self.status = status

class InvalidOperatorError(StatsBotException):
    """Raised when an operator name does not match any of the player's operators."""
    def __init__(self, operator_name: str, username: str):
        super().__init__(
            f"Operator '{operator_name}' not found for {username}",
            f"No operator named **{operator_name}** for {username}"
        )
        self.operator_name = operator_name
        self.username = username
