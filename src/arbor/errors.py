class ArborError(Exception):
    """Base class for errors raised while growing a structure."""


class ConfigurationError(ArborError, ValueError):
    """Raised when a growth configuration is out of range or malformed."""


class DerivationError(ArborError, ValueError):
    """Raised when a derivation is requested with invalid arguments."""


class InterpretationError(ArborError):
    """Raised when the turtle cannot continue through a derived sequence."""

    def __init__(self, message: str, *, symbol: str, index: int) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.index = index


class UnbalancedBracketsError(InterpretationError):
    """Raised when ``]`` would pop the protected root state."""


class UnrecognizedSymbolError(InterpretationError):
    """Raised when a symbol has no turtle operation and is not inert."""
