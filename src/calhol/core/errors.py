class CalholError(Exception):
    """Base error."""

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() their message
        if len(self.args) == 1:
            return str(self.args[0])
        return super().__str__()

class InvalidDateError(CalholError, ValueError):
    """Raised when a date does not exist in the Gregorian calendar."""

class InvalidArgumentError(CalholError, ValueError):
    """Raised on malformed input to a date rule, provider or holiday."""

class UnknownRegionError(CalholError, KeyError):
    """Raised when no provider is registered for a region code."""

class UnknownLocaleError(CalholError, KeyError):
    """Raised when a locale has no translations at all."""

class DuplicateKeyError(CalholError, KeyError):
    """Raised when two rules contribute the same holiday key for one year."""
