"""Exceptions raised outside the search core."""


class PalindromicFuelError(Exception):
    """Base class for errors raised by palindromic_fuel."""


class InputError(PalindromicFuelError, ValueError):
    """Raised when user input cannot be turned into search parameters."""


class ExportError(PalindromicFuelError):
    """Raised when results cannot be written out."""
