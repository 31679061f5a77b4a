"""Exception hierarchy for Rephrazer.

All exceptions inherit from RephrazerError, providing a consistent error handling interface.
The prompt compiler itself never raises: only option input and preset lookup can fail.
"""


class RephrazerError(Exception):
    """Base exception for all Rephrazer errors."""


class OptionError(RephrazerError):
    """Raised when an option edit or option mapping is invalid."""


class PresetError(RephrazerError):
    """Raised when a preset name does not refer to a named preset."""
