"""
GPIO Errors

Every failure the library reports derives from GPIOError, so callers can
catch the whole family with a single except clause or pick out one case.

Validation errors also subclass ValueError, permission problems subclass
PermissionError and the export timeout subclasses TimeoutError, so code
written against the builtin exceptions keeps working.
"""


class GPIOError(Exception):
    """Base class for all sysfs_gpio errors"""


# =============================================================================
# NUMBERING MODE
# =============================================================================


class ModeNotSetError(GPIOError):
    """No numbering mode has been selected with setmode()"""


class ModeConflictError(GPIOError):
    """A different numbering mode is already active"""


class InvalidModeError(GPIOError, ValueError):
    """The requested numbering mode is unknown or unsupported by the board"""


# =============================================================================
# CHANNEL RESOLUTION
# =============================================================================


class InvalidChannelError(GPIOError, ValueError):
    """The channel has no entry under the active numbering mode"""


class NotGPIOCapableError(GPIOError, ValueError):
    """The channel exists but is not connected to a GPIO controller"""


class NotPWMCapableError(GPIOError, ValueError):
    """The channel exists but is not connected to a PWM controller"""


# =============================================================================
# ARGUMENT VALIDATION
# =============================================================================


class InvalidDirectionError(GPIOError, ValueError):
    """setup() was given a direction other than IN or OUT"""


class InvalidArgumentError(GPIOError, ValueError):
    """An argument is not valid for the requested operation"""


class LengthMismatchError(GPIOError, ValueError):
    """output() got a different number of values than channels"""


class NotSetUpError(GPIOError):
    """The channel has not been set up for the requested operation"""


# =============================================================================
# KERNEL INTERFACE
# =============================================================================


class GPIOPermissionError(GPIOError, PermissionError):
    """The process cannot write to the sysfs export/unexport nodes"""


class SysfsIOError(GPIOError):
    """A sysfs read or write failed; wraps the underlying OSError"""


class ExportTimeoutError(GPIOError, TimeoutError):
    """The kernel did not create the exported line's nodes in time"""


# =============================================================================
# BOARD DESCRIPTION
# =============================================================================


class BoardConfigError(GPIOError):
    """A board description file is missing or malformed"""
