"""startwork exception hierarchy.

All public exceptions inherit from StartWorkError, giving callers a single
base class to catch when they want to handle any startwork-specific failure
without swallowing unrelated errors.

A missing or stale IDE preference is deliberately absent from this module:
it is not an error, the default IDE is used instead.
"""


class StartWorkError(Exception):
    """Base exception for all startwork errors."""


class RegistryError(StartWorkError):
    """Raised when the IDE catalogue is malformed.

    Covers empty catalogues, duplicate display names or protocol
    prefixes, and protocol prefixes that do not end with ``/``.
    """


class DuplicateMonikerError(RegistryError):
    """Raised when two catalogue entries share the same moniker."""


class UnknownMonikerError(RegistryError):
    """Raised when a moniker is selected that the catalogue does not know."""


class StoreUnavailableError(StartWorkError):
    """Raised when the scoped key-value store cannot be read or written.

    Reads recover from it locally (the default IDE is used); writes
    surface it to the user.
    """


class StoreQuotaError(StoreUnavailableError):
    """Raised when a write would exceed the per-bucket storage quota."""


class CardContextUnavailableError(StartWorkError):
    """Raised when the fields of the in-context card cannot be read.

    Fatal to the current launch attempt.
    """


class MalformedRouteError(StartWorkError):
    """Raised when a link would be built from an empty protocol or controller."""


class SettingsError(StartWorkError):
    """Raised for invalid transitions of the settings controller."""


class SaveInProgressError(SettingsError):
    """Raised when a save is requested while another one is pending."""


class LaunchAbortedError(StartWorkError):
    """Raised when a launch stops before navigation.

    The underlying store or card-source failure is chained as
    ``__cause__``.
    """


class UnsupportedCapabilityError(StartWorkError):
    """Raised when the host asks for a capability with no handler."""
