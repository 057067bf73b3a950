"""Errors raised by the menu catalog providers.

None of these escape CatalogSource.resolve(): they are logged where they
occur and the resolve falls through to the next tier.
"""


class MenuError(Exception):
    """Base class for catalog provider failures."""


class FetchError(MenuError):
    """Remote menu unreachable, non-2xx, or the payload could not be parsed."""


class PersistError(MenuError):
    """Menu storage read or write failed."""


class InitError(MenuError):
    """Menu storage is not available in the current environment."""
