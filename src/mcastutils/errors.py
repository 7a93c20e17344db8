"""
Exceptions raised by mcastutils.

Every error is a ``MulticastUtilsError`` and also subclasses the builtin
exception a caller would naturally catch (``ValueError`` for bad input,
``LookupError`` for a missing interface).
"""


class MulticastUtilsError(Exception):
    """Base class for all mcastutils errors."""
    pass


class AddressError(MulticastUtilsError, ValueError):
    """Raised when an address has no valid 4-byte IPv4 form."""
    pass


class CIDRParseError(AddressError):
    """Raised when an ``address/prefix`` string cannot be parsed."""
    pass


class AddressRangeTooLarge(AddressError):
    """Raised when a CIDR block is too large to materialise as a list."""

    def __init__(self, cidr: str, count: int, limit: int):
        self.cidr = cidr
        self.count = count
        self.limit = limit
        super().__init__(
            f"{cidr} spans {count:,} addresses which exceeds the limit of {limit:,}"
        )


class InterfaceNotFoundError(MulticastUtilsError, LookupError):
    """Raised when no local interface matches the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no such network interface: {name}")


class ConfigError(MulticastUtilsError, ValueError):
    """Raised when a configuration value cannot be parsed."""
    pass
