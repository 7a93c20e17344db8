"""
Core IPv4/CIDR functionality.
"""

import logging
import operator
import re
from collections.abc import Iterator, Sequence

from netaddr import INET_PTON, AddrFormatError, IPAddress, IPNetwork

from mcastutils.config import get_config
from mcastutils.errors import AddressError, AddressRangeTooLarge, CIDRParseError


logger = logging.getLogger(__name__)

MAX_IPV4 = 0xFFFFFFFF
HOST_ROUTE_PREFIX = 32

_PREFIX_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _to_ipv4(address) -> IPAddress:
    """Normalise any supported address representation to an IPv4 IPAddress."""
    if isinstance(address, (bytes, bytearray, memoryview)):
        packed = bytes(address)
        if len(packed) == 4:
            return IPAddress(int.from_bytes(packed, "big"), 4)
        if len(packed) == 16:
            address = IPAddress(int.from_bytes(packed, "big"), 6)
        else:
            raise AddressError(f"packed address must be 4 or 16 bytes, got {len(packed)}")

    try:
        ip = IPAddress(address, flags=INET_PTON)
    except (AddrFormatError, TypeError, ValueError) as exc:
        raise AddressError(f"invalid IP address: {address!r}") from exc

    if ip.version == 4:
        return ip
    if ip.is_ipv4_mapped():
        return ip.ipv4()
    raise AddressError(f"{ip} has no IPv4 representation")


def ip4_to_int(address) -> int:
    """Return the 32-bit big-endian integer for an IPv4 address.

    Accepts an IPAddress, a string, an int, or packed bytes. IPv4-mapped
    IPv6 addresses are unwrapped; any other IPv6 address raises AddressError.
    """
    return _to_ipv4(address).value


def int_to_ip4(value: int) -> IPAddress:
    """Return the IPv4 address for a 32-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise AddressError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_IPV4:
        raise AddressError(f"{value} is outside the 32-bit IPv4 range")
    return IPAddress(value, 4)


def split_cidr(address: str) -> tuple[str, int]:
    """Split ``address[/prefix]`` into the address part and prefix length.

    A bare address is treated as a /32 host route. The address part is
    returned as given; it is validated later by the CIDR parser.
    """
    if "/" not in address:
        return address, HOST_ROUTE_PREFIX

    network, _, mask = address.partition("/")
    if not _PREFIX_RE.fullmatch(mask):
        raise CIDRParseError(f"invalid prefix length {mask!r} in {address!r}")
    prefix = int(mask, 10)
    if not _INT32_MIN <= prefix <= _INT32_MAX:
        raise CIDRParseError(f"prefix length {mask!r} out of range in {address!r}")
    return network, prefix


def _parse_cidr(network, prefix: int) -> IPNetwork:
    cidr = f"{network}/{prefix}"
    if isinstance(prefix, bool) or not isinstance(prefix, int) or not 0 <= prefix <= HOST_ROUTE_PREFIX:
        raise CIDRParseError(f"invalid CIDR address: {cidr}")

    try:
        base = IPAddress(network, 4, flags=INET_PTON)
    except (AddrFormatError, TypeError, ValueError) as exc:
        raise CIDRParseError(f"invalid CIDR address: {cidr}") from exc

    # .cidr masks the host bits off the base address
    return IPNetwork(f"{base}/{prefix}").cidr


class AddressBlock(Sequence):
    """Every address of an IPv4 CIDR block, network address to broadcast.

    Addresses are computed on access, so a /8 costs no more memory than a
    /30. Iteration can be restarted any number of times.
    """

    def __init__(self, network: IPNetwork):
        if network.version != 4:
            raise AddressError(f"{network} is not an IPv4 network")
        self._cidr = network.cidr

    @property
    def cidr(self) -> IPNetwork:
        return self._cidr

    @property
    def prefix_length(self) -> int:
        return self._cidr.prefixlen

    @property
    def host_bits(self) -> int:
        return HOST_ROUTE_PREFIX - self._cidr.prefixlen

    @property
    def network(self) -> IPAddress:
        """Address with all host bits zero."""
        return IPAddress(self._cidr.first, 4)

    @property
    def broadcast(self) -> IPAddress:
        """Address with all host bits one."""
        return IPAddress(self._cidr.last, 4)

    def __len__(self) -> int:
        return 1 << self.host_bits

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]

        index = operator.index(index)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("address index out of range")
        return int_to_ip4(self._cidr.first | index)

    def __iter__(self) -> Iterator[IPAddress]:
        base = self._cidr.first
        for offset in range(len(self)):
            yield int_to_ip4(base | offset)

    def __contains__(self, address) -> bool:
        try:
            value = ip4_to_int(address)
        except AddressError:
            return False
        return self._cidr.first <= value <= self._cidr.last

    def __str__(self) -> str:
        return str(self._cidr)

    def __repr__(self) -> str:
        return f"AddressBlock('{self._cidr}')"


def address_block(network, prefix: int) -> AddressBlock:
    """Return the lazy address block for ``network/prefix``.

    The network does not need to be the block's first address; host bits
    are masked off.
    """
    return AddressBlock(_parse_cidr(network, prefix))


def address_block_cidr(address: str) -> AddressBlock:
    """Return the lazy address block for an ``address[/prefix]`` string."""
    network, prefix = split_cidr(address)
    return address_block(network, prefix)


def ip_list(network, prefix: int, limit: int | None = None) -> list[IPAddress]:
    """Return every address in the block that ``network/prefix`` falls in.

    The list includes both the network address (first item) and the
    broadcast address (last item). Blocks larger than ``limit`` addresses
    raise AddressRangeTooLarge; ``limit`` defaults to the configured
    ``max_list_addresses`` and 0 disables the check.
    """
    block = address_block(network, prefix)
    if limit is None:
        limit = get_config().max_list_addresses
    if limit and len(block) > limit:
        raise AddressRangeTooLarge(str(block), len(block), limit)

    logger.debug("Enumerating %d addresses in %s", len(block), block)
    return list(block)


def ip_list_cidr(address: str, limit: int | None = None) -> list[IPAddress]:
    """Return every address in the block described by ``address[/prefix]``."""
    network, prefix = split_cidr(address)
    return ip_list(network, prefix, limit=limit)
