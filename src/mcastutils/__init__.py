"""
mcastutils - helpers for multicast traffic generation

Checksums for hand-built headers, IPv4 address/integer conversion,
CIDR block enumeration and network interface lookup.
"""

from mcastutils.errors import (
    AddressError,
    AddressRangeTooLarge,
    CIDRParseError,
    ConfigError,
    InterfaceNotFoundError,
    MulticastUtilsError,
)
from mcastutils.iface import NetInterface, get_interface, list_interfaces
from mcastutils.ip import (
    AddressBlock,
    address_block,
    address_block_cidr,
    int_to_ip4,
    ip4_to_int,
    ip_list,
    ip_list_cidr,
    split_cidr,
)
from mcastutils.packet import compute_checksum, compute_checksum_bytes

__version__ = "0.1.0"

__all__ = [
    "AddressBlock",
    "AddressError",
    "AddressRangeTooLarge",
    "CIDRParseError",
    "ConfigError",
    "InterfaceNotFoundError",
    "MulticastUtilsError",
    "NetInterface",
    "address_block",
    "address_block_cidr",
    "compute_checksum",
    "compute_checksum_bytes",
    "get_interface",
    "int_to_ip4",
    "ip4_to_int",
    "ip_list",
    "ip_list_cidr",
    "list_interfaces",
    "split_cidr",
]
