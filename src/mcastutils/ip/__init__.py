"""
IPv4/CIDR Tools Module

Provides address/integer conversion, CIDR string splitting and
enumeration of every address in a CIDR block.
"""

from mcastutils.ip.core import (
    AddressBlock,
    address_block,
    address_block_cidr,
    int_to_ip4,
    ip4_to_int,
    ip_list,
    ip_list_cidr,
    split_cidr,
)

__all__ = [
    "AddressBlock",
    "address_block",
    "address_block_cidr",
    "int_to_ip4",
    "ip4_to_int",
    "ip_list",
    "ip_list_cidr",
    "split_cidr",
]
