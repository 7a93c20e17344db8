"""
Packet helpers.

Checksum computation for hand-built IPv4, IGMP and UDP headers.
"""

from mcastutils.packet.checksum import (
    compute_checksum,
    compute_checksum_bytes,
)

__all__ = [
    "compute_checksum",
    "compute_checksum_bytes",
]
