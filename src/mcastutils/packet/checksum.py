"""
One's-complement checksum used in IPv4, IGMP and UDP headers.
"""

import struct


def compute_checksum(buf: bytes | bytearray | memoryview) -> int:
    """Return the 16-bit one's-complement checksum of ``buf``.

    The buffer is summed as big-endian 16-bit words; an odd trailing byte
    is padded with a zero low byte.
    """
    data = memoryview(buf).tobytes()
    if len(data) % 2:
        data += b"\x00"

    total = sum(struct.unpack(f"!{len(data) // 2}H", data))
    while total > 0xFFFF:
        total = (total >> 16) + (total & 0xFFFF)

    checksum = ~total & 0xFFFF

    # RFC 768: a computed zero is transmitted as all ones, since an all-zero
    # checksum field means no checksum was generated.
    if checksum == 0:
        checksum = 0xFFFF
    return checksum


def compute_checksum_bytes(buf: bytes | bytearray | memoryview) -> tuple[int, int]:
    """Return the checksum of ``buf`` as ``(high byte, low byte)``."""
    checksum = compute_checksum(buf)
    return checksum >> 8, checksum & 0xFF
