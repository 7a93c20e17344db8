"""
Local network interface lookup.
"""

import logging
import socket
from dataclasses import dataclass, field

import psutil

from mcastutils.config import get_config
from mcastutils.errors import InterfaceNotFoundError


logger = logging.getLogger(__name__)


@dataclass
class NetInterface:
    """A local network interface."""
    name: str
    index: int = 0
    mtu: int = 0
    is_up: bool = False
    flags: list[str] = field(default_factory=list)
    hardware_addr: str | None = None
    ipv4_addresses: list[str] = field(default_factory=list)
    ipv6_addresses: list[str] = field(default_factory=list)

    @property
    def is_multicast(self) -> bool:
        return "multicast" in self.flags


def _interface_index(name: str) -> int:
    # 0 is never a valid index, so it marks "unknown"
    try:
        return socket.if_nametoindex(name)
    except OSError:
        return 0


def _build_interface(name: str, addrs: list, stats) -> NetInterface:
    iface = NetInterface(name=name, index=_interface_index(name))

    if stats is not None:
        iface.mtu = stats.mtu
        iface.is_up = stats.isup
        # Older psutil releases have no flags field
        raw_flags = getattr(stats, "flags", "") or ""
        iface.flags = [f for f in raw_flags.split(",") if f]

    for addr in addrs:
        if addr.family == socket.AF_INET:
            iface.ipv4_addresses.append(addr.address)
        elif addr.family == socket.AF_INET6:
            iface.ipv6_addresses.append(addr.address)
        elif addr.family == psutil.AF_LINK and iface.hardware_addr is None:
            iface.hardware_addr = addr.address

    return iface


def list_interfaces() -> list[NetInterface]:
    """Return every local network interface, sorted by name."""
    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()
    return [
        _build_interface(name, addrs.get(name, []), stats.get(name))
        for name in sorted(set(addrs) | set(stats))
    ]


def get_interface(name: str | None) -> NetInterface | None:
    """Return the interface with the given name.

    An empty name means no interface was requested and returns None, which
    lets an optional ``--interface`` option default to "". ``None`` falls
    back to the configured default interface.
    """
    if name is None:
        name = get_config().default_interface
    if not name:
        return None

    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()
    if name not in addrs and name not in stats:
        raise InterfaceNotFoundError(name)

    iface = _build_interface(name, addrs.get(name, []), stats.get(name))
    logger.debug("Resolved interface %s (index %d, mtu %d)", iface.name, iface.index, iface.mtu)
    return iface
