"""
Network interface lookup.
"""

from mcastutils.iface.core import (
    NetInterface,
    get_interface,
    list_interfaces,
)

__all__ = [
    "NetInterface",
    "get_interface",
    "list_interfaces",
]
