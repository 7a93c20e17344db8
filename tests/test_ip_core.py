import random

import pytest
from netaddr import IPAddress, IPNetwork

from mcastutils.config import UtilsConfig, set_config
from mcastutils.errors import AddressError, AddressRangeTooLarge, CIDRParseError
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


def _strs(addresses):
    return [str(a) for a in addresses]


# ip4_to_int / int_to_ip4

def test_ip4_to_int_known_values():
    assert ip4_to_int("0.0.0.0") == 0
    assert ip4_to_int("255.255.255.255") == 0xFFFFFFFF
    assert ip4_to_int("192.168.1.2") == 0xC0A80102
    assert ip4_to_int(IPAddress("239.1.2.3")) == 0xEF010203


def test_ip4_to_int_accepts_packed_and_int():
    assert ip4_to_int(b"\x0a\x00\x00\x01") == 0x0A000001
    assert ip4_to_int(0x0A000001) == 0x0A000001


def test_ip4_to_int_unwraps_ipv4_mapped():
    assert ip4_to_int("::ffff:10.1.2.3") == 0x0A010203
    mapped = bytes(10) + b"\xff\xff" + b"\x0a\x01\x02\x03"
    assert ip4_to_int(mapped) == 0x0A010203


@pytest.mark.parametrize("address", ["2001:db8::1", "::1", "not-an-ip", "10.0.0", "256.0.0.1", b"\x01\x02"])
def test_ip4_to_int_rejects_non_ipv4(address):
    with pytest.raises(AddressError):
        ip4_to_int(address)


def test_int_to_ip4_known_values():
    assert int_to_ip4(0xC0A80102) == IPAddress("192.168.1.2")
    assert int_to_ip4(0).version == 4
    assert str(int_to_ip4(0xFFFFFFFF)) == "255.255.255.255"


@pytest.mark.parametrize("value", [-1, 1 << 32, "10.0.0.1", 1.5, True])
def test_int_to_ip4_rejects_out_of_range(value):
    with pytest.raises(AddressError):
        int_to_ip4(value)


def test_address_and_integer_are_inverse():
    rng = random.Random(1234)
    for value in [0, 1, 0xFFFFFFFF] + [rng.getrandbits(32) for _ in range(200)]:
        assert ip4_to_int(int_to_ip4(value)) == value
        address = int_to_ip4(value)
        assert int_to_ip4(ip4_to_int(address)) == address


def test_address_error_is_value_error():
    with pytest.raises(ValueError):
        ip4_to_int("fe80::1")


# split_cidr

def test_split_cidr_bare_address_is_host_route():
    assert split_cidr("10.0.0.1") == ("10.0.0.1", 32)


def test_split_cidr_with_prefix():
    assert split_cidr("10.0.0.0/24") == ("10.0.0.0", 24)
    assert split_cidr("239.0.0.0/+8") == ("239.0.0.0", 8)


def test_split_cidr_does_not_validate_address():
    assert split_cidr("bogus/16") == ("bogus", 16)
    assert split_cidr("10.0.0.0/64") == ("10.0.0.0", 64)


@pytest.mark.parametrize("address", ["10.0.0.0/abc", "10.0.0.0/", "10.0.0.0/2 4", "10.0.0.0/24/8", "10.0.0.0/99999999999"])
def test_split_cidr_rejects_bad_prefix(address):
    with pytest.raises(CIDRParseError):
        split_cidr(address)


# ip_list / ip_list_cidr

def test_ip_list_cidr_slash_30():
    assert _strs(ip_list_cidr("192.168.1.0/30")) == [
        "192.168.1.0",
        "192.168.1.1",
        "192.168.1.2",
        "192.168.1.3",
    ]


def test_ip_list_masks_to_network():
    addresses = ip_list("10.1.2.77", 28)
    assert str(addresses[0]) == "10.1.2.64"
    assert str(addresses[-1]) == "10.1.2.79"


@pytest.mark.parametrize("prefix", [32, 31, 30, 24, 20, 16])
def test_ip_list_size_and_bounds(prefix):
    addresses = ip_list("172.16.5.9", prefix)
    net = IPNetwork(f"172.16.5.9/{prefix}").cidr
    host_mask = (1 << (32 - prefix)) - 1

    assert len(addresses) == 2 ** (32 - prefix)
    assert addresses[0] == IPAddress(net.first, 4)
    assert ip4_to_int(addresses[-1]) == ip4_to_int(addresses[0]) | host_mask
    assert [ip4_to_int(a) for a in addresses] == sorted(ip4_to_int(a) for a in addresses)


def test_ip_list_host_route():
    assert _strs(ip_list_cidr("239.255.0.1")) == ["239.255.0.1"]


def test_ip_list_returns_ipv4_addresses():
    assert all(a.version == 4 for a in ip_list("224.0.0.0", 29))


@pytest.mark.parametrize("network,prefix", [
    ("10.0.0.0", 33),
    ("10.0.0.0", -1),
    ("10.0.0", 24),
    ("nonsense", 24),
    ("2001:db8::", 32),
    ("", 24),
])
def test_ip_list_rejects_invalid_cidr(network, prefix):
    with pytest.raises(CIDRParseError):
        ip_list(network, prefix)


def test_ip_list_cidr_propagates_split_error():
    with pytest.raises(CIDRParseError):
        ip_list_cidr("10.0.0.0/abc")


def test_ip_list_guard_uses_config():
    set_config(UtilsConfig(max_list_addresses=256))
    assert len(ip_list("10.0.0.0", 24)) == 256
    with pytest.raises(AddressRangeTooLarge) as excinfo:
        ip_list("10.0.0.0", 23)
    assert excinfo.value.count == 512
    assert excinfo.value.limit == 256
    assert excinfo.value.cidr == "10.0.0.0/23"


def test_ip_list_explicit_limit_overrides_config():
    with pytest.raises(AddressRangeTooLarge):
        ip_list_cidr("10.0.0.0/29", limit=4)
    assert len(ip_list_cidr("10.0.0.0/29", limit=8)) == 8


def test_ip_list_limit_zero_disables_guard():
    set_config(UtilsConfig(max_list_addresses=1))
    assert len(ip_list("10.0.0.0", 22, limit=0)) == 1024


def test_ip_list_default_guard_rejects_slash_zero():
    with pytest.raises(AddressRangeTooLarge):
        ip_list("0.0.0.0", 0)


# AddressBlock

def test_address_block_properties():
    block = address_block("192.168.10.200", 24)
    assert isinstance(block, AddressBlock)
    assert str(block) == "192.168.10.0/24"
    assert repr(block) == "AddressBlock('192.168.10.0/24')"
    assert block.prefix_length == 24
    assert block.host_bits == 8
    assert str(block.network) == "192.168.10.0"
    assert str(block.broadcast) == "192.168.10.255"
    assert len(block) == 256


def test_address_block_indexing():
    block = address_block_cidr("10.0.0.0/30")
    assert str(block[0]) == "10.0.0.0"
    assert str(block[-1]) == "10.0.0.3"
    assert _strs(block[1:3]) == ["10.0.0.1", "10.0.0.2"]
    assert _strs(block[::-2]) == ["10.0.0.3", "10.0.0.1"]
    with pytest.raises(IndexError):
        block[4]
    with pytest.raises(IndexError):
        block[-5]


def test_address_block_iteration_is_restartable():
    block = address_block_cidr("10.0.0.0/30")
    assert _strs(block) == _strs(block)
    assert _strs(reversed(block)) == ["10.0.0.3", "10.0.0.2", "10.0.0.1", "10.0.0.0"]


def test_address_block_matches_ip_list():
    assert list(address_block("239.1.1.0", 27)) == ip_list("239.1.1.0", 27)


def test_address_block_membership():
    block = address_block_cidr("10.0.0.0/24")
    assert "10.0.0.255" in block
    assert IPAddress("10.0.0.7") in block
    assert "10.0.1.0" not in block
    assert "2001:db8::1" not in block
    assert "garbage" not in block


def test_address_block_whole_space_is_lazy():
    block = address_block("0.0.0.0", 0)
    assert len(block) == 2 ** 32
    assert str(block[0]) == "0.0.0.0"
    assert str(block[-1]) == "255.255.255.255"
    assert str(block[0x0A000001]) == "10.0.0.1"
    first = iter(block)
    assert str(next(first)) == "0.0.0.0"
    assert str(next(first)) == "0.0.0.1"


def test_address_block_rejects_ipv6_network():
    with pytest.raises(AddressError):
        AddressBlock(IPNetwork("2001:db8::/126"))
