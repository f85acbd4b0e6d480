"""IP Log - Subnet matching"""

import ipaddress
import re
from typing import Tuple, Union

from .errors import InvalidAddressError
from .patterns import IPV4_PATTERN

Address = Union[str, ipaddress.IPv4Address]

_IPV4_RE = re.compile(IPV4_PATTERN)


def parse_ipv4(value: Address) -> ipaddress.IPv4Address:
    """Parse a dotted-quad IPv4 address, raising InvalidAddressError otherwise."""
    if isinstance(value, ipaddress.IPv4Address):
        return value
    text = str(value).strip()
    if not _IPV4_RE.match(text):
        raise InvalidAddressError(str(value))
    try:
        return ipaddress.IPv4Address(text)
    except ipaddress.AddressValueError:
        raise InvalidAddressError(str(value)) from None


def in_subnet(ip: Address, start: Address, mask: Address) -> bool:
    """True when every octet of ip & mask equals the same octet of start & mask."""
    ip_bytes = parse_ipv4(ip).packed
    start_bytes = parse_ipv4(start).packed
    mask_bytes = parse_ipv4(mask).packed
    for ip_octet, start_octet, mask_octet in zip(ip_bytes, start_bytes, mask_bytes):
        if ip_octet & mask_octet != start_octet & mask_octet:
            return False
    return True


def address_range(start: Address, mask: Address) -> Tuple[ipaddress.IPv4Address, ipaddress.IPv4Address]:
    """First and last address matched by start/mask."""
    start_int = int(parse_ipv4(start))
    mask_int = int(parse_ipv4(mask))
    low = start_int & mask_int
    high = low | (~mask_int & 0xFFFFFFFF)
    return ipaddress.IPv4Address(low), ipaddress.IPv4Address(high)
