#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 14:31:05 krylon>
#
# /data/code/python/wgroutes/hostname.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.hostname

(c) 2026 Benjamin Walkenhorst

Helpers to pick apart the hostnames we find in capture files.
"""

from ipaddress import AddressValueError, IPv4Address, IPv4Network
from typing import Final, Optional

from wgroutes.common import InvalidHostname


def discard_port(s: str) -> str:
    """Strip a trailing :port from <s>, if there is one."""
    host, _, _ = s.partition(":")
    return host


def literal_addr(s: str) -> Optional[IPv4Address]:
    """Return <s> as an IPv4Address if it is a dotted quad, None otherwise."""
    try:
        return IPv4Address(s)
    except AddressValueError:
        return None


local_networks: Final[list[IPv4Network]] = [
    IPv4Network("10.0.0.0/8"),
    IPv4Network("172.16.0.0/12"),
    IPv4Network("192.168.0.0/16"),
]

broadcast: Final[IPv4Address] = IPv4Address("255.255.255.255")


def needs_tunnel(addr: IPv4Address) -> bool:
    """Return False for loopback, broadcast and RFC 1918 addresses.

    IPv4Address.is_private is not used, as it also covers documentation
    and reserved ranges, which we route like any other address.
    """
    if addr.is_loopback or addr == broadcast:
        return False
    return not any(addr in net for net in local_networks)


def domain_of(host: str) -> str:
    """Return the registrable domain of <host>, i.e. its two rightmost labels.

    This does not consult the public suffix list, so for foo.co.uk we get
    co.uk, not foo.co.uk.
    """
    labels = host.split(".")
    if any(x == "" for x in labels):
        raise InvalidHostname(f"too short component of hostname {host}")
    if len(labels) < 2:
        raise InvalidHostname(f"too short hostname {host}")
    return ".".join(labels[-2:])


# Local Variables: #
# python-indent: 4 #
# End: #
