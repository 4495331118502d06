#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 16:05:52 krylon>
#
# /data/code/python/wgroutes/routes.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.routes

(c) 2026 Benjamin Walkenhorst

Fold addresses into /16 networks and drop the ones we must not route.
"""

import logging
from ipaddress import IPv4Address, IPv4Network, ip_network
from typing import Final, Iterable, Optional, Union

from wgroutes import common
from wgroutes.conntable import ConnTable

prefix_len: Final[int] = 16


def network_of(addr: Union[str, IPv4Address]) -> IPv4Network:
    """Return the /16 network <addr> belongs to."""
    return ip_network(f"{addr}/{prefix_len}", strict=False)  # type: ignore


def aggregate(addrs: Iterable[Union[str, IPv4Address]]) -> set[IPv4Network]:
    """Return the set of /16 networks covering <addrs>."""
    return {network_of(a) for a in addrs}


def filter_networks(networks: Iterable[IPv4Network],
                    table: ConnTable,
                    log: Optional[logging.Logger] = None) -> set[IPv4Network]:
    """Return the subset of <networks> that contains none of the host's connections.

    Routing such a network through the tunnel would hijack the connection,
    e.g. the ssh session we are running in.
    """
    if log is None:
        log = common.get_logger("routes")

    result: set[IPv4Network] = set()
    for net in networks:
        conn = table.contains_dst(net)
        if conn is not None:
            log.warning("Host connection to %s:%d would fall into routed network %s, ignoring it",
                        conn.dst,
                        conn.dport,
                        net)
            continue
        result.add(net)
    return result


def allowed_ips(networks: Iterable[IPv4Network]) -> str:
    """Render <networks> as an AllowedIPs line for a WireGuard config."""
    return "AllowedIPs = " + ", ".join(str(n) for n in sorted(networks))


# Local Variables: #
# python-indent: 4 #
# End: #
