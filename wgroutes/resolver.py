#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 15:40:19 krylon>
#
# /data/code/python/wgroutes/resolver.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.resolver

(c) 2026 Benjamin Walkenhorst
"""

import logging
from dataclasses import dataclass, field
from ipaddress import AddressValueError, IPv4Address
from typing import Final, Iterable, Union

from dns import rdatatype
from dns.exception import DNSException
from dns.resolver import Answer, Resolver

from wgroutes import common
from wgroutes.common import MalformedNameServerAddress
from wgroutes.nameserver import default_timeout

# Public resolvers we always ask in addition to a host's own nameservers.
global_dns: Final[tuple[str, ...]] = (
    "8.8.8.8",
    "1.1.1.1",
    "9.9.9.9",
)


def parse_servers(servers: Iterable[Union[str, IPv4Address]]) -> list[IPv4Address]:
    """Parse a list of nameserver addresses, which must all be IPv4."""
    addrs: list[IPv4Address] = []
    for s in servers:
        if isinstance(s, IPv4Address):
            addrs.append(s)
            continue
        try:
            addrs.append(IPv4Address(s))
        except AddressValueError as err:
            raise MalformedNameServerAddress(
                f"could not parse {s} as IPv4 addr: {err}") from err
    return addrs


@dataclass(kw_only=True, slots=True)
class HostResolver:
    """HostResolver resolves hostnames by asking a given set of nameservers directly."""

    log: logging.Logger = field(default_factory=lambda: common.get_logger("resolver"))
    timeout: float = default_timeout
    fallback: tuple[str, ...] = global_dns

    def servers_for(self, nameservers: Iterable[Union[str, IPv4Address]]) -> list[str]:
        """Return <nameservers> followed by the fallback resolvers, without duplicates.

        The resolver asks the servers in this order and stops at the first
        definitive answer, so the authoritative servers must come first.
        """
        servers: list[str] = []
        for addr in parse_servers(nameservers) + parse_servers(self.fallback):
            if str(addr) not in servers:
                servers.append(str(addr))
        return servers

    def resolve(self,
                host: str,
                nameservers: Iterable[Union[str, IPv4Address]]) -> frozenset[IPv4Address]:
        """Return the IPv4 addresses of <host>.

        An empty set means the host could not be resolved with the given
        servers. Malformed nameserver addresses raise MalformedNameServerAddress.
        """
        servers: Final[list[str]] = self.servers_for(nameservers)
        self.log.debug("Resolve %s using nameservers %s",
                       host,
                       ", ".join(servers))

        res: Resolver = Resolver(configure=False)
        res.nameservers = servers
        # Each server gets one attempt before we give up on the host.
        res.timeout = self.timeout
        res.lifetime = self.timeout * len(servers)
        res.rotate = False

        try:
            answer: Answer = res.resolve(host, rdatatype.A, search=False)
        except DNSException as err:
            self.log.warning("Cannot resolve host %s with nameservers %s: %s",
                             host,
                             ", ".join(servers),
                             err.__class__.__name__)
            return frozenset()

        return frozenset(IPv4Address(rr.address) for rr in answer)


# Local Variables: #
# python-indent: 4 #
# End: #
