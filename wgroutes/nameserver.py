#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 15:12:48 krylon>
#
# /data/code/python/wgroutes/nameserver.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.nameserver

(c) 2026 Benjamin Walkenhorst
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from ipaddress import IPv4Address
from typing import Final

from dns import rdatatype
from dns.exception import DNSException
from dns.resolver import Answer, Resolver

from wgroutes import common
from wgroutes.common import NameServerLookupFailure

default_timeout: Final[float] = 2.5


@dataclass(kw_only=True, slots=True)
class NSResolver:
    """NSResolver finds the addresses of a domain's authoritative nameservers.

    Both the NS query and the address lookups of the nameservers go to the
    system's configured recursive resolver.
    """

    log: logging.Logger = field(default_factory=lambda: common.get_logger("nameserver"))
    timeout: float = default_timeout
    res: Resolver = field(init=False)

    def __post_init__(self) -> None:
        self.res = Resolver()
        self.res.timeout = self.timeout
        self.res.lifetime = self.timeout

    def lookup_ns(self, domain: str) -> list[str]:
        """Return the hostnames of the nameservers for <domain>."""
        try:
            reply: Answer = self.res.resolve(domain, rdatatype.NS, search=False)
        except DNSException as err:
            cname: Final[str] = err.__class__.__name__
            self.log.error("%s looking up nameservers for %s: %s",
                           cname,
                           domain,
                           err)
            raise NameServerLookupFailure(
                f"could not look up nameservers of {domain}: {cname}") from err

        servers: list[str] = [srv.target.to_text().rstrip(".") for srv in reply]
        if len(servers) == 0:
            raise NameServerLookupFailure(f"no nameservers found for {domain}")
        return servers

    def lookup_addr(self, ns: str) -> IPv4Address:
        """Return the first IPv4 address of the nameserver <ns>."""
        try:
            reply: Answer = self.res.resolve(ns, rdatatype.A, search=False)
        except DNSException as err:
            cname: Final[str] = err.__class__.__name__
            self.log.error("%s looking up address of nameserver %s: %s",
                           cname,
                           ns,
                           err)
            raise NameServerLookupFailure(
                f"could not lookup IPs of nameserver hostname {ns}: {cname}") from err

        for rr in reply:
            return IPv4Address(rr.address)
        raise NameServerLookupFailure(f"empty IP list for nameserver hostname {ns}")

    def nameservers_of(self, domain: str) -> frozenset[IPv4Address]:
        """Return one address for each authoritative nameserver of <domain>.

        If any one of the nameservers cannot be resolved, the whole lookup
        fails.
        """
        servers: Final[list[str]] = self.lookup_ns(domain)
        self.log.debug("Nameservers for %s: %s",
                       domain,
                       ", ".join(servers))

        with ThreadPoolExecutor(max_workers=len(servers)) as pool:
            addrs = list(pool.map(self.lookup_addr, servers))

        return frozenset(addrs)


# Local Variables: #
# python-indent: 4 #
# End: #
