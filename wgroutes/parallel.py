#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 17:52:40 krylon>
#
# /data/code/python/wgroutes/parallel.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.parallel

(c) 2026 Benjamin Walkenhorst
"""

import logging
import traceback
from dataclasses import dataclass, field
from ipaddress import IPv4Address
from queue import Queue, ShutDown
from threading import Thread
from typing import Final, Iterable, Optional

from wgroutes import common
from wgroutes.common import RouteError
from wgroutes.hostname import discard_port, domain_of, literal_addr, needs_tunnel
from wgroutes.model import Resolution, ResultSet
from wgroutes.nameserver import NSResolver
from wgroutes.resolver import HostResolver


@dataclass(kw_only=True, slots=True)
class ParallelResolver:
    """Resolve a batch of hostnames in multiple threads.

    Each hostname is resolved on its own: we look up the authoritative
    nameservers of its domain and then ask those (plus a few public resolvers)
    for its addresses. A failure for one hostname never affects the others.
    """

    wcnt: int = 8
    log: logging.Logger = field(default_factory=lambda: common.get_logger("parallel"))
    nsres: NSResolver = field(default_factory=NSResolver)
    hostres: HostResolver = field(default_factory=HostResolver)

    def __post_init__(self) -> None:
        assert self.wcnt > 0

    def resolve_one(self, host: str) -> Resolution:
        """Resolve a single hostname, which may carry a :port suffix."""
        name: Final[str] = discard_port(host)
        addr: Final[Optional[IPv4Address]] = literal_addr(name)

        if addr is not None:
            if needs_tunnel(addr):
                return Resolution(host=host, addrs=frozenset({addr}))
            self.log.debug("%s is a local address, skipping it.", host)
            return Resolution(host=host)

        try:
            domain = domain_of(name)
            nameservers = self.nsres.nameservers_of(domain)
            addrs = self.hostres.resolve(name, nameservers)
        except RouteError as err:
            self.log.info("Failed to resolve %s: %s", host, err)
            return Resolution(host=host, error=str(err))

        self.log.debug("%s => %s",
                       host,
                       ", ".join(str(x) for x in sorted(addrs)))
        return Resolution(host=host, addrs=addrs)

    def resolve_all(self, hosts: Iterable[str]) -> ResultSet:
        """Resolve all of <hosts>, return the successes and failures."""
        hostQ: Queue[str] = Queue()
        resQ: Queue[Resolution] = Queue()
        result: ResultSet = ResultSet()

        for h in set(hosts):
            hostQ.put(h)

        cnt: Final[int] = min(self.wcnt, hostQ.qsize())
        if cnt == 0:
            return result

        # Workers drain the queue and quit once it is empty.
        hostQ.shutdown()

        workers: list[Thread] = []
        for wid in range(1, cnt + 1):
            w: Thread = Thread(target=self._resolve_worker,
                               name=f"resolve_worker_{wid:02d}",
                               args=(wid, hostQ, resQ),
                               daemon=True)
            w.start()
            workers.append(w)

        for w in workers:
            w.join()

        while not resQ.empty():
            result.add(resQ.get_nowait())

        self.log.info("Resolved %d hosts, %d failed.",
                      len(result.resolved),
                      len(result.failed))
        return result

    def _resolve_worker(self, wid: int, hostQ: Queue[str], resQ: Queue[Resolution]) -> None:
        self.log.debug("resolve_worker #%02d reporting for work.", wid)
        try:
            while True:
                try:
                    host: str = hostQ.get()
                except ShutDown:
                    return

                try:
                    res = self.resolve_one(host)
                except Exception as err:  # noqa: F841 # pylint: disable-msg=W0718
                    cname: str = err.__class__.__name__
                    self.log.error("%s trying to resolve %s: %s\n%s",
                                   cname,
                                   host,
                                   err,
                                   "".join(traceback.format_exception(err)))
                    res = Resolution(host=host, error=f"{cname}: {err}")
                resQ.put(res)
        finally:
            self.log.debug("resolve_worker #%02d is finished.", wid)


# Local Variables: #
# python-indent: 4 #
# End: #
