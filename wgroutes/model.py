#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 14:20:37 krylon>
#
# /data/code/python/wgroutes/model.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.model

(c) 2026 Benjamin Walkenhorst
"""

from dataclasses import dataclass, field
from ipaddress import IPv4Address
from typing import Optional


@dataclass(frozen=True, slots=True, kw_only=True)
class Conn:
    """Conn is a connection from the host's TCP or UDP table."""

    src: IPv4Address
    sport: int
    dst: IPv4Address
    dport: int

    def __str__(self) -> str:
        return f"{self.src}:{self.sport} -> {self.dst}:{self.dport}"


@dataclass(frozen=True, slots=True, kw_only=True)
class Resolution:
    """Resolution is the outcome of resolving a single hostname.

    Exactly one of addrs and error is meaningful: if error is set, the
    resolution failed, otherwise addrs holds the addresses found for the host,
    which may well be empty.
    """

    host: str
    addrs: frozenset[IPv4Address] = frozenset()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Return True if the hostname was processed without error."""
        return self.error is None


@dataclass(slots=True, kw_only=True)
class ResultSet:
    """ResultSet collects the Resolutions of a batch of hostnames."""

    resolved: dict[str, frozenset[IPv4Address]] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    def add(self, res: Resolution) -> None:
        """Sort a Resolution into the matching mapping."""
        if res.ok:
            self.resolved[res.host] = res.addrs
        else:
            self.failed[res.host] = res.error  # type: ignore

    def all_addrs(self) -> set[IPv4Address]:
        """Return the union of all resolved addresses."""
        addrs: set[IPv4Address] = set()
        for a in self.resolved.values():
            addrs |= a
        return addrs


# Local Variables: #
# python-indent: 4 #
# End: #
