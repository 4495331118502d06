#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 16:44:03 krylon>
#
# /data/code/python/wgroutes/conntable.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.conntable

(c) 2026 Benjamin Walkenhorst

Read the host's TCP and UDP connections from /proc/net.
"""

import os
from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv4Network
from typing import Final, Iterable, Optional, Union

from wgroutes.common import ConnTableError
from wgroutes.model import Conn

proc_net: Final[str] = "/proc/net"
protocols: Final[tuple[str, ...]] = ("tcp", "udp")

unspec: Final[IPv4Address] = IPv4Address("0.0.0.0")


def from_hex(s: str) -> int:
    """Convert a string of hex digits to an int."""
    try:
        return int(s, 16)
    except ValueError as err:
        raise ConnTableError(f"could not convert '{s}' from hex string: {err}") from err


def parse_ip_port(s: str) -> tuple[IPv4Address, int]:
    """Parse an address/port pair as the kernel prints them, e.g. C301A8C0:E5BC.

    The address is in host byte order, i.e. little endian on the machines we
    care about, the port is not.
    """
    s_ip, sep, s_port = s.partition(":")
    if sep == "":
        raise ConnTableError(f"no port in 'ip:port' pair to parse: {s}")
    if len(s_ip) != 8 or len(s_port) != 4:
        raise ConnTableError(f"ip:port pair has the wrong length: {s}")

    octets: Final[list[int]] = [from_hex(s_ip[i:i+2]) for i in range(0, 8, 2)]
    addr: Final[IPv4Address] = IPv4Address(".".join(str(x) for x in reversed(octets)))
    return addr, from_hex(s_port)


def parse_table(proto: str, contents: str) -> list[Conn]:
    """Parse the contents of /proc/net/<proto>."""
    conns: list[Conn] = []
    for line in contents.splitlines()[1:]:
        fields = line.split()
        if len(fields) < 3:
            raise ConnTableError(
                f"not enough fields to parse 'ip:port' for proto {proto}: {line}")
        src, sport = parse_ip_port(fields[1])
        dst, dport = parse_ip_port(fields[2])
        conns.append(Conn(src=src, sport=sport, dst=dst, dport=dport))
    return conns


@dataclass(kw_only=True, slots=True)
class ConnTable:
    """ConnTable is a snapshot of the host's TCP and UDP connections."""

    tcp: list[Conn] = field(default_factory=list)
    udp: list[Conn] = field(default_factory=list)

    @classmethod
    def from_proc(cls, root: str = proc_net) -> 'ConnTable':
        """Read the connection tables from <root>, usually /proc/net."""
        tables: dict[str, list[Conn]] = {}
        for proto in protocols:
            fpath = os.path.join(root, proto)
            try:
                with open(fpath, "r", encoding="ascii") as fh:
                    contents = fh.read()
            except OSError as err:
                raise ConnTableError(f"could not read {fpath}: {err}") from err
            tables[proto] = parse_table(proto, contents)
        return cls(tcp=tables["tcp"], udp=tables["udp"])

    @classmethod
    def from_endpoints(cls,
                       endpoints: Iterable[tuple[Union[str, IPv4Address], int]]) -> 'ConnTable':
        """Create a ConnTable from (address, port) pairs of remote endpoints."""
        conns: list[Conn] = [Conn(src=unspec, sport=0, dst=IPv4Address(addr), dport=port)
                             for addr, port in endpoints]
        return cls(tcp=conns)

    def endpoints(self) -> set[tuple[IPv4Address, int]]:
        """Return the remote endpoints of all connections."""
        return {(c.dst, c.dport) for c in self.tcp + self.udp}

    def contains_dst(self, net: IPv4Network) -> Optional[Conn]:
        """Return the first connection whose destination lies within <net>, if any."""
        for c in self.tcp + self.udp:
            if c.dst in net:
                return c
        return None


# Local Variables: #
# python-indent: 4 #
# End: #
