#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 18:30:14 krylon>
#
# /data/code/python/wgroutes/main.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.main

(c) 2026 Benjamin Walkenhorst
"""


import argparse
import logging
import pathlib
import sys
from ipaddress import IPv4Network
from typing import Final

from wgroutes import common
from wgroutes.common import RouteError
from wgroutes.conntable import ConnTable, proc_net
from wgroutes.har import hostnames_from_files
from wgroutes.model import ResultSet
from wgroutes.nameserver import NSResolver, default_timeout
from wgroutes.parallel import ParallelResolver
from wgroutes.resolver import HostResolver
from wgroutes.routes import aggregate, allowed_ips, filter_networks


def format_results(result: ResultSet) -> str:
    """Render the resolved and unresolved hosts for the user."""
    lines: list[str] = ["Resolved hosts:"]
    for host in sorted(result.resolved):
        addrs = ", ".join(str(a) for a in sorted(result.resolved[host]))
        lines.append(f"    {host} => [{addrs}]")
    lines.append("")
    lines.append("Unresolved hosts:")
    for host in sorted(result.failed):
        lines.append(f"    {host} => {result.failed[host]}")
    lines.append("")
    return "\n".join(lines)


def gen_routes(hosts: set[str], pres: ParallelResolver, table_root: str = proc_net) -> str:
    """Resolve <hosts> and return the AllowedIPs line for the networks they live in."""
    result: Final[ResultSet] = pres.resolve_all(hosts)
    print(format_results(result))

    table: Final[ConnTable] = ConnTable.from_proc(table_root)
    networks: Final[set[IPv4Network]] = filter_networks(aggregate(result.all_addrs()), table)
    return allowed_ips(networks)


def main() -> None:
    argp: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Generate WireGuard AllowedIPs for the hosts found in HAR files")
    argp.add_argument("har",
                      nargs="+",
                      help="HAR files to extract hostnames from")
    argp.add_argument("-w", "--workers",
                      type=int,
                      default=8,
                      help="The number of hosts to resolve in parallel")
    argp.add_argument("-t", "--timeout",
                      type=float,
                      default=default_timeout,
                      help="Timeout for a single DNS query in seconds")
    argp.add_argument("-b", "--basedir",
                      type=pathlib.Path,
                      default=common.path.base(),
                      help="Directory to store the log file in")
    argp.add_argument("--proc",
                      default=proc_net,
                      help="Directory to read the tcp and udp connection tables from")
    argp.add_argument("-v", "--verbose",
                      action="store_true",
                      help="Print debug messages to the terminal")

    args = argp.parse_args()
    common.set_basedir(args.basedir)
    if args.verbose:
        common.set_tty_level(logging.DEBUG)

    try:
        hosts = hostnames_from_files(args.har)
        pres = ParallelResolver(wcnt=args.workers,
                                nsres=NSResolver(timeout=args.timeout),
                                hostres=HostResolver(timeout=args.timeout))
        print(gen_routes(hosts, pres, args.proc))
    except RouteError as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

# Local Variables: #
# python-indent: 4 #
# End: #
