#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 19:41:17 krylon>
#
# /data/code/python/wgroutes/test_routes.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.test_routes

(c) 2026 Benjamin Walkenhorst
"""

import os
import shutil
import unittest
from datetime import datetime
from ipaddress import IPv4Address, IPv4Network, ip_network
from typing import Final

from wgroutes import common
from wgroutes.conntable import ConnTable
from wgroutes.routes import aggregate, allowed_ips, filter_networks, network_of

test_dir: Final[str] = os.path.join(
    "/tmp",
    datetime.now().strftime(f"{common.AppName.lower()}_test_routes_%Y%m%d_%H%M%S"))


def nets(*args: str) -> set[IPv4Network]:
    """Turn strings into a set of networks."""
    return {ip_network(x) for x in args}  # type: ignore


class TestRoutes(unittest.TestCase):
    """Test aggregating and filtering routes."""

    @classmethod
    def setUpClass(cls) -> None:
        """Prepare the testing environment."""
        common.set_basedir(test_dir)

    @classmethod
    def tearDownClass(cls) -> None:
        """Clean up afterwards."""
        shutil.rmtree(test_dir, ignore_errors=True)

    def test_01_network_of(self) -> None:
        """Test mapping addresses to their /16."""
        test_cases: Final[list[tuple[str, str]]] = [
            ("192.168.1.195", "192.168.0.0/16"),
            ("10.0.2.7", "10.0.0.0/16"),
            ("93.184.216.34", "93.184.0.0/16"),
        ]

        for c in test_cases:
            self.assertEqual(str(network_of(c[0])), c[1])
            self.assertEqual(str(network_of(IPv4Address(c[0]))), c[1])

    def test_02_aggregate(self) -> None:
        """Test that addresses in the same /16 collapse into one network."""
        result = aggregate(["93.184.216.34", "93.184.1.1", "1.1.1.1"])
        self.assertEqual(result, nets("93.184.0.0/16", "1.1.0.0/16"))

    def test_03_filter_conflict(self) -> None:
        """Test that networks containing a live connection are dropped."""
        table = ConnTable.from_endpoints([("10.0.2.7", 443)])
        log = common.get_logger("test_routes")

        with self.assertLogs(log, "WARNING") as cm:
            result = filter_networks(nets("10.0.0.0/16"), table, log)

        self.assertEqual(result, set())
        self.assertEqual(len(cm.output), 1)
        self.assertIn("10.0.2.7:443", cm.output[0])
        self.assertIn("10.0.0.0/16", cm.output[0])

    def test_04_filter_no_conflict(self) -> None:
        """Test that networks without live connections survive."""
        table = ConnTable.from_endpoints([("192.168.1.1", 22)])
        self.assertEqual(filter_networks(nets("10.0.0.0/16"), table), nets("10.0.0.0/16"))

    def test_05_filter_idempotent(self) -> None:
        """Test that filtering twice gives the same result as filtering once."""
        table = ConnTable.from_endpoints([("10.0.2.7", 443), ("93.184.216.34", 443)])
        candidates = nets("10.0.0.0/16", "93.184.0.0/16", "1.1.0.0/16", "8.8.0.0/16")

        once = filter_networks(candidates, table)
        twice = filter_networks(once, table)

        self.assertEqual(once, nets("1.1.0.0/16", "8.8.0.0/16"))
        self.assertEqual(once, twice)

    def test_06_allowed_ips(self) -> None:
        """Test rendering the AllowedIPs line."""
        line = allowed_ips(nets("93.184.0.0/16", "1.1.0.0/16"))
        self.assertEqual(line, "AllowedIPs = 1.1.0.0/16, 93.184.0.0/16")
        self.assertEqual(allowed_ips(set()), "AllowedIPs = ")


# Local Variables: #
# python-indent: 4 #
# End: #
