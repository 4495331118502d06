#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-18 17:10:26 krylon>
#
# /data/code/python/wgroutes/har.py
# created on 18. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the WGRoutes route generator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
wgroutes.har

(c) 2026 Benjamin Walkenhorst

Extract hostnames from HAR files, as saved by the developer tools of a web browser.
"""

import json
from typing import Final, Iterable, Optional

from wgroutes.common import HarError

schemes: Final[tuple[str, ...]] = ("https://", "http://", "wss://")


def hostname_from_url(url: str) -> Optional[str]:
    """Return the host part of <url>, including the port, if any."""
    for prefix in schemes:
        if url.startswith(prefix):
            return url[len(prefix):].split("/", 1)[0]
    return None


def hostnames_from_har(fpath: str) -> set[str]:
    """Return the set of hostnames requested in the HAR file at <fpath>."""
    try:
        with open(fpath, "r", encoding="utf-8") as fh:
            har = json.load(fh)
    except (OSError, ValueError) as err:
        raise HarError(f"could not parse HAR file {fpath}: {err}") from err

    try:
        entries = har["log"]["entries"]
    except (KeyError, TypeError) as err:
        raise HarError(f"HAR file {fpath} has no log entries") from err

    hosts: set[str] = set()
    try:
        for e in entries:
            url: str = e.get("request", {}).get("url", "")
            host = hostname_from_url(url)
            if host is None:
                raise HarError(f"could not extract hostname from URL {url}")
            hosts.add(host)
    except (AttributeError, TypeError) as err:
        raise HarError(f"malformed entry in HAR file {fpath}: {err}") from err
    return hosts


def hostnames_from_files(paths: Iterable[str]) -> set[str]:
    """Return the union of the hostnames found in several HAR files."""
    hosts: set[str] = set()
    for p in paths:
        hosts |= hostnames_from_har(p)
    return hosts


# Local Variables: #
# python-indent: 4 #
# End: #
