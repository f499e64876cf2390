from __future__ import annotations

import argparse

from can_i_connect.config import settings
from can_i_connect.version import VERSION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="can-i-connect",
        description="tool to check connectivity to various hosts using HTTP or TCP",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--http-hosts",
        metavar="https://example.com",
        help="comma separated list of http hosts to attempt to connect to",
    )
    parser.add_argument(
        "--tcp-hosts",
        metavar="example.com:80",
        help="comma separated list of tcp hosts to attempt to connect to. "
        "Required format: <dns name or ip address>:<port>",
    )
    parser.add_argument(
        "--timeout",
        metavar="5",
        help="how much time in seconds to wait while connecting to a host before giving up",
    )
    parser.add_argument(
        "--log-level",
        metavar="debug",
        default=settings.LOG_LEVEL,
        help="set the log level {off|error|warn|info|debug|trace}",
    )
    parser.add_argument("--no-color", action="store_true", help="remove color from log output")
    parser.add_argument(
        "--listen",
        metavar="127.0.0.1:8000",
        help="run in Server Mode by binding to <ip address>:<port> e.g. 127.0.0.1:8000 or [::1]:8000",
    )
    return parser
