"""Command-line entry point for the zerod server."""

from __future__ import annotations

import argparse
import os
import socket

from zerod.log import log_info
from zerod.server import serve


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="zerod", description="Run the zerod server.")
    parser.add_argument("--port", default="8080", help="port to listen on")
    args = parser.parse_args(argv)

    log_info("Starting zerod (pid: %d)", os.getpid())
    serve(args.port, socket.AF_INET)
    return 0