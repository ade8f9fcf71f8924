# python
"""
treeshell.__main__
Entry point for python -m treeshell
"""
import argparse
import asyncio
import logging
import sys

from .config import load_config, log_level
from .console import shell


def main(argv=None):
    parser = argparse.ArgumentParser(prog="treeshell")
    parser.add_argument("--scenario", help="scenario id under the scenarios root")
    parser.add_argument("--scenarios-root", help="directory holding <scenario>/fs.json")
    parser.add_argument("--start", help="initial directory path")
    parser.add_argument("--user", help="user name shown in the prompt")
    parser.add_argument("--log-level", help="logging level name, e.g. DEBUG")
    args = parser.parse_args(argv)

    overrides = {}
    if args.scenario:
        overrides.setdefault("shell", {})["scenario"] = args.scenario
    if args.start:
        overrides.setdefault("shell", {})["start_path"] = args.start
    if args.user:
        overrides.setdefault("shell", {})["user"] = args.user
    if args.scenarios_root:
        overrides.setdefault("paths", {})["scenarios_root"] = args.scenarios_root
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    try:
        config = load_config(overrides)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=log_level(config))
    try:
        asyncio.run(shell(sys.stdin, sys.stdout, config))
    except KeyboardInterrupt:
        print("shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
