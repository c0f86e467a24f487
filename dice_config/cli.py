#!/usr/bin/env python3
"""
DiceGame contract config CLI.

Supports:
- render the record as JSON or as the front-end contract-config.js
- serve the record over HTTP
"""

import argparse
import sys

from dice_config.config import settings
from dice_config.core.contract_config import CONTRACT_CONFIG
from dice_config.core.render import FORMATS, render, write_artifact


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="dice-config", description="DiceGame contract config")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_render = sub.add_parser("render", help="write the config artifact")
    p_render.add_argument("--format", choices=FORMATS, default="js")
    p_render.add_argument("--output", help="destination file (default: stdout)")

    p_serve = sub.add_parser("serve", help="run the config HTTP service")
    p_serve.add_argument("--host", default=settings.HOST)
    p_serve.add_argument("--port", type=int, default=settings.PORT)

    args = ap.parse_args(argv)

    if args.cmd == "render":
        if args.output:
            write_artifact(CONTRACT_CONFIG, args.output, args.format)
        else:
            sys.stdout.write(render(CONTRACT_CONFIG, args.format))
        return 0

    if args.cmd == "serve":
        import uvicorn

        uvicorn.run("dice_config.main:app", host=args.host, port=args.port)
        return 0

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
