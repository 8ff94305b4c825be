from __future__ import annotations

import argparse
import json
import sys

from canarysim.probe import run_probe

ENDPOINTS = {"version": "/version", "health": "/health", "work": "/work"}


def _print(obj) -> None:
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Canary Simulator probe")
    p.add_argument("--api", default="http://localhost:8080", help="Service base URL")
    sub = p.add_subparsers(dest="cmd", required=True)

    for name, path in ENDPOINTS.items():
        s = sub.add_parser(name, help=f"Probe {path}")
        s.add_argument("--count", type=int, default=1, help="Number of sequential requests")
        s.add_argument("--timeout", type=float, default=5.0, help="Per-request timeout in seconds")

    args = p.parse_args(argv)

    summary = run_probe(args.api, ENDPOINTS[args.cmd], args.count, timeout_s=args.timeout)
    _print(summary.as_dict())
    return 0 if summary.failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
