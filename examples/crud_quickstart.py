#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging

from serviceworker import RestClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run CRUD calls against a REST resource")
    p.add_argument("base_url", nargs="?", default="https://httpbin.org/anything")
    p.add_argument("--timeout", type=float, default=10.0)
    p.add_argument("--content-type", default="autodetect", choices=["json", "xml", "autodetect", "raw"])
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    client = RestClient(
        args.base_url,
        timeout=args.timeout,
        content_type=args.content_type,
        logger=logging.getLogger("crud_quickstart"),
    )
    print("=" * 65)
    print("get_all :", client.get_all({"page": 1}))
    print("get_one :", client.get_one(42))
    print("create  :", client.create({"name": "x"}))
    print("update  :", client.update({"name": "y"}, 42))
    print("delete  :", client.delete(42))
    print("=" * 65)


if __name__ == "__main__":
    main()
