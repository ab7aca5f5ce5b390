"""Nexmo Verify command-line client."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from nexmo_verify.client import VerifyClient
from nexmo_verify.config import resolve_settings
from nexmo_verify.errors import RemoteRejectionError, VerifyError
from nexmo_verify.types import Fetcher


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--app-id", default=None)
    parser.add_argument("--secret", default=None)
    parser.add_argument("--token-url", default=None)
    parser.add_argument("--search-url", default=None)
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", action="store_true")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nexmo-verify", description="Nexmo Verify SDK client")
    subparsers = parser.add_subparsers(dest="command", required=True)

    token_parser = subparsers.add_parser("token", help="Request an SDK token")
    token_parser.add_argument("--device-id", required=True)
    token_parser.add_argument("--source-ip", default=None)
    _add_common_arguments(token_parser)

    search_parser = subparsers.add_parser("search", help="Look up a number's verification status")
    search_parser.add_argument("--device-id", required=True)
    search_parser.add_argument("--source-ip", required=True)
    search_parser.add_argument("--number", required=True)
    search_parser.add_argument("--country", default=None)
    _add_common_arguments(search_parser)

    return parser


def _request_params(args: argparse.Namespace) -> dict[str, str]:
    params = {"device_id": args.device_id}
    if args.source_ip is not None:
        params["source_ip_address"] = args.source_ip
    if args.command == "search":
        params["number"] = args.number
        if args.country:
            params["country"] = args.country
    return params


def _print_result(command: str, result: object, as_json: bool) -> None:
    payload = dataclasses.asdict(result)
    if as_json:
        print(json.dumps({"command": command, **payload}, sort_keys=True))
        return
    for key, value in payload.items():
        print(f"{key}: {value}")


def main(argv: list[str] | None = None, fetcher: Fetcher | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = resolve_settings(args.app_id, args.secret, args.token_url, args.search_url)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2

    client = VerifyClient(
        settings.app_id,
        settings.shared_secret,
        endpoints=settings.endpoints,
        fetcher=fetcher,
    )
    params = _request_params(args)

    try:
        if args.command == "token":
            result = client.get_token(params)
        elif args.command == "search":
            result = client.verify_search(params)
        else:
            parser.print_help()
            return 1
    except RemoteRejectionError as error:
        print(f"error: token rejected ({error.result_code}): {error}", file=sys.stderr)
        return 1
    except VerifyError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    _print_result(args.command, result, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
