"""A small HTTP client command line with ``get`` and ``post`` subcommands."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from urllib.parse import urlsplit

import requests
from termcolor import colored

_SPECIAL_SCHEMES = {"http", "https", "ws", "wss", "ftp"}
_VERSIONS = {9: "HTTP/0.9", 10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2.0"}


@dataclass(frozen=True)
class KvPair:
    """A ``key=value`` pair given on the command line."""

    k: str
    v: str

    @classmethod
    def parse(cls, s: str) -> "KvPair":
        """Parse ``key=value``; text after a second ``=`` is dropped."""
        parts = s.split("=")
        if len(parts) < 2:
            raise ValueError(f"Failed to parse {s}")
        return cls(parts[0], parts[1])


def parse_kv_pair(s: str) -> KvPair:
    return KvPair.parse(s)


def parse_url(s: str) -> str:
    """Check that ``s`` is an absolute URL and return it unchanged."""
    try:
        parts = urlsplit(s)
    except ValueError as exc:
        raise ValueError(f"invalid URL: {s}") from exc
    scheme = parts.scheme
    if not scheme or not scheme[0].isalpha() or ":" not in s:
        raise ValueError(f"relative URL without a base: {s}")
    if scheme.lower() in _SPECIAL_SCHEMES and not parts.hostname:
        raise ValueError(f"empty host: {s}")
    return s


def _kv_type(s: str) -> KvPair:
    try:
        return parse_kv_pair(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _url_type(s: str) -> str:
    try:
        return parse_url(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="httpie", description="A naive httpie implementation."
    )
    parser.add_argument("--version", action="version", version="1.0")
    sub = parser.add_subparsers(dest="subcmd", required=True)
    g = sub.add_parser("get", help="send a GET request")
    g.add_argument("url", type=_url_type, help="HTTP request URL")
    p = sub.add_parser(
        "post",
        help="post key=value pairs as a JSON body and show the response",
    )
    p.add_argument("url", type=_url_type, help="HTTP request URL")
    p.add_argument("body", type=_kv_type, nargs="*", help="key=value pairs")
    return parser


def get(session: requests.Session, url: str) -> None:
    print_resp(session.get(url))


def post(session: requests.Session, url: str, pairs) -> None:
    body = {pair.k: pair.v for pair in pairs}
    print_resp(session.post(url, json=body))


def format_status(resp: requests.Response) -> str:
    raw_version = getattr(getattr(resp, "raw", None), "version", None)
    version = _VERSIONS.get(raw_version, "HTTP/1.1")
    return f"{version} {resp.status_code} {resp.reason or ''}".rstrip()


def format_headers(resp: requests.Response) -> list[str]:
    return [f'{name.lower()}:"{value}"' for name, value in resp.headers.items()]


def _is_json(content_type: str) -> bool:
    essence, *params = [p.strip() for p in content_type.split(";")]
    return essence.lower() == "application/json" and not any(params)


def format_body(content_type: str | None, body: str) -> str:
    """Pretty-print a plain ``application/json`` body; pass others through."""
    if content_type is not None and _is_json(content_type):
        return json.dumps(json.loads(body), indent=2, ensure_ascii=False)
    return body


def get_content_type(resp: requests.Response) -> str | None:
    return resp.headers.get("Content-Type")


def print_resp(resp: requests.Response) -> None:
    print(colored(format_status(resp), "blue") + "\n")
    for line in format_headers(resp):
        name, _, value = line.partition(":")
        print(f"{colored(name, 'green')}:{value}")
    print("\n")
    content_type = get_content_type(resp)
    text = format_body(content_type, resp.text)
    if content_type is not None and _is_json(content_type):
        text = colored(text, "cyan")
    print(text)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    with requests.Session() as session:
        if args.subcmd == "get":
            get(session, args.url)
        else:
            post(session, args.url, args.body)
    return 0