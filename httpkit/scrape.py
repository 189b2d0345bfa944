"""Fetch a web page and save it as Markdown."""

from __future__ import annotations

import sys
from pathlib import Path

import requests

from .html2md import html_to_markdown

DEFAULT_URL = "https://www.rust-lang.org/"
DEFAULT_OUTPUT = "rust.md"


def fetch(url: str) -> str:
    resp = requests.get(url)
    return resp.text


def scrape(url: str, output) -> str:
    """Fetch ``url``, convert it to Markdown, write it to ``output``."""
    print(f"Fetching url:{url}")
    body = fetch(url)
    print("Converting html to markdown...")
    md = html_to_markdown(body)
    Path(output).write_text(md, encoding="utf-8")
    print(f"Converted markdown has been saved in {output}.")
    return md


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    for arg in [sys.argv[0], *args]:
        print(arg)
    if len(args) < 2:
        print("Usage: scrape_url_args <url> <output file>")
        return 1
    scrape(args[0], args[1])
    return 0


def main_default(argv=None) -> int:
    scrape(DEFAULT_URL, DEFAULT_OUTPUT)
    return 0