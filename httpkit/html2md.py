"""Convert HTML into Markdown."""

from __future__ import annotations

import re
from html.parser import HTMLParser

_BLOCK = {"p", "div", "section", "article", "header", "footer", "main", "nav",
          "table", "tr", "form", "ul", "ol", "blockquote"}
_SKIP = {"script", "style", "head", "title", "noscript"}


class MarkdownConverter(HTMLParser):
    """An HTML parser that emits Markdown text."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._reset_state()

    def _reset_state(self) -> None:
        self._out: list[str] = []
        self._skip = 0
        self._pre = 0
        self._lists: list[list] = []
        self._links: list[str | None] = []

    def _block(self) -> None:
        self._out.append("\n\n")

    def handle_starttag(self, tag, attrs):
        a = dict(attrs)
        if tag in _SKIP:
            self._skip += 1
        elif self._skip:
            return
        elif re.fullmatch(r"h[1-6]", tag):
            self._block()
            self._out.append("#" * int(tag[1]) + " ")
        elif tag in _BLOCK:
            self._block()
            if tag in ("ul", "ol"):
                self._lists.append([tag, 0])
        elif tag == "li":
            indent = "  " * max(len(self._lists) - 1, 0)
            if self._lists and self._lists[-1][0] == "ol":
                self._lists[-1][1] += 1
                marker = f"{self._lists[-1][1]}. "
            else:
                marker = "* "
            self._out.append("\n" + indent + marker)
        elif tag == "br":
            self._out.append("  \n")
        elif tag == "hr":
            self._out.append("\n\n---\n\n")
        elif tag in ("strong", "b"):
            self._out.append("**")
        elif tag in ("em", "i"):
            self._out.append("*")
        elif tag == "pre":
            self._pre += 1
            self._out.append("\n\n```\n")
        elif tag == "code" and not self._pre:
            self._out.append("`")
        elif tag == "a":
            self._links.append(a.get("href"))
            self._out.append("[")
        elif tag == "img":
            self._out.append(f"![{a.get('alt') or ''}]({a.get('src') or ''})")

    def handle_endtag(self, tag):
        if tag in _SKIP:
            self._skip = max(self._skip - 1, 0)
        elif self._skip:
            return
        elif re.fullmatch(r"h[1-6]", tag) or tag in _BLOCK:
            if tag in ("ul", "ol") and self._lists:
                self._lists.pop()
            self._block()
        elif tag in ("strong", "b"):
            self._out.append("**")
        elif tag in ("em", "i"):
            self._out.append("*")
        elif tag == "pre":
            self._pre = max(self._pre - 1, 0)
            self._out.append("\n```\n\n")
        elif tag == "code" and not self._pre:
            self._out.append("`")
        elif tag == "a" and self._links:
            href = self._links.pop()
            self._out.append(f"]({href})" if href else "]")

    def handle_data(self, data):
        if self._skip:
            return
        if self._pre:
            self._out.append(data)
        else:
            self._out.append(re.sub(r"\s+", " ", data))

    def convert(self, html: str) -> str:
        """Return ``html`` rendered as Markdown."""
        self._reset_state()
        self.reset()
        self.feed(html)
        self.close()
        text = "".join(self._out)
        lines = [line.rstrip(" ") if not line.endswith("  ") else line
                 for line in text.split("\n")]
        text = "\n".join(line.lstrip(" ") if not line.lstrip().startswith(("*", "1"))
                         else line for line in lines)
        return re.sub(r"\n{3,}", "\n\n", text).strip()


def html_to_markdown(html: str) -> str:
    return MarkdownConverter().convert(html)