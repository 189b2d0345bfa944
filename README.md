# httpkit

A small set of command-line tools:

- **httpkit-httpie**: a simple HTTP client. It sends a GET or a POST request and prints
  the status line, the response headers and the body in colour. A body whose content type
  is exactly `application/json` is pretty-printed.
- **httpkit-scrape**: fetches a web page, converts its HTML to Markdown and saves the
  result to a file.
- A few short demo commands: `httpkit-event`, `httpkit-fib`, `httpkit-func-exam` and
  `httpkit-pi`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## HTTP client

Send a GET request:

```
httpkit-httpie get https://example.com/get
```

Send a POST request. Each `key=value` argument becomes a field of a JSON object sent as
the request body (all values are sent as strings):

```
httpkit-httpie post https://example.com/post greeting=hello name=world
```

The URL must be absolute; for `http`, `https`, `ws`, `wss` and `ftp` URLs it must also
have a host. Each body argument must contain `=`; anything after a second `=` is dropped.
If either check fails, the command prints an error and exits. `httpkit-httpie --version`
prints the version.

The same steps are available from Python:

```python
import requests
from httpkit.httpie import KvPair, get, post

with requests.Session() as session:
    get(session, "https://example.com/get")
    post(session, "https://example.com/post", [KvPair.parse("a=1")])
```

Helpers in `httpkit.httpie`:

- `parse_url(s)` returns `s` if it is a valid absolute URL, else raises `ValueError`.
- `parse_kv_pair(s)` / `KvPair.parse(s)` return a `KvPair` with fields `k` and `v`, or
  raise `ValueError`.
- `format_status(resp)`, `format_headers(resp)`, `format_body(content_type, body)` and
  `get_content_type(resp)` build the text that `print_resp(resp)` prints.
- `build_parser()` returns the `argparse` parser used by the command.

## Saving a page as Markdown

```
httpkit-scrape https://example.com page.md
```

This prints its arguments, fetches the URL, converts the HTML to Markdown and writes it to
`page.md`. With fewer than two arguments it prints a usage line and exits with status 1.

`httpkit-scrape-default` does the same for a fixed URL and writes the result to `rust.md`
in the current directory.

From Python:

```python
from httpkit.html2md import html_to_markdown
from httpkit.scrape import scrape

print(html_to_markdown("<h1>Title</h1><p>Some <b>bold</b> text.</p>"))
scrape("https://example.com", "page.md")
```

`html_to_markdown` (or `MarkdownConverter().convert(html)`) handles headings, paragraphs
and other block elements, ordered and unordered lists, links, images, bold and italic
text, inline code, `<pre>` blocks, `<br>` and `<hr>`. The contents of `script`, `style`,
`head`, `title` and `noscript` are dropped; other tags are ignored and their text kept.

## Demos

```
httpkit-event       # builds chat users, topics and events and prints how each event is handled
httpkit-fib         # prints Fibonacci values three ways, using n = 10
httpkit-func-exam   # passes functions as values: square and cube of 2 (or of a given integer)
httpkit-pi          # a function that returns a value next to ones that return nothing
```

## Limits

- The HTTP client supports only GET and POST. It has no options for custom headers, query
  parameters, authentication or request timeouts, and POST bodies are always JSON objects
  of string values.
- The scraper does not check the HTTP status of the page it fetches; whatever body comes
  back is converted and saved. Tables are not rendered as Markdown tables.

## Running the tests

```
pip install ".[test]"
pytest
```