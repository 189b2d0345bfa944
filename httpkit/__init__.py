"""HTTP command-line client, HTML-to-Markdown scraper and small demo programs."""

__version__ = "0.1.0"