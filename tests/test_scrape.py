import pytest
import requests
import responses

from httpkit.scrape import fetch, main, scrape


def test_fetch():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/", body="<p>x</p>")
        assert fetch("http://example.com/") == "<p>x</p>"


def test_scrape_writes_file(tmp_path, capsys):
    out = tmp_path / "o.md"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/", body="<h2>Hi</h2>")
        md = scrape("http://example.com/", out)
    assert out.read_text(encoding="utf-8") == md
    assert md == "## Hi"
    assert f"saved in {out}." in capsys.readouterr().out


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage: scrape_url_args <url> <output file>" in capsys.readouterr().out


def test_main_runs(tmp_path):
    out = tmp_path / "a.md"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/", body="<p>t</p>")
        assert main(["http://example.com/", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "t"


def test_fetch_connection_error():
    with responses.RequestsMock():
        with pytest.raises(requests.ConnectionError):
            fetch("http://example.com/none")