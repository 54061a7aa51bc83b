import csv
import json

from comment_extractor import cli

PAGE = (
    '<html><body>'
    '<div class="comment" data-id="42"><span class="author">Alice</span><p>Hello</p></div>'
    '</body></html>'
)


def test_file_to_stdout(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")

    assert cli.main(["--file", str(page), "--unit-id", "U"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == [{"id": 42, "author": "Alice", "content": "Hello", "timestamp": 0, "avatar_url": None}]


def test_csv_output(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")
    output = tmp_path / "out" / "comments.csv"

    assert cli.main(["--file", str(page), "--unit-id", "U", "--output", str(output), "--format", "csv"]) == 0

    with open(output, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows == [{"id": "42", "author": "Alice", "content": "Hello", "timestamp": "0", "avatar_url": ""}]


def test_missing_file(tmp_path):
    assert cli.main(["--file", str(tmp_path / "nope.html"), "--unit-id", "U"]) == 1


def test_url_uses_fetcher(monkeypatch, capsys):
    class StubFetcher:
        def __init__(self, timeout=30):
            self.timeout = timeout

        def fetch(self, url):
            return PAGE

        def close(self):
            pass

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            self.close()

    monkeypatch.setattr(cli, "HTMLFetcher", StubFetcher)
    assert cli.main(["--url", "https://example.com/ch/1", "--unit-id", "U", "--timeout", "5"]) == 0
    assert json.loads(capsys.readouterr().out)[0]["id"] == 42
