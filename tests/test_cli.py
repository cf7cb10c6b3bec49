"""Tests for the feedscraper CLI."""
import io
import json
import xml.etree.ElementTree as ET

import pytest

from feedscraper.cli import main

_ITEMS = [
    {
        "id": "tw-1",
        "url": "https://x.com/a/status/1",
        "author": "a",
        "source": "twitter",
        "content": "Hello from X",
        "timestamp": "2024-10-02T15:04:05Z",
    },
    {
        "id": "gh-1",
        "url": "https://github.com/acme/repo/issues/1",
        "author": "octocat",
        "source": "github",
        "timestamp": "2024-10-02T16:00:00Z",
    },
]


@pytest.fixture
def items_file(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "items.json"
    path.write_text(json.dumps(_ITEMS), encoding="utf-8")
    return path


class TestMain:
    def test_file_to_stdout(self, items_file, capsys):
        main([str(items_file), "--no-config"])
        out, err = capsys.readouterr()
        assert out.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        channel = ET.fromstring(out).find("channel")
        assert [g.text for g in channel.iter("guid")] == ["tw-1", "gh-1"]
        assert "Loaded 2 items" in err

    def test_output_file(self, items_file, tmp_path, capsys):
        out_path = tmp_path / "feed.xml"
        main([str(items_file), "--no-config", "-o", str(out_path)])
        content = out_path.read_text(encoding="utf-8")
        assert content.count("<item>") == 2
        _, err = capsys.readouterr()
        assert "Wrote 2 items" in err

    def test_channel_overrides(self, items_file, capsys):
        main([str(items_file), "--no-config", "--title", "Mentions & More", "--link", "https://acme.example"])
        out, _ = capsys.readouterr()
        assert "<title>Mentions &amp; More</title>" in out
        assert "<link>https://acme.example</link>" in out

    def test_quiet(self, items_file, capsys):
        main([str(items_file), "--no-config", "-q"])
        _, err = capsys.readouterr()
        assert err == ""

    def test_stdin_json(self, items_file, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"items": _ITEMS})))
        main(["--no-config", "-q"])
        out, _ = capsys.readouterr()
        assert out.count("<item>") == 2

    def test_stdin_yaml(self, items_file, monkeypatch, capsys):
        yaml_items = (
            "- id: r-1\n"
            "  url: https://reddit.com/r/x/1\n"
            "  author: u\n"
            "  source: reddit\n"
            "  timestamp: '2024-10-02T15:04:05Z'\n"
        )
        monkeypatch.setattr("sys.stdin", io.StringIO(yaml_items))
        main(["-", "--no-config", "-q"])
        out, _ = capsys.readouterr()
        assert "<title>reddit post by u</title>" in out

    def test_missing_file_exits(self, items_file, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.json"), "--no-config"])
        assert exc.value.code == 1
        _, err = capsys.readouterr()
        assert "Error loading items" in err

    def test_malformed_json_exits(self, items_file, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("[{broken"))
        with pytest.raises(SystemExit) as exc:
            main(["--no-config"])
        assert exc.value.code == 1

    def test_numeric_ids_in_yaml(self, items_file, tmp_path, capsys):
        path = tmp_path / "numeric.yaml"
        path.write_text(
            "- id: 12345\n"
            "  url: https://reddit.com/r/x/12345\n"
            "  author: u\n"
            "  source: reddit\n"
            "  timestamp: '2024-10-02T15:04:05Z'\n",
            encoding="utf-8",
        )
        main([str(path), "--no-config", "-q"])
        out, _ = capsys.readouterr()
        assert '<guid isPermaLink="false">12345</guid>' in out

    def test_bad_field_type_exits(self, items_file, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([dict(_ITEMS[0], metadata="lots of likes")]), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(path), "--no-config", "-q"])
        assert exc.value.code == 1
        _, err = capsys.readouterr()
        assert "metadata" in err

    def test_empty_stdin_exits(self, items_file, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("  \n"))
        with pytest.raises(SystemExit) as exc:
            main(["--no-config"])
        assert exc.value.code == 1
        _, err = capsys.readouterr()
        assert "No items on stdin" in err

    def test_blank_config_value_keeps_default(self, items_file, tmp_path, capsys):
        (tmp_path / "feedscraper.yaml").write_text("title:\n")
        main([str(items_file), "-q"])
        out, _ = capsys.readouterr()
        assert "<title>Factory AI Social Feed</title>" in out

    def test_config_file_defaults(self, items_file, tmp_path, capsys):
        (tmp_path / "feedscraper.yaml").write_text("title: From Config\nquiet: true\n")
        main([str(items_file)])
        out, err = capsys.readouterr()
        assert "<title>From Config</title>" in out
        assert err == ""

    def test_init_config(self, items_file, tmp_path, capsys):
        main(["--init-config"])
        out, _ = capsys.readouterr()
        assert (tmp_path / "home" / ".feedscraper.yaml").exists()
        assert "starter config" in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        out, _ = capsys.readouterr()
        assert "feedscraper" in out
