import json

from yt_ranker import cli
from yt_ranker.config import MissingApiKeyError
from yt_ranker.models import Candidate


def _raise_missing():
    raise MissingApiKeyError("YOUTUBE_API_KEY not set.")


def test_missing_key_exits_with_config_error(monkeypatch, capsys):
    monkeypatch.setattr(cli, "get_api_key", _raise_missing)
    assert cli.run(["rank", "python"]) == cli.EXIT_CONFIG_ERROR
    captured = capsys.readouterr()
    assert "YOUTUBE_API_KEY" in captured.err
    assert "No results." not in captured.out


def test_rank_json_output(monkeypatch, capsys, make_client):
    fake = make_client(
        candidates=[Candidate("a", "A"), Candidate("b", "B")],
        stats={"a": {"title": "A", "views": 500_000, "likes": 10_000, "comments": 200}, "b": None},
        comments={"a": ["great stuff"]},
    )
    monkeypatch.setattr(cli, "get_api_key", lambda: "k")
    monkeypatch.setattr(cli, "YouTubeClient", lambda api_key, timeout: fake)

    assert cli.run(["rank", "python", "--keywords", "async,io", "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [p["id"] for p in payload] == ["a"]
    assert set(payload[0]) == {"id", "title", "engagement", "sentiment", "suspicious", "compositeScore"}
    assert payload[0]["sentiment"] == 1.0
    assert fake.search_calls == [("python async io tutorial guide tips", 5, "medium")]


def test_rank_table_no_results(monkeypatch, capsys, make_client):
    fake = make_client(candidates=[], stats={})
    monkeypatch.setattr(cli, "get_api_key", lambda: "k")
    monkeypatch.setattr(cli, "YouTubeClient", lambda api_key, timeout: fake)

    assert cli.run(["rank", "nothing"]) == 0
    assert "No results." in capsys.readouterr().out


def test_set_key(monkeypatch, capsys, tmp_path):
    saved = tmp_path / "config.env"
    monkeypatch.setattr(cli, "save_api_key", lambda key: saved)
    assert cli.run(["set-key", "abc"]) == 0
    assert str(saved) in capsys.readouterr().out


def test_rank_table_output(monkeypatch, capsys, make_client):
    fake = make_client(
        candidates=[Candidate("a", "A"), Candidate("b", "B")],
        stats={
            "a": {"title": "Popular", "views": 2_000_000, "likes": 20_000, "comments": 300},
            "b": {"title": "Tiny", "views": 100, "likes": 1, "comments": 0},
        },
    )
    monkeypatch.setattr(cli, "get_api_key", lambda: "k")
    monkeypatch.setattr(cli, "YouTubeClient", lambda api_key, timeout: fake)

    assert cli.run(["rank", "python"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split(" | ")[0].strip() == "#"
    assert set(lines[1]) <= {"-", "+"}
    assert "Popular" in lines[2] and "https://www.youtube.com/watch?v=a" in lines[2]
    assert "Tiny" in lines[3] and " ! " in lines[3]
    assert "- Recommended for: over 1M views, high like count" in lines
