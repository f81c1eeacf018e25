import argparse

import pytest

from ogmeta.app import cli


@pytest.fixture(autouse=True)
def memory_backend(monkeypatch, tmp_path):
    monkeypatch.setattr("ogmeta.config.SETTINGS_PATH", str(tmp_path / "missing.toml"))
    monkeypatch.setattr("ogmeta.config.STORAGE_BACKEND", "memory")
    monkeypatch.setattr("ogmeta.config.NONCE_SECRET", "")


def test_parse_pairs():
    assert cli.parse_pairs(["title=Hello", "desc=a=b"]) == {"title": "Hello", "desc": "a=b"}
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_pairs(["novalue"])


def test_main_saves_and_prints_head(capsys):
    cli.main(["--item", "3", "--set", "title=Hello", "--set", "type=article"])
    out = capsys.readouterr().out
    assert 'property="og:title"' in out
    assert 'content="article"' in out


def test_main_prints_form(capsys):
    cli.main(["--form", "--set", "type=book"])
    out = capsys.readouterr().out
    assert "ADMIN PANEL" in out
    assert 'selected="selected"' in out


def test_main_without_values(capsys):
    cli.main([])
    assert "no OpenGraph tags" in capsys.readouterr().out
