"""Smoke tests for module imports and the CLI entry point."""
from __future__ import annotations

import io

import pytest


def test_imports():
    """All main modules should be importable."""
    import bids.bid
    import bids.linked_list
    import cli.main
    import cli.session
    import common.config_loader
    import display.render
    import display.theme
    import loader.amount
    import loader.csv_loader


def test_cli_main_help(capsys):
    """CLI should show help without error."""
    from cli.main import main

    with pytest.raises(SystemExit) as e:
        main(["--help"])
    assert e.value.code == 0

    captured = capsys.readouterr()
    assert "csv_path" in captured.out


def test_cli_exit_choice(monkeypatch, capsys):
    """Choosing 9 at the first prompt exits with status 0."""
    from cli.main import main

    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))

    with pytest.raises(SystemExit) as e:
        main(["data/eBid_Monthly_Sales.csv", "98109"])
    assert e.value.code == 0

    assert "Goodbye!" in capsys.readouterr().out


def test_cli_load_and_find(monkeypatch, capsys):
    """Load the sample file, find the default key, then exit."""
    from cli.main import main

    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n\n4\n\n\n9\n"))

    with pytest.raises(SystemExit) as e:
        main(["data/eBid_Monthly_Sales.csv", "98109"])
    assert e.value.code == 0

    out = capsys.readouterr().out
    assert "8 bids read" in out
    assert "BID FOUND" in out
    assert "Ford F-150, 2008" in out


def test_cli_bad_config(tmp_path, capsys):
    """A malformed config file exits with status 1."""
    from cli.main import main

    bad = tmp_path / "bad.yaml"
    bad.write_text("data: [unclosed\n", encoding="utf-8")

    with pytest.raises(SystemExit) as e:
        main(["--config", str(bad)])
    assert e.value.code == 1


def test_cli_non_integer_config_value(tmp_path, capsys):
    """A non-numeric width in the config is reported, not raised."""
    from cli.main import main

    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("display:\n  min_width: wide\n", encoding="utf-8")

    with pytest.raises(SystemExit) as e:
        main(["--config", str(cfg)])
    assert e.value.code == 1

    assert "Error:" in capsys.readouterr().out
