from __future__ import annotations

from rich.console import Console

from mediaindex.cli.console import ConsoleManager, rich_enabled


def test_console_manager_yields_console():  # noqa: D103
    with ConsoleManager(record=True) as console:  # type: Console
        assert isinstance(console, Console)
        console.print("Start")
        console.print("Done")

        output = console.export_text()

    for expected in ("Start", "Done"):
        assert expected in output


def test_rich_disabled_by_env(monkeypatch):  # noqa: D103
    monkeypatch.setenv("MEDIAINDEX_NO_RICH", "1")
    assert not rich_enabled()
    with ConsoleManager(record=True) as console:
        assert console.color_system is None


def test_force_use_overrides_env(monkeypatch):  # noqa: D103
    monkeypatch.setenv("MEDIAINDEX_NO_RICH", "1")
    with ConsoleManager(record=True, force_use=True) as console:
        console.print("[bold]styled[/bold]")
        assert "styled" in console.export_text()


def test_exceptions_propagate():  # noqa: D103
    try:
        with ConsoleManager(record=True):
            raise ValueError("boom")
    except ValueError as e:
        assert str(e) == "boom"
    else:
        raise AssertionError("exception was swallowed")
