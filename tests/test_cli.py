import io

import pytest

from strpipe.cli import build_pipeline, main, print_help, run_pipeline
from strpipe.plugin import PluginError

SENTENCE = "A sentence to be Tested 123!!!"


def _feed_stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_main_without_plugins_prints_usage(capsys):
    assert main(["20"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Usage: ./analyzer <queue_size>")


def test_main_rejects_zero_queue_size(capsys):
    assert main(["0", "logger"]) == 1
    captured = capsys.readouterr()
    assert "Queue size must be greater than 0" in captured.err
    assert "Usage: ./analyzer" in captured.out


def test_main_rejects_non_numeric_queue_size(capsys):
    assert main(["abc", "logger"]) == 1
    assert "Queue size must be greater than 0" in capsys.readouterr().err


def test_main_rejects_unknown_plugin(capsys):
    assert main(["5", "logger", "nosuch"]) == 1
    err = capsys.readouterr().err
    assert "nosuch" in err


def test_main_runs_chain(monkeypatch, capsys):
    _feed_stdin(monkeypatch, SENTENCE + "\n<END>\n")
    assert main(["20", "uppercaser", "rotator", "logger"]) == 0
    out = capsys.readouterr().out
    assert "[logger] !A SENTENCE TO BE TESTED 123!!\n" in out
    assert out.endswith("Pipeline shutdown complete\n")


def test_main_ignores_lines_after_end(monkeypatch, capsys):
    _feed_stdin(monkeypatch, "first\n<END>\nsecond\n")
    assert main(["3", "logger"]) == 0
    out = capsys.readouterr().out
    assert "[logger] first\n" in out
    assert "second" not in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    _feed_stdin(monkeypatch, "only line\n")
    assert main(["3", "logger"]) == 0
    out = capsys.readouterr().out
    assert "[logger] only line\n" in out
    assert out.endswith("Pipeline shutdown complete\n")


def test_build_pipeline_keeps_order():
    plugins = build_pipeline(["flipper", "rotator", "logger"], 4)
    try:
        assert [p.name for p in plugins] == ["flipper", "rotator", "logger"]
    finally:
        for plugin in plugins:
            plugin.fini()


def test_build_pipeline_unknown_name_raises():
    with pytest.raises(PluginError, match="missing"):
        build_pipeline(["logger", "missing"], 4)


def test_build_pipeline_bad_queue_size_raises():
    with pytest.raises(PluginError):
        build_pipeline(["logger"], 0)


def test_run_pipeline_delivers_in_order(capsys):
    plugins = build_pipeline(["flipper"], 1)
    results = []
    plugins[-1].attach(results.append)
    lines = [SENTENCE + "\n"] * 5 + ["<END>\n"]
    run_pipeline(plugins, lines)
    assert results == ["!!!321 detseT eb ot ecnetnes A"] * 5
    assert all(p.finished for p in plugins)
    assert capsys.readouterr().out.endswith("Pipeline shutdown complete\n")


def test_run_pipeline_chain_matches_source_example():
    plugins = build_pipeline(["uppercaser", "rotator"], 2)
    results = []
    plugins[-1].attach(results.append)
    run_pipeline(plugins, [SENTENCE])
    assert results == ["!A SENTENCE TO BE TESTED 123!!"]


def test_run_pipeline_on_closed_stage_raises(capsys):
    plugins = build_pipeline(["flipper"], 2)
    plugins[0].fini()
    with pytest.raises(PluginError, match="flipper"):
        run_pipeline(plugins, ["text\n"])
    assert "Pipeline shutdown complete" in capsys.readouterr().out


def test_run_pipeline_requires_plugins():
    with pytest.raises(ValueError):
        run_pipeline([], ["text\n"])


def test_print_help_lists_every_plugin():
    buffer = io.StringIO()
    print_help(buffer)
    text = buffer.getvalue()
    for name in ("logger", "typewriter", "uppercaser", "rotator", "flipper", "expander"):
        assert f"  {name}" in text
    assert "./analyzer 20 uppercaser rotator logger" in text