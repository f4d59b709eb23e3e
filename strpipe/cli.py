"""Command line entry point: run stdin lines through a chain of stages."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from strpipe.plugin import Plugin, PluginError, load_plugin

END_MARKER = "<END>"
"""A line holding only this marker ends the input."""

_HELP = """\
Usage: ./analyzer <queue_size> <plugin1> <plugin2> ... <pluginN>

Arguments:
  queue_size   Maximum number of items in each plugin's queue
  plugin1..N   Name of plugins to load (without .so extension)

Available plugins:
  logger        - Logs all strings that pass through
  typewriter    - Simulates typewriter effect with delays
  uppercaser    - Converts strings to uppercase
  rotator       - Move every character to the right.  Last character moves to the beginning.
  flipper       - Reverses the order of the characters
  expander      - Expands each character with spaces

Example:
  ./analyzer 20 uppercaser rotator logger
"""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def print_help(file: TextIO | None = None) -> None:
    """Write the usage text to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(_HELP)
    out.flush()


def _parse_queue_size(text: str) -> int:
    """Read a leading integer from ``text``; anything unparsable counts as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def build_pipeline(names: Sequence[str], queue_size: int) -> list[Plugin]:
    """Start the stages named in ``names`` and chain each to the next.

    If any stage cannot be started, the stages already running are shut
    down and :class:`PluginError` is raised.
    """
    plugins: list[Plugin] = []
    for name in names:
        try:
            plugins.append(load_plugin(name, queue_size))
        except PluginError as exc:
            for started in plugins:
                try:
                    started.fini()
                except PluginError:
                    pass
            raise PluginError(f"Failed to initialize plugin {name}: {exc}") from exc
    for current, following in zip(plugins, plugins[1:]):
        current.attach(following.place_work)
    return plugins


def _shutdown(plugins: Sequence[Plugin]) -> None:
    for plugin in plugins:
        try:
            plugin.wait_finished()
        except PluginError as exc:
            print(
                f"Failed to wait for plugin {plugin.name} to finish: {exc}",
                file=sys.stderr,
            )
        try:
            plugin.fini()
        except PluginError as exc:
            print(f"Failed to finalize plugin {plugin.name}: {exc}", file=sys.stderr)
    print("Pipeline shutdown complete", flush=True)


def run_pipeline(plugins: Sequence[Plugin], lines: Iterable[str]) -> None:
    """Feed ``lines`` to the first stage until the end marker, then shut down.

    Each line is cut at its first newline. Input also ends when ``lines``
    runs out. All stages are drained and finalized in order before this
    returns; if a line cannot be queued, :class:`PluginError` is raised
    after the shutdown.
    """
    if not plugins:
        raise ValueError("At least one plugin is required")
    head = plugins[0]
    try:
        for line in lines:
            text = line.split("\n", 1)[0]
            if text == END_MARKER:
                break
            try:
                head.place_work(text)
            except PluginError as exc:
                raise PluginError(
                    f"Failed to place work in plugin {head.name}: {exc}"
                ) from exc
    finally:
        _shutdown(plugins)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline described by ``argv`` over standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print_help()
        return 1
    queue_size = _parse_queue_size(args[0])
    if queue_size <= 0:
        print("Queue size must be greater than 0", file=sys.stderr)
        print_help()
        return 1
    names = args[1:]
    try:
        plugins = build_pipeline(names, queue_size)
    except PluginError as exc:
        print(str(exc), file=sys.stderr)
        print_help()
        return 1
    try:
        run_pipeline(plugins, sys.stdin)
    except PluginError as exc:
        print(str(exc), file=sys.stderr)
        print_help()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())