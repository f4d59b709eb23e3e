# strpipe

`strpipe` reads lines of text and passes each one through a chain of
string transforms. Every stage runs in its own thread and has a bounded
queue of its own. When a stage's queue is full, the stage before it waits.

## Installation

```
pip install .
```

## Command line

```
strpipe <queue_size> <plugin1> <plugin2> ... <pluginN>
```

The same command can also be started as `python -m strpipe.cli`.

- `queue_size`: the largest number of items each stage's queue may hold.
  The leading integer of the argument is used, and anything that does not
  start with a number counts as 0. The value must be greater than 0.
- `plugin1..N`: the stages, in the order they run. At least one is needed.

The available stages are:

| name         | effect                                                        |
|--------------|---------------------------------------------------------------|
| `logger`     | prints each string as `[logger] <text>` and passes it on      |
| `typewriter` | prints `[typewriter] ` and then the string one character at a time, 100 ms apart, and passes it on |
| `uppercaser` | converts ASCII letters to upper case                          |
| `rotator`    | moves every character one place right; the last comes first   |
| `flipper`    | reverses the string                                           |
| `expander`   | puts a single space between each pair of characters          |

Input is read from standard input one line at a time. A line that reads
exactly `<END>` stops the input, and so does the end of standard input.
Each stage then drains its queue and shuts down, in order, and the program
prints `Pipeline shutdown complete`.

```
$ printf 'hello\n<END>\n' | strpipe 20 uppercaser rotator logger
[logger] OHELL
Pipeline shutdown complete
```

If there are too few arguments, if the queue size is not greater than 0, or
if a stage name is unknown, the program prints a message and the usage text
and exits with status 1. The exit status is 0 after a normal run.

## Library use

The transforms are plain functions in `strpipe.transforms`:

```python
from strpipe.transforms import uppercase, rotate, flip, expand, get_transform

rotate(uppercase("A sentence to be Tested 123!!!"))
# '!A SENTENCE TO BE TESTED 123!!'
flip("abCde")          # 'edCba'
expand("abc")          # 'a b c'
get_transform("flipper")("123")   # '321'
```

`log` and `typewrite` print their input and return it unchanged.
`get_transform` raises `ValueError` for an unknown name.

You can also build a threaded pipeline and feed it lines yourself:

```python
from strpipe.cli import build_pipeline, run_pipeline

plugins = build_pipeline(["uppercaser", "logger"], queue_size=10)
run_pipeline(plugins, ["hello", "world", "<END>"])
```

`run_pipeline` drains and finalizes every stage before it returns.

A single stage is a `strpipe.plugin.Plugin`. You get one from
`load_plugin(name, queue_size)`. It has `place_work`, `attach`,
`wait_finished` and `fini`, can be used as a context manager, and raises
`PluginError` when something goes wrong. The queue behind each stage is
`strpipe.channel.ConsumerProducer`. Its `get` returns `None` once the queue
is finished and empty, and `put` raises `QueueFinishedError` if you put an
item after the queue has been marked finished. `strpipe.monitor.Monitor` is
the one-shot signal that the queue uses.

## What it does not do

The set of stages is fixed: only the six stages listed above exist.
Stages cannot be added at run time or loaded from files.

## Running the tests

```
pip install ".[test]"
pytest
```