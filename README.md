# evenodd

`evenodd` reads a small configuration file and starts a number of worker
threads. Each worker generates a batch of unique random numbers and sorts them
into a shared list of even values and a shared list of odd values. A progress
bar shows how far along the workers are. When they finish, both lists are
printed.

The program's messages are in Spanish.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Configuration file

The file name must end in `.txt`. The file is read as UTF-8. Blank lines are
ignored. Every other line must hold one of these two settings:

```
numbers_per_thread = 6
thread_num = 2
```

Spaces around the `=` are optional. If a setting appears more than once, the
later line wins. A setting that is missing counts as 0. After the whole file
is read, both values must be positive. A line that is neither setting makes
the whole file invalid.

## Usage

```
evenodd -f config.txt
evenodd --file config.txt
evenodd -h
evenodd --help
```

The same entry point can also be run with `python -m evenodd.cli`.

- With `-f`/`--file` the program first prints the name of the chosen file.
  It then runs the workers, redrawing the progress bar as they go, and prints
  both lists. The exit status is 0.
- `-h`/`--help` prints a usage line and exits with status 1.
- These cases print an error to standard error and exit with status 1:
  - a wrong number of arguments,
  - an unknown option,
  - a file name without a `.txt` extension,
  - a file that cannot be opened,
  - invalid settings.

Example output:

```
El archivo de configuración es: config.txt
[==================================================] 100.00%

Lista PARES:
412, 88, 730
Lista IMPARES:
17, 951, 303, 5, 649, 221, 97, 583, 9
```

Each worker draws its numbers from `0` up to `max(10 * numbers_per_thread, 1000)`,
exclusive. Each worker's random generator is seeded with the current time
plus the worker's index. A worker pauses 1 ms after each number.

Numbers are unique within one worker's batch as long as the batch holds at
most 100000 numbers. Above that size, duplicates are allowed. Numbers from
different workers may repeat.

Press Ctrl+C, or send SIGTERM, to stop early. The program then does the
following:

1. It announces the signal.
2. The workers stop after their current number.
3. It reports that it was interrupted.
4. It reports how many numbers each list held, and discards them without
   printing them.

## Using it as a library

```python
import random

from evenodd.config import read_config
from evenodd.linked_list import NumberList
from evenodd.numbers import generate_unique_numbers, is_even

config = read_config("config.txt")
numbers = generate_unique_numbers(config.numbers_per_thread, random.Random(42))

evens, odds = NumberList(), NumberList()
for n in numbers:
    (evens if is_even(n) else odds).append(n)

print(evens.format())
print(odds.format())
```

### `evenodd.config`

- `read_config(filename)` returns a frozen `Config` with the fields
  `numbers_per_thread` and `thread_num`.
- It raises `ConfigError`, a subclass of `ValueError`, when the file cannot be
  opened or its contents are invalid.

### `evenodd.arguments`

- `check_args(argv)` takes the arguments without the program name and returns
  the configuration path.
  - It raises `HelpRequested` for `-h`/`--help`.
  - It raises `ArgumentError` for anything malformed.
- `validate_file_extension(filename)` checks the file name.
- `check_argument(arg, short_option, long_option)` matches an option.

### `evenodd.linked_list`

- `NumberList` is a thread-safe, append-only list of integers. It offers
  `append(value)`, `clear()` and `format()`.
  - `clear()` returns the number of elements removed.
  - `format()` joins the elements with `", "`.
- It also supports `len()` and iteration over a snapshot.

### `evenodd.numbers`

- `is_even(number)` tells whether a number is even.
- `generate_unique_numbers(count, rng)` generates a batch of numbers with the
  given `random.Random`.
- `ProgressBar(total, stream=None)` is a thread-safe bar, 50 characters wide,
  that writes to `stream` (standard output by default).
  - `update(increment)` records finished operations.
  - `advance_to(current)` moves to an absolute count and ignores going back.
  - `reset(total)` starts counting again.
  - `render()` returns text such as `[=====...     ] 50.00%`.

### `evenodd.signals`

- `RunState(stream=None)` holds the shared "keep running" flag, read through
  its `running` property.
  - `stop(signum)` clears the flag and announces only the first request.
  - `install_handlers()` routes SIGINT and SIGTERM to `stop`, and returns the
    handlers that were in place before.
  - `register(even_list, odd_list)` records the lists to clean up.
  - `cleanup()` empties those lists and reports how many elements each held.

### `evenodd.threads`

- `WorkerTask` is one worker's job. Its `run()` method generates the numbers
  and appends each to the even or odd list until the run state stops.
- `run_workers(config, even_list, odd_list, state, progress, delay=0.001)`
  does three things:
  - it starts one thread per configured worker,
  - it waits for all of them,
  - it returns how many were started.

## Running the tests

```
pip install .[test]
pytest
```