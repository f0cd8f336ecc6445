# rustlings

A small library for people learning Rust through short exercises. It
provides:

- `rustlings.project`: builds a `rust-project.json` file so that
  rust-analyzer treats each exercise file as its own crate.
- `rustlings.ui`: coloured warning and success lines for the terminal.
- `rustlings.exercises`: worked solutions to many of the exercises, written
  as plain Python functions and types.

## Requirements

- Python 3.11 or later
- `rich`
- `rustc` on your `PATH`, but only if you call
  `RustAnalyzerProject.get_sysroot_src()` without `RUST_SRC_PATH` set

## Installation

```
pip install .
```

## rust-analyzer project files

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()             # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` when it is set. Otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found, and points at
  `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks everything below `root` (default
  `exercises`) in sorted order and adds a `Crate` for every `.rs` file.
- `add_path(path)` adds a single crate if the path ends in `.rs`, and
  ignores any other path.
- Each `Crate` has edition `2021`, no dependencies, and the `test` cfg, so
  rust-analyzer also works inside `#[test]` blocks.
- `write_to_disk(path)` writes compact JSON. The default path is
  `rust-project.json`. `to_dict()` returns the same data as a dictionary.

## Status lines

`rustlings.ui.warn(message)` prints a red line and
`rustlings.ui.success(message)` prints a green one, each with a marker in
front. When the environment variable `NO_EMOJI` is set, the markers are
plain `!` and `✓`. `no_emoji()` reports whether it is set.

## Worked exercise solutions

Each module in `rustlings.exercises` covers one topic:

| Module | Contents |
| --- | --- |
| `conditionals` | `bigger`, `foo_if_fizz`, `animal_habitat` |
| `enums` | message types `ChangeColor`, `Echo`, `Move`, `Quit`, and a `State` that processes them |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `functions` | `sale_price`, `is_even`, `square` |
| `iterators` | `capitalize_first`, `divide`, `factorial`, and `Progress` counting helpers |
| `options` | `maybe_icecream` |
| `person` | `Person.from_text` (lenient, falls back to John, 30) and `Person.parse` (strict) |
| `quizzes` | `calculate_price_of_apples`, `Command` and `transformer`, `ReportCard` |
| `smart_pointers` | a `Cons` list and a copy-on-write `Cow` with `abs_all` |
| `strings` | `trim_me`, `compose_me`, `replace_me`, `is_a_color_word` |
| `structs` | `Package`, which must weigh at least 10 grams |
| `traits` | `append_bar` for strings and lists, `Licensed` and `compare_license_types` |
| `vecs` | `array_and_vec`, `vec_loop`, `vec_map` |

Failures raise exceptions:

```python
from rustlings.exercises.person import Person, BadLenError
from rustlings.exercises.iterators import divide, NotDivisibleError

Person.parse("Mark,20")          # Person(name='Mark', age=20)
Person.from_text("Mark")         # Person(name='John', age=30)
divide(81, 9)                    # 9
divide(81, 6)                    # raises NotDivisibleError(81, 6)
Person.parse("John,32,man")      # raises BadLenError
```

## What this package does not do

This package has no command-line program. It does not read an exercise
list, compile, run or test exercise files, or track which exercises are
solved. It has no watch mode and no way to reset an exercise. It supplies
only the library pieces described above.

## Tests

```
pip install ".[test]"
pytest
```