# prettyterm

Styled output for terminal programs: ANSI styles and true-colour RGB, a
theme that bundles every style, section headings, aligned tables, trees
and an animated spinner, plus helpers that build tables and trees from
plain data.

## Installation

```
pip install prettyterm
```

## Styles and themes

`prettyterm.theme` holds `Color` (ANSI SGR codes), `Style` (an immutable
set of colours with `sprint`, `sprintln` and `sprintf`) and `Theme`, a
frozen dataclass of styles. `DEFAULT_THEME` is the theme the default
printers use; the `with_*_style` methods return changed copies.

```python
from prettyterm.theme import Color, Style, DEFAULT_THEME

print(Style(Color.BOLD, Color.FG_YELLOW).sprint("Warning"))
theme = DEFAULT_THEME.with_primary_style(Style(Color.FG_GREEN))
```

`sprintf` uses `%`-style formatting.

## True colour

```python
from prettyterm.rgb import RGB, new_rgb_style
from prettyterm.theme import Color

orange = RGB(255, 128, 0)
orange.println("true-colour text")          # written to standard output
RGB(0, 0, 80, background=True).sprint("on dark blue")

# Blend from one colour through others as a value moves through a range
RGB(0, 0, 0).fade(0, 100, 50, RGB(255, 255, 255))   # RGB(127, 127, 127)

new_rgb_style(RGB(0, 0, 255), RGB(255, 0, 255)).add_options(Color.BOLD).println("styled")
```

Channels outside 0–255 raise `ValueError`. `print_on_error` and
`print_on_errorf` print only those operands that are exceptions.

Hex codes:

```python
from prettyterm.putils.colors import rgb_from_hex, HexCodeInvalidError

rgb_from_hex("#fba")      # RGB(255, 187, 170)
rgb_from_hex("ff0009")    # RGB(255, 0, 9)
```

`#` and `0x` are stripped; a code that is not 3 or 6 digits long raises
`HexCodeInvalidError` (a `ValueError`), and non-hex digits raise `ValueError`.

## Sections

```python
from prettyterm.section_printer import DEFAULT_SECTION

DEFAULT_SECTION.with_level(2).println("Results")   # "## Results", padded by blank lines
```

## Tables

```python
from prettyterm.table_printer import DEFAULT_TABLE
from prettyterm.putils.tabledata import table_data_from_csv

data = table_data_from_csv("name,role\nAda,admin\nBob,user")
DEFAULT_TABLE.with_has_header().with_data(data).render()
```

`srender()` returns the table as a string instead of writing it. Cells may
span several lines; widths count display columns and ignore ANSI escapes.
`with_boxed()`, `with_right_alignment()`, `with_row_separator("-")` and
`with_header_row_separator("=")` change the layout, and `with_csv_reader`
takes rows from a `csv.reader`.

`table_data_from_tsv` and `table_data_from_separated_values` split other
delimited text; `table_from_struct_slice` and
`default_table_from_struct_slice` fill a table from a list of dataclass
instances, with the field names as the first row.

## Trees

```python
from prettyterm.tree_printer import DEFAULT_TREE, LeveledListItem
from prettyterm.putils.tree import tree_from_leveled_list

root = tree_from_leveled_list([
    LeveledListItem(level=0, text="src"),
    LeveledListItem(level=1, text="main.py"),
    LeveledListItem(level=0, text="README.md"),
])
DEFAULT_TREE.with_root(root).render()
```

Negative levels count as 0, and a level more than one deeper than the item
before it is reduced to one deeper.

## Spinners

`SpinnerPrinter.start()` returns a running copy that animates on a
background thread; `stop()` ends it, while `info`, `success`, `fail` and
`warning` end it with a status line.

```python
from prettyterm.spinner_printer import DEFAULT_SPINNER
from prettyterm.putils.runners import run_with_default_spinner

spinner = DEFAULT_SPINNER.with_text("Working").start()
spinner.update_text("Still working")
spinner.success("Done")

result = run_with_default_spinner("Crunching", lambda s: 42)   # returns 42
```

`delay` and `timer_rounding_factor` are in seconds. `print_average_execution_time(count, func)`
calls `func(i)` for each `i` in `range(count)` and prints the average time.

## Terminal size

```python
from prettyterm.terminal import get_terminal_size, set_forced_terminal_size

width, height, detected = get_terminal_size()   # falls back to 80x10
set_forced_terminal_size(80, 24)                # fixed size, e.g. for tests
set_forced_terminal_size(0, 0)                  # detect again
```

## What is not included

prettyterm is a library only; it has no command-line program. It has no
progress bars, boxed text printer, bullet lists, headers, loggers or
interactive prompts; the box drawn by `with_boxed()` is the only box it
renders.

## Running the tests

```
pip install -e ".[test]"
pytest
```