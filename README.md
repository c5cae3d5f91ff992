# tuidialog

Building blocks for terminal dialog boxes. The package holds the state and
logic behind several dialog widgets, kept apart from any drawing code, so
that each piece can be used on its own and tested without a terminal.

## What is inside

| Module | Purpose |
| --- | --- |
| `tuidialog.inputstr` | Character and display-column indexing of strings (`count_wchars`, `index_columns`, `count_columns`, `limit_columns`, `edit_offset`, `render_field`) and `LineEditor`, a single-line editor driven by `EditKey` keys and plain characters |
| `tuidialog.mouse` | `MouseRegions`, a registry of clickable screen regions (`MouseRegion`, `RegionMode`), with `mouse_key` to map a region code to a key code |
| `tuidialog.mousewget` | `resolve_click` and `read_key`, which turn a mouse click into the key of the region under it |
| `tuidialog.rc` | The run-time configuration file: `find_rc_file`, `load_rc`, `parse_rc`, `parse_line`, `parse_attribute`, `create_rc`, with `RcSettings`, `ColorAttr` and `RcError` |
| `tuidialog.fselect` | File and directory selection: `FileSelector`, `ScrollList`, `scan_directory`, `match_names` and name completion with `complete` |
| `tuidialog.rangebox` | `RangeValue`, a bounded integer with per-digit editing and a scaled slider |
| `tuidialog.mixedgauge` | `MixedGauge`, named entries each with a status, laid out as status rows; `status_string` and `percent_cells` |
| `tuidialog.progressbox` | `LineReader`, which reads lines from a text stream, and `ProgressBox`, a fixed number of rows that scroll as lines arrive |
| `tuidialog.prgbox` | `popen_merged` and `prgbox`, which run a command under `sh -c` and feed its combined stdout and stderr to a `ProgressBox` |

## Examples

Measuring strings the way the editor does (tab stops every 8 columns):

```python
from tuidialog.inputstr import count_columns, count_wchars

count_wchars("hello")    # 5
count_columns("a\tb")    # 9
```

Editing a line key by key:

```python
from tuidialog.inputstr import EditKey, LineEditor

editor = LineEditor("abc")
editor.edit(EditKey.LEFT)
editor.edit("X")
editor.text              # "abXc"
editor.offset            # 3
```

Registering a clickable region and resolving a click against it:

```python
from tuidialog.mouse import MouseRegions, mouse_key
from tuidialog.mousewget import resolve_click

regions = MouseRegions()
regions.set_base(10, 5)                       # x, y of the dialog
regions.make_region(0, 0, 3, 20, ord("i"))
resolve_click(regions, 6, 12) == mouse_key(ord("i"))   # True
resolve_click(regions, 0, 0)                            # None
```

Loading settings from the configuration file named by `$DIALOGRC`, then
`$HOME/.dialogrc`, then `/etc/dialogrc`:

```python
from tuidialog.rc import RcSettings, load_rc

settings = RcSettings()
path = load_rc(settings)     # None when no file was found
```

`parse_rc` applies lines from any iterable and stops at the first bad line
with an `RcError` naming the file and line number; `create_rc` writes a file
describing a `RcSettings` and a colour table.

A bounded value with a slider:

```python
from tuidialog.rangebox import RangeValue

value = RangeValue(0, 100, 50, 40)
value.step(+5)           # 55
value.step(+1000)        # 100, clamped
value.slider_cells()     # filled cells of the slider
```

Status codes of a mixed gauge:

```python
from tuidialog.mixedgauge import status_string

status_string("0")       # "Succeeded"
status_string("-40")     # " 40%"
```

Showing the output of a command:

```python
from tuidialog.prgbox import prgbox

box = prgbox("ls -l", 20, 70)
box.lines                # the rows currently shown
box.history              # every line read
box.result               # 0
```

## What this package does not do

It draws nothing and reads no keys from a terminal: each module holds the
state and rules of a widget, and a caller supplies the screen and the input
(for example the `get_key` callable passed to `read_key`). There is no
command-line program, no menu or checklist widget, and no single-bar gauge
fed from standard input.

## Requirements

Python 3.10 or later and `wcwidth`, which supplies display widths for wide
characters. `prgbox` needs a POSIX `sh`.