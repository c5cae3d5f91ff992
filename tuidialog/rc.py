"""Run-time configuration file: locating, reading, writing and attribute parsing."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, MutableSequence, Sequence

from .inputstr import MAX_LEN

GLOBALRC = "/etc/dialogrc"
DIALOGRC = ".dialogrc"

MIN_TOKEN = 3
MAX_TOKEN = 5

_BLANKS = " \t"

COLOR_NAMES: tuple[tuple[str, int], ...] = (
    ("DEFAULT", -1),
    ("BLACK", 0),
    ("RED", 1),
    ("GREEN", 2),
    ("YELLOW", 3),
    ("BLUE", 4),
    ("MAGENTA", 5),
    ("CYAN", 6),
    ("WHITE", 7),
)

_HEADER = (
    "#\n"
    "# Run-time configuration file for dialog\n"
    "#\n"
    '# Automatically generated by "tuidialog --create-rc <file>"\n'
    "#\n"
    "#\n"
    "# Types of values:\n"
    "#\n"
    "# Number     -  <number>\n"
    '# String     -  "string"\n'
    "# Boolean    -  <ON|OFF>\n"
    "# Attribute  -  (foreground,background,highlight?,underline?,reverse?)\n"
)


class RcError(Exception):
    """A configuration file could not be parsed."""

    def __init__(self, filename: str, line_no: int, message: str):
        super().__init__(f"{filename}:{line_no}: {message}")
        self.filename = filename
        self.line_no = line_no
        self.message = message


@dataclass
class RcSettings:
    """Settings that a configuration file may change."""

    aspect_ratio: int = 9
    separate_str: str = ""
    tab_len: int = 8
    visit_items: bool = False
    use_scrollbar: bool = False
    use_shadow: bool = True
    use_colors: bool = True
    bindkeys: list[str] = field(default_factory=list)


@dataclass
class ColorAttr:
    """One entry of the colour table."""

    name: str = ""
    fg: int = -1
    bg: int = -1
    hilite: bool = False
    ul: bool = False
    rv: bool = False
    comment: str = ""


class _Kind(enum.Enum):
    INT = "int"
    STR = "str"
    BOOL = "bool"


@dataclass(frozen=True)
class _Var:
    name: str
    attr: str
    kind: _Kind
    comment: str


_VARS: tuple[_Var, ...] = (
    _Var("aspect", "aspect_ratio", _Kind.INT, "Set aspect-ration."),
    _Var("separate_widget", "separate_str", _Kind.STR,
         "Set separator (for multiple widgets output)."),
    _Var("tab_len", "tab_len", _Kind.INT,
         "Set tab-length (for textbox tab-conversion)."),
    _Var("visit_items", "visit_items", _Kind.BOOL,
         "Make tab-traversal for checklist, etc., include the list."),
    _Var("use_scrollbar", "use_scrollbar", _Kind.BOOL,
         "Show scrollbar in dialog boxes?"),
    _Var("use_shadow", "use_shadow", _Kind.BOOL,
         "Shadow dialog boxes? This also turns on color."),
    _Var("use_colors", "use_colors", _Kind.BOOL, "Turn color support ON or OFF"),
)

_ON_OFF = {True: "ON", False: "OFF"}


def _same(a: str, b: str) -> bool:
    return a.upper() == b.upper()


def from_boolean(text: str | None) -> bool | None:
    """``True`` for ON, ``False`` for OFF (any case), else ``None``."""
    if not text:
        return None
    if _same(text, "ON"):
        return True
    if _same(text, "OFF"):
        return False
    return None


def from_color_name(text: str | None) -> int | None:
    """Colour number for a colour name (any case), or ``None`` if unknown."""
    if not text:
        return None
    return next((value for name, value in COLOR_NAMES if _same(text, name)), None)


def to_color_name(code: int) -> str:
    """Name of a colour number, or ``?`` if there is none."""
    return next((name for name, value in COLOR_NAMES if value == code), "?")


def _find_color(color_table: Sequence[ColorAttr], name: str) -> ColorAttr | None:
    return next((entry for entry in color_table if _same(entry.name, name)), None)


def _find_var(name: str) -> _Var | None:
    return next((var for var in _VARS if _same(var.name, name)), None)


def _trim_token(token: str) -> str:
    return re.split(r"[ \t]", token.lstrip(_BLANKS), maxsplit=1)[0]


def parse_attribute(text: str, color_table: Sequence[ColorAttr] = ()) -> ColorAttr:
    """Parse ``(fg,bg,hilite[,ul[,rv]])`` or the name of a colour-table entry.

    Raises ``ValueError`` for an invalid representation.
    """
    if not text.startswith("(") or not text.endswith(")"):
        entry = _find_color(color_table, text)
        if entry is None:
            raise ValueError(f"invalid attribute: {text!r}")
        return replace(entry)

    tokens = text[1:-1].split(",")
    if not MIN_TOKEN <= len(tokens) <= MAX_TOKEN:
        raise ValueError(f"invalid attribute: {text!r}")
    tokens = [_trim_token(token) for token in tokens]

    fg = from_color_name(tokens[0])
    bg = from_color_name(tokens[1])
    hilite = from_boolean(tokens[2])
    ul = from_boolean(tokens[3]) if len(tokens) >= 4 else False
    rv = from_boolean(tokens[4]) if len(tokens) >= 5 else False
    if fg is None or bg is None or hilite is None or ul is None or rv is None:
        raise ValueError(f"invalid attribute: {text!r}")
    return ColorAttr(fg=fg, bg=bg, hilite=hilite, ul=ul, rv=rv)


def parse_line(line: str) -> tuple[str, str] | None:
    """Split ``variable = value``; ``None`` for a blank or comment line.

    Raises ``ValueError`` on a syntax error.
    """
    rest = line.lstrip(_BLANKS)
    if not rest or rest[0] == "#":
        return None
    if rest[0] == "=":
        raise ValueError("syntax error")
    match = re.match(r"[^ \t=]+", rest)
    name = match.group(0)
    rest = rest[match.end():]
    if not rest:
        raise ValueError("syntax error")
    if rest[0] != "=":
        rest = rest.lstrip(_BLANKS)
        if not rest.startswith("="):
            raise ValueError("syntax error")
    rest = rest[1:].lstrip(_BLANKS)
    if not rest:
        raise ValueError("syntax error")
    return name, rest.rstrip(_BLANKS)


def _begins_with(line: str, keyword: str) -> str | None:
    match = re.match(r"[ \t]*([A-Za-z0-9]*)", line)
    word = match.group(1)
    if len(word) == len(keyword) and _same(word, keyword):
        return line[match.end() + 1:].lstrip(_BLANKS)
    return None


def _atoi(text: str) -> int:
    match = re.match(r"[ \t\n\v\f\r]*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _is_quote(char: str) -> bool:
    return char in "\"'"


def _set_var(var: _Var, value: str, settings: RcSettings) -> str | None:
    """Assign ``value``; return an error message on failure."""
    if var.kind is _Kind.INT:
        setattr(settings, var.attr, _atoi(value))
    elif var.kind is _Kind.STR:
        if len(value) < 2 or not _is_quote(value[0]) or not _is_quote(value[-1]):
            return "expected string value"
        setattr(settings, var.attr, value[1:-1])
    else:
        flag = None
        if _same(value, "ON"):
            flag = True
        elif _same(value, "OFF"):
            flag = False
        if flag is None:
            return "expected boolean value"
        setattr(settings, var.attr, flag)
    return None


def parse_rc(
    lines: Iterable[str],
    filename: str = "<rc>",
    settings: RcSettings | None = None,
    color_table: MutableSequence[ColorAttr] | None = None,
) -> RcSettings:
    """Apply configuration lines to ``settings`` and ``color_table``.

    Stops at the first error, raising :class:`RcError`; changes made by
    earlier lines are kept.
    """
    if settings is None:
        settings = RcSettings()
    if color_table is None:
        color_table = []

    for line_no, raw in enumerate(lines, start=1):
        line = raw[:-1] if raw.endswith("\n") else raw
        if len(line) > MAX_LEN - 2:
            raise RcError(filename, line_no, "line too long")

        params = _begins_with(line, "bindkey")
        if params is not None:
            settings.bindkeys.append(params)
            continue

        try:
            parsed = parse_line(line)
        except ValueError:
            raise RcError(filename, line_no, "syntax error") from None
        if parsed is None:
            continue
        name, value = parsed

        var = _find_var(name)
        if var is not None:
            message = _set_var(var, value, settings)
            if message is not None:
                raise RcError(filename, line_no, message)
            continue

        entry = _find_color(color_table, name)
        if entry is None:
            raise RcError(filename, line_no, "unknown variable")
        try:
            attr = parse_attribute(value, color_table)
        except ValueError:
            raise RcError(filename, line_no, "expected attribute value") from None
        entry.fg = attr.fg
        entry.bg = attr.bg
        entry.hilite = attr.hilite
        entry.ul = attr.ul
        entry.rv = attr.rv
    return settings


def _readable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


def find_rc_file(environ: Mapping[str, str] | None = None) -> str | None:
    """Path of the configuration file to use, or ``None`` for built-in defaults.

    Tries ``$DIALOGRC``, then ``$HOME/.dialogrc``, then the global file.
    """
    env = os.environ if environ is None else environ
    candidate = env.get("DIALOGRC")
    if candidate and _readable(candidate):
        return candidate

    home = env.get("HOME")
    if home is not None and len(home) < MAX_LEN - (len(DIALOGRC) + 1 + 3):
        if not home or home.endswith("/"):
            path = home + DIALOGRC
        else:
            path = home + "/" + DIALOGRC
        if _readable(path):
            return path

    if _readable(GLOBALRC):
        return GLOBALRC
    return None


def load_rc(
    settings: RcSettings,
    color_table: MutableSequence[ColorAttr] | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Find and apply the configuration file; return its path, if any."""
    path = find_rc_file(environ)
    if path is None:
        return None
    with open(path, encoding="utf-8", errors="replace") as handle:
        parse_rc(handle, path, settings, color_table)
    return path


def create_rc(
    path: str | os.PathLike,
    settings: RcSettings,
    color_table: Sequence[ColorAttr] = (),
) -> None:
    """Write a configuration file describing ``settings`` and ``color_table``."""
    out = [_HEADER]
    for var in _VARS:
        out.append(f"\n# {var.comment}\n")
        value = getattr(settings, var.attr)
        if var.kind is _Kind.INT:
            out.append(f"{var.name} = {value}\n")
        elif var.kind is _Kind.STR:
            out.append(f'{var.name} = "{value}"\n')
        else:
            out.append(f"{var.name} = {_ON_OFF[bool(value)]}\n")

    for position, entry in enumerate(color_table):
        out.append(f"\n# {entry.comment}\n")
        earlier = next(
            (
                other
                for other in color_table[:position]
                if (other.fg, other.bg, other.hilite)
                == (entry.fg, entry.bg, entry.hilite)
            ),
            None,
        )
        if earlier is not None:
            out.append(f"{entry.name} = {earlier.name}\n")
            continue
        fields = [
            to_color_name(entry.fg),
            to_color_name(entry.bg),
            _ON_OFF[bool(entry.hilite)],
        ]
        if entry.ul or entry.rv:
            fields.append(_ON_OFF[bool(entry.ul)])
        if entry.rv:
            fields.append(_ON_OFF[bool(entry.rv)])
        out.append(f"{entry.name} = ({','.join(fields)})\n")

    if settings.bindkeys:
        out.append("\n")
        out.extend(f"bindkey {params}\n" for params in settings.bindkeys)

    with open(path, "w", encoding="utf-8") as handle:
        handle.write("".join(out))