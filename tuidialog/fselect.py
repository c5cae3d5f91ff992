"""File and directory selection: listing, matching and name completion."""

from __future__ import annotations

import os
import stat
from typing import Sequence

from .inputstr import MAX_LEN

DIRS = -3
FILES = -2
TEXT = -1


def leaf_of(path: str) -> str:
    """The part of ``path`` after its last slash."""
    return path[path.rfind("/") + 1:]


def _replace_leaf(path: str, leaf: str) -> str:
    return path[: path.rfind("/") + 1] + leaf


def match_names(name: str, dirs: Sequence[str], files: Sequence[str]) -> list[str]:
    """Directory and file names that begin with the leaf of ``name``.

    The first two directory entries (``.`` and ``..``) are never matched.
    Directories come before files.
    """
    test = leaf_of(name)
    matches = [entry for entry in dirs[2:] if entry.startswith(test)]
    matches.extend(entry for entry in files if entry.startswith(test))
    return matches


def complete(
    name: str,
    dirs: Sequence[str],
    files: Sequence[str],
    selected_dir: str | None = None,
) -> str | None:
    """Completion of the leaf of ``name``, or ``None`` if there is none.

    A single match is completed in full, with a trailing slash when it is
    the currently selected directory.  Several matches complete to their
    common prefix.
    """
    matches = match_names(name, dirs, files)
    if not matches:
        return None
    if len(matches) == 1:
        result = matches[0]
        if selected_dir is not None and result == selected_dir:
            result += "/"
    else:
        result = os.path.commonprefix(matches)
    return result or None


def scan_directory(path: str, want_files: bool = True) -> tuple[list[str], list[str]]:
    """Sorted directory and file names in the directory part of ``path``.

    The directory part is everything up to the last slash, or ``./``.
    Entries that cannot be examined are left out, as are names too long to
    fit together with ``path``.  An unreadable directory gives empty lists.
    """
    have = min(len(path), MAX_LEN)
    slash = path.rfind("/", 0, have)
    directory = path[: slash + 1] if slash >= 0 else "./"

    try:
        names = [".", ".."] + os.listdir(directory)
    except OSError:
        return [], []

    dirs: list[str] = []
    files: list[str] = []
    for entry in names:
        if not entry or len(entry) + have + 2 >= MAX_LEN:
            continue
        try:
            mode = os.stat(directory + entry).st_mode
        except OSError:
            continue
        if stat.S_ISDIR(mode):
            dirs.append(entry)
        elif want_files:
            files.append(entry)
    dirs.sort()
    files.sort()
    return dirs, files


class ScrollList:
    """A list of names shown in a window ``height`` rows high."""

    def __init__(self, height: int):
        self.height = height
        self.items: list[str] = []
        self.offset = 0
        self.choice = 0

    def set_items(self, items) -> None:
        """Replace the contents and reset the position."""
        self.items = list(items)
        self.offset = 0
        self.choice = 0

    @property
    def current(self) -> str | None:
        """The selected name, or ``None`` for an empty list."""
        return self.items[self.choice] if self.items else None

    def keep_visible(self) -> None:
        """Scroll so that the selected row is on screen."""
        if self.choice < self.offset:
            self.offset = self.choice
        if self.choice - self.offset >= self.height:
            self.offset = self.choice - self.height + 1

    def find_choice(self, target: str) -> bool:
        """Select the entry that best matches ``target``; True if it moved.

        The longest common prefix wins; among equals, the entry whose next
        character is closest to the next character of ``target``.
        """
        before = self.choice
        if not target:
            self.choice = 0
        else:
            best_len = 0
            best_cmp = 256
            for n, entry in enumerate(self.items):
                length = 0
                for a, b in zip(target, entry):
                    if a != b:
                        break
                    length += 1
                a_code = ord(target[length]) if length < len(target) else 0
                b_code = ord(entry[length]) if length < len(entry) else 0
                cmp = abs(a_code - b_code)
                if length > best_len or (length == best_len and cmp < best_cmp):
                    best_len = length
                    best_cmp = cmp
                    self.choice = n
        changed = before != self.choice
        if changed:
            self.keep_visible()
        return changed

    def change(self, delta: int) -> bool:
        """Move the selection by ``delta``, clamped; False for an empty list."""
        if not self.items:
            return False
        self.choice = max(0, min(self.choice + delta, len(self.items) - 1))
        self.keep_visible()
        return True

    def scroll(self, direction: int) -> bool:
        """Move by a page in ``direction``; False if there is nothing to move."""
        return self.change(direction * self.height)


class FileSelector:
    """State of a file (or directory) selector around an editable path."""

    def __init__(self, path: str, list_height: int, dselect: bool = False):
        self.text = path
        self.current = ""
        self.dselect = dselect
        self.dirs = ScrollList(list_height)
        self.files = ScrollList(list_height)
        self.state = TEXT

    def _show_list(self, target: str, lst: ScrollList, keep: bool) -> bool:
        return keep or lst.find_choice(target)

    def _show_both(self, keep: bool) -> bool:
        leaf = leaf_of(self.text)
        return self._show_list(leaf, self.dirs, keep) or self._show_list(
            leaf, self.files, keep
        )

    def refresh(self, keep: bool = False) -> bool:
        """Bring the lists up to date with the edited path; True if they changed.

        The directory is read again when the directory part of the path
        changed; otherwise only the selections follow the typed leaf.
        """
        current, text = self.current, self.text
        n = 0
        for a, b in zip(current, text):
            if a != b:
                break
            n += 1

        rescan = False
        result = True
        if current == text:
            result = False
            rescan = n == 0 and not self.dirs.items
        elif "/" not in current[n:] and "/" not in text[n:]:
            result = self._show_both(keep)
        else:
            rescan = True

        if rescan:
            self.current = text[:MAX_LEN]
            dirs, files = scan_directory(self.current, not self.dselect)
            self.dirs.set_items(dirs)
            self.files.set_items(files)
            self._show_both(False)
            self.dirs.offset = self.dirs.choice
            self.files.offset = self.files.choice
            result = True
        return result

    def select(self, state: int) -> bool:
        """Put the selection for ``state`` into the path's leaf.

        From the file or directory list the selected name is used; from the
        text field the leaf is completed.  Returns False when there was
        nothing to put in.
        """
        if state == FILES and not self.dselect:
            completed = self.files.current
        elif state == DIRS:
            completed = self.dirs.current
        else:
            completed = complete(
                self.text, self.dirs.items, self.files.items, self.dirs.current
            )
        if completed is None:
            return False
        self.text = _replace_leaf(self.text, completed)
        self.state = TEXT
        return True