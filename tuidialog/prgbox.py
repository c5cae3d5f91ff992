"""Running a shell command and showing its merged output in a progress box."""

from __future__ import annotations

import subprocess

from .progressbox import LineReader, ProgressBox


def popen_merged(command: str) -> subprocess.Popen:
    """Start ``command`` under ``sh -c`` with stderr joined to stdout.

    Raises ``OSError`` if the process cannot be started.
    """
    return subprocess.Popen(
        ["sh", "-c", command],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
    )


def prgbox(command: str, height: int, width: int, pause: bool = False) -> ProgressBox:
    """Show the output of ``command``; the returned box holds the exit status."""
    box = ProgressBox(height, width)
    with popen_merged(command) as proc:
        box.run(LineReader(proc.stdout), pause)
    return box