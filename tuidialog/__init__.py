"""State and logic for terminal dialog widgets: line editing, mouse regions, rc files, file selection, ranges and progress views."""

__version__ = "0.1.0"

__all__ = [
    "fselect",
    "inputstr",
    "mixedgauge",
    "mouse",
    "mousewget",
    "prgbox",
    "progressbox",
    "rangebox",
    "rc",
]