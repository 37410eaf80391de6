"""Helpers for formatting command help texts."""

from __future__ import annotations


def long_desc(text: str) -> str:
    """Strip leading and trailing whitespace from every line and from the whole text."""
    return "\n".join(line.strip() for line in text.split("\n")).strip()


def example(text: str) -> str:
    """Strip every line and indent it by two spaces.

    A leading empty line is dropped and trailing spaces are removed.
    """
    lines = text.split("\n")
    if lines and lines[0] == "":
        lines = lines[1:]
    out = "\n".join("  " + line.strip() for line in lines)
    return out.rstrip(" ")


def _base(file_path: str) -> str:
    if file_path == "":
        return "."
    stripped = file_path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def preset_name(file_path: str) -> str:
    """Return the file name of a slash-separated path without its extension."""
    base = _base(file_path)
    dot = base.rfind(".")
    ext = base[dot:] if dot >= 0 else ""
    if base == ext:
        return base
    return base[: len(base) - len(ext)]