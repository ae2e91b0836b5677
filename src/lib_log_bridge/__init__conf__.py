"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_bridge"
title = "Forward stdlib logging records into a structlog backend"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_bridge"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (default: :func:`print`).

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_log_bridge:
    ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)


__all__ = ["author", "name", "print_info", "shell_command", "title", "version"]
