"""Path and naming helpers shared by recorders and builders."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath

_RELATIVE_MARKERS = ("/", ".", "..")


def default_export_name(path: Path | str, extension: str, separator: str = "_") -> str:
    """Derive the default export binding for a component file.

    The extension is stripped and the first ``separator`` is removed, so
    ``_Button.svelte`` becomes ``Button`` and ``button_group.svelte`` becomes
    ``buttongroup``.
    """
    name = PurePosixPath(Path(path).as_posix()).name
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    if separator:
        name = name.replace(separator, "", 1)
    return name


def split_bulk_names(interior: str) -> list[str]:
    """Split the inside of ``export { ... }`` into trimmed, non-empty names."""
    return [name.strip() for name in interior.split(",") if name.strip()]


def relative_import_path(source: Path, out_dir: Path, strip_extension: str | None = None) -> str:
    """Return the import specifier for ``source`` as seen from ``out_dir``.

    Separators are normalised to ``/``. A bare relative result gets a ``./``
    prefix so bundlers never mistake it for a package name.
    """
    target = source
    if strip_extension and target.name.endswith(strip_extension):
        target = target.with_name(target.name[: -len(strip_extension)])
    relative = os.path.relpath(os.path.abspath(target), os.path.abspath(out_dir))
    path = Path(relative).as_posix()
    if path.startswith(_RELATIVE_MARKERS):
        return path
    return f"./{path}"


__all__ = ["default_export_name", "relative_import_path", "split_bulk_names"]
