"""Resolve the artefact path supplied to the action."""

from __future__ import annotations

import dataclasses
from pathlib import Path

__all__ = ["ResolvedArtefact", "resolve_artefact"]


@dataclasses.dataclass(frozen=True, slots=True)
class ResolvedArtefact:
    """Artefact located on local disk.

    Attributes
    ----------
    source : str
        Path exactly as supplied by the workflow.
    path : Path
        Absolute path of the artefact.
    name : str
        Base file name sent with the upload.
    """

    source: str
    path: Path
    name: str


def resolve_artefact(
    source: str | Path, *, cwd: Path | None = None
) -> ResolvedArtefact:
    """Resolve ``source`` and ensure it names an existing file.

    Parameters
    ----------
    source : str | Path
        Absolute path, or path relative to ``cwd``.
    cwd : Path | None, optional
        Base directory for relative paths; defaults to the working directory.

    Raises
    ------
    FileNotFoundError
        If no regular file exists at the resolved path.

    Examples
    --------
    >>> resolve_artefact("build/app.apk", cwd=Path("/work"))  # doctest: +SKIP
    ResolvedArtefact(source='build/app.apk', path=PosixPath('/work/build/app.apk'), name='app.apk')
    """
    base = Path.cwd() if cwd is None else cwd
    path = (base / Path(source).expanduser()).resolve()
    if not path.is_file():
        message = f'File "{path}" not found.'
        raise FileNotFoundError(message)
    return ResolvedArtefact(source=str(source), path=path, name=path.name)
