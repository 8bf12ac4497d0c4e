"""Dump sink adapters used by ``dump`` and ``log``.

Writes are best-effort side effects; they never alter the field being
composed.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import click

from ...observability import log_debug


class EchoSink:
    """Print text to stdout (or stderr) through :func:`click.echo`."""

    def __init__(self, *, err: bool = False) -> None:
        self._err = err

    def write(self, text: str) -> None:
        click.echo(text, err=self._err)


class FileSink:
    """Append timestamped lines to a file.

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> sink = FileSink(Path(tmp.name) / "fields.log", clock=lambda: datetime(2024, 5, 1, 12, 0))
    >>> sink.write("Haze")
    >>> (Path(tmp.name) / "fields.log").read_text(encoding="utf-8")
    '[2024-05-01T12:00:00] Haze\\n'
    >>> tmp.cleanup()
    """

    def __init__(self, path: str | Path, *, clock: Callable[[], datetime] | None = None) -> None:
        self._path = Path(path)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def path(self) -> Path:
        return self._path

    def write(self, text: str) -> None:
        stamp = self._clock().isoformat(timespec="seconds")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(f"[{stamp}] {text}\n")
        log_debug("field_logged", operation="log", field=None, path=str(self._path), size=len(text))
