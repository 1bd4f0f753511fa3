"""
reordering/pipeline.py — pełny przebieg dla jednego pliku.

  plik → read_bytes() → parse_go_source() → extract_units() → find_block()
  → assemble() → zapis (w miejscu albo do --output)

Stany końcowe: NOOP (brak jednostek, plik nietknięty), REWRITTEN,
UNCHANGED (bufor identyczny z wejściem, nic nie jest zapisywane).
Każdy błąd przerywa przebieg przed zapisem.
"""

from __future__ import annotations

import contextlib
import os
import shutil
from pathlib import Path

from go_source import GoSyntaxError, ParsedFile, parse_go_source

from .assembler import assemble
from .extractor import extract_units, find_block
from .ordering import in_output_order
from .selection import SelectionPolicy
from .types import ErrorCode, ReorderError, ReorderResult, ReorderStatus


def plan_reorder(
    source: bytes,
    filename: str = "<source>",
    policy: SelectionPolicy | None = None,
) -> ReorderResult:
    """
    Wylicza nowy bufor bez dotykania systemu plików.

    Raises:
        GoSyntaxError: gdy źródło nie jest poprawnym Go.
    """
    parsed = parse_go_source(source, filename)
    units = extract_units(parsed, policy)

    if not units:
        return ReorderResult(status=ReorderStatus.NOOP, path=filename)

    new_source = assemble(source, units)
    status = ReorderStatus.UNCHANGED if new_source == source else ReorderStatus.REWRITTEN

    return ReorderResult(
        status=status,
        path=filename,
        units=in_output_order(units),
        block=find_block(parsed, units),
        new_source=new_source,
    )


def reorder_file(
    path: str | Path,
    policy: SelectionPolicy | None = None,
    *,
    output: str | Path | None = None,
    dry_run: bool = False,
) -> ReorderResult:
    """
    Przestawia metody w pliku i zapisuje wynik.

    Args:
        path:    Plik źródłowy Go.
        policy:  Polityka wyboru (domyślnie SelectionPolicy()).
        output:  Zapis do innego pliku zamiast nadpisywania źródła.
        dry_run: Tylko wylicz wynik, nic nie zapisuj.

    Raises:
        ReorderError: E_READ_FAILURE / E_PARSE_FAILURE / E_WRITE_FAILURE.
    """
    path = Path(path)
    source = read_source(path)

    try:
        result = plan_reorder(source, str(path), policy)
    except GoSyntaxError as exc:
        raise _parse_failure(path, exc) from exc

    if dry_run or result.status is ReorderStatus.NOOP or result.new_source is None:
        return result

    target = Path(output) if output is not None else path
    if result.status is ReorderStatus.UNCHANGED and target.resolve() == path.resolve():
        return result

    write_source(target, result.new_source)
    result.written_to = target
    return result


def load_file(path: str | Path) -> ParsedFile:
    """Odczytuje i parsuje plik; błędy zamienia na ReorderError."""
    path = Path(path)
    source = read_source(path)
    try:
        return parse_go_source(source, str(path))
    except GoSyntaxError as exc:
        raise _parse_failure(path, exc) from exc


def read_source(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ReorderError(
            ErrorCode.READ_FAILURE, path, f"nie można odczytać pliku: {exc.strerror or exc}"
        ) from exc


def _parse_failure(path: Path, exc: GoSyntaxError) -> ReorderError:
    return ReorderError(
        ErrorCode.PARSE_FAILURE, path, f"{exc.line}:{exc.column}: {exc.message}"
    )


def write_source(path: Path, data: bytes) -> None:
    """
    Atomowo zastępuje plik: zapis do <plik>.tmp obok i os.replace().

    Dowiązanie symboliczne jest rozwiązywane; zastępowany jest plik docelowy.
    """
    path = path.resolve()
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_bytes(data)
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            os.remove(tmp_path)
        raise ReorderError(
            ErrorCode.WRITE_FAILURE, path, f"nie można zapisać pliku: {exc.strerror or exc}"
        ) from exc
