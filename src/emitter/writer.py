"""
Write composed artifact text to disk.

The target is opened in create-or-truncate mode and written in one call, so a
second dump to the same path replaces the first one completely, whoever wrote
the existing file. A failed write leaves whatever landed on disk in an
indeterminate state; there is no backup and no retry.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from artifact import WriteError


def write_artifact(path: Union[str, os.PathLike], text: str) -> int:
    """
    Overwrite `path` with `text` encoded as UTF-8.

    Newlines are written untranslated so the file matches `text` exactly.

    Returns:
        Number of characters written.

    Raises:
        WriteError: On any OS-level failure (permissions, disk full, the path
            being a directory, ...) and on paths the OS cannot represent,
            such as names containing a NUL byte.
    """
    target = Path(path)
    try:
        with target.open("w", encoding="utf-8", newline="") as handle:
            return handle.write(text)
    except OSError as exc:
        raise WriteError(target, exc.strerror or str(exc)) from exc
    except UnicodeEncodeError as exc:
        raise WriteError(target, f"text is not encodable as UTF-8 ({exc.reason})") from exc
    except ValueError as exc:
        raise WriteError(target, str(exc)) from exc


__all__ = ["write_artifact"]
