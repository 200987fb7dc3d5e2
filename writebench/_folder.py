from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from ._config import SUB_FOLDER
from ._exceptions import WBConfigError

logger = logging.getLogger(__name__)


def create_test_folder(root: Path | str, name: str = SUB_FOLDER) -> Path:
    """Create ``root/name`` for the benchmark files.

    ``root`` must already exist and the subfolder must not, so a run never
    mixes its files with someone else's.
    """
    root = Path(root)
    if not root.is_dir():
        raise WBConfigError(f"folder {root} does not exist or is not a directory")
    sub = root / name
    if sub.exists():
        raise WBConfigError(f"folder {sub} already exists")
    try:
        sub.mkdir(mode=0o700)
    except OSError as exc:
        raise WBConfigError(f"cannot create folder {sub}: {exc.strerror or exc}") from exc
    return sub


def clean_folder(
    folder: Path | str,
    *,
    show_deletion: bool = False,
    confirm: Callable[[Path], bool] | None = None,
) -> bool:
    """Remove every file in ``folder``, then the folder itself.

    Returns ``True`` only when the folder is gone. The folder is kept when
    ``confirm`` declines or when any file could not be removed.
    """
    folder = Path(folder)
    if confirm is not None and not confirm(folder):
        logger.info("keeping %s", folder)
        return False
    if not folder.is_dir():
        logger.warning("folder %s not found", folder)
        return False

    all_removed = True
    with os.scandir(folder) as it:
        entries = list(it)
    for entry in entries:
        try:
            os.remove(entry.path)
        except OSError as exc:
            logger.warning("failed to remove %s: %s", entry.path, exc.strerror or exc)
            all_removed = False
            continue
        if show_deletion:
            logger.info("removed %s", entry.path)

    if not all_removed:
        logger.warning("one or more files could not be deleted, remove %s manually", folder)
        return False
    try:
        folder.rmdir()
    except OSError as exc:
        logger.warning("failed to remove folder %s: %s", folder, exc.strerror or exc)
        return False
    logger.info("removed folder %s", folder)
    return True
