"""Packages directory trees into a zip archive for unpackaged reactor modules."""
from __future__ import annotations

import logging
import os
import shutil
import zipfile
from typing import Any, List, Optional

from common.logging_utils import extra_context, is_debug_enabled

logger = logging.getLogger(__name__)


def _safely_close(closeable: Optional[Any]) -> None:
    """Close ``closeable`` ignoring (but tracing) any failure."""
    if closeable is None:
        return
    try:
        closeable.close()
    except (OSError, ValueError) as exc:
        logger.debug("Could not close stream due to: %s; ignoring", exc)


def file_listing(directory: str) -> List[str]:
    """List regular files under ``directory`` as '/'-separated relative paths.

    Traversal is depth-first with children in name order. Directory symlinks
    are not descended into. A missing directory yields an empty list.
    """
    entries: List[str] = []
    # (absolute path, relative path) pairs still to visit
    stack = [(directory, "")]
    while stack:
        path, relative = stack.pop()
        if os.path.isfile(path):
            if relative:
                entries.append(relative)
            continue
        if not os.path.isdir(path):
            continue
        if relative and os.path.islink(path):
            continue
        children = sorted(os.listdir(path), reverse=True)
        for name in children:
            child_relative = f"{relative}/{name}" if relative else name
            stack.append((os.path.join(path, name), child_relative))
    return entries


def package_directories(output_file: str, *directories: str) -> int:
    """Write every regular file below ``directories`` into the zip ``output_file``.

    Entries are named relative to the directory they came from, so files of
    later directories overwrite same-named entries of earlier ones when the
    archive is extracted. A failure while copying propagates and leaves the
    partially written archive in place.

    Args:
        output_file: Archive to create (truncated if it exists).
        *directories: Roots to package, in order.

    Returns:
        Number of entries written.
    """
    if not directories or any(d is None for d in directories):
        raise ValueError("Directories to be packaged must be specified")

    written = 0
    archive = zipfile.ZipFile(output_file, "w", compression=zipfile.ZIP_DEFLATED)
    try:
        for directory in directories:
            listing = file_listing(directory)
            if not listing and is_debug_enabled(logger):
                logger.debug("Nothing to package", extra=extra_context(
                    event="package", component="packager", action="list_files",
                    outcome="empty", target=directory
                ))
            for entry in listing:
                source = None
                target = None
                try:
                    source = open(os.path.join(directory, *entry.split("/")), "rb")
                    target = archive.open(entry, "w")
                    shutil.copyfileobj(source, target)
                finally:
                    _safely_close(target)
                    _safely_close(source)
                written += 1
    finally:
        _safely_close(archive)

    if is_debug_enabled(logger):
        logger.debug("Packaged directories", extra=extra_context(
            event="package", component="packager", action="package_directories",
            outcome="success", target=output_file, entries=written
        ))
    return written
