#!/usr/bin/env python3
"""
Filename utilities for generating output filenames.
"""

from typing import Iterator
import os
import logging

logger = logging.getLogger(__name__)

MAX_NUMBERED_VARIANTS = 100


def _candidate_filenames(input_filename: str) -> Iterator[str]:
    """Yield "<name> playback.html", then "<name> playback (1).html", ..."""
    directory, base = os.path.split(input_filename)
    stem, extension = os.path.splitext(base)
    if extension.lower() != ".gpx":
        stem = base

    yield os.path.join(directory, f"{stem} playback.html")
    for i in range(1, MAX_NUMBERED_VARIANTS + 1):
        yield os.path.join(directory, f"{stem} playback ({i}).html")


def generate_output_filename(input_filename: str) -> str:
    """
    Generate an output HTML filename next to the input and reserve it.

    A trailing .gpx (any case) is dropped and " playback.html" appended; if
    that file exists, numbered variants are tried. Each candidate is created
    exclusively so that the returned name is reserved as an empty file.

    Args:
        input_filename: Path to the input GPX file

    Returns:
        Output filename that now exists as an empty file

    Raises:
        RuntimeError: If every candidate already exists
        ValueError: If a candidate cannot be created (permissions, invalid name)
    """
    for candidate in _candidate_filenames(input_filename):
        try:
            with open(candidate, "x"):
                pass
            return candidate
        except FileExistsError:
            continue
        except OSError as e:
            logger.error(f"Cannot create file {candidate}: {e}")
            raise ValueError(f"Cannot create file: {e}")

    logger.error(
        f"Could not find an available filename after {MAX_NUMBERED_VARIANTS} numbered variants. "
        f"Please clean up your output directory or specify --output explicitly."
    )
    raise RuntimeError(
        f"No available filename found after {MAX_NUMBERED_VARIANTS} attempts"
    )
