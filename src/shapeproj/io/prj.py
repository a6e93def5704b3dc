"""ESRI .prj reader — spatial reference from a WKT projection file."""

from __future__ import annotations

import logging
import os
from typing import IO, Union

from shapeproj.core.srs import SpatialReference
from shapeproj.errors import StreamReadError

logger = logging.getLogger(__name__)

PrjSource = Union[str, "os.PathLike[str]", IO[bytes], IO[str]]


def read_prj(source: PrjSource) -> SpatialReference:
    """Read a projection file and build its spatial reference.

    Args:
        source: Path to a ``.prj`` file, or an open file-like object
            (binary or text). File objects are read to the end but not
            closed.

    Returns:
        SpatialReference parsed from the WKT contents.

    Raises:
        StreamReadError: The file could not be opened or read.
        SpatialReferenceError: The contents are not valid WKT.
    """
    if isinstance(source, (str, os.PathLike)):
        try:
            with open(source, "rb") as f:
                data = f.read()
        except OSError as e:
            raise StreamReadError(f"Cannot read projection file {source}: {e}") from e
    else:
        try:
            data = source.read()
        except OSError as e:
            raise StreamReadError(f"Cannot read projection stream: {e}") from e

    wkt = _decode(data).strip()
    logger.debug("Parsing %d characters of projection WKT", len(wkt))
    return SpatialReference.from_wkt(wkt)


def _decode(data: bytes | str) -> str:
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        # ESRI tools commonly write Latin-1
        return data.decode("latin-1")
