"""Readers for projection definition files."""

from shapeproj.io.prj import read_prj

__all__ = ["read_prj"]
