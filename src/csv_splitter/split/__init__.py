"""Boundary scanning and byte-range copying."""

from csv_splitter.split.copy import copy_part, part_path
from csv_splitter.split.header import capture_header
from csv_splitter.split.scan import iter_boundaries

__all__ = ["capture_header", "copy_part", "iter_boundaries", "part_path"]
