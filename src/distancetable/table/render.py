"""
Fixed-width text rendering for a `DistanceTable`.

The layout is column-exact: each latitude group is 20 characters wide
(`%9.0f` planar + `%10.0f ` spherical) under a 7-character longitude gutter.
"""

from __future__ import annotations

import sys
from typing import TextIO

from distancetable.domain.models import DistanceRow, DistanceTable

GROUP_LABEL = "Planar Spherical"


def _title_line(table: DistanceTable) -> str:
    return (
        f"{'':9s}Distance (miles) from {table.origin_name} "
        f"(lat {table.origin.lat:5.2f} long {table.origin.lon:5.2f})"
    )


def _column_header_line(table: DistanceTable) -> str:
    return " " + "".join(f"{'':14s}lat {lat:2d}" for lat in table.latitudes)


def _sub_header_line(table: DistanceTable) -> str:
    widths = [21] + [19] * (len(table.latitudes) - 1)
    return "long" + "".join(f" {GROUP_LABEL:>{w}s}" for w in widths)


def _separator_line(table: DistanceTable) -> str:
    n = len(table.latitudes)
    return "----" + "      ------ ---------" + "    ------ ---------" * (n - 1)


def _data_line(row: DistanceRow) -> str:
    parts = [f"{row.longitude:4d}   "]
    for cell in row.cells:
        parts.append(f"{cell.planar_miles:9.0f}")
        parts.append(f"{cell.spherical_miles:10.0f} ")
    return "".join(parts)


def render_table(table: DistanceTable) -> list[str]:
    """Render the report as a list of lines (no trailing newlines)."""
    lines = [
        _title_line(table),
        _column_header_line(table),
        _sub_header_line(table),
        _separator_line(table),
    ]
    lines.extend(_data_line(row) for row in table.rows)
    return lines


def print_table(table: DistanceTable, stream: TextIO | None = None) -> None:
    """Write the rendered report to `stream` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    for line in render_table(table):
        out.write(line + "\n")
    out.flush()
