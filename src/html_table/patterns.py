"""Markup vocabulary shared by the generator and the parser.

Matching is case-sensitive.  Start markers are prefixes only (``<td`` rather
than ``<td>``) so that tags carrying attributes such as ``<td class="x">``
are still recognised; everything up to the next ``>`` is ignored.
"""

# ─── Tag Delimiters ───────────────────────────────────────────────────────────

TAG_OPEN = "<"
TAG_CLOSE = ">"

# ─── Table Markers ────────────────────────────────────────────────────────────

TABLE_START = "<table"
TABLE_END = "</table>"

# ─── Row Markers ──────────────────────────────────────────────────────────────

ROW_START = "<tr>"
ROW_END = "</tr>"

# ─── Cell Markers ─────────────────────────────────────────────────────────────

CELL_START = "<td"
CELL_OPEN = CELL_START + TAG_CLOSE
CELL_END = "</td>"

# Line-break characters stripped from the table region before row splitting
LINE_BREAKS = ("\r", "\n")
