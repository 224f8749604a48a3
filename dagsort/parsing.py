"""Parse textual graph input into the values Graph construction expects.

Edge lists are written one ``from,to`` pair per line, e.g.::

    0,1
    0,2
    1,3
"""

import re

from dagsort.errors import InvalidEdgeFormatError, InvalidVertexCountError

_INTEGER = re.compile(r"^[+-]?\d+$")
EDGE_FIELDS = 2


def _parse_int(token: str) -> int | None:
    token = token.strip()
    return int(token) if _INTEGER.match(token) else None


def parse_vertex_count(text: str) -> int:
    """Parse a vertex count.

    Raises:
        InvalidVertexCountError: If ``text`` is not a positive integer
    """
    value = _parse_int(text)
    if value is None or value < 1:
        msg = f"Number of vertices must be a positive integer, got {text.strip()!r}"
        raise InvalidVertexCountError(msg)
    return value


def parse_edge_list(text: str) -> list[tuple[int, int]]:
    """Parse ``from,to`` lines into integer pairs.

    Blank lines and whitespace around numbers are ignored; empty input yields
    an empty edge list. Range, self-loop and cycle checks are left to Graph
    construction.

    Raises:
        InvalidEdgeFormatError: If a line is not two comma-separated integers
    """
    edges: list[tuple[int, int]] = []

    for line_number, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()
        if not line:
            continue

        parts = line.split(",")
        numbers = [_parse_int(part) for part in parts]
        if len(numbers) != EDGE_FIELDS or None in numbers:
            msg = f"Invalid edge on line {line_number}: {line!r} (expected 'from,to')"
            raise InvalidEdgeFormatError(msg)

        edges.append((numbers[0], numbers[1]))

    return edges
