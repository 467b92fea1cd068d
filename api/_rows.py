from typing import Any, Dict, Iterable, List, Mapping, Optional

CELL_PREFIX = 'gsx$'
CELL_TEXT = '$t'


def cell_text(value: Any) -> Optional[Any]:
    """Return the '$t' text of a feed cell, or None when the cell is not shaped like one."""
    if not isinstance(value, Mapping):
        return None
    return value.get(CELL_TEXT)


def map_row(row: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Flatten one feed entry into {column: text}.

    Only 'gsx$' fields are kept, with the prefix removed from the key.
    Metadata (id, updated, ...) and cells without text are dropped.
    """
    data = {}
    for name, value in row.items():
        if CELL_PREFIX not in name:
            continue
        text = cell_text(value)
        if text is None:
            continue
        data[name.replace(CELL_PREFIX, '')] = text
    return data


def map_rows(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [map_row(r) for r in rows]
