"""
users/tables.py — Generic table projection

Turns a list of rows (dicts or objects) plus column descriptors into a
render-ready structure for templates/users/_table.html. No state and no
mutation: the same input always yields the same Table.

    columns = [Column("name", "Name"), Column("skills", "Skills", render=join_skills)]
    table = build_table(users, columns, actions=row_actions)

- render(row) replaces the raw attribute for that column.
- actions(row) adds a trailing cell (e.g. edit/delete controls).
- An empty input produces a single placeholder row spanning every column.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

EMPTY_MESSAGE = "No data available"


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    render: Optional[Callable[[Any], Any]] = None


@dataclass
class TableRow:
    cells: List[Any]
    actions: Any = None
    index: int = 0

    @property
    def striped(self) -> bool:
        return self.index % 2 == 1


@dataclass
class Table:
    headers: List[str]
    rows: List[TableRow] = field(default_factory=list)
    has_actions: bool = False
    empty_message: str = EMPTY_MESSAGE

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def colspan(self) -> int:
        return len(self.headers) + (1 if self.has_actions else 0)


def _value(row, key):
    if isinstance(row, dict):
        return row.get(key)
    return getattr(row, key, None)


def build_table(rows, columns, actions=None) -> Table:
    table = Table(headers=[column.label for column in columns], has_actions=actions is not None)
    for index, row in enumerate(rows):
        cells = [
            column.render(row) if column.render is not None else _value(row, column.key)
            for column in columns
        ]
        table.rows.append(TableRow(cells=cells, actions=actions(row) if actions else None, index=index))
    return table
