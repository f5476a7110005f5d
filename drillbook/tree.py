"""Building a tree from a flat list of (id, parent) records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


class TreeError(ValueError):
    """Raised when records do not describe a valid tree."""


@dataclass(frozen=True)
class Record:
    """A node identifier together with the identifier of its parent."""

    id: int
    parent: int


@dataclass
class Node:
    """A tree node holding its children in ascending order of id."""

    id: int
    children: list[Node] = field(default_factory=list)

    def add(self, record: Record) -> None:
        """Attach ``record`` as a node below its parent within this subtree.

        Raises TreeError when the record cannot be placed here.
        """
        if self.id >= record.id or self.id > record.parent:
            raise TreeError("Invalid Child ID")
        if self.id == record.parent:
            if any(child.id == record.id for child in self.children):
                raise TreeError("Duplicate Child ID")
            self.children.append(Node(record.id))
            return
        for child in self.children:
            try:
                child.add(record)
            except TreeError:
                continue
            return
        raise TreeError("Parent not found")


def build(records: Iterable[Record]) -> Node | None:
    """Build the tree described by ``records`` and return its root.

    Ids must run from 0 without gaps, the root (id 0) must have no parent
    above 0, and every other node's parent must have a smaller id. Returns
    None for no records. Raises TreeError otherwise.
    """
    ordered = sorted(records, key=lambda record: record.id)
    if not ordered:
        return None
    root_record, *rest = ordered
    if root_record.id != 0 or root_record.parent > 0:
        raise TreeError("Invalid root")
    nodes = [Node(0)]
    for expected_id, record in enumerate(rest, start=1):
        if record.id != expected_id:
            raise TreeError("Non-continuous Tree")
        if not 0 <= record.parent < record.id:
            raise TreeError("Invalid Child ID")
        node = Node(record.id)
        nodes[record.parent].children.append(node)
        nodes.append(node)
    return nodes[0]