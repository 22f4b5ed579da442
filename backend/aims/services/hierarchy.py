"""Nest pools or locations under their parents for tree views."""

from typing import Any, Protocol


class Nestable(Protocol):
    id: str
    is_nested: bool
    parent_id: str | None

    def model_dump(self, **kwargs: Any) -> dict: ...


def _parent_of(item: Nestable, ids: set[str]) -> str | None:
    if item.is_nested and item.parent_id in ids and item.parent_id != item.id:
        return item.parent_id
    return None


def would_cycle(items: list[Nestable], item_id: str | None, parent_id: str) -> bool:
    """True when placing ``item_id`` under ``parent_id`` closes a loop.

    Walks up from the proposed parent; reaching the item itself (or a
    loop already present in the data) means a cycle.
    """
    by_id = {item.id: item for item in items}
    seen: set[str] = set()
    current: str | None = parent_id
    while current is not None:
        if current == item_id or current in seen:
            return True
        seen.add(current)
        node = by_id.get(current)
        if node is None or not node.is_nested:
            return False
        current = node.parent_id
    return False


def build_tree(items: list[Nestable]) -> list[dict]:
    """Return root nodes as dicts with a ``children`` list.

    An item is nested only when flagged as nested and its parent exists;
    otherwise it is a root. Items caught in a parent loop are promoted
    to roots so nothing drops out of the tree. Input order is preserved
    at every level.
    """
    ids = {item.id for item in items}
    parents = {item.id: _parent_of(item, ids) for item in items}

    # Detach loop members from their parents
    settled: set[str] = set()
    for item in items:
        path: list[str] = []
        current: str | None = item.id
        while current is not None and current not in settled and current not in path:
            path.append(current)
            current = parents[current]
        if current is not None and current in path:
            for member in path[path.index(current):]:
                parents[member] = None
        settled.update(path)

    nodes = {
        item.id: {**item.model_dump(mode="json", by_alias=True), "children": []}
        for item in items
    }
    roots: list[dict] = []
    for item in items:
        node = nodes[item.id]
        parent_id = parents[item.id]
        if parent_id is not None:
            nodes[parent_id]["children"].append(node)
        else:
            roots.append(node)
    return roots
