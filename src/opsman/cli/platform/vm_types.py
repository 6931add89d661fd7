"""Merging a VM type into the full vm_types collection.

The vm_types endpoint only supports replacing the whole collection, so every
change is a read-modify-write. There is no version marker on the collection:
a change made by someone else between the read and the write is overwritten.
"""

from __future__ import annotations

from typing import Any

from .types import VmType


def merge_vm_type(
    collection: list[dict[str, Any]], vm_type: VmType
) -> list[dict[str, Any]]:
    """Insert or update one VM type by name.

    Elements with other names are carried over as the very same mappings in
    the order fetched. The first matching element keeps any extra keys the
    server returned and gets its sizing fields overwritten; later elements
    with the same name are dropped so the name ends up unique. An unknown
    name is appended at the end.

    Args:
        collection: VM types as fetched from the server. Not modified.
        vm_type: VM type to apply.

    Returns:
        The collection to send back.
    """
    merged: list[dict[str, Any]] = []
    found = False
    for item in collection:
        if item.get("name") != vm_type.name:
            merged.append(item)
        elif not found:
            merged.append({**item, **vm_type.model_dump()})
            found = True
    if not found:
        merged.append(vm_type.model_dump())
    return merged
