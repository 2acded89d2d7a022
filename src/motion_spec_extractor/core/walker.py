"""Fault-tolerant traversal of host property trees.

Host objects can raise on any attribute access or method call. This module
holds the accessor layer that turns those failures into None, and the
depth-bounded walker built on top of it. These are the only places in the
extractors where host exceptions are caught.
"""

from collections.abc import Callable, Iterator
from typing import Any

# Maximum recursion depth for property and shape trees. Deeper subtrees are
# abandoned, which also stops the walk on self-referential host data.
MAX_WALK_DEPTH = 20


def try_attr(obj: Any, name: str) -> Any:
    """Read an attribute from a host object.

    Args:
        obj: Host object (may be None)
        name: Attribute name

    Returns:
        The attribute value, or None if the read raised
    """
    if obj is None:
        return None
    try:
        return getattr(obj, name)
    except Exception:
        return None


def try_call(fn: Callable[..., Any] | None, *args: Any) -> Any:
    """Call a host method, returning None if it raises."""
    if fn is None:
        return None
    try:
        return fn(*args)
    except Exception:
        return None


def try_property(group: Any, index_or_name: int | str) -> Any:
    """Fetch a child of a host group by 1-based index or name.

    Returns:
        The child, or None if the group has no such child or the lookup raised
    """
    return try_call(try_attr(group, "property"), index_or_name)


def count_children(node: Any) -> int:
    """Probe how many children a node has.

    Returns:
        The child count, or 0 when the probe fails or is not a positive int
    """
    count = try_attr(node, "num_properties")
    if isinstance(count, bool) or not isinstance(count, int):
        return 0
    return max(count, 0)


def is_group(node: Any) -> bool:
    """A node is a group when its child-count probe returns a positive count."""
    return count_children(node) > 0


def iter_children(group: Any) -> Iterator[tuple[int, Any]]:
    """Yield ``(index, child)`` for each readable child of a host group.

    Slots whose lookup raises or returns nothing are skipped; iteration
    continues with the next sibling.
    """
    for index in range(1, count_children(group) + 1):
        child = try_property(group, index)
        if child is None:
            continue
        yield index, child


def walk_property_group(
    group: Any,
    visit: Callable[[Any, int], None],
    depth: int = 0,
    max_depth: int = MAX_WALK_DEPTH,
) -> None:
    """Recursively walk a host property group, visiting every leaf once.

    Children that are groups are recursed into; everything else is passed
    to ``visit(node, depth)``. A subtree deeper than ``max_depth`` is
    abandoned without being reported.

    Args:
        group: Root group to traverse
        visit: Callback invoked for each leaf
        depth: Depth of ``group`` (used internally)
        max_depth: Depth bound
    """
    if depth > max_depth or group is None:
        return

    for _, child in iter_children(group):
        if is_group(child):
            walk_property_group(child, visit, depth + 1, max_depth)
        else:
            visit(child, depth)


def is_property_animated(prop: Any) -> bool:
    """Check whether a host property has at least one keyframe."""
    num_keys = try_attr(prop, "num_keys")
    return isinstance(num_keys, int) and not isinstance(num_keys, bool) and num_keys > 0


def get_animated_properties(group: Any) -> list[Any]:
    """Collect all keyframed leaf properties within a host group.

    Args:
        group: Host property group to search

    Returns:
        Leaf properties with keyframes, in traversal order
    """
    results: list[Any] = []

    def collect(prop: Any, depth: int) -> None:
        if is_property_animated(prop):
            results.append(prop)

    walk_property_group(group, collect)
    return results
