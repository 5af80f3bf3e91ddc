"""
Outline tree assembly.

Turns the flat, parent-pointer outline of one repository into a rooted,
ordered TocNode tree. Assembly is a breadth-first expansion from the
repository root over an id -> node map, so malformed data (cycles,
dangling parents, duplicate ids) can never loop: an id is expanded at
most once and a node is attached at most once.
"""

import logging
from collections import deque
from collections.abc import Iterable
from typing import Any

from clipper.services.yuque.constants import TOC_TITLE_TYPE
from clipper.services.yuque.types import OutlineEntry, TocNode, TocValue

logger = logging.getLogger(__name__)

# Key of the repository root in the assembly maps; never a heading uuid
_ROOT = None


def normalize_outline_entry(data: dict[str, Any]) -> OutlineEntry:
    """Convert a raw toc row to an OutlineEntry."""
    parent_uuid = data.get("parent_uuid")
    return OutlineEntry(
        uuid=str(data.get("uuid", "")),
        type=str(data.get("type", "")),
        title=data.get("title") or "",
        parent_uuid=str(parent_uuid) if parent_uuid else None,
    )


def build_outline(
    entries: Iterable[OutlineEntry],
    repository_id: str,
    root_label: str,
) -> TocNode:
    """
    Build the outline tree of one repository.

    Args:
        entries: Flat outline rows in remote listing order
        repository_id: Repository the rows belong to
        root_label: Title of the root node (the repository's display name)

    Returns:
        The root TocNode. Children keep the remote listing order; entries
        whose kind is not TITLE, or whose parent never resolves to a
        listed TITLE entry, are not part of the tree.
    """
    root = TocNode(title=root_label, value=TocValue("", repository_id))

    # uuid -> node, and parent uuid -> child uuids in listing order.
    # Root-level entries are recorded under _ROOT.
    nodes: dict[str | None, TocNode] = {_ROOT: root}
    pending: dict[str | None, list[str]] = {}
    for entry in entries:
        if entry.type != TOC_TITLE_TYPE or not entry.uuid:
            continue
        nodes[entry.uuid] = TocNode(
            title=entry.title,
            value=TocValue(entry.uuid, repository_id),
        )
        parent_id = entry.parent_uuid or _ROOT
        pending.setdefault(parent_id, []).append(entry.uuid)

    queue: deque[str | None] = deque([_ROOT])
    expanded: set[str | None] = set()
    attached: set[str | None] = {_ROOT}
    while queue:
        parent_id = queue.popleft()
        if parent_id in expanded:
            continue
        expanded.add(parent_id)

        parent = nodes.get(parent_id)
        child_ids = pending.get(parent_id)
        if parent is None or child_ids is None:
            continue

        for child_id in child_ids:
            if child_id in attached:
                continue
            attached.add(child_id)
            parent.children.append(nodes[child_id])
            if child_id in pending:
                queue.append(child_id)

    logger.debug(
        f"Built outline for repository {repository_id}: "
        f"{len(attached) - 1} of {len(nodes) - 1} headings attached"
    )
    return root
