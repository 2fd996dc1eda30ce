"""CSG tree serialization — JSON-safe dicts for inspection and diffing."""

from __future__ import annotations

from dataclasses import fields

from .nodes import Node


def node_to_dict(node: Node) -> dict:
    """Serialize a CSG tree to nested dicts.

    Each dict has a ``"kind"`` key, the node's scalar fields, and a
    ``"children"`` list when the node has operands.
    """
    out: dict = {"kind": node.kind}
    for f in fields(node):
        if f.name in ("child", "items"):
            continue
        value = getattr(node, f.name)
        if isinstance(value, tuple):
            value = [list(v) if isinstance(v, tuple) else v for v in value]
        out[f.name] = value
    if node.children:
        out["children"] = [node_to_dict(c) for c in node.children]
    return out


def count_nodes(node: Node, kind: str | None = None) -> int:
    """Number of nodes in the tree, optionally only those of one *kind*."""
    own = 1 if kind is None or node.kind == kind else 0
    return own + sum(count_nodes(c, kind) for c in node.children)
