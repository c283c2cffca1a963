"""Position sets (nullable, firstpos, lastpos, followpos) of expression trees."""

from __future__ import annotations

from typing import Iterable, Optional

from .regex import Node, Op


def _include(nodes: list, target: Optional[Node]) -> None:
    """Insert a node into a set kept in descending op order, without duplicates."""
    if target is None:
        return
    for index, node in enumerate(nodes):
        if node is target:
            return
        if node.op < target.op:
            nodes.insert(index, target)
            return
    nodes.append(target)


def _include_all(nodes: list, targets: Iterable[Node]) -> None:
    for target in targets:
        _include(nodes, target)


def nullable(node):
    """Tell whether the subtree can match the empty string."""
    if node is None:
        return False
    if node.op == Op.OR:
        return nullable(node.left) or nullable(node.right)
    if node.op == Op.CAT:
        return nullable(node.left) and nullable(node.right)
    return node.op in (Op.CLOSURE, Op.QUESTION)


def firstpos(node):
    """Return the leaves that can start a match of the subtree."""
    if node is None:
        return []
    if node.firstpos is not None:
        return node.firstpos
    result: list = []
    if node.op == Op.OR:
        _include_all(result, firstpos(node.left))
        _include_all(result, firstpos(node.right))
    elif node.op == Op.CAT:
        _include_all(result, firstpos(node.left))
        if nullable(node.left):
            _include_all(result, firstpos(node.right))
    elif node.op in (Op.CLOSURE, Op.QUESTION):
        _include_all(result, firstpos(node.left))
    else:
        result.append(node)
    node.firstpos = result
    return result


def lastpos(node):
    """Return the leaves that can end a match of the subtree."""
    if node is None:
        return []
    if node.lastpos is not None:
        return node.lastpos
    result: list = []
    if node.op == Op.OR:
        _include_all(result, lastpos(node.right))
        _include_all(result, lastpos(node.left))
    elif node.op == Op.CAT:
        _include_all(result, lastpos(node.right))
        if nullable(node.right):
            _include_all(result, lastpos(node.left))
    elif node.op in (Op.CLOSURE, Op.QUESTION):
        _include_all(result, lastpos(node.left))
    else:
        result.append(node)
    node.lastpos = result
    return result


def _follow_set(leaf: Node) -> list:
    if leaf.followpos is None:
        leaf.followpos = []
    return leaf.followpos


def followpos(node):
    """Add the followpos contributions of one concatenation or closure node."""
    if node is None or node.followpos is not None:
        return
    if node.op == Op.CAT:
        for leaf in lastpos(node.left):
            _include_all(_follow_set(leaf), firstpos(node.right))
    elif node.op == Op.CLOSURE:
        for leaf in lastpos(node):
            _include_all(_follow_set(leaf), firstpos(node))


def make_followpos(node):
    """Compute position sets for the whole tree and return its root."""
    if node is None:
        return None
    firstpos(node.left)
    firstpos(node.right)
    firstpos(node)
    lastpos(node.left)
    lastpos(node.right)
    lastpos(node)
    make_followpos(node.left)
    make_followpos(node.right)
    followpos(node)
    return node