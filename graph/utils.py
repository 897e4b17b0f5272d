"""
utils.py — Editor Helpers
==========================
Small structural queries the editor runs while a graph is being drawn.
They work on anything with `.source` / `.target` attributes (Edge, EdgeRef)
and treat edges as DIRECTED (source → target).

Both cycle searches walk an explicit stack of (node, iterator) frames, so a
long chain drawn in the editor cannot hit the interpreter recursion limit.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Set


def has_cycle(edges: Iterable, start: Optional[str]) -> bool:
    """True if a directed cycle is reachable from `start`."""
    if not start:
        return False

    adj = _adjacency(edges)
    visited: Set[str] = {start}
    on_stack: Set[str] = {start}
    stack = [(start, iter(adj.get(start, [])))]

    while stack:
        node, pending = stack[-1]
        nbr = next(pending, None)
        if nbr is None:
            stack.pop()
            on_stack.discard(node)
        elif nbr not in visited:
            visited.add(nbr)
            on_stack.add(nbr)
            stack.append((nbr, iter(adj.get(nbr, []))))
        elif nbr in on_stack:
            return True

    return False


def find_cycles(edges: Sequence) -> List:
    """
    Return the edges (matched in either direction) that close or lead into a
    cycle found by a DFS from every unvisited source node.  The edge back to
    the DFS parent is not treated as a cycle, so an A→B, B→A pair alone is
    not reported.
    """
    adj = _adjacency(edges)
    cycle_keys: Set[tuple] = set()
    visited: Set[str] = set()
    on_stack: Set[str] = set()

    def visit(root: str) -> None:
        visited.add(root)
        on_stack.add(root)
        # frames: (node, parent, remaining neighbours)
        stack = [(root, None, iter(adj.get(root, [])))]

        while stack:
            node, parent, pending = stack[-1]
            nbr = next(pending, None)
            if nbr is None:
                stack.pop()
                on_stack.discard(node)
            elif nbr == parent:
                continue
            elif nbr not in visited:
                visited.add(nbr)
                on_stack.add(nbr)
                stack.append((nbr, node, iter(adj.get(nbr, []))))
            elif nbr in on_stack:
                cycle_keys.add((node, nbr))
                # every open frame led into the cycle
                for (a, _, _), (b, _, _) in zip(stack, stack[1:]):
                    cycle_keys.add((a, b))
                return

    for node in list(adj):
        if node not in visited:
            visit(node)

    return [
        e for e in edges
        if (e.source, e.target) in cycle_keys or (e.target, e.source) in cycle_keys
    ]


def make_acyclic(edges: Sequence) -> List:
    """Drop every edge `find_cycles` reports."""
    doomed = find_cycles(edges)
    return [
        e for e in edges
        if not any(
            (d.source == e.source and d.target == e.target)
            or (d.source == e.target and d.target == e.source)
            for d in doomed
        )
    ]


def find_next_available_label(current_labels: Set[str], preferred_label: str) -> str:
    """
    `preferred_label` if it is free, otherwise the first integer in
    [-100, 100] not already used as a numeric label.
    """
    if preferred_label not in current_labels:
        return preferred_label

    used: Set[int] = set()
    for label in current_labels:
        number = _leading_int(label)
        if number is not None:
            used.add(number)

    for i in range(-100, 101):
        if i not in used:
            return str(i)

    # every slot taken: hand the preferred label back
    return preferred_label


# ---------------------------------------------------------------------------
def _adjacency(edges: Iterable) -> Dict[str, List[str]]:
    adj: Dict[str, List[str]] = {}
    for e in edges:
        adj.setdefault(e.source, []).append(e.target)
    return adj


def _leading_int(text: str) -> Optional[int]:
    """Parse a leading integer the lenient way a text field would ("12a" → 12)."""
    s = text.strip()
    end = 1 if s[:1] in ("+", "-") else 0
    while end < len(s) and s[end] in "0123456789":
        end += 1
    digits = s[:end]
    if digits in ("", "+", "-"):
        return None
    return int(digits)
