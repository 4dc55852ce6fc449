"""
Containment checks over a collection's nested document structure.
"""

from typing import Sequence

from .models import DocumentTreeNode


def has_descendant(roots: Sequence[DocumentTreeNode], target_id: str) -> bool:
    """
    Return True if the node ``target_id`` exists in the forest and has children.

    The forest is searched depth first in sibling order and stops at the
    first matching node that has children. A target that does not appear at
    all is treated like a leaf.
    """
    for node in roots:
        if node.id == target_id:
            if node.children:
                return True
            continue
        if has_descendant(node.children, target_id):
            return True
    return False
