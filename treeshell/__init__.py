# python
"""treeshell package"""
__version__ = "0.1"

from treeshell.builder import build_tree, TreeBuilder
from treeshell.resolver import Found, NotFound, NodeSource, PathResolver
from treeshell.tree import Node, NodeKind, Tree
