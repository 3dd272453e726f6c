"""
Abstract tree generation from optimized SVG markup.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from lxml import etree

from .exceptions import OptimizeError
from .models import AbstractNode
from .optimizer import make_parser, split_tag


def element_to_node(element) -> AbstractNode:
    """
    Convert an lxml element and its element children to an AbstractNode.

    Namespaces are dropped from tags and attribute names. Text, comments and
    processing instructions are not part of the drawable structure.
    """
    _, tag = split_tag(element.tag)
    attrs = {split_tag(name)[1]: value for name, value in element.attrib.items()}
    children = [element_to_node(child) for child in element if isinstance(child.tag, str)]
    return AbstractNode(tag=tag, attrs=attrs, children=children)


def generate_abstract_tree(markup: str, path: str = "") -> AbstractNode:
    """
    Parse optimized markup into a single root AbstractNode.

    Args:
        markup: Optimized SVG markup
        path: Source path, used in error messages only

    Raises:
        OptimizeError: If the markup cannot be parsed
    """
    try:
        root = etree.fromstring(markup.encode('utf-8'), make_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise OptimizeError(f"Cannot parse optimized markup: {e}", path) from e

    try:
        return element_to_node(root)
    except ValueError as e:
        raise OptimizeError(f"Invalid element structure: {e}", path) from e
