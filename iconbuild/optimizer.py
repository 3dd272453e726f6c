"""
SVG markup optimizer.

Cleans raw editor output down to the drawable structure the code emitter
needs: comments, metadata and editor namespaces go away, attribute values are
whitespace-normalized, configured attributes are stripped and redundant
groups are merged into their parent.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from typing import Optional

from lxml import etree

from .exceptions import OptimizeError
from .models import OptimizerOptions
from .utils.logger import get_logger

logger = get_logger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'
XLINK_NS = 'http://www.w3.org/1999/xlink'

# Containers that are dropped when they end up without children
EMPTY_CONTAINER_TAGS = frozenset({"g", "defs", "symbol", "clipPath", "mask"})

# Presentation attributes a <g> may hand down to its only child
INHERITABLE_ATTRS = frozenset({
    "clip-rule", "color", "fill", "fill-opacity", "fill-rule", "font-family",
    "font-size", "font-style", "font-weight", "stroke", "stroke-dasharray",
    "stroke-dashoffset", "stroke-linecap", "stroke-linejoin", "stroke-miterlimit",
    "stroke-opacity", "stroke-width", "visibility",
})

_WHITESPACE_RE = re.compile(r'\s+')


def make_parser(remove_comments: bool = True) -> etree.XMLParser:
    """Create a parser that never touches the network or expands entities."""
    # lxml parsers must not be shared between threads
    return etree.XMLParser(
        remove_blank_text=True,
        remove_comments=remove_comments,
        remove_pis=True,
        no_network=True,
        resolve_entities=False,
    )


def split_tag(tag: str):
    """Split a Clark-notation tag into (namespace, local name)."""
    if tag.startswith('{'):
        namespace, _, local = tag[1:].partition('}')
        return namespace, local
    return None, tag


class SvgOptimizer:
    """Optimizes SVG markup according to a set of options."""

    def __init__(self, options: Optional[OptimizerOptions] = None) -> None:
        """
        Initialize the optimizer.

        Args:
            options: Optimizer options, defaults when omitted
        """
        self.options = options or OptimizerOptions()
        self._remove_attrs = frozenset(self.options.remove_attrs)
        self._remove_elements = frozenset(self.options.remove_elements)

    def optimize(self, markup: str, path: str = "") -> str:
        """
        Optimize raw SVG markup.

        Args:
            markup: Raw SVG document text
            path: Source path, used in error messages only

        Returns:
            Optimized markup with a single namespace-free <svg> root

        Raises:
            OptimizeError: If the markup is not a well-formed SVG document
        """
        if not markup or not markup.strip():
            raise OptimizeError("Empty SVG document", path)

        try:
            root = etree.fromstring(markup.encode('utf-8'), make_parser(self.options.remove_comments))
        except etree.XMLSyntaxError as e:
            raise OptimizeError(f"Malformed SVG markup: {e}", path) from e

        namespace, local = split_tag(root.tag)
        if local != 'svg' or namespace not in (None, SVG_NS):
            raise OptimizeError(f"Root element must be <svg>, got <{local}>", path)

        clean = self._clean_element(root, is_root=True)
        result = etree.tostring(clean, encoding='unicode')
        logger.debug(f"Optimized {path or 'markup'}: {len(markup)} -> {len(result)} chars")
        return result

    def _keep_element(self, element) -> bool:
        if not isinstance(element.tag, str):
            return False
        namespace, local = split_tag(element.tag)
        if namespace not in (None, SVG_NS) and self.options.strip_namespaced:
            return False
        return local not in self._remove_elements

    def _clean_element(self, element, is_root: bool = False):
        _, local = split_tag(element.tag)
        clean = etree.Element(local)

        for name, value in element.attrib.items():
            attr_name = self._attribute_name(name)
            if attr_name is None or attr_name in self._remove_attrs:
                continue
            clean.set(attr_name, _WHITESPACE_RE.sub(' ', value).strip())

        if is_root and self.options.remove_dimensions and 'viewBox' in clean.attrib:
            for dimension in ('width', 'height'):
                if dimension in clean.attrib:
                    del clean.attrib[dimension]

        for child in element:
            if child.tag is etree.Comment:
                if not self.options.remove_comments:
                    clean.append(etree.Comment(child.text))
                continue
            if not self._keep_element(child):
                continue
            cleaned_child = self._clean_element(child)
            if cleaned_child is None:
                continue
            if self.options.collapse_groups and cleaned_child.tag == "g":
                clean.extend(self._collapse_group(cleaned_child))
            else:
                clean.append(cleaned_child)

        if not is_root and local in EMPTY_CONTAINER_TAGS and len(clean) == 0:
            return None
        return clean

    def _collapse_group(self, group) -> list:
        """
        Elements that replace a cleaned <g> in its parent.

        A group without attributes is replaced by its children. A group with
        one element child and only inheritable attributes hands them down to
        that child, whose own values win. Any other group is kept.
        """
        if not group.attrib:
            return list(group)
        if len(group) != 1 or not isinstance(group[0].tag, str):
            return [group]
        if any(name not in INHERITABLE_ATTRS for name in group.attrib):
            return [group]

        child = group[0]
        for name, value in group.attrib.items():
            if name not in child.attrib:
                child.set(name, value)
        return [child]

    def _attribute_name(self, name: str) -> Optional[str]:
        namespace, local = split_tag(name)
        if namespace is None:
            return local
        if namespace == XLINK_NS:
            # SVG 2 accepts plain href
            return local
        if self.options.strip_namespaced:
            return None
        return local
