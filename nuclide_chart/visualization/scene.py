"""
Scene Graph
===========

Plain data tree describing the finished chart.  Layout code builds
:class:`SceneElement` nodes (tag, attributes, children, text); a separate
serialiser turns the tree into SVG markup, so nothing in the layout depends
on a DOM or on XML libraries.

Example:
    >>> scene = create_chart(text)
    >>> len(scene.cells)
    3340
    >>> svg = to_svg(scene, stylesheet=Path('chartstyle.css').read_text())
"""

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'


def number_text(value: float) -> str:
    """Shortest text for *value*, as a browser prints numbers.

    Fixed notation for ``1e-7 <= |value| < 1e21`` (``0.0000545``, ``100``),
    exponent notation outside it (``7e-9``, ``1e+21``).  No rounding.
    """
    value = float(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if 'e' not in text:
        return text
    if 1e-7 <= abs(value) < 1e21:
        return format(Decimal(text), 'f')
    mantissa, _, exponent = text.partition('e')
    exponent = int(exponent)
    return f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def format_number(value: Any) -> str:
    """Render an attribute value; numbers are rounded to 6 decimals (``5.1``, ``100``)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    return number_text(round(float(value), 6))


@dataclass
class SceneElement:
    """One node of the scene tree.

    Attributes:
        tag: Element kind (``'a'``, ``'rect'``, ``'path'``, ``'text'``, ...).
        attributes: Attribute values; numbers are kept as numbers.
        children: Child nodes in document order.
        text: Text content, for ``text``/``tspan``/``title`` nodes.
    """

    tag: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    children: List['SceneElement'] = field(default_factory=list)
    text: Optional[str] = None

    def iter(self, tag: Optional[str] = None) -> Iterator['SceneElement']:
        """Depth-first walk over this node and its descendants."""
        if tag is None or self.tag == tag:
            yield self
        for child in self.children:
            yield from child.iter(tag)

    def find_all(self, tag: str) -> List['SceneElement']:
        """Direct children with the given tag."""
        return [c for c in self.children if c.tag == tag]

    def find(self, tag: str) -> Optional['SceneElement']:
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def text_content(self) -> str:
        """Concatenated text of this node and all descendants."""
        parts = [self.text or '']
        parts.extend(child.text_content() for child in self.children)
        return ''.join(parts)

    @property
    def css_classes(self) -> List[str]:
        return str(self.attributes.get('class', '')).split()


@dataclass
class Scene:
    """The assembled chart: nuclide cells followed by magic-number lines."""

    width: float
    height: float
    elements: List[SceneElement] = field(default_factory=list)

    @property
    def cells(self) -> List[SceneElement]:
        return [e for e in self.elements if e.tag == 'a']

    @property
    def magic_lines(self) -> List[SceneElement]:
        return [
            e for e in self.elements
            if e.tag == 'line' and 'magicNumber' in e.css_classes
        ]

    def to_element(self) -> SceneElement:
        """The scene as a single ``svg`` root node."""
        return SceneElement(
            tag='svg',
            attributes={
                'width': self.width,
                'height': self.height,
                'viewBox': f'0 0 {format_number(self.width)} {format_number(self.height)}',
            },
            children=list(self.elements),
        )


def _to_etree(node: SceneElement, parent: Optional[ET.Element] = None) -> ET.Element:
    attrib = {k: format_number(v) for k, v in node.attributes.items()}
    if parent is None:
        el = ET.Element(node.tag, attrib)
    else:
        el = ET.SubElement(parent, node.tag, attrib)
    if node.text is not None:
        el.text = node.text
    for child in node.children:
        _to_etree(child, el)
    return el


def to_svg(scene: Scene, stylesheet: Optional[str] = None) -> str:
    """Serialise *scene* to a standalone SVG document.

    Args:
        scene: Assembled chart.
        stylesheet: CSS text to embed in a ``<style>`` block so the file
            renders without the page's stylesheet.
    """
    root = _to_etree(scene.to_element())
    root.set('xmlns', SVG_NAMESPACE)
    if stylesheet:
        style = ET.Element('style', {'type': 'text/css'})
        style.text = stylesheet
        root.insert(0, style)
    return ET.tostring(root, encoding='unicode')


def save_svg(
    scene: Scene,
    path: Union[str, Path],
    stylesheet: Optional[str] = None,
) -> Path:
    """Write *scene* as an SVG file and return the path."""
    path = Path(path)
    path.write_text(to_svg(scene, stylesheet), encoding='utf-8')
    logger.info(f"Saved chart ({len(scene.cells)} cells) to {path}")
    return path
