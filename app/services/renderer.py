"""Rich-text rendering: restricted HTML fragment → presentational node tree.

The fragments come from converting CMS markdown to HTML. Only a fixed tag
vocabulary is recognised; everything else, including tags with attributes,
``<script>`` and friends, stays in the output as literal text. Nodes carry
no attributes, so nothing in the input can add structure the vocabulary
does not describe.

Two variants exist:

``render_simple``
    Strips every ``<p>`` tag and parses ``strong``/``em``/``code``/``u``
    as one flat run of inline nodes. Used for short fields (sub-lines,
    the biography).

``render_enhanced``
    Keeps paragraphs as ``p`` nodes, understands ``ul``/``ol``/``li`` (lists may
    nest) and also accepts ``b`` and ``i`` (as ``strong`` and ``em``).
"""

import html
import re
from typing import Dict, Iterator, List, Optional, Pattern, Tuple, Union

from app.models.richtext import RichNode

# Tag name in the source → node kind in the output
_SIMPLE_TAGS: Dict[str, str] = {"strong": "strong", "em": "em", "code": "code", "u": "u"}
_ENHANCED_TAGS: Dict[str, str] = {**_SIMPLE_TAGS, "b": "strong", "i": "em"}


def _marker_pattern(tags: Dict[str, str]) -> Pattern[str]:
    # Longest names first so "<strong>" is never read as "<s...>"
    names = "|".join(sorted(tags, key=len, reverse=True))
    return re.compile(rf"(</?(?:{names})>)")


_SIMPLE_MARKERS = _marker_pattern(_SIMPLE_TAGS)
_ENHANCED_MARKERS = _marker_pattern(_ENHANCED_TAGS)

_PARAGRAPH_TAG = re.compile(r"</?p(?:\s[^>]*)?>")
_LIST_TAG = re.compile(r"<(/?)(ul|ol)(?:\s[^>]*)?>")
_ITEM_TAG = re.compile(r"<(/?)(li)(?:\s[^>]*)?>")


def _parse_inline(block: str, markers: Pattern[str], tags: Dict[str, str]) -> List[RichNode]:
    """Split *block* on formatting markers and wrap each text run in the active formats.

    ``re.split`` with a capturing group alternates text (even indexes) and
    markers (odd indexes). The open formats are kept in opening order; each
    text run is wrapped starting from the first-opened format, so that one
    ends up innermost. A close marker drops its format from the stack if it
    is there and is otherwise ignored. Formats still open at the end of the
    block simply cover the rest of it.
    """
    active: List[str] = []
    nodes: List[RichNode] = []

    for index, part in enumerate(markers.split(block)):
        if index % 2:
            kind = tags[part.strip("</>")]
            if part.startswith("</"):
                active = [fmt for fmt in active if fmt != kind]
            else:
                active.append(kind)
            continue

        if not part:
            continue

        node: Union[RichNode, str] = html.unescape(part)
        for kind in active:
            node = RichNode(kind=kind, children=[node])
        nodes.append(RichNode(kind="span", children=[node]))

    return nodes


def render_simple(fragment: str) -> List[RichNode]:
    """Render *fragment* as a flat run of inline nodes, discarding paragraph breaks."""
    if not fragment:
        return []
    text = _PARAGRAPH_TAG.sub("", fragment).strip()
    return _parse_inline(text, _SIMPLE_MARKERS, _SIMPLE_TAGS)


def _paragraphs(segment: str) -> List[RichNode]:
    nodes: List[RichNode] = []
    for block in _PARAGRAPH_TAG.split(segment):
        block = block.strip()
        if not block:
            continue
        children = _parse_inline(block, _ENHANCED_MARKERS, _ENHANCED_TAGS)
        if children:
            nodes.append(RichNode(kind="p", children=children))
    return nodes


def _balanced(text: str, tags: Pattern[str]) -> Iterator[Tuple[str, int, int, str]]:
    """Yield ``(name, start, end, inner)`` for each top-level element in *text*.

    *tags* matches open and close tags, capturing the slash and the name.
    Tags are counted so an element's nested children stay inside it. A close
    tag with nothing open is ignored and an element never closed yields
    nothing, leaving its markup as text.
    """
    depth = 0
    opened: Optional["re.Match[str]"] = None
    for tag in tags.finditer(text):
        if not tag.group(1):
            if depth == 0:
                opened = tag
            depth += 1
        elif depth:
            depth -= 1
            if depth == 0:
                yield opened.group(2), opened.start(), tag.end(), text[opened.end():tag.start()]


def _item(body: str) -> List[Union[RichNode, str]]:
    # Loose markdown lists wrap item text in <p>; nested lists become child nodes
    children: List[Union[RichNode, str]] = []
    position = 0
    for kind, start, end, inner in _balanced(body, _LIST_TAG):
        children.extend(_inline(body[position:start]))
        children.append(_list(kind, inner))
        position = end
    children.extend(_inline(body[position:]))
    return children


def _inline(text: str) -> List[RichNode]:
    return _parse_inline(_PARAGRAPH_TAG.sub("", text).strip(), _ENHANCED_MARKERS, _ENHANCED_TAGS)


def _list(kind: str, body: str) -> RichNode:
    items: List[Union[RichNode, str]] = [
        RichNode(kind="li", children=_item(content))
        for _, _, _, content in _balanced(body, _ITEM_TAG)
    ]
    return RichNode(kind=kind, children=items)


def render_enhanced(fragment: str) -> List[RichNode]:
    """Render *fragment* as paragraph and list blocks.

    Top-level list elements are located first by counting open and close
    tags; the text before, between and after them is split into paragraphs.
    A list nested inside an item becomes a child ``ul``/``ol`` node of that
    ``li``.
    """
    if not fragment:
        return []

    nodes: List[RichNode] = []
    position = 0
    for kind, start, end, body in _balanced(fragment, _LIST_TAG):
        nodes.extend(_paragraphs(fragment[position:start]))
        nodes.append(_list(kind, body))
        position = end
    nodes.extend(_paragraphs(fragment[position:]))
    return nodes
