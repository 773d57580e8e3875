"""
Virtual element helpers.

A small structural representation of markup (tag, attributes, children) and a
serializer to text. Components may build their ``render()`` output with these
instead of string templates; the reactive path never depends on them.

    >>> render_to_string(Div(Span("3", cls="count"), Button("+", data_joko_click="increment")))
    '<div><span class="count">3</span><button data-joko-click="increment">+</button></div>'
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from fastcore.basics import partition, risinstance

html_tags = ['A', 'P', 'I', 'B', 'H1','H2','H3','H4','H5','H6','Div','Span','Pre','Blockquote','Q','Ul','Ol','Li','Dl','Dt','Dd','Table','Thead','Tbody','Tfoot','Tr','Th','Td','Caption','Form','Label','Select','Option','Textarea','Button','Fieldset','Legend','Article','Section','Nav','Aside','Header','Footer','Main','Figure','Figcaption','Strong','Em','Mark','Code','Small','Time','Abbr','Sub','Sup','Details','Summary','Dialog','Template']
self_closing_tags = ['Img','Input','Br','Hr','Meta','Link']

SELF_CLOSING = frozenset(t.lower() for t in self_closing_tags)

_specials = set('@.-!~:[](){}$%^&*+=|/?<>,`')


def attrmap(o: str) -> str:
    "Map a Python-friendly keyword to an html attribute name"
    if _specials & set(o): return o
    o = dict(className='class', htmlClass='class', cls='class', _class='class', klass='class',
             _for='for', fr='for', htmlFor='for').get(o, o)
    return o if o=='_' else o.lstrip('_').replace('_', '-')


def _flatten(children) -> Tuple[Any, ...]:
    flat = []
    for child in children:
        if isinstance(child, (list, tuple)):
            flat.extend(_flatten(child))
        else:
            flat.append(child)
    return tuple(flat)


@dataclass(frozen=True)
class VElement:
    """Immutable virtual element."""
    tag: str
    props: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple[Any, ...] = ()

    def __str__(self) -> str:
        return render_to_string(self)

    def _repr_html_(self) -> str:
        return render_to_string(self)


def create_element(tag: str, props: Optional[Mapping[str, Any]] = None, *children) -> VElement:
    """Build a ``VElement``; nested child lists are flattened."""
    return VElement(tag, dict(props or {}), _flatten(children))


def _render_attr(key: str, value: Any) -> str:
    name = attrmap(key)
    if isinstance(value, bool):
        return name if value else ""
    return f'{name}="{value}"'


def render_to_string(v: Any) -> str:
    """Serialize a virtual element (or a string/number child) to markup."""
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    if not isinstance(v, VElement) or not v.tag:
        return ""

    attrs = " ".join(a for a in (_render_attr(k, val) for k, val in (v.props or {}).items()) if a)
    opening = f"{v.tag} {attrs}" if attrs else v.tag

    if v.tag in SELF_CLOSING:
        return f"<{opening} />"

    inner = "".join(render_to_string(child) for child in v.children)
    return f"<{opening}>{inner}</{v.tag}>"


def _tag_builder(class_name: str):
    tag = class_name.lower()

    def build(*args, **kwargs) -> VElement:
        ds, c = partition(args, risinstance(Mapping))
        for d in ds: kwargs = {**kwargs, **d}
        children = _flatten(c)
        if children and tag in SELF_CLOSING:
            raise RuntimeError(f"{class_name} element cannot have child elements because it represents self closing html tag.")
        return VElement(tag, kwargs, children)

    build.__name__ = class_name
    build.__qualname__ = class_name
    build.__doc__ = f"""Build a `<{tag}>` virtual element."""
    return build


for class_name in html_tags + self_closing_tags:
    globals()[class_name] = _tag_builder(class_name)


__all__ = ['VElement', 'create_element', 'render_to_string', 'attrmap', *html_tags, *self_closing_tags]
