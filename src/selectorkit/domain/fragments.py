"""Fragment kinds and their rendered text.

A compound selector is assembled from six kinds of fragments which must
appear in a fixed canonical order::

    element#id.class[attribute]:pseudo-class::pseudo-element

INVARIANT: declaration order of FragmentKind IS the canonical order.
"""

from __future__ import annotations

from enum import StrEnum


class FragmentKind(StrEnum):
    """The six simple-selector fragment kinds, in canonical order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def position(self) -> int:
        """Index of this kind in the canonical order."""
        return CANONICAL_ORDER.index(self)

    @property
    def repeatable(self) -> bool:
        return self in REPEATABLE_KINDS

    @classmethod
    def parse(cls, name: str) -> FragmentKind:
        """Resolve a kind from its value or one of its aliases.

        Examples:
            >>> FragmentKind.parse("class")
            <FragmentKind.CLASS: 'class'>
            >>> FragmentKind.parse("attr")
            <FragmentKind.ATTRIBUTE: 'attribute'>
            >>> FragmentKind.parse("pseudoClass")
            <FragmentKind.PSEUDO_CLASS: 'pseudo-class'>
        """
        key = name.strip()
        kind = _ALIASES.get(key)
        if kind is None:
            try:
                kind = cls(key.lower())
            except ValueError:
                msg = f"Unknown fragment kind: {name!r}"
                raise ValueError(msg) from None
        return kind


CANONICAL_ORDER: tuple[FragmentKind, ...] = tuple(FragmentKind)

SINGULAR_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

REPEATABLE_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.CLASS, FragmentKind.ATTRIBUTE, FragmentKind.PSEUDO_CLASS}
)

_ALIASES: dict[str, FragmentKind] = {
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo_class": FragmentKind.PSEUDO_CLASS,
    "pseudoClass": FragmentKind.PSEUDO_CLASS,
    "pseudo_element": FragmentKind.PSEUDO_ELEMENT,
    "pseudoElement": FragmentKind.PSEUDO_ELEMENT,
}

# (prefix, suffix) wrapped around the raw value
_TEMPLATES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


def render_fragment(kind: FragmentKind, value: str) -> str:
    """Render *value* as the selector text for *kind*.

    Examples:
        >>> render_fragment(FragmentKind.ID, "main")
        '#main'
        >>> render_fragment(FragmentKind.ATTRIBUTE, 'href$=".png"')
        '[href$=".png"]'
    """
    prefix, suffix = _TEMPLATES[kind]
    return f"{prefix}{value}{suffix}"
