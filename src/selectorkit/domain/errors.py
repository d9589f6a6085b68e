"""Builder error types.

Raised synchronously by the offending builder call. A builder that has
raised must be discarded; callers start over from the facade.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.domain.fragments import FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base class for selector builder failures."""


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is supplied twice."""

    def __init__(self, kind: FragmentKind) -> None:
        self.kind = kind
        super().__init__(DUPLICATE_MESSAGE)


class OrderError(SelectorError):
    """Raised when a fragment kind is added after a later-ordered kind."""

    def __init__(self, kind: FragmentKind, after: FragmentKind) -> None:
        self.kind = kind
        self.after = after
        super().__init__(ORDER_MESSAGE)
