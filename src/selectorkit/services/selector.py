"""SelectorService — build and render selectors for the CLI.

Translates builder and document failures into ServiceError codes:

- ``UNKNOWN_KIND``: a part names no fragment kind.
- ``EMPTY_SELECTOR``: no parts were given.
- ``DUPLICATE_FRAGMENT``: element, id or pseudo-element repeated.
- ``ORDER_VIOLATION``: a kind added after a later-ordered kind.
- ``INVALID_JSON`` / ``INVALID_DOCUMENT``: unreadable, non-UTF-8 or too deeply
  nested selector document.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from selectorkit.domain.documents import parse_document
from selectorkit.domain.errors import DuplicateFragmentError, OrderError, SelectorError
from selectorkit.domain.fragments import FragmentKind
from selectorkit.domain.selectors import SelectorBuilder
from selectorkit.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    logger.debug("%s failed: %s (%s)", op, code, message)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def _selector_failure(op: str, exc: SelectorError) -> ServiceResult:
    if isinstance(exc, DuplicateFragmentError):
        return _failure(op, "DUPLICATE_FRAGMENT", str(exc), kind=str(exc.kind))
    if isinstance(exc, OrderError):
        return _failure(op, "ORDER_VIOLATION", str(exc), kind=str(exc.kind), after=str(exc.after))
    return _failure(op, "SELECTOR_ERROR", str(exc))


def _too_deep(op: str) -> ServiceResult:
    return _failure(op, "INVALID_DOCUMENT", "Selector document nested too deeply")


class SelectorService:
    """Builds selectors from CLI parts and renders selector documents."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, parts: Sequence[tuple[str, str]]) -> ServiceResult:
        """Build one compound selector from ``(kind, value)`` pairs, in order."""
        op = "build_selector"
        if not parts:
            return _failure(op, "EMPTY_SELECTOR", "At least one selector part is required")

        builder = SelectorBuilder()
        for name, value in parts:
            try:
                kind = FragmentKind.parse(name)
            except ValueError as exc:
                return _failure(op, "UNKNOWN_KIND", str(exc), kind=name)
            try:
                builder.add(kind, value)
            except SelectorError as exc:
                return _selector_failure(op, exc)

        selector = builder.stringify()
        logger.debug("Built selector %r", selector)
        return ServiceResult(
            ok=True,
            op=op,
            data={"selector": selector, "kinds": [str(kind) for kind in builder.kinds]},
        )

    def render(self, document: Any) -> ServiceResult:
        """Render a decoded selector document (compound or combination)."""
        op = "render_selector"
        try:
            parsed = parse_document(document)
        except ValidationError as exc:
            errors = [
                {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                for err in exc.errors()
            ]
            return _failure(
                op,
                "INVALID_DOCUMENT",
                f"Invalid selector document ({exc.error_count()} error(s))",
                errors=errors,
            )
        except RecursionError:
            return _too_deep(op)

        try:
            text = parsed.to_selector().stringify()
        except SelectorError as exc:
            return _selector_failure(op, exc)
        except RecursionError:
            return _too_deep(op)

        logger.debug("Rendered selector %r", text)
        return ServiceResult(ok=True, op=op, data={"selector": text})

    def render_json(self, text: str | bytes) -> ServiceResult:
        """Decode JSON *text* and render it; bytes must be UTF-8."""
        op = "render_selector"
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as exc:
                return _failure(
                    op,
                    "INVALID_JSON",
                    f"Invalid JSON: not UTF-8 text (byte {exc.start})",
                )
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            return _failure(
                op,
                "INVALID_JSON",
                f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            )
        except RecursionError:
            return _too_deep(op)
        return self.render(document)
