"""Deferred, cached construction of :class:`HtmlStyle` snapshots.

A :class:`HtmlStyleBuilder` is created for every element while the
markup tree is walked.  Tag and CSS handling code enqueues
contributions on it; nothing is computed until the widget layer calls
:meth:`HtmlStyleBuilder.build`.

Example::

    root = HtmlStyleBuilder.root(HtmlStyle.root(default_values(context)))
    p = root.sub()
    p.enqueue(lambda style, colour: style.merge_with(TextStyle(color=colour)), "red")
    p.build(context).color  # (1.0, 0.0, 0.0, 1.0)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from htmlstyle.model.html_style import HtmlStyle

if TYPE_CHECKING:
    from htmlstyle.model.context import BuildContext

logger = logging.getLogger(__name__)

StyleCallback = Callable[[HtmlStyle, Any], HtmlStyle]


class ContributionKind(StrEnum):
    """What a contribution's callback receives as its second argument.

    Attributes:
        FIXED: The input captured when the contribution was enqueued.
        CONTEXT: The live :class:`BuildContext` passed to ``build``.
    """

    FIXED = "fixed"
    CONTEXT = "context"


@dataclass(frozen=True)
class Contribution:
    """One deferred transform applied to a snapshot at build time.

    Attributes:
        callback: ``callback(style, input) -> HtmlStyle``.  Must derive
            its result from *style* via ``copy_with``/``merge_with`` so
            the parent reference is preserved.
        input: Captured input for ``FIXED`` contributions.
        kind: Whether the callback receives *input* or the context.
    """

    callback: StyleCallback
    input: Any = None
    kind: ContributionKind = ContributionKind.FIXED

    def __call__(self, context: BuildContext, style: HtmlStyle) -> HtmlStyle:
        if self.kind is ContributionKind.CONTEXT:
            return self.callback(style, context)
        return self.callback(style, self.input)


class HtmlStyleBuilder:
    """A chainable accumulator of style contributions for one element.

    Builders form a tree mirroring the element tree.  Each builder
    keeps a single-slot cache of ``(parent snapshot, built snapshot)``;
    the cached snapshot is reused only while the parent's built
    snapshot is the very same object.

    Args:
        parent: Builder of the enclosing element.
        queue: Initial contributions.  The list is used as-is.
    """

    __slots__ = ("parent", "_queue", "_root", "_cache")

    def __init__(
        self,
        parent: HtmlStyleBuilder | None = None,
        queue: list[Contribution] | None = None,
    ) -> None:
        self.parent = parent
        self._queue: list[Contribution] = queue if queue is not None else []
        self._root: HtmlStyle | None = None
        self._cache: tuple[HtmlStyle, HtmlStyle] | None = None

    @classmethod
    def root(cls, style: HtmlStyle) -> HtmlStyleBuilder:
        """Create the root builder, which always builds to *style*."""
        builder = cls()
        builder._root = style
        return builder

    @property
    def is_root(self) -> bool:
        return self._root is not None

    @property
    def has_contributions(self) -> bool:
        """Whether this builder adds any styling of its own."""
        return bool(self._queue)

    def enqueue(self, callback: StyleCallback, input: Any) -> None:
        """Append a contribution that receives *input* at build time.

        Args:
            callback: ``callback(style, input) -> HtmlStyle``.
            input: Value handed to *callback*.

        Raises:
            ValueError: If this is a root builder.
        """
        self._append(Contribution(callback, input))

    def enqueue_with_context(
        self, callback: Callable[[HtmlStyle, BuildContext], HtmlStyle],
    ) -> None:
        """Append a contribution that receives the build context.

        Use this when a contribution depends on ambient state (platform,
        default font size, theme colours) that is only known when
        :meth:`build` is called.

        Raises:
            ValueError: If this is a root builder.
        """
        self._append(Contribution(callback, kind=ContributionKind.CONTEXT))

    def _append(self, contribution: Contribution) -> None:
        if self._root is not None:
            raise ValueError(
                "the root builder cannot take contributions; use sub()"
            )
        self._queue.append(contribution)
        self._cache = None

    def build(self, context: BuildContext) -> HtmlStyle:
        """Return the snapshot for this builder, building ancestors first.

        Builders without contributions return their parent's snapshot.
        Otherwise the cached snapshot is returned while the parent's
        snapshot is unchanged (by identity); if it changed, the queue
        is replayed in order on top of the new parent snapshot.

        Args:
            context: Ambient context for context-dependent contributions.

        Raises:
            ValueError: If the builder chain does not end at a root
                builder.
        """
        # Walk up iteratively so arbitrarily deep markup cannot exhaust
        # the interpreter stack.
        chain: list[HtmlStyleBuilder] = []
        node: HtmlStyleBuilder | None = self
        while node is not None and node._root is None:
            chain.append(node)
            node = node.parent
        if node is None:
            raise ValueError(f"{self!r} is not attached to a root builder")

        built = node._root
        for builder in reversed(chain):
            built = builder._build_on(built, context)
        return built

    def _build_on(self, parent_built: HtmlStyle, context: BuildContext) -> HtmlStyle:
        queue = self._queue
        if not queue:
            return parent_built

        cache = self._cache
        if cache is not None and cache[0] is parent_built:
            return cache[1]

        built = parent_built.copy_with(parent=parent_built)
        for contribution in queue:
            built = contribution(context, built)
            if built.parent is not parent_built:
                _report_reparent(self, contribution)

        # One assignment keeps the cache pair consistent for readers.
        self._cache = (parent_built, built)
        return built

    def copy_with(self, *, parent: HtmlStyleBuilder | None = None) -> HtmlStyleBuilder:
        """Return a builder with the same contributions and a new parent.

        The queue list is copied, so later contributions on either
        builder do not affect the other.  The cache is not shared.
        """
        builder = HtmlStyleBuilder(
            parent if parent is not None else self.parent, list(self._queue),
        )
        builder._root = self._root
        return builder

    def has_same_style_with(self, other: HtmlStyleBuilder) -> bool:
        """Return ``True`` if this and *other* resolve to the same styling.

        Both chains are walked up past builders without contributions;
        the styling is the same when they arrive at the same builder.
        """
        return _nearest_styled(self) is _nearest_styled(other)

    def sub(self) -> HtmlStyleBuilder:
        """Create a child builder with an empty queue."""
        return HtmlStyleBuilder(self)

    def __repr__(self) -> str:
        parent = f"(parent=#{id(self.parent):x})" if self.parent is not None else ""
        return f"HtmlStyleBuilder#{id(self):x}{parent}"


def _nearest_styled(builder: HtmlStyleBuilder) -> HtmlStyleBuilder:
    """Return *builder* or its nearest ancestor with contributions.

    Falls back to the top of the chain when no builder has any.
    """
    while not builder._queue and builder.parent is not None:
        builder = builder.parent
    return builder


def _report_reparent(builder: HtmlStyleBuilder, contribution: Contribution) -> None:
    """Handle a contribution that replaced the snapshot's parent.

    Logged always; fatal only when assertions are enabled.
    """
    logger.warning(
        "%r: contribution %r changed the parent reference; styles should "
        "be derived with copy_with() or merge_with()",
        builder, contribution.callback,
    )
    if __debug__:
        raise AssertionError(
            "The HTML styling set should be modified by calling copy_with() "
            "to preserve parent reference."
        )
