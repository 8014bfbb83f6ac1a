"""
Error tree rendering.

Walks a :class:`DetailedError` tree depth-first and produces the
:class:`DisplayInfo` snapshot for it: every node is explained, its location
styled, its causes split into explained ones (kept, simplest first) and
unexplained ones (only counted).
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from detailed_errors.config import RenderConfig, colorization, resolve_colorize
from detailed_errors.styling.highlighter import apply_styles
from detailed_errors.tree.display import DisplayInfo
from detailed_errors.tree.error import DetailedError
from detailed_errors.tree.explanation import ErrorDetail, ErrorExplanation

logger = logging.getLogger("detailed-errors")


class ErrorTreeRenderer:
    """
    Renders error trees into DisplayInfo snapshots.

    Usage:
        renderer = ErrorTreeRenderer(RenderConfig(color=ColorMode.NEVER))
        print(renderer.render(error).to_text())
    """

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()

    def render(self, error: Union[DetailedError, ErrorDetail]) -> DisplayInfo:
        """
        Render an error and all of its causes.

        When the configuration forces color on or off, the setting also
        applies to styling done inside ``explain()`` calls, and is lifted
        again once rendering ends.
        """
        error = DetailedError.coerce(error)
        colorize = self.config.colorize
        if colorize is None:
            return self._render_node(error)
        with colorization(colorize):
            return self._render_node(error)

    def render_text(self, error: Union[DetailedError, ErrorDetail]) -> str:
        """Render an error straight to text."""
        return self.render(error).to_text()

    def _explain(self, error: DetailedError) -> ErrorExplanation:
        detail = error.detail
        if detail is None:
            return ErrorExplanation()
        try:
            explanation = detail.explain()
        except Exception:
            logger.warning(
                "explain() failed for %r, rendering it without explanation",
                detail,
                exc_info=True,
            )
            return ErrorExplanation()
        if explanation is None:
            return ErrorExplanation()
        if not isinstance(explanation, ErrorExplanation):
            logger.warning(
                "explain() of %r returned %s instead of an ErrorExplanation, "
                "rendering it without explanation",
                detail,
                type(explanation).__name__,
            )
            return ErrorExplanation()
        return explanation

    def _location(self, error: DetailedError, explanation: ErrorExplanation) -> Optional[str]:
        location = error.location
        if location is None or location.is_blank:
            return None
        if resolve_colorize(self.config.colorize) is False:
            text = location.text
        else:
            text = apply_styles(
                location,
                explanation.whole_style,
                explanation.markers,
                self.config.colorize,
            )
        return text.strip() or None

    def _render_node(self, root: DetailedError) -> DisplayInfo:
        """
        Render a tree bottom-up without recursion.

        Each node is explained when first reached and assembled once all of
        its causes are, so cause chains of any depth can be rendered.
        """
        explanations: dict[int, ErrorExplanation] = {}
        # Rendered nodes with the size of their explained subtree
        rendered: dict[int, tuple[DisplayInfo, int]] = {}

        stack: list[tuple[DetailedError, bool]] = [(root, False)]
        while stack:
            error, causes_done = stack.pop()
            if not causes_done:
                explanations[id(error)] = self._explain(error)
                stack.append((error, True))
                stack.extend((cause, False) for cause in reversed(error.causes))
                continue

            explained_causes: list[tuple[DisplayInfo, int]] = []
            unexplained_causes = 0
            for cause in error.causes:
                info, size = rendered[id(cause)]
                if info.is_explained():
                    explained_causes.append((info, size))
                else:
                    unexplained_causes += 1

            # Stable: equally complex causes keep their order
            explained_causes.sort(key=lambda pair: pair[1])

            explanation = explanations.pop(id(error))
            info = DisplayInfo(
                at=self._location(error, explanation),
                reason=explanation.explanation,
                solution=explanation.solution,
                start=error.start,
                end=error.end,
                unexplained_cause_count=unexplained_causes,
                explained_causes=tuple(info for info, _ in explained_causes),
            )
            rendered[id(error)] = (info, 1 + sum(size for _, size in explained_causes))
            logger.debug(
                "Rendered %r: %d explained and %d unexplained causes",
                error,
                len(explained_causes),
                unexplained_causes,
            )

        return rendered[id(root)][0]


def render(
    error: Union[DetailedError, ErrorDetail], colorize: Optional[bool] = None
) -> DisplayInfo:
    """
    Convenience function to render an error tree.

    Args:
        error: The root error
        colorize: Force (True) or suppress (False) styling; None lets
            termcolor decide

    Returns:
        The DisplayInfo snapshot of the tree
    """
    return ErrorTreeRenderer(RenderConfig.from_flag(colorize)).render(error)


def render_text(
    error: Union[DetailedError, ErrorDetail], colorize: Optional[bool] = None
) -> str:
    """Convenience function to render an error tree straight to text."""
    return render(error, colorize).to_text()
