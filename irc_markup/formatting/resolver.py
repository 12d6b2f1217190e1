"""Priority-based conflict resolution between entity detectors."""

import logging
from bisect import bisect_right
from collections.abc import Iterable, Sequence

from irc_markup.errors import MarkupContractError
from irc_markup.formatting.models import EntityKind, EntitySpan


logger = logging.getLogger(__name__)

FAMILY_PRIORITY: tuple[EntityKind, ...] = (
    EntityKind.CHANNEL,
    EntityKind.LINK,
    EntityKind.EMOJI,
    EntityKind.MENTION,
)


def _check_family(spans: Sequence[EntitySpan]) -> None:
    """Ensure one detector's spans are ordered and disjoint."""
    previous: EntitySpan | None = None
    for span in spans:
        if span.start >= span.end:
            continue
        if previous is not None and span.start < previous.end:
            raise MarkupContractError(
                f'{span.kind.value} detector produced unordered or overlapping spans '
                f'[{previous.start}, {previous.end}) and [{span.start}, {span.end})',
                start=span.start,
                end=span.end,
            )
        previous = span


def resolve_conflicts(families: Iterable[Sequence[EntitySpan]]) -> list[EntitySpan]:
    """Merge detector outputs into one non-overlapping span list.

    Families are visited in the order given, which is their priority order
    (see ``FAMILY_PRIORITY``). A span is kept only if it shares no offset with
    a span kept before it; losing spans are dropped whole, never clipped.

    Args:
        families: Span lists, highest priority first. Each list must be
            ordered and free of overlaps.

    Returns:
        Accepted spans sorted by start offset.

    Raises:
        MarkupContractError: If a family is unordered or self-overlapping.
    """
    accepted: list[EntitySpan] = []
    starts: list[int] = []

    for spans in families:
        _check_family(spans)
        for span in spans:
            if span.start >= span.end:
                logger.debug(f'Ignoring empty {span.kind.value} span at {span.start}')
                continue

            index = bisect_right(starts, span.start)
            if index > 0 and accepted[index - 1].end > span.start:
                logger.debug(f'Dropping {span.kind.value} span {span.value!r}: overlaps {accepted[index - 1].kind.value}')
                continue
            if index < len(accepted) and accepted[index].start < span.end:
                logger.debug(f'Dropping {span.kind.value} span {span.value!r}: overlaps {accepted[index].kind.value}')
                continue

            starts.insert(index, span.start)
            accepted.insert(index, span)

    return accepted
