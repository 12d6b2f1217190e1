"""Interleave resolved entity spans with style runs.

The merge is a single boundary sweep. Entity bounds decide where output
parts start and end; style bounds only split fragments inside a part.
"""

from collections import defaultdict
from collections.abc import Sequence
from itertools import pairwise

from irc_markup.errors import MarkupContractError
from irc_markup.formatting.models import PLAIN, EntitySpan, OutputPart, StyleAttributes, StyleRun


def _check_spans(spans: Sequence[EntitySpan], length: int) -> None:
    previous_end = 0
    for span in spans:
        if not 0 <= span.start < span.end <= length:
            raise MarkupContractError(
                f'Entity span [{span.start}, {span.end}) is empty or outside text of length {length}',
                start=span.start,
                end=span.end,
            )
        if span.start < previous_end:
            raise MarkupContractError(
                f'Entity span [{span.start}, {span.end}) is unordered or overlaps its predecessor',
                start=span.start,
                end=span.end,
            )
        previous_end = span.end


def _check_runs(runs: Sequence[StyleRun], length: int) -> None:
    for run in runs:
        if not 0 <= run.start < run.end <= length:
            raise MarkupContractError(
                f'Style run [{run.start}, {run.end}) is empty or outside text of length {length}',
                start=run.start,
                end=run.end,
            )


def combine_attributes(runs: Sequence[StyleRun], active: set[int]) -> StyleAttributes:
    """Overlay the attributes of the active runs in input order."""
    attributes = PLAIN
    for index in sorted(active):
        attributes = attributes.merged(runs[index].attributes)
    return attributes


def merge_spans(text: str, spans: Sequence[EntitySpan], runs: Sequence[StyleRun]) -> list[OutputPart]:
    """Partition ``text`` into output parts with styled fragments.

    Args:
        text: Plain message text.
        spans: Resolved entity spans, sorted and pairwise disjoint.
        runs: Style runs; may overlap, later runs override earlier ones.

    Returns:
        Parts tiling ``[0, len(text))``. A part is annotated when it covers
        exactly one entity span.

    Raises:
        MarkupContractError: If spans or runs break their producer contracts.
    """
    if not text:
        return []

    length = len(text)
    _check_spans(spans, length)
    _check_runs(runs, length)

    part_cuts = sorted({0, length, *(bound for span in spans for bound in (span.start, span.end))})
    by_start = {span.start: span for span in spans}
    parts = [OutputPart(start=start, end=end, annotation=by_start.get(start)) for start, end in pairwise(part_cuts)]

    opening: dict[int, list[int]] = defaultdict(list)
    closing: dict[int, list[int]] = defaultdict(list)
    for index, run in enumerate(runs):
        opening[run.start].append(index)
        closing[run.end].append(index)

    cuts = sorted({*part_cuts, *opening, *closing})
    active: set[int] = set()
    remaining = iter(parts)
    part = next(remaining)

    for start, end in pairwise(cuts):
        active.difference_update(closing.get(start, ()))
        active.update(opening.get(start, ()))
        if start >= part.end:
            part = next(remaining)
        part.append(start, text[start:end], combine_attributes(runs, active))

    return parts
