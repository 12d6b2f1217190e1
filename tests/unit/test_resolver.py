"""Tests for priority-based conflict resolution."""

import pytest

from irc_markup.errors import MarkupContractError
from irc_markup.formatting.models import EntityKind, spans_overlap
from irc_markup.formatting.resolver import FAMILY_PRIORITY, resolve_conflicts
from tests.fixtures.spans import span


CHANNEL = EntityKind.CHANNEL
LINK = EntityKind.LINK
EMOJI = EntityKind.EMOJI
MENTION = EntityKind.MENTION


class TestResolveConflicts:
    """Tests for resolve_conflicts."""

    def test_priority_order(self):
        assert FAMILY_PRIORITY == (CHANNEL, LINK, EMOJI, MENTION)

    def test_empty(self):
        assert resolve_conflicts([[], [], [], []]) == []

    def test_no_families(self):
        assert resolve_conflicts([]) == []

    def test_channel_beats_partially_overlapping_link(self):
        channel = span(0, 5, CHANNEL)
        link = span(2, 8, LINK)
        assert resolve_conflicts([[channel], [link], [], []]) == [channel]

    def test_identical_bounds_higher_priority_wins(self):
        emoji = span(0, 4, EMOJI)
        mention = span(0, 4, MENTION)
        assert resolve_conflicts([[], [], [emoji], [mention]]) == [emoji]

    def test_lower_priority_span_inside_higher_is_dropped(self):
        link = span(0, 20, LINK)
        mention = span(7, 12, MENTION)
        assert resolve_conflicts([[], [link], [], [mention]]) == [link]

    def test_lower_priority_span_covering_higher_is_dropped(self):
        emoji = span(5, 10, EMOJI)
        link = span(0, 20, LINK)
        # Emoji listed after link loses even though it is smaller
        assert resolve_conflicts([[], [link], [emoji], []]) == [link]

    def test_disjoint_spans_are_sorted_by_start(self):
        channel = span(10, 15, CHANNEL)
        link = span(0, 5, LINK)
        mention = span(6, 9, MENTION)
        assert resolve_conflicts([[channel], [link], [], [mention]]) == [link, mention, channel]

    def test_adjacent_spans_do_not_conflict(self):
        channel = span(0, 3, CHANNEL)
        link = span(3, 6, LINK)
        assert resolve_conflicts([[channel], [link], [], []]) == [channel, link]

    def test_gaps_between_accepted_spans(self):
        first = span(0, 3, CHANNEL)
        last = span(10, 12, CHANNEL)
        fits = span(4, 9, MENTION)
        clips_left = span(2, 4, EMOJI)
        clips_right = span(9, 11, EMOJI)
        result = resolve_conflicts([[first, last], [], [clips_left, clips_right], [fits]])
        assert result == [first, fits, last]

    def test_empty_span_is_ignored(self):
        assert resolve_conflicts([[], [span(3, 3, LINK)], [], []]) == []

    def test_same_family_overlap_is_a_contract_error(self):
        with pytest.raises(MarkupContractError) as exc_info:
            resolve_conflicts([[span(0, 5, CHANNEL), span(3, 8, CHANNEL)]])
        assert exc_info.value.start == 3
        assert exc_info.value.end == 8

    def test_unordered_family_is_a_contract_error(self):
        with pytest.raises(MarkupContractError):
            resolve_conflicts([[], [span(5, 8, LINK), span(0, 3, LINK)]])

    def test_result_never_overlaps(self):
        families = [
            [span(0, 4, CHANNEL), span(20, 26, CHANNEL)],
            [span(2, 10, LINK), span(12, 22, LINK)],
            [span(9, 11, EMOJI), span(26, 27, EMOJI)],
            [span(0, 2, MENTION), span(11, 12, MENTION), span(27, 30, MENTION)],
        ]
        result = resolve_conflicts(families)
        assert [(s.start, s.end) for s in result] == [(0, 4), (9, 11), (11, 12), (20, 26), (26, 27), (27, 30)]
        for index, first in enumerate(result):
            for second in result[index + 1 :]:
                assert not spans_overlap(first, second)
