"""Tests for headings and the segment chain."""

import pytest

from block_bite.entities import EntityKind, EntityTable, InvariantViolation
from block_bite.grid import Position
from block_bite.snake import Direction, HeadingController, SegmentChain


class TestDirection:
    def test_opposites(self):
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP

    def test_from_name(self):
        assert Direction.from_name("up") is Direction.UP
        assert Direction.from_name("Left") is Direction.LEFT

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.from_name("sideways")


class TestHeadingController:
    def test_default_heading_up(self):
        assert HeadingController().current() is Direction.UP

    @pytest.mark.parametrize("current", list(Direction))
    @pytest.mark.parametrize("candidate", list(Direction))
    def test_applies_unless_opposite(self, current, candidate):
        heading = HeadingController(current)
        heading.set_candidate(candidate)
        expected = current if candidate is current.opposite else candidate
        assert heading.current() is expected

    def test_reversal_rejected_then_turn_accepted(self):
        heading = HeadingController(Direction.UP)
        assert not heading.set_candidate(Direction.DOWN)
        assert heading.current() is Direction.UP
        assert heading.set_candidate(Direction.LEFT)
        assert heading.current() is Direction.LEFT

    def test_checked_against_live_heading(self):
        heading = HeadingController(Direction.UP)
        heading.set_candidate(Direction.LEFT)
        # DOWN is no longer a reversal once the heading is LEFT.
        assert heading.set_candidate(Direction.DOWN)
        assert heading.current() is Direction.DOWN

    def test_same_heading_reports_no_change(self):
        heading = HeadingController(Direction.RIGHT)
        assert not heading.set_candidate(Direction.RIGHT)
        assert heading.current() is Direction.RIGHT


class TestSegmentChain:
    def test_head_and_tail(self):
        chain = SegmentChain([4, 7, 9])
        assert chain.head == 4
        assert chain.tail == 9
        assert len(chain) == 3
        assert list(chain) == [4, 7, 9]

    def test_append_goes_to_tail(self):
        chain = SegmentChain([1])
        chain.append(5)
        assert chain.tail == 5
        assert chain[0] == 1

    def test_empty_chain_has_no_head(self):
        with pytest.raises(InvariantViolation, match="no head"):
            SegmentChain().head

    def test_positions_in_chain_order(self):
        table = EntityTable()
        tail = table.spawn(EntityKind.SEGMENT, Position(3, 2), 0.65)
        head = table.spawn(EntityKind.HEAD, Position(3, 3), 0.8)
        chain = SegmentChain([head, tail])
        assert chain.positions(table) == [Position(3, 3), Position(3, 2)]
