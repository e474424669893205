from collections import deque

from src.termsnake.body import Body


class TestBody:
    """Tests for the Body sequence."""

    def test_head_and_tail(self):
        body = Body([(6, 5), (5, 5), (4, 5)])
        assert body.head() == (6, 5)
        assert body.tail() == (4, 5)

    def test_empty_body_has_no_head_or_tail(self):
        body = Body()
        assert body.head() is None
        assert body.tail() is None
        assert body.length() == 0

    def test_segments_is_deque(self):
        assert isinstance(Body([(5, 5)]).segments, deque)

    def test_contains(self):
        body = Body([(6, 5), (5, 5)])
        assert body.contains((5, 5))
        assert (6, 5) in body
        assert not body.contains((7, 5))

    def test_grow_front_keeps_tail(self):
        body = Body([(5, 5)])
        body.grow_front((6, 5))
        assert list(body) == [(6, 5), (5, 5)]
        assert body.length() == 2

    def test_advance_front_drops_tail(self):
        body = Body([(6, 5), (5, 5)])
        body.advance_front((7, 5))
        assert list(body) == [(7, 5), (6, 5)]
        assert len(body) == 2

    def test_advance_single_segment(self):
        body = Body([(5, 5)])
        body.advance_front((6, 5))
        assert list(body) == [(6, 5)]
