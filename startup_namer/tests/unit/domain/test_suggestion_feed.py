from __future__ import annotations

import pytest

from startup_namer.adapters.word_source_mock import WordPairSourceMock
from startup_namer.domain.errors import SuggestionSourceExhausted
from startup_namer.domain.suggestion_feed import SuggestionFeed
from startup_namer.domain.word_pair import WordPair


def test_feed_grows_in_batches_of_ten() -> None:
    feed = SuggestionFeed(WordPairSourceMock())
    assert len(feed) == 0

    first = feed.item_at(0)
    assert len(feed) == 10
    assert first == feed.items()[0]

    ninth = feed.item_at(9)
    assert len(feed) == 10
    assert ninth == feed.items()[9]

    tenth = feed.item_at(10)
    assert len(feed) == 20
    assert tenth == feed.items()[10]


def test_feed_items_are_stable_across_growth() -> None:
    feed = SuggestionFeed(WordPairSourceMock())
    seen = [feed.item_at(i) for i in range(35)]

    assert [feed.item_at(i) for i in range(35)] == seen
    assert list(feed.items()[:35]) == seen


@pytest.mark.parametrize("k", [0, 5, 9, 10, 19, 20, 37, 99])
def test_feed_length_after_request_is_batch_multiple_above_index(k: int) -> None:
    feed = SuggestionFeed(WordPairSourceMock())
    feed.item_at(k)

    assert len(feed) >= k + 1
    assert len(feed) % 10 == 0
    assert len(feed) - 10 <= k


def test_feed_pulls_one_fresh_iterator_per_batch() -> None:
    source = WordPairSourceMock()
    feed = SuggestionFeed(source, batch_size=5)

    feed.item_at(12)

    assert len(feed) == 15
    assert source.generate_calls == 3
    assert source.produced == 15


def test_feed_tracks_membership_of_served_pairs() -> None:
    feed = SuggestionFeed(WordPairSourceMock())
    pair = feed.item_at(3)

    assert pair in feed
    assert WordPair("never", "served") not in feed


def test_feed_rejects_negative_index() -> None:
    feed = SuggestionFeed(WordPairSourceMock())
    with pytest.raises(IndexError):
        feed.item_at(-1)


@pytest.mark.parametrize("size", [0, -3, True, 2.5])
def test_feed_rejects_bad_batch_size(size) -> None:
    with pytest.raises(ValueError):
        SuggestionFeed(WordPairSourceMock(), batch_size=size)


def test_feed_exhausted_source_is_fatal() -> None:
    feed = SuggestionFeed(WordPairSourceMock(limit=14))
    feed.item_at(9)

    with pytest.raises(SuggestionSourceExhausted) as excinfo:
        feed.item_at(10)

    assert excinfo.value.requested == 10
    assert excinfo.value.received == 4
    assert len(feed) == 10


def test_feed_propagates_source_failure() -> None:
    class BrokenSource:
        def generate(self):
            raise RuntimeError("dictionary missing")

    feed = SuggestionFeed(BrokenSource())
    with pytest.raises(RuntimeError, match="dictionary missing"):
        feed.item_at(0)
