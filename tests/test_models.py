"""
Tests for the data models.
"""

import pytest
from hn_browser.models import Category, Item, format_age


class TestCategory:

    def test_successor_cycle(self):
        order = [Category.TOP]
        for _ in range(5):
            order.append(order[-1].successor())

        assert order == [
            Category.TOP, Category.NEW, Category.BEST,
            Category.SHOW, Category.ASK, Category.TOP,
        ]

    def test_labels(self):
        assert [c.label for c in Category] == ["Top", "New", "Best", "Show", "Ask"]


class TestFormatAge:

    @pytest.mark.parametrize("elapsed,expected", [
        (0, "0s ago"),
        (59, "59s ago"),
        (60, "1m ago"),
        (3599, "59m ago"),
        (3600, "1h ago"),
        (86399, "23h ago"),
        (86400, "1d ago"),
        (10 * 86400 + 5, "10d ago"),
    ])
    def test_buckets(self, elapsed, expected):
        assert format_age(1000000, 1000000 + elapsed) == expected

    def test_future_timestamp(self):
        assert format_age(2000, 1000) == "0s ago"


class TestItem:

    def test_domain_from_url(self):
        item = Item(id=1, by="a", time=0, url="https://www.example.com/path?q=1")

        assert item.domain == "www.example.com"
        assert item.has_link is True

    def test_domain_without_url(self):
        item = Item(id=1, by="a", time=0)

        assert item.domain == "news.ycombinator.com"
        assert item.has_link is False

    def test_domain_without_host(self):
        item = Item(id=1, by="a", time=0, url="/relative/link")

        assert item.domain == "news.ycombinator.com"

    def test_time_ago_recomputed(self):
        item = Item(id=1, by="a", time=1000)

        assert item.time_ago(now=1030) == "30s ago"
        assert item.time_ago(now=1000 + 7200) == "2h ago"

    def test_summary_line(self):
        item = Item(id=1, by="pg", time=1000, score=57, descendants=3)

        assert item.summary_line(now=1120) == "57 points by pg 2m ago | 3 comments"

    def test_summary_line_without_comments(self):
        item = Item(id=1, by="pg", time=1000, score=1)

        assert item.summary_line(now=1000).endswith("| 0 comments")

    def test_immutable(self):
        item = Item(id=1, by="pg", time=1000)

        with pytest.raises(AttributeError):
            item.score = 5

    def test_hashable(self):
        first = Item(id=1, by="pg", time=1000, kids=(2, 3))
        second = Item(id=1, by="pg", time=1000, kids=(2, 3))

        assert hash(first) == hash(second)
        assert len({first, second}) == 1
