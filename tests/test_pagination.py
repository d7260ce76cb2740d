"""
Tests for the pagination controller.
"""

import pytest
from unittest.mock import Mock
from hn_browser.exceptions import EmptyBatch, NetworkError
from hn_browser.models import Category
from hn_browser.pagination import PaginationController
from hn_browser.resolver import BatchResolver


class TestPaginationController:

    def _controller(self, api, batch_size=30, chunk_size=10):
        return PaginationController(api, BatchResolver(api, chunk_size=chunk_size), batch_size=batch_size)

    def test_initial_state(self, fake_api):
        controller = self._controller(fake_api())

        assert controller.resolved_count == 0
        assert controller.total == 0
        assert controller.can_load_more() is False

    def test_short_list_loads_in_one_batch(self, fake_api):
        api = fake_api(identifiers=list(range(1, 26)))
        controller = self._controller(api)

        items = controller.start_category(Category.TOP)

        assert [item.id for item in items] == list(range(1, 26))
        assert controller.resolved_count == 25
        assert controller.can_load_more() is False
        assert api.max_in_flight <= 10

    def test_long_list_paginates(self, fake_api):
        api = fake_api(identifiers=list(range(1, 71)))
        controller = self._controller(api)

        first = controller.start_category(Category.TOP)
        assert len(first) == 30
        assert controller.resolved_count == 30
        assert controller.can_load_more() is True

        second = controller.load_more()
        assert [item.id for item in second] == list(range(31, 61))
        assert controller.resolved_count == 60

        third = controller.load_more()
        assert [item.id for item in third] == list(range(61, 71))
        assert controller.resolved_count == 70
        assert controller.can_load_more() is False

        calls = len(api.fetch_calls)
        with pytest.raises(EmptyBatch):
            controller.load_more()
        assert controller.resolved_count == 70
        assert len(api.fetch_calls) == calls

    def test_resolved_count_is_monotonic(self, fake_api):
        api = fake_api(identifiers=list(range(1, 101)))
        controller = self._controller(api, batch_size=7, chunk_size=3)
        controller.start_category(Category.NEW)

        seen = [controller.resolved_count]
        while controller.can_load_more():
            controller.load_more()
            seen.append(controller.resolved_count)

        assert seen == sorted(seen)
        assert seen[-1] == controller.total == 100

    def test_failed_items_reduce_collection_only(self, fake_api):
        api = fake_api(identifiers=list(range(1, 41)), fail_ids={5, 17})
        controller = self._controller(api)

        items = controller.start_category(Category.TOP)

        assert len(items) == 28
        assert controller.resolved_count == 30

    def test_empty_id_list(self, fake_api):
        controller = self._controller(fake_api(identifiers=[]))

        assert controller.start_category(Category.ASK) == []
        assert controller.resolved_count == 0
        assert controller.can_load_more() is False

    def test_list_failure_keeps_previous_state(self, fake_api):
        api = fake_api(identifiers=list(range(1, 41)))
        controller = self._controller(api)
        controller.start_category(Category.TOP)

        api.list_error = NetworkError("Connection refused")
        with pytest.raises(NetworkError):
            controller.start_category(Category.NEW)

        assert controller.category == Category.TOP
        assert controller.identifiers == list(range(1, 41))
        assert controller.resolved_count == 30

    def test_load_more_failure_does_not_advance(self, fake_api):
        api = fake_api(identifiers=list(range(1, 71)))
        controller = self._controller(api)
        controller.start_category(Category.TOP)
        controller.load_more()

        original = controller.resolver.resolve_many
        controller.resolver.resolve_many = Mock(side_effect=NetworkError("Connection reset"))
        with pytest.raises(NetworkError):
            controller.load_more()
        assert controller.resolved_count == 60

        # The same slice is requested again
        controller.resolver.resolve_many = Mock(side_effect=original)
        items = controller.load_more()
        controller.resolver.resolve_many.assert_called_once_with(list(range(61, 71)))
        assert len(items) == 10
        assert controller.resolved_count == 70

    def test_rejects_zero_batch_size(self, fake_api):
        api = fake_api()
        with pytest.raises(ValueError):
            PaginationController(api, BatchResolver(api), batch_size=0)
