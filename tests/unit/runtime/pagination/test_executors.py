"""Unit tests for the concurrent page stream."""

from __future__ import annotations

from contextlib import aclosing

import pytest

from prelate.core.config import PaginationPolicy
from prelate.core.exceptions import (
    DecodeError,
    HttpStatusError,
    StreamConsumedError,
    TransportError,
)
from prelate.runtime.pagination import ItemStream, PlanStrategy, StreamState


def make_stream(server, page_request, *, limit=None, **policy):
    return ItemStream(page_request, server, policy=PaginationPolicy(**policy), limit=limit)


class TestItemStreamCompleteness:
    """Every item is emitted once, in order."""

    @pytest.mark.asyncio
    async def test_probe_plans_exact_page_count(self, fake_server, page_request):
        server = fake_server(120)
        stream = make_stream(server, page_request)

        items = await stream.collect()

        assert items == list(range(120))
        assert len(server.probes) == 1
        assert sorted(server.pages_fetched) == [1, 2, 3]
        assert stream.plan.strategy == PlanStrategy.PROBE
        assert stream.plan.total_pages == 3
        assert stream.stats.requested_pages == [1, 2, 3]
        assert stream.stats.pages_emitted == 3

    @pytest.mark.asyncio
    async def test_order_preserved_when_pages_complete_out_of_order(
        self, fake_server, page_request
    ):
        server = fake_server(200, delays={1: 0.04, 2: 0.03, 3: 0.02, 4: 0.0})
        stream = make_stream(server, page_request)

        items = await stream.collect()

        assert items == list(range(200))
        # Page 4 answered before page 1
        fetched_order = server.completed[1:]
        assert fetched_order.index(4) < fetched_order.index(1)

    @pytest.mark.asyncio
    async def test_single_page_concurrency_is_sequential(self, fake_server, page_request):
        server = fake_server(130)
        stream = make_stream(server, page_request, concurrency=1)

        items = await stream.collect()

        assert items == list(range(130))
        assert server.pages_fetched == [1, 2, 3]
        assert server.max_in_flight == 1

    @pytest.mark.asyncio
    async def test_empty_result_set(self, fake_server, page_request):
        server = fake_server(0)
        stream = make_stream(server, page_request)

        assert await stream.collect() == []
        assert len(server.probes) == 1
        assert server.pages_fetched == []
        assert stream.state == StreamState.DONE


class TestItemStreamTermination:
    """The stream stops at the first short page or at the limit."""

    @pytest.mark.asyncio
    async def test_unknown_total_stops_after_short_page(self, fake_server, page_request):
        server = fake_server(page_sizes=[50, 50, 13], report_total=False)
        stream = make_stream(server, page_request)

        items = await stream.collect()

        assert len(items) == 113
        assert items == list(range(113))
        assert server.pages_fetched == [1, 2, 3]
        assert stream.plan.strategy == PlanStrategy.UNBOUNDED

    @pytest.mark.asyncio
    async def test_unknown_total_with_full_last_page_needs_empty_page(
        self, fake_server, page_request
    ):
        server = fake_server(page_sizes=[50, 50], report_total=False)
        stream = make_stream(server, page_request)

        items = await stream.collect()

        assert items == list(range(100))
        assert server.pages_fetched == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_short_page_ends_stream_without_total(self, fake_server, page_request):
        server = fake_server(page_sizes=[50, 20, 50], report_total=False)
        stream = make_stream(server, page_request)

        items = await stream.collect()

        assert items == list(range(70))
        assert server.pages_fetched == [1, 2]
        assert stream.stats.pages_emitted == 2

    @pytest.mark.asyncio
    async def test_short_page_does_not_end_stream_with_known_total(
        self, fake_server, page_request
    ):
        server = fake_server(page_sizes=[50, 20, 50, 50])
        stream = make_stream(server, page_request)

        items = await stream.collect()

        assert items == list(range(170))
        assert stream.stats.pages_emitted == 4

    @pytest.mark.asyncio
    async def test_probing_disabled_walks_until_short_page(self, fake_server, page_request):
        server = fake_server(120)
        stream = make_stream(server, page_request, probe=False)

        items = await stream.collect()

        assert items == list(range(120))
        assert server.probes == []
        assert server.pages_fetched == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_limit_within_first_page(self, fake_server, page_request):
        server = fake_server(1000)
        stream = make_stream(server, page_request, limit=10)

        items = await stream.collect()

        assert items == list(range(10))
        assert server.probes == []
        assert server.pages_fetched == [1]
        assert stream.plan.strategy == PlanStrategy.LIMIT

    @pytest.mark.asyncio
    async def test_limit_spanning_pages(self, fake_server, page_request):
        server = fake_server(1000)
        stream = make_stream(server, page_request, limit=120)

        items = await stream.collect()

        assert items == list(range(120))
        assert sorted(server.pages_fetched) == [1, 2, 3]
        assert stream.stats.items_emitted == 120

    @pytest.mark.asyncio
    async def test_limit_larger_than_result_set(self, fake_server, page_request):
        server = fake_server(120)
        stream = make_stream(server, page_request, limit=500)

        items = await stream.collect()

        assert items == list(range(120))

    @pytest.mark.asyncio
    async def test_max_pages_caps_plan(self, fake_server, page_request):
        server = fake_server(1000)
        stream = make_stream(server, page_request, max_pages=2)

        items = await stream.collect()

        assert items == list(range(100))
        assert sorted(server.pages_fetched) == [1, 2]


class TestItemStreamFailures:
    """A failing page ends the stream with exactly one error."""

    @pytest.mark.asyncio
    async def test_failed_page_after_earlier_items(self, fake_server, page_request):
        server = fake_server(250, failures={3: HttpStatusError("server error", status_code=500)})
        stream = make_stream(server, page_request)

        results = [result async for result in stream.results()]

        items = [r.item for r in results if r.ok]
        errors = [r.error for r in results if not r.ok]
        assert items == list(range(100))
        assert len(errors) == 1
        assert results[-1].error is errors[0]
        assert isinstance(errors[0], HttpStatusError)
        assert errors[0].status_code == 500
        assert errors[0].page == 3
        assert stream.state == StreamState.DONE

    @pytest.mark.asyncio
    async def test_iteration_raises_in_place(self, fake_server, page_request):
        server = fake_server(250, failures={2: DecodeError("not a page")})
        stream = make_stream(server, page_request)
        seen = []

        with pytest.raises(DecodeError) as exc_info:
            async for item in stream:
                seen.append(item)

        assert seen == list(range(50))
        assert exc_info.value.page == 2

    @pytest.mark.asyncio
    async def test_probe_failure_is_only_result(self, fake_server, page_request):
        server = fake_server(250, failures={1: TransportError("connection refused")})
        stream = make_stream(server, page_request)

        results = [result async for result in stream.results()]

        assert len(results) == 1
        assert isinstance(results[0].error, TransportError)
        assert results[0].error.page == 1
        assert server.pages_fetched == []
        assert stream.stats.pages_requested == 0

    @pytest.mark.asyncio
    async def test_failure_cancels_later_pages(self, fake_server, page_request):
        delays = {page: 5.0 for page in range(3, 21)}
        server = fake_server(
            1000, delays=delays, failures={2: TransportError("reset")}
        )
        stream = make_stream(server, page_request, concurrency=4)

        with pytest.raises(TransportError):
            await stream.collect()

        assert server.in_flight == 0
        assert 3 in server.cancelled
        assert 3 not in server.completed


class TestItemStreamConcurrency:
    """In-flight page fetches are bounded by the policy."""

    @pytest.mark.asyncio
    async def test_in_flight_never_exceeds_concurrency(self, fake_server, page_request):
        delays = {page: 0.01 for page in range(2, 21)}
        server = fake_server(1000, delays=delays)
        stream = make_stream(server, page_request, concurrency=3)

        items = await stream.collect()

        assert items == list(range(1000))
        assert server.max_in_flight <= 3
        assert stream.stats.max_in_flight == 3

    @pytest.mark.asyncio
    async def test_unbounded_walk_keeps_one_page_in_flight(self, fake_server, page_request):
        server = fake_server(page_sizes=[50, 50, 50, 7], report_total=False)
        stream = make_stream(server, page_request, concurrency=8)

        await stream.collect()

        assert server.max_in_flight == 1


class TestItemStreamLifecycle:
    """State transitions, early abandonment and single-pass iteration."""

    @pytest.mark.asyncio
    async def test_states(self, fake_server, page_request):
        server = fake_server(120)
        stream = make_stream(server, page_request)
        assert stream.state == StreamState.NOT_STARTED
        assert stream.plan is None

        async with aclosing(aiter(stream)) as items:
            first = await anext(items)
            assert first == 0
            # All three pages were issued
            assert stream.state == StreamState.DRAINING

        assert stream.state == StreamState.DONE

    @pytest.mark.asyncio
    async def test_state_fetching_while_pages_remain(self, fake_server, page_request):
        server = fake_server(1000)
        stream = make_stream(server, page_request, concurrency=2)

        async with aclosing(aiter(stream)) as items:
            await anext(items)
            assert stream.state == StreamState.FETCHING

    @pytest.mark.asyncio
    async def test_abandoned_stream_cancels_in_flight_pages(self, fake_server, page_request):
        delays = {page: 5.0 for page in range(2, 21)}
        server = fake_server(1000, delays=delays)
        stream = make_stream(server, page_request, concurrency=4)

        async with aclosing(aiter(stream)) as items:
            async for item in items:
                assert item == 0
                break

        assert stream.state == StreamState.DONE
        assert server.in_flight == 0
        assert 2 in server.cancelled
        assert server.completed == [1, 1]  # probe, then page 1
        assert 6 not in stream.stats.requested_pages

    @pytest.mark.asyncio
    async def test_second_iteration_rejected(self, fake_server, page_request):
        server = fake_server(60)
        stream = make_stream(server, page_request)

        assert len(await stream.collect()) == 60

        with pytest.raises(StreamConsumedError):
            aiter(stream)
        with pytest.raises(StreamConsumedError):
            stream.results()

    @pytest.mark.asyncio
    async def test_nothing_fetched_before_iteration(self, fake_server, page_request):
        server = fake_server(60)
        make_stream(server, page_request)

        assert server.requests == []


class TestItemStreamServerPageSize:
    """The server may serve smaller pages than requested."""

    @pytest.mark.asyncio
    async def test_capped_page_size_with_known_total(self, fake_server, page_request):
        server = fake_server(120, max_per_page=50)
        stream = make_stream(server, page_request, per_page=100)

        items = await stream.collect()

        assert items == list(range(120))
        assert sorted(server.pages_fetched) == [1, 2, 3]
        assert stream.plan.total_pages == 2
        assert stream.stats.pages_emitted == 3

    @pytest.mark.asyncio
    async def test_capped_page_size_with_limit(self, fake_server, page_request):
        server = fake_server(1000, max_per_page=50)
        stream = make_stream(server, page_request, per_page=100, limit=120)

        items = await stream.collect()

        assert items == list(range(120))
        assert sorted(server.pages_fetched) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_capped_page_size_without_total(self, fake_server, page_request):
        server = fake_server(120, max_per_page=50, report_total=False)
        stream = make_stream(server, page_request, per_page=100)

        items = await stream.collect()

        assert items == list(range(120))
        assert server.pages_fetched == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_capped_page_size_respects_max_pages(self, fake_server, page_request):
        server = fake_server(1000, max_per_page=50)
        stream = make_stream(server, page_request, per_page=100, max_pages=2)

        items = await stream.collect()

        assert items == list(range(100))
        assert sorted(server.pages_fetched) == [1, 2]
