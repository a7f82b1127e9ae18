"""Tests for the weight calculation service entry points."""

import pytest

from constants import PenaltyMediaType
from processor.weights import (
    RankedListNotFoundError,
    UnsupportedAlgorithmVersionError,
    calculate_weights,
    recalculate_all_configurations,
    recalculate_ranked_list,
)


async def break_list(factory, media_list, configuration):
    penalty = await factory.penalty(media_type=PenaltyMediaType.BOOKS.value)
    await factory.apply(penalty, configuration, 30)
    await factory.tag(media_list, penalty)


class TestCalculateWeights:
    async def test_success_message(self, factory, session):
        configuration = await factory.configuration()
        await factory.ranked_list(await factory.media_list(), configuration)
        await factory.ranked_list(await factory.media_list(), configuration, weight=100)

        outcome = await calculate_weights(session, configuration)

        assert outcome["success"] is True
        assert outcome["message"] == "Successfully calculated weights for 2 ranked lists (2 processed, 1 updated)"
        assert outcome["results"]["processed"] == 2

    async def test_error_message(self, factory, session):
        configuration = await factory.configuration()
        await factory.ranked_list(await factory.media_list(), configuration)
        broken_list = await factory.media_list()
        await break_list(factory, broken_list, configuration)
        await factory.ranked_list(broken_list, configuration)

        outcome = await calculate_weights(session, configuration)

        assert outcome["success"] is False
        assert outcome["error"] == "Weight calculation completed with 1 errors. 1 weights updated, 2 processed"
        assert len(outcome["results"]["errors"]) == 1


class TestRecalculateAllConfigurations:
    async def test_skips_archived_configurations(self, factory, session):
        music = await factory.configuration(media_type="music")
        books = await factory.configuration(media_type="books")
        archived = await factory.configuration(archived=True)
        music_id, books_id = music.id, books.id
        await factory.ranked_list(await factory.media_list(), music)
        await factory.ranked_list(await factory.media_list(media_type="books"), books)
        archived_list_id = (await factory.ranked_list(await factory.media_list(), archived)).id

        outcomes = await recalculate_all_configurations(session)

        assert list(outcomes) == [music_id, books_id]
        assert all(outcome["success"] for outcome in outcomes.values())
        assert (await factory.reload(archived_list_id)).weight is None

    async def test_failure_does_not_stop_later_configurations(self, factory, session):
        failing = await factory.configuration()
        healthy = await factory.configuration()
        failing_id, healthy_id = failing.id, healthy.id
        broken_list = await factory.media_list()
        await break_list(factory, broken_list, failing)
        await factory.ranked_list(broken_list, failing)
        healthy_list_id = (await factory.ranked_list(await factory.media_list(), healthy)).id

        outcomes = await recalculate_all_configurations(session)

        assert outcomes[failing_id]["success"] is False
        assert outcomes[healthy_id]["success"] is True
        assert (await factory.reload(healthy_list_id)).weight == 100


    async def test_unsupported_version_does_not_stop_later_configurations(self, factory, session):
        unsupported = await factory.configuration(algorithm_version=999)
        healthy = await factory.configuration()
        unsupported_id, healthy_id = unsupported.id, healthy.id
        untouched_id = (await factory.ranked_list(await factory.media_list(), unsupported)).id
        healthy_list_id = (await factory.ranked_list(await factory.media_list(), healthy)).id

        outcomes = await recalculate_all_configurations(session)

        assert outcomes[unsupported_id] == {
            "success": False,
            "error": "Unsupported algorithm version: 999",
            "results": None,
        }
        assert outcomes[healthy_id]["success"] is True
        assert (await factory.reload(untouched_id)).weight is None
        assert (await factory.reload(healthy_list_id)).weight == 100


class TestRecalculateRankedList:
    async def test_returns_new_weight(self, factory, session):
        configuration = await factory.configuration()
        media_list = await factory.media_list()
        await factory.penalized(media_list, configuration, 35)
        ranked_list = await factory.ranked_list(media_list, configuration)

        weight = await recalculate_ranked_list(session, ranked_list.id)
        await session.commit()

        assert weight == 65
        assert (await factory.reload(ranked_list.id)).weight == 65

    async def test_unknown_ranked_list(self, session):
        with pytest.raises(RankedListNotFoundError) as exc_info:
            await recalculate_ranked_list(session, 999)

        assert str(exc_info.value) == "RankedList 999 not found"

    async def test_unsupported_version(self, factory, session):
        configuration = await factory.configuration(algorithm_version=3)
        ranked_list = await factory.ranked_list(await factory.media_list(), configuration)

        with pytest.raises(UnsupportedAlgorithmVersionError):
            await recalculate_ranked_list(session, ranked_list.id)
