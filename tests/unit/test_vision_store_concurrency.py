"""
Interleaving tests: generation results arriving while the store keeps changing.
"""
import asyncio

import pytest
from civiz.domain.constants.point_values import PointValues
from civiz.domain.exceptions import VisionGenerationError
from civiz.domain.models.generation import FailureReason, GenerationResult
from civiz.domain.models.vision import GenerationState


class TestReconciliationByIdentity:
    """Generation outcomes update exactly the vision they belong to"""

    @pytest.mark.asyncio
    async def test_resolving_first_leaves_second_pending(self, store, controlled_gateway, settle, placeholder):
        first_task = asyncio.create_task(store.submit("build a new park with a playground", "Dolores Park"))
        await settle()
        second_task = asyncio.create_task(store.submit("more bus routes for the sunset", "Irving Street"))
        await settle()
        second_id, first_id = (v.id for v in store.visions)

        controlled_gateway.succeed(0, "https://images.test/first.png")
        await first_task

        first = store.get(first_id)
        second = store.get(second_id)
        assert first.generation_state is GenerationState.READY
        assert first.image_url == "https://images.test/first.png"
        assert second.generation_state is GenerationState.PENDING
        assert second.image_url == placeholder
        assert second.generated_image_url is None

        controlled_gateway.succeed(1, "https://images.test/second.png")
        await second_task
        assert store.get(second_id).image_url == "https://images.test/second.png"

    @pytest.mark.asyncio
    async def test_out_of_order_completion(self, store, controlled_gateway, settle):
        tasks = []
        for index in range(3):
            tasks.append(asyncio.create_task(store.submit(f"community garden plan {index}", f"Street {index}")))
            await settle()

        # Resolve newest first, then oldest, then the middle one
        for call_index in (2, 0, 1):
            controlled_gateway.succeed(call_index, f"https://images.test/{call_index}.png")
        results = await asyncio.gather(*tasks)

        for index, vision in enumerate(results):
            assert vision.text == f"community garden plan {index}"
            assert vision.image_url == f"https://images.test/{index}.png"
        assert [v.text for v in store.visions] == [
            "community garden plan 2",
            "community garden plan 1",
            "community garden plan 0",
        ]

    @pytest.mark.asyncio
    async def test_mixed_success_and_failure(self, store, controlled_gateway, settle, placeholder):
        ok_task = asyncio.create_task(store.submit("build a new park with a playground", "Dolores Park"))
        await settle()
        failing_task = asyncio.create_task(store.submit("affordable housing near transit", "Market Street"))
        await settle()

        controlled_gateway.reply(1, GenerationResult.failure(FailureReason.RATE_LIMITED, "slow down"))
        controlled_gateway.succeed(0, "https://images.test/park.png")

        ok, failed = await asyncio.gather(ok_task, failing_task, return_exceptions=True)

        assert ok.generation_state is GenerationState.READY
        assert isinstance(failed, VisionGenerationError)
        assert failed.reason is FailureReason.RATE_LIMITED
        failed_vision = store.get(failed.vision_id)
        assert failed_vision.generation_state is GenerationState.FAILED
        assert failed_vision.image_url == placeholder
        assert len(store.visions) == 2
        assert store.points == 10 + 2 * PointValues.VISION_SUBMISSION


class TestMutationsDuringGeneration:
    """Likes and reads interleaved with an in-flight generation"""

    @pytest.mark.asyncio
    async def test_like_while_pending_survives_reconciliation(self, store, controlled_gateway, settle):
        task = asyncio.create_task(store.submit("build a new park with a playground", "Dolores Park"))
        await settle()
        vision_id = store.visions[0].id

        assert store.like(vision_id) is True
        controlled_gateway.succeed(0, "https://images.test/park.png")
        result = await task

        assert result.liked_by == frozenset({"user-1"})
        assert result.points == PointValues.VISION_SUBMISSION + PointValues.IMAGE_LIKE_RECEIVED
        assert result.generation_state is GenerationState.READY
        assert store.points == 10 + PointValues.VISION_SUBMISSION + PointValues.IMAGE_LIKE_GIVEN

    @pytest.mark.asyncio
    async def test_like_while_pending_survives_failure(self, store, controlled_gateway, settle):
        task = asyncio.create_task(store.submit("build a new park with a playground", "Dolores Park"))
        await settle()
        vision_id = store.visions[0].id
        store.like(vision_id)

        controlled_gateway.reply(0, GenerationResult.failure(FailureReason.QUOTA_EXHAUSTED))
        with pytest.raises(VisionGenerationError):
            await task

        vision = store.get(vision_id)
        assert vision.generation_state is GenerationState.FAILED
        assert vision.points == PointValues.VISION_SUBMISSION + PointValues.IMAGE_LIKE_RECEIVED

    @pytest.mark.asyncio
    async def test_points_never_drop_below_submission_award(self, store, controlled_gateway, settle):
        observed = []
        store.subscribe(lambda event, current: observed.extend(v.points for v in current.visions))

        tasks = []
        for index in range(4):
            tasks.append(asyncio.create_task(store.submit(f"youth center idea number {index}", "Mission")))
            await settle()
            store.like(store.visions[0].id)

        controlled_gateway.succeed(1, "https://images.test/1.png")
        controlled_gateway.reply(3, GenerationResult.failure(FailureReason.UNKNOWN))
        controlled_gateway.succeed(0, "https://images.test/0.png")
        controlled_gateway.raise_error(2, RuntimeError("boom"))
        await asyncio.gather(*tasks, return_exceptions=True)

        assert observed
        assert min(observed) >= PointValues.VISION_SUBMISSION
        assert all(v.generation_state is not GenerationState.PENDING for v in store.visions)
        assert len(store.visions) == 4

    @pytest.mark.asyncio
    async def test_readers_never_see_partial_record(self, store, controlled_gateway, settle):
        snapshots = []

        def listener(event, current):
            for vision in current.visions:
                snapshots.append((vision.generation_state, vision.generated_image_url, vision.image_url))

        store.subscribe(listener)
        task = asyncio.create_task(store.submit("build a new park with a playground", "Dolores Park"))
        await settle()
        controlled_gateway.succeed(0, "https://images.test/park.png")
        await task

        for state, generated, image in snapshots:
            if state is GenerationState.READY:
                assert generated == image == "https://images.test/park.png"
            else:
                assert generated is None
