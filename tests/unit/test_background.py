"""Unit tests for BackgroundTaskRunner and RoleChangeEffects."""

import asyncio
import logging
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from societyhub.application.notifications.role_change_effects import RoleChangeEffects
from societyhub.domain.value_objects import ActionNature, RoleChangeKind
from societyhub.infrastructure.tasks.background import BackgroundTaskRunner


@pytest.mark.asyncio
async def test_spawn_runs_task_without_awaiting() -> None:
    runner = BackgroundTaskRunner()
    done = asyncio.Event()

    async def work():
        done.set()

    runner.spawn(work(), name="work")
    assert runner.pending == 1

    await runner.drain()
    assert done.is_set()
    assert runner.pending == 0


@pytest.mark.asyncio
async def test_failing_task_is_logged_not_raised(caplog) -> None:
    runner = BackgroundTaskRunner()

    async def boom():
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        runner.spawn(boom(), name="boom-task")
        await runner.drain()

    assert "Background task boom-task failed" in caplog.text


@pytest.mark.asyncio
async def test_drain_cancels_tasks_after_timeout(caplog) -> None:
    runner = BackgroundTaskRunner()

    async def slow():
        await asyncio.sleep(10)

    runner.spawn(slow(), name="slow")
    with caplog.at_level(logging.WARNING):
        await runner.drain(timeout=0.01)

    assert runner.pending == 0
    assert "Cancelled 1 background tasks" in caplog.text


@pytest.mark.asyncio
async def test_drain_without_tasks_returns() -> None:
    await BackgroundTaskRunner().drain(timeout=0.01)


@pytest.mark.asyncio
async def test_effects_skip_empty_member_list() -> None:
    runner = BackgroundTaskRunner()
    dispatcher = AsyncMock()
    effects = RoleChangeEffects(runner, dispatcher, AsyncMock())

    effects.notify(uuid4(), uuid4(), set(), RoleChangeKind.ADDED)

    assert runner.pending == 0
    dispatcher.notify_role_change.assert_not_called()


@pytest.mark.asyncio
async def test_effects_pass_sorted_members_and_activity_fields() -> None:
    runner = BackgroundTaskRunner()
    dispatcher = AsyncMock()
    recorder = AsyncMock()
    effects = RoleChangeEffects(runner, dispatcher, recorder)
    role_id, society_id, actor = uuid4(), uuid4(), uuid4()
    members = {uuid4(), uuid4(), uuid4()}

    effects.notify(role_id, society_id, members, RoleChangeKind.REMOVED)
    effects.record(actor, society_id, "DELETED_ROLE", "Deleted role", target_id=role_id,
                   target_type="Role", nature=ActionNature.DESTRUCTIVE)
    await runner.drain()

    dispatcher.notify_role_change.assert_awaited_once_with(
        role_id, society_id, sorted(members), RoleChangeKind.REMOVED
    )
    recorder.record.assert_awaited_once_with(
        actor, society_id, "DELETED_ROLE", "Deleted role", role_id, "Role",
        ActionNature.DESTRUCTIVE,
    )


@pytest.mark.asyncio
async def test_effects_student_roles_skip_when_nothing_changed() -> None:
    runner = BackgroundTaskRunner()
    dispatcher = AsyncMock()
    effects = RoleChangeEffects(runner, dispatcher, AsyncMock())

    effects.notify_student_roles(uuid4(), uuid4(), set(), set(), 0)

    assert runner.pending == 0
    dispatcher.notify_student_roles.assert_not_called()


@pytest.mark.asyncio
async def test_effects_student_roles_pass_sorted_ids() -> None:
    runner = BackgroundTaskRunner()
    dispatcher = AsyncMock()
    effects = RoleChangeEffects(runner, dispatcher, AsyncMock())
    student_id, society_id = uuid4(), uuid4()
    removed = {uuid4(), uuid4()}

    effects.notify_student_roles(student_id, society_id, set(), removed, 0)
    await runner.drain()

    dispatcher.notify_student_roles.assert_awaited_once_with(
        student_id, society_id, [], sorted(removed), 0
    )
