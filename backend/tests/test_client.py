"""Tests for the Python client: HTTP wrapper, reducers and TaskBoard."""

from datetime import datetime, timezone

import httpx
import pytest

from taskapp.client import TaskBoard, TaskClient, TaskListState
from taskapp.client.state import task_created, task_deleted, task_updated, tasks_loaded
from taskapp.core.errors import InvalidTaskInput, TaskNotFoundError, TransportError
from taskapp.schemas.task import TaskRead

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_task(task_id, completed=False, title=None):
    return TaskRead(
        id=task_id,
        title=title or f"Task {task_id}",
        completed=completed,
        created_at=NOW,
        updated_at=NOW,
    )


def failing_client(handler):
    return TaskClient(http=httpx.Client(base_url="http://tasks.test", transport=httpx.MockTransport(handler)))


@pytest.fixture()
def api(client):
    return TaskClient(http=client)


class TestReducers:
    def test_loaded_replaces_list(self):
        state = TaskListState(tasks=(make_task(9),))
        new = tasks_loaded(state, [make_task(1), make_task(2)])
        assert [t.id for t in new.tasks] == [1, 2]
        assert [t.id for t in state.tasks] == [9]

    def test_created_appends(self):
        state = TaskListState(tasks=(make_task(2),))
        new = task_created(state, make_task(3))
        assert [t.id for t in new.tasks] == [2, 3]

    def test_updated_replaces_in_place(self):
        state = TaskListState(tasks=(make_task(1), make_task(2), make_task(3)))
        new = task_updated(state, make_task(2, completed=True))
        assert [t.id for t in new.tasks] == [1, 2, 3]
        assert new.tasks[1].completed is True
        assert state.tasks[1].completed is False

    def test_deleted_filters(self):
        state = TaskListState(tasks=(make_task(1), make_task(2)))
        assert [t.id for t in task_deleted(state, 1).tasks] == [2]
        assert task_deleted(state, 99).tasks == state.tasks


class TestViews:
    def test_partition_preserves_order(self):
        state = TaskListState(
            tasks=(
                make_task(5),
                make_task(4, completed=True),
                make_task(3),
                make_task(2, completed=True),
                make_task(1),
            )
        )
        assert [t.id for t in state.pending] == [5, 3, 1]
        assert [t.id for t in state.completed] == [4, 2]
        assert state.summary() == {"total": 5, "pending": 3, "completed": 2}

    def test_empty(self):
        assert TaskListState().summary() == {"total": 0, "pending": 0, "completed": 0}


class TestTaskClient:
    def test_operations(self, api):
        created = api.create_task("Client task", "via httpx")
        assert created.completed is False
        assert created.created_at.tzinfo is not None

        assert [t.id for t in api.get_tasks()] == [created.id]

        updated = api.update_task_completion(created.id, True)
        assert updated.completed is True
        assert updated.updated_at > created.updated_at

        api.delete_task(created.id)
        assert api.get_tasks() == []

    def test_update_missing_raises_not_found(self, api):
        with pytest.raises(TaskNotFoundError) as exc:
            api.update_task_completion(777, True)
        assert exc.value.task_id == 777

    def test_unrelated_404_is_transport_error(self):
        response = httpx.Response(404, json={"detail": "Not Found"})
        with pytest.raises(TransportError):
            failing_client(lambda request: response).update_task_completion(1, True)

    def test_delete_missing_is_silent(self, api):
        api.delete_task(777)

    def test_blank_title_is_invalid_input(self, api):
        with pytest.raises(InvalidTaskInput):
            api.create_task("  ")

    def test_network_failure_is_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError):
            failing_client(handler).get_tasks()

    def test_server_error_is_transport_error(self):
        with pytest.raises(TransportError):
            failing_client(lambda request: httpx.Response(500, text="boom")).get_tasks()

    def test_malformed_body_is_transport_error(self):
        with pytest.raises(TransportError):
            failing_client(lambda request: httpx.Response(200, json={"id": "x"})).create_task("t")


class TestTaskBoard:
    def test_full_lifecycle(self, api):
        board = TaskBoard(api)
        state = board.load(TaskListState())
        assert state.total == 0

        state = board.add(state, "First")
        state = board.add(state, "Second", "")
        assert [t.title for t in state.tasks] == ["First", "Second"]
        assert state.tasks[1].description is None

        first_id = state.tasks[0].id
        state = board.toggle(state, first_id)
        assert [t.id for t in state.completed] == [first_id]
        assert state.summary() == {"total": 2, "pending": 1, "completed": 1}

        state = board.toggle(state, first_id)
        assert state.completed == ()

        state = board.remove(state, first_id)
        assert [t.title for t in state.tasks] == ["Second"]

        # Reloading comes back newest first from the server
        state = board.add(state, "Third")
        state = board.load(state)
        assert [t.title for t in state.tasks] == ["Third", "Second"]

    def test_blank_title_skips_call(self):
        def handler(request):
            raise AssertionError("no request expected")

        state = TaskListState()
        assert TaskBoard(failing_client(handler)).add(state, "   ") is state

    def test_failures_leave_state_unchanged(self, caplog):
        def handler(request):
            raise httpx.ConnectError("down", request=request)

        board = TaskBoard(failing_client(handler))
        state = TaskListState(tasks=(make_task(1),))

        assert board.load(state) is state
        assert board.add(state, "New") is state
        assert board.toggle(state, 1) is state
        assert board.remove(state, 1) is state
        assert "Failed to delete task 1" in caplog.text

    def test_toggle_missing_on_server_keeps_state(self, api):
        state = TaskListState(tasks=(make_task(555),))
        assert TaskBoard(api).toggle(state, 555) is state
