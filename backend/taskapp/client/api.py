import logging
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter

from taskapp.core.config import settings
from taskapp.core.errors import InvalidTaskInput, TaskNotFoundError, TransportError
from taskapp.schemas.task import TaskRead

logger = logging.getLogger(__name__)

_task_list = TypeAdapter(List[TaskRead])


def _detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


class TaskClient:
    """
    Thin HTTP client for the four task operations.

    Pass `http` to reuse an existing httpx.Client (FastAPI's TestClient works
    too); otherwise one is created against `base_url` or TASK_API_URL.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=base_url or settings.task_api_url, timeout=timeout
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "TaskClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(self, method: str, path: str, payload: Any = None) -> httpx.Response:
        try:
            resp = self._http.request(method, path, json=payload)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if resp.status_code == 422:
            raise InvalidTaskInput(_detail(resp))
        return resp

    def _body(self, resp: httpx.Response) -> Any:
        try:
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{resp.request.method} {resp.request.url.path} returned "
                f"{resp.status_code}: {_detail(resp)}"
            ) from e
        except ValueError as e:
            raise TransportError(f"Malformed response body: {e}") from e

    def create_task(self, title: str, description: Optional[str] = None) -> TaskRead:
        resp = self._request(
            "POST", "/createTask", {"title": title, "description": description}
        )
        return self._parse(self._body(resp))

    def get_tasks(self) -> List[TaskRead]:
        resp = self._request("GET", "/getTasks")
        try:
            return _task_list.validate_python(self._body(resp))
        except ValueError as e:
            raise TransportError(f"Malformed task list: {e}") from e

    def update_task_completion(self, task_id: int, completed: bool) -> TaskRead:
        resp = self._request(
            "POST", "/updateTaskCompletion", {"id": task_id, "completed": completed}
        )
        if resp.status_code == 404 and _detail(resp) == str(TaskNotFoundError(task_id)):
            raise TaskNotFoundError(task_id)
        return self._parse(self._body(resp))

    def delete_task(self, task_id: int) -> None:
        self._body(self._request("POST", "/deleteTask", {"id": task_id}))

    @staticmethod
    def _parse(body: Any) -> TaskRead:
        try:
            return TaskRead.model_validate(body)
        except ValueError as e:
            raise TransportError(f"Malformed task: {e}") from e
