"""Writes are committed before the client sees the response."""

from dishka import Provider, Scope, provide
import pytest

from blog.domain.error import StoreError
from blog.domain.repository import UnitOfWork


class RecordingUnitOfWork(UnitOfWork):
    def __init__(self, events: list[str], fail: bool = False) -> None:
        self.events = events
        self.fail = fail

    async def commit(self) -> None:
        if self.fail:
            raise StoreError("could not commit: connection to 10.0.0.3 lost")
        self.events.append("commit")


class RecordingUnitOfWorkProvider(Provider):
    def __init__(self, events: list[str], fail: bool = False) -> None:
        super().__init__()
        self.events = events
        self.fail = fail

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        return RecordingUnitOfWork(self.events, self.fail)


class ResponseRecorder:
    """ASGI middleware noting when the response starts going out."""

    def __init__(self, app, events: list[str]) -> None:
        self.app = app
        self.events = events

    async def __call__(self, scope, receive, send):
        async def recording_send(message):
            if message["type"] == "http.response.start":
                self.events.append("response_sent")
            await send(message)

        await self.app(scope, receive, recording_send)


@pytest.fixture
def events() -> list[str]:
    return []


class TestCommitBeforeResponse:
    @pytest.fixture
    def api_providers(self, events):
        return [RecordingUnitOfWorkProvider(events)]

    @pytest.mark.asyncio
    async def test_create_post_commits_before_responding(self, api, events):
        api.app.add_middleware(ResponseRecorder, events=events)
        alice = await api.login("Alice")

        response = await api.post(
            "/posts",
            json={"title": "Durable", "content": "Committed first"},
            headers=alice.headers,
        )

        assert response.status_code == 201
        assert events == ["commit", "response_sent"]

    @pytest.mark.asyncio
    async def test_like_and_comment_commit_before_responding(self, api, events):
        api.app.add_middleware(ResponseRecorder, events=events)
        alice = await api.login("Alice")
        response = await api.post(
            "/posts",
            json={"title": "Durable", "content": "Committed first"},
            headers=alice.headers,
        )
        post_id = response.json()["post"]["id"]
        events.clear()

        await api.post(f"/posts/{post_id}/like", headers=alice.headers)
        await api.post(
            f"/posts/{post_id}/comments",
            json={"content": "Nice"},
            headers=alice.headers,
        )

        assert events == ["commit", "response_sent", "commit", "response_sent"]

    @pytest.mark.asyncio
    async def test_anonymous_read_does_not_commit(self, api, events):
        api.app.add_middleware(ResponseRecorder, events=events)

        response = await api.get("/posts")

        assert response.status_code == 200
        assert events == ["response_sent"]


class TestFailedCommit:
    @pytest.fixture
    def api_providers(self, events):
        return [RecordingUnitOfWorkProvider(events, fail=True)]

    @pytest.mark.asyncio
    async def test_failed_commit_is_a_server_error(self, api):
        alice = await api.login("Alice")

        response = await api.post(
            "/posts",
            json={"title": "Lost", "content": "Never committed"},
            headers=alice.headers,
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}
        assert "10.0.0.3" not in response.text
