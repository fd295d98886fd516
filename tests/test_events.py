"""Tests for the event hook system."""

import uuid

import pytest
from httpx import AsyncClient

from ticketing_auth import AuthError, TicketingAuth, UserCreated, UserDeleted
from ticketing_auth.events import EventCollector, HookRegistry

from conftest import unique_email

pytestmark = pytest.mark.asyncio


class TestHookRegistry:
    async def test_unknown_event_rejected(self):
        registry = HookRegistry()
        with pytest.raises(ValueError, match="Unknown event 'login'"):
            registry.register("login", lambda e: None)

    async def test_multiple_listeners(self):
        registry = HookRegistry()
        calls = []
        registry.register("user_created", lambda e: calls.append("sync"))

        async def async_hook(e):
            calls.append("async")

        registry.register("user_created", async_hook)
        await registry.emit("user_created", UserCreated(email="a@example.com"))
        assert calls == ["sync", "async"]

    async def test_failing_hook_is_logged_not_raised(self, caplog):
        registry = HookRegistry()
        calls = []

        def broken(e):
            raise RuntimeError("hook exploded")

        registry.register("user_created", broken)
        registry.register("user_created", lambda e: calls.append(e))

        with caplog.at_level("ERROR", logger="ticketing_auth.events"):
            await registry.emit("user_created", UserCreated(email="a@example.com"))

        assert len(calls) == 1
        assert "Hook error in 'user_created'" in caplog.text

    async def test_collector_emits_only_on_flush(self):
        registry = HookRegistry()
        calls = []
        registry.register("user_deleted", lambda e: calls.append(e.user_id))
        collector = EventCollector(registry)

        user_id = uuid.uuid4()
        collector.collect("user_deleted", UserDeleted(user_id=user_id))
        assert calls == []

        await collector.flush()
        assert calls == [user_id]

        await collector.flush()
        assert calls == [user_id]


class TestAuthEvents:
    async def test_user_created_on_create_user(self, auth: TicketingAuth):
        received = []
        auth.add_hook("user_created", lambda e: received.append(e))

        email = unique_email()
        user = await auth.create_user(email, "abcd")

        assert len(received) == 1
        assert received[0].user_id == user.id
        assert received[0].email == email

    async def test_decorator_registration(self, auth: TicketingAuth):
        received = []

        @auth.on("user_created")
        async def handle(event):
            received.append(event)

        await auth.create_user(unique_email(), "abcd")
        assert len(received) == 1

    async def test_no_event_on_failed_signup(self, auth: TicketingAuth):
        received = []
        auth.add_hook("user_created", lambda e: received.append(e))

        email = unique_email()
        await auth.create_user(email, "abcd")
        with pytest.raises(AuthError):
            await auth.create_user(email, "abcd")

        assert len(received) == 1

    async def test_failing_hook_does_not_break_signup(self, auth: TicketingAuth):
        async def broken(event):
            raise RuntimeError("mail server down")

        auth.add_hook("user_created", broken)
        email = unique_email()
        user = await auth.create_user(email, "abcd")
        assert user.email == email
        assert await auth.check_password(email, "abcd") is True

    async def test_user_deleted(self, auth: TicketingAuth):
        received = []
        auth.add_hook("user_deleted", lambda e: received.append(e))

        user = await auth.create_user(unique_email(), "abcd")
        await auth.delete_user(user.id)

        assert [e.user_id for e in received] == [user.id]

    async def test_hook_fires_after_http_signup_commit(self, auth: TicketingAuth, client: AsyncClient):
        seen_in_db = []

        async def check_committed(event):
            seen_in_db.append(await auth.check_password(event.email, "abcd"))

        auth.add_hook("user_created", check_committed)
        response = await client.post("/api/users/signup", json={"email": unique_email(), "password": "abcd"})

        assert response.status_code == 201
        assert seen_in_db == [True]

    async def test_no_event_on_http_duplicate(self, auth: TicketingAuth, client: AsyncClient):
        received = []
        auth.add_hook("user_created", lambda e: received.append(e))

        email = unique_email()
        await client.post("/api/users/signup", json={"email": email, "password": "abcd"})
        await client.post("/api/users/signup", json={"email": email, "password": "abcd"})

        assert len(received) == 1
