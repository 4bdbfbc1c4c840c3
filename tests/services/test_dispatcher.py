from unittest.mock import MagicMock

import httpx
import pytest

from strings_panel.services.orchestration.dispatcher import RequestDispatcher
from strings_panel.services.transport import Transport
from strings_panel.ui.form import FormField, FormState


def _dispatcher(handler) -> tuple[RequestDispatcher, FormState]:
    form = FormState()
    transport = Transport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    return RequestDispatcher(transport, form), form


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="body")


@pytest.mark.asyncio
async def test_failed_validation_flags_field_and_sends_nothing() -> None:
    handler = MagicMock(side_effect=_ok)
    dispatcher, form = _dispatcher(handler)
    builder = MagicMock(return_value=httpx.Request("GET", "http://x.test/"))

    task = dispatcher.dispatch(
        builder,
        failure_message="failed",
        validator=lambda: False,
        form_field=FormField.STATE,
    )

    assert task is None
    assert form.is_invalid(FormField.STATE)
    builder.assert_not_called()
    handler.assert_not_called()
    assert form.notifications == []


def test_failed_validation_without_event_loop() -> None:
    handler = MagicMock(side_effect=_ok)
    dispatcher, form = _dispatcher(handler)

    task = dispatcher.dispatch(
        lambda: httpx.Request("GET", "http://x.test/"),
        failure_message="failed",
        validator=lambda: False,
        form_field=FormField.STATE,
    )

    assert task is None
    assert form.is_invalid(FormField.STATE)
    handler.assert_not_called()


@pytest.mark.asyncio
async def test_dispatch_clears_previous_invalid_flag() -> None:
    dispatcher, form = _dispatcher(_ok)
    form.set_invalid(FormField.SPLITTER, True)

    dispatcher.dispatch(
        lambda: httpx.Request("GET", "http://x.test/"),
        failure_message="failed",
        validator=lambda: True,
        form_field=FormField.SPLITTER,
    )
    await dispatcher.wait_idle()

    assert not form.is_invalid(FormField.SPLITTER)


@pytest.mark.asyncio
async def test_request_is_built_at_dispatch_time() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.content.decode())
        return httpx.Response(200)

    dispatcher, form = _dispatcher(handler)
    form.set_text(FormField.STATE, "first")

    def builder() -> httpx.Request:
        return httpx.Request("PUT", "http://x.test/", content=form.get_text(FormField.STATE))

    form.set_text(FormField.STATE, "second")
    dispatcher.dispatch(builder, failure_message="failed")
    await dispatcher.wait_idle()

    assert seen == ["second"]


@pytest.mark.asyncio
async def test_success_routes_body() -> None:
    dispatcher, form = _dispatcher(_ok)
    on_success = MagicMock()

    dispatcher.dispatch(
        lambda: httpx.Request("GET", "http://x.test/"),
        failure_message="failed",
        on_success=on_success,
    )
    await dispatcher.wait_idle()

    on_success.assert_called_once_with("body")
    assert form.notifications == []


@pytest.mark.asyncio
async def test_failure_notifies_exactly_once() -> None:
    dispatcher, form = _dispatcher(lambda request: httpx.Response(503))
    on_success = MagicMock()

    dispatcher.dispatch(
        lambda: httpx.Request("GET", "http://x.test/"),
        failure_message="Failed to get state!",
        on_success=on_success,
    )
    await dispatcher.wait_idle()

    assert [n.message for n in form.notifications] == ["Failed to get state!"]
    on_success.assert_not_called()


@pytest.mark.asyncio
async def test_builder_error_reports_failure() -> None:
    dispatcher, form = _dispatcher(_ok)

    def builder() -> httpx.Request:
        raise RuntimeError("cannot build")

    assert dispatcher.dispatch(builder, failure_message="failed") is None
    assert [n.message for n in form.notifications] == ["failed"]


@pytest.mark.asyncio
async def test_wait_idle_covers_dispatches_from_callbacks() -> None:
    dispatcher, form = _dispatcher(_ok)
    calls: list[str] = []

    def second(body: str) -> None:
        calls.append("second")

    def first(body: str) -> None:
        calls.append("first")
        dispatcher.dispatch(
            lambda: httpx.Request("GET", "http://x.test/2"),
            failure_message="failed",
            on_success=second,
        )

    dispatcher.dispatch(
        lambda: httpx.Request("GET", "http://x.test/1"),
        failure_message="failed",
        on_success=first,
    )
    await dispatcher.wait_idle()

    assert calls == ["first", "second"]
    assert dispatcher.pending_count == 0
