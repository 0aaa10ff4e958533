import pytest
from formnotify.adapters.errors import (
    InvalidInput,
    RenderError,
    TypeMismatch,
    UnsupportedEventKind,
    UnsupportedIntegration,
)
from formnotify.adapters.registry import (
    Adapter,
    AdapterRegistry,
    get_registry,
    render,
)
from formnotify.schemas.event import EventType
from formnotify.schemas.webhook import AdapterDetail, IntegrationType


def test_render_mattermost(rating_event):
    webhook = render(rating_event, IntegrationType.MATTERMOST, "form.finished")
    assert webhook.data["text"] == "Survey [view](http://x)"


def test_render_accepts_raw_values(rating_event):
    webhook = render(rating_event.model_dump(), 2, EventType.FORM_FINISHED)
    assert [b["type"] for b in webhook.data["blocks"]] == [
        "section",
        "divider",
        "rich_text",
        "divider",
    ]


def test_render_generic(full_event):
    webhook = render(full_event, IntegrationType.GENERIC, "form.finished")
    assert webhook.data == full_event.model_dump(mode="json")
    assert webhook.data["nodes"][2] == {"kind": "signature", "translation": "Sign here"}


def test_render_ntfy(rating_event):
    webhook = render(rating_event, IntegrationType.NTFY, "form.finished")
    assert webhook.headers == {
        "X-Title": ["Survey"],
        "X-Markdown": ["yes"],
        "X-Click": ["http://x"],
    }
    assert webhook.data.startswith("## Customer Survey")


def test_invalid_input():
    with pytest.raises(InvalidInput):
        render(None, IntegrationType.SLACK, "form.finished")


def test_invalid_input_wins_over_unknown_selectors():
    with pytest.raises(InvalidInput):
        render(None, 99, "unknown.kind")


@pytest.mark.parametrize("integration", [99, -1, "slack", None])
def test_unsupported_integration(rating_event, integration):
    with pytest.raises(UnsupportedIntegration):
        render(rating_event, integration, "form.finished")


def test_unregistered_integration(rating_event):
    registry = AdapterRegistry(
        {IntegrationType.SLACK: get_registry().get(IntegrationType.SLACK)}
    )
    with pytest.raises(UnsupportedIntegration):
        render(rating_event, IntegrationType.MATTERMOST, "form.finished", registry)


def test_unsupported_event_kind(rating_event):
    with pytest.raises(UnsupportedEventKind):
        render(rating_event, IntegrationType.MATTERMOST, "unknown.kind")


def test_event_kind_without_renderer(rating_event):
    registry = AdapterRegistry(
        {IntegrationType.SLACK: Adapter(AdapterDetail(name="Slack", icon="x"), {})}
    )
    with pytest.raises(UnsupportedEventKind):
        registry.render(rating_event, IntegrationType.SLACK, "form.finished")


@pytest.mark.parametrize(
    "payload",
    [
        "not an event",
        ["title"],
        {"nodes": []},
        {"title": "t", "nodes": [{"kind": "rating"}]},
    ],
)
def test_type_mismatch(payload):
    with pytest.raises(TypeMismatch):
        render(payload, IntegrationType.SLACK, "form.finished")


def test_errors_share_a_base():
    errors = (InvalidInput, UnsupportedIntegration, UnsupportedEventKind, TypeMismatch)
    for error in errors:
        assert issubclass(error, RenderError)


def test_registry_details():
    registry = get_registry()

    assert registry is get_registry()
    assert registry.integrations() == [
        IntegrationType.GENERIC,
        IntegrationType.MATTERMOST,
        IntegrationType.SLACK,
        IntegrationType.NTFY,
    ]
    assert registry.detail(IntegrationType.NTFY) == AdapterDetail(
        name="Ntfy", icon="simple-icons:ntfy", color="#10b981"
    )
    assert registry.details()[IntegrationType.SLACK].name == "Slack"
    assert registry.detail(1).icon == "logos:mattermost-icon"


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        get_registry()._adapters[IntegrationType.GENERIC] = None
