import pytest
from loguru import logger

from ytsource import ReferenceKind, SourceReference, TitleResolver


class FakePrimary:
    def __init__(self):
        self.calls = []

    def get_playlist_title(self, *, playlist_id, success, error):
        self.calls.append(("playlist", playlist_id, success, error))

    def get_channel_name(self, *, channel_id, success, error):
        self.calls.append(("channel", channel_id, success, error))


class FakeAlternate:
    def __init__(self):
        self.calls = []

    def get_auto_generated_playlist_title(self, playlist_id, success):
        self.calls.append((playlist_id, success))


class Recorder:
    def __init__(self):
        self.titles = []
        self.errors = 0

    def success(self, title):
        self.titles.append(title)

    def error(self):
        self.errors += 1


@pytest.fixture
def primary():
    return FakePrimary()


@pytest.fixture
def alternate():
    return FakeAlternate()


@pytest.fixture
def resolver(primary, alternate):
    return TitleResolver(primary=primary, alternate=alternate)


@pytest.fixture
def error_logs():
    messages = []
    handler_id = logger.add(messages.append, level="ERROR", format="{message}")
    yield messages
    logger.remove(handler_id)


def test_playlist_uses_primary_playlist_lookup(resolver, primary):
    ref = SourceReference(kind=ReferenceKind.PLAYLIST, source_id="abc")
    rec = Recorder()
    resolver.resolve_title(ref, rec.success, rec.error)

    assert len(primary.calls) == 1
    name, source_id, success, _ = primary.calls[0]
    assert (name, source_id) == ("playlist", "abc")

    success("My Playlist")
    assert ref.title == "My Playlist"
    assert rec.titles == ["My Playlist"]
    assert rec.errors == 0


@pytest.mark.parametrize("kind", [ReferenceKind.CHANNEL, ReferenceKind.FAVORITES])
def test_channel_and_favorites_use_channel_lookup(resolver, primary, kind):
    ref = SourceReference(kind=kind, source_id="someone")
    rec = Recorder()
    resolver.resolve_title(ref, rec.success, rec.error)

    name, source_id, success, _ = primary.calls[0]
    assert (name, source_id) == ("channel", "someone")
    success("Some Channel")
    assert ref.title == "Some Channel"
    assert rec.titles == ["Some Channel"]


def test_primary_failure_calls_error_and_keeps_title_empty(resolver, primary):
    ref = SourceReference(kind=ReferenceKind.PLAYLIST, source_id="abc")
    rec = Recorder()
    resolver.resolve_title(ref, rec.success, rec.error)

    _, _, _, error = primary.calls[0]
    error()
    assert rec.errors == 1
    assert rec.titles == []
    assert ref.title == ""


def test_cached_title_returns_synchronously_without_remote_call(resolver, primary):
    ref = SourceReference(kind=ReferenceKind.PLAYLIST, source_id="abc")
    resolver.resolve_title(ref)
    primary.calls[0][2]("Cached")

    rec = Recorder()
    resolver.resolve_title(ref, rec.success, rec.error)
    assert rec.titles == ["Cached"]
    assert len(primary.calls) == 1


def test_auto_generated_uses_alternate_without_error_channel(resolver, primary, alternate):
    ref = SourceReference(kind=ReferenceKind.AUTO_GENERATED, source_id="ALabc")
    rec = Recorder()
    resolver.resolve_title(ref, rec.success, rec.error)

    assert primary.calls == []
    assert len(alternate.calls) == 1
    source_id, success = alternate.calls[0]
    assert source_id == "ALabc"
    success("Mix")
    assert ref.title == "Mix"
    assert rec.titles == ["Mix"]
    assert rec.errors == 0


@pytest.mark.parametrize(
    "kind", [ReferenceKind.SHARED_PLAYLIST, ReferenceKind.VIDEO, ReferenceKind.NONE]
)
def test_unhandled_kinds_always_error(resolver, primary, alternate, error_logs, kind):
    ref = SourceReference(kind=kind, source_id="x")
    rec = Recorder()
    resolver.resolve_title(ref, rec.success, rec.error, notify_on_error=True)

    assert rec.errors == 1
    assert rec.titles == []
    assert primary.calls == [] and alternate.calls == []
    assert any(kind.value in str(m) for m in error_logs)


def test_notify_on_error_false_stays_quiet(resolver, error_logs):
    ref = SourceReference(kind=ReferenceKind.SHARED_PLAYLIST, source_id="x")
    rec = Recorder()
    resolver.resolve_title(ref, rec.success, rec.error, notify_on_error=False)

    assert rec.errors == 1
    assert error_logs == []


def test_callbacks_are_optional(resolver, primary):
    resolver.resolve_title(SourceReference(kind=ReferenceKind.SHARED_PLAYLIST))
    ref = SourceReference(kind=ReferenceKind.PLAYLIST, source_id="abc")
    resolver.resolve_title(ref)
    primary.calls[0][2]("Title")
    primary.calls[0][3]()
    assert ref.title == "Title"


def test_unhandled_kind_logs_by_default(resolver, error_logs):
    rec = Recorder()
    resolver.resolve_title(SourceReference(kind=ReferenceKind.VIDEO, source_id="x"), rec.success, rec.error)
    assert rec.errors == 1
    assert any("video" in str(m) for m in error_logs)
