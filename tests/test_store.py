import pytest

from volunteer_hub.core.config import Settings
from volunteer_hub.core.errors import StorageError
from volunteer_hub.db.seed import default_event, ensure_documents
from volunteer_hub.db.store import (
    EVENTS,
    VOLUNTEERS,
    JsonFileStore,
    SqlDocumentStore,
    build_store,
)


@pytest.fixture(params=["json", "sql"])
def store(request, tmp_path):
    if request.param == "json":
        store = JsonFileStore(tmp_path / "data")
    else:
        store = SqlDocumentStore(f"sqlite:///{tmp_path / 'docs.db'}")
    store.initialize()
    return store


def test_missing_document_raises_storage_error(store):
    assert not store.exists(VOLUNTEERS)
    with pytest.raises(StorageError):
        store.get(VOLUNTEERS)


def test_put_overwrites_whole_document(store):
    store.put(VOLUNTEERS, [{"id": "1"}, {"id": "2"}])
    store.put(VOLUNTEERS, [{"id": "3"}])
    assert store.get(VOLUNTEERS) == [{"id": "3"}]
    assert store.exists(VOLUNTEERS)


def test_ensure_documents_seeds_once(store):
    ensure_documents(store, "owner@example.com")
    assert store.get(EVENTS) == [default_event("owner@example.com")]
    assert store.get(VOLUNTEERS) == []

    store.put(VOLUNTEERS, [{"id": "42"}])
    ensure_documents(store)
    assert store.get(VOLUNTEERS) == [{"id": "42"}]
    assert store.get(EVENTS)[0]["organizer"]["email"] == "owner@example.com"


def test_default_event_falls_back_to_built_in_organizer_email():
    assert default_event()["organizer"]["email"] == "glenn@hvscma.com"


def test_corrupt_json_file_raises_storage_error(tmp_path):
    store = JsonFileStore(tmp_path)
    store.path_for(EVENTS).write_text("[{")
    with pytest.raises(StorageError):
        store.get(EVENTS)


def test_unserializable_value_leaves_previous_document(tmp_path):
    store = JsonFileStore(tmp_path)
    store.put(VOLUNTEERS, [{"id": "1"}])
    with pytest.raises(StorageError):
        store.put(VOLUNTEERS, [{"id": object()}])
    assert store.get(VOLUNTEERS) == [{"id": "1"}]
    assert list(tmp_path.glob("*.tmp")) == []


def test_build_store_picks_backend(tmp_path):
    assert isinstance(build_store(Settings(storage_backend="json", data_dir=str(tmp_path))), JsonFileStore)
    sql = build_store(Settings(storage_backend="SQL", database_url=f"sqlite:///{tmp_path / 'x.db'}"))
    assert isinstance(sql, SqlDocumentStore)
    with pytest.raises(ValueError):
        build_store(Settings(storage_backend="redis"))


def test_settings_defaults():
    defaults = Settings(_env_file=None)
    assert defaults.refresh_interval == 30.0
    assert defaults.volunteer_gate_code == "1957"
    assert defaults.organizer_password == "5791"
