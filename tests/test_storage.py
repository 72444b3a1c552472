from trainer.storage import KeyValueStore


def test_missing_key_returns_fallback(store):
    result = store.load("nothing", {"a": 1})
    assert result.value == {"a": 1}
    assert result.status == "missing"
    assert result.used_fallback


def test_save_and_load(store):
    assert store.save("k", {"x": [1, 2]})
    result = store.load("k")
    assert result.value == {"x": [1, 2]}
    assert result.status == "loaded"
    assert not result.used_fallback


def test_save_overwrites(store):
    store.save("k", 1)
    store.save("k", 2)
    assert store.load("k").value == 2


def test_unserialisable_value_is_not_saved(store):
    assert not store.save("k", {"bad": object()})
    assert store.load("k").status == "missing"


def test_delete(store):
    store.save("k", 1)
    assert store.delete("k")
    assert store.load("k", 0).value == 0


def test_keys_by_prefix(store):
    store.save("warmup_check_1-A", {})
    store.save("warmup_check_1-B", {})
    store.save("warmupXcheck", {})
    assert store.keys("warmup_check_") == ["warmup_check_1-A", "warmup_check_1-B"]


def test_unreadable_value_falls_back(store):
    with store._connect() as conn:
        conn.execute("INSERT INTO kv_store (key, value) VALUES ('k', 'not json')")
    result = store.load("k", [])
    assert result.value == []
    assert result.status == "fallback"


def test_unavailable_store(tmp_path):
    store = KeyValueStore(tmp_path)
    assert store.load("k", 5).status == "fallback"
    assert store.load("k", 5).value == 5
    assert not store.save("k", 1)
    assert not store.delete("k")
    assert store.keys() == []
