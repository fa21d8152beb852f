from __future__ import annotations

import json
import os
import stat
from unittest.mock import patch

import pytest

from dadjokes_tui.datamodels import DadJoke, JokeDecodeError
from dadjokes_tui.favourites import FavouritesStore, decode_favourites, encode_favourites


@pytest.mark.parametrize("count", [0, 1, 5])
def test_encoded_favourites_decode_to_the_same_list(count):
    jokes = [DadJoke(f"id{i}", f"joke {i}", 200) for i in range(count)]
    jokes += jokes[:1]  # duplicates survive
    assert decode_favourites(encode_favourites(jokes)) == jokes


def test_encode_is_pretty_printed_array():
    text = encode_favourites([DadJoke("abc", "Why did...", 200)])
    assert text.startswith("[\n")
    assert json.loads(text) == [{"id": "abc", "joke": "Why did...", "status": 200}]


@pytest.mark.parametrize("text", ["", "{not json", '{"id": "abc"}', '[{"id": "abc"}]'])
def test_decode_rejects_bad_documents(text):
    with pytest.raises(JokeDecodeError):
        decode_favourites(text)


def test_new_store_is_empty(store):
    assert len(store) == 0
    assert store.items == []


def test_append_keeps_order_and_duplicates(store, why_did, skeleton):
    store.append(why_did)
    store.append(skeleton)
    store.append(why_did)
    assert store.items == [why_did, skeleton, why_did]


def test_append_does_not_write_file(store, why_did):
    store.append(why_did)
    assert not os.path.exists(store.path)


def test_save_then_load(store, why_did, skeleton):
    store.append(why_did)
    store.append(skeleton)
    assert store.save()

    reloaded = FavouritesStore(store.path)
    assert reloaded.load()
    assert reloaded.items == [why_did, skeleton]


def test_save_writes_utf8_json_privately(store):
    store.append(DadJoke("u1", "Café jokes are très drôle", 200))
    store.save()

    with open(store.path, "rb") as f:
        raw = f.read()
    assert "très".encode("utf-8") in raw
    assert json.loads(raw.decode("utf-8"))[0]["id"] == "u1"
    assert stat.S_IMODE(os.stat(store.path).st_mode) == 0o600


def test_save_creates_missing_directory(tmp_path, why_did):
    store = FavouritesStore(str(tmp_path / "nested" / "dir" / "savedFavourites"))
    store.append(why_did)
    assert store.save()
    assert os.path.exists(store.path)


def test_failed_save_keeps_previous_file(store, why_did, skeleton):
    store.append(why_did)
    store.save()
    store.append(skeleton)

    with patch("dadjokes_tui.config.os.replace", side_effect=OSError("disk full")):
        assert not store.save()

    assert store.items == [why_did, skeleton]
    with open(store.path, encoding="utf-8") as f:
        assert decode_favourites(f.read()) == [why_did]
    assert os.listdir(os.path.dirname(store.path)) == ["savedFavourites"]


def test_load_missing_file(store):
    assert not store.load()
    assert store.items == []


def test_load_corrupt_file(store):
    with open(store.path, "w", encoding="utf-8") as f:
        f.write("[{\"id\": \"abc\"")
    assert not store.load()
    assert store.items == []


def test_load_replaces_contents_wholesale(store, why_did, skeleton):
    with open(store.path, "w", encoding="utf-8") as f:
        f.write(encode_favourites([skeleton]))
    store.append(why_did)
    assert store.load()
    assert store.items == [skeleton]


def test_listeners_are_notified(store, why_did):
    seen = []
    unsubscribe = store.subscribe(lambda s: seen.append(len(s)))
    store.append(why_did)
    unsubscribe()
    store.append(why_did)
    assert seen == [1]


def test_failing_listener_does_not_block_others(store, why_did):
    seen = []

    def broken(_):
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(lambda s: seen.append(s.items))
    store.append(why_did)
    assert seen == [[why_did]]
