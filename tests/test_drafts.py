"""Unit tests for the key-value stores and the draft library."""
import asyncio
import json
import re

import pytest
from hypothesis import given
from hypothesis import settings as hypothesis_settings
from hypothesis import strategies as st

from licitagov.config import DRAFTS_STORAGE_KEY
from licitagov.drafts import DraftLibrary, KeyValueStore, SavedDraft, create_key_value_store
from licitagov.drafts.in_memory import InMemoryKeyValueStore
from licitagov.errors import DraftNotFoundError


class TestKeyValueStoreInterface:
    """Tests for the abstract KeyValueStore interface."""

    def test_store_is_abstract(self):
        with pytest.raises(TypeError):
            KeyValueStore()  # type: ignore


class TestKeyValueStoreFactory:
    """Tests for create_key_value_store."""

    @pytest.mark.parametrize("backend", ["memory", "json", "sqlite"])
    def test_creates_backend(self, backend, tmp_path):
        kwargs = {} if backend == "memory" else {"path": tmp_path / f"store.{backend}"}

        store = create_key_value_store(backend, **kwargs)

        assert store.backend_type == backend

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unsupported storage backend"):
            create_key_value_store("redis")


class TestStores:
    """Behaviour shared by every backend."""

    @pytest.fixture(params=["memory", "json", "sqlite"])
    def store(self, request, tmp_path):
        if request.param == "memory":
            return create_key_value_store("memory")
        return create_key_value_store(request.param, path=tmp_path / f"store.{request.param}")

    @pytest.mark.asyncio
    async def test_get_set_delete(self, store):
        async with store:
            assert await store.get("k") is None

            await store.set("k", "v1")
            await store.set("k", "v2")
            assert await store.get("k") == "v2"

            await store.delete("k")
            assert await store.get("k") is None

            await store.delete("missing")


class TestPersistentStores:
    """Data written by file-backed stores survives a reconnect."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("backend", ["json", "sqlite"])
    async def test_reconnect_keeps_values(self, backend, tmp_path):
        path = tmp_path / "nested" / f"store.{backend}"

        async with create_key_value_store(backend, path=path) as store:
            await store.set("licitagov_drafts", "[]")

        async with create_key_value_store(backend, path=path) as store:
            assert await store.get("licitagov_drafts") == "[]"

    @pytest.mark.asyncio
    async def test_json_store_ignores_corrupt_file(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")

        async with create_key_value_store("json", path=path) as store:
            assert await store.get("k") is None
            await store.set("k", "v")

        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}

    @pytest.mark.asyncio
    async def test_json_store_failed_write_keeps_values(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        store = create_key_value_store("json", path=blocker / "store.json")
        await store.connect()

        with pytest.raises(OSError):
            await store.set("k", "v")

        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_sqlite_requires_connect(self, tmp_path):
        store = create_key_value_store("sqlite", path=tmp_path / "store.db")

        with pytest.raises(RuntimeError, match="not connected"):
            await store.get("k")


class TestSavedDraft:
    """Tests for SavedDraft.create."""

    def test_title_truncates_objeto(self):
        draft = SavedDraft.create("Termo de Referência (TR)", "Aquisição de material de expediente para 2025", "conteúdo")

        assert draft.title == "Termo de Referência (TR): Aquisição de material de exped..."
        assert draft.type == "Termo de Referência (TR)"

    def test_date_is_pt_br(self):
        draft = SavedDraft.create("ETP", "x", "c")

        assert re.fullmatch(r"\d{2}/\d{2}/\d{4}, \d{2}:\d{2}:\d{2}", draft.date)

    def test_ids_are_unique(self):
        ids = {SavedDraft.create("ETP", "x", "c").id for _ in range(50)}

        assert len(ids) == 50


class TestDraftLibrary:
    """Tests for DraftLibrary persistence."""

    @pytest.mark.asyncio
    async def test_empty_store_loads_empty(self, library):
        assert await library.load() == []
        assert len(library) == 0

    @pytest.mark.asyncio
    async def test_save_then_reload_newest_first(self, memory_store):
        library = DraftLibrary(memory_store)
        saved = [await library.save("ETP", f"objeto {i}", f"conteúdo {i}") for i in range(3)]

        reloaded = DraftLibrary(memory_store)
        drafts = await reloaded.load()

        assert [d.id for d in drafts] == [d.id for d in reversed(saved)]
        assert drafts[0].content == "conteúdo 2"

    @pytest.mark.asyncio
    async def test_delete_removes_the_right_draft(self, memory_store):
        library = DraftLibrary(memory_store)
        first = await library.save("TR", "a", "A")
        second = await library.save("TR", "b", "B")
        third = await library.save("TR", "c", "C")

        removed = await library.delete(second.id)

        reloaded = DraftLibrary(memory_store)
        drafts = await reloaded.load()
        assert removed.id == second.id
        assert [d.id for d in drafts] == [third.id, first.id]

    @pytest.mark.asyncio
    async def test_delete_unknown_draft(self, library):
        with pytest.raises(DraftNotFoundError):
            await library.delete("nope")

    @pytest.mark.asyncio
    async def test_get(self, library):
        draft = await library.save("TR", "a", "A")

        assert library.get(draft.id) == draft
        with pytest.raises(DraftNotFoundError):
            library.get("nope")

    @pytest.mark.asyncio
    async def test_corrupt_payload_loads_empty(self, memory_store):
        await memory_store.set(DRAFTS_STORAGE_KEY, "not json at all")

        assert await DraftLibrary(memory_store).load() == []

    @pytest.mark.asyncio
    async def test_non_list_payload_loads_empty(self, memory_store):
        await memory_store.set(DRAFTS_STORAGE_KEY, json.dumps({"id": "1"}))

        assert await DraftLibrary(memory_store).load() == []

    @pytest.mark.asyncio
    async def test_stored_format_is_json_list(self, memory_store):
        library = DraftLibrary(memory_store)
        draft = await library.save("TR", "a", "A")

        stored = json.loads(await memory_store.get(DRAFTS_STORAGE_KEY))

        assert stored == [draft.model_dump()]
        assert set(stored[0]) == {"id", "title", "type", "content", "date"}

    @hypothesis_settings(max_examples=20, deadline=None)
    @given(st.integers(min_value=1, max_value=8), st.data())
    def test_save_n_delete_one(self, n: int, data):
        """Property test: N saves then one delete leaves N-1 drafts in order."""
        store = create_key_value_store("memory")
        library = DraftLibrary(store)

        async def save_all():
            return [await library.save("TR", str(i), str(i)) for i in range(n)]

        saved = asyncio.run(save_all())
        victim = data.draw(st.sampled_from(saved))

        asyncio.run(library.delete(victim.id))
        drafts = asyncio.run(DraftLibrary(store).load())

        assert len(drafts) == n - 1
        assert victim.id not in {d.id for d in drafts}
        assert [d.id for d in drafts] == [d.id for d in reversed(saved) if d.id != victim.id]


class FailingStore(InMemoryKeyValueStore):
    """Memory store whose writes fail once ``broken`` is set."""

    broken = False

    async def set(self, key: str, value: str) -> None:
        if self.broken:
            raise OSError("disk full")
        await super().set(key, value)


class TestDraftLibraryWriteFailures:
    """A failed store write leaves the library unchanged."""

    @pytest.mark.asyncio
    async def test_failed_save_keeps_previous_list(self):
        store = FailingStore()
        library = DraftLibrary(store)
        kept = await library.save("TR", "a", "A")
        store.broken = True

        with pytest.raises(OSError):
            await library.save("TR", "b", "B")

        assert library.drafts == [kept]

    @pytest.mark.asyncio
    async def test_failed_delete_keeps_draft(self):
        store = FailingStore()
        library = DraftLibrary(store)
        draft = await library.save("TR", "a", "A")
        store.broken = True

        with pytest.raises(OSError):
            await library.delete(draft.id)

        assert library.get(draft.id) == draft
