import asyncio
import json

from backend.app.db.leads_store import LeadsStore, next_lead_id


def _lead(name: str) -> dict:
    return {"name": name, "email": f"{name.lower()}@example.com", "goal": "Apprendre Excel vite"}


def test_next_lead_id_ignores_non_numeric_ids():
    assert next_lead_id([]) == 1
    assert next_lead_id([{"id": 3}, {"id": "7"}, {"id": "x"}, {"id": None}, "junk", {"id": float("inf")}]) == 8


def test_missing_file_is_empty_store(tmp_path):
    async def scenario():
        store = await LeadsStore(tmp_path / "missing" / "leads.json").open()
        return store.list(), store.next_id

    leads, next_id = asyncio.run(scenario())
    assert leads == []
    assert next_id == 1


def test_load_if_needed_reads_file_once(tmp_path):
    path = tmp_path / "leads.json"
    path.write_text(json.dumps([{"id": 4, "name": "Old"}]), encoding="utf-8")

    async def scenario():
        store = LeadsStore(path)
        await store.load_if_needed()
        await store.load_if_needed()
        await store.open()
        return store

    store = asyncio.run(scenario())
    assert store.load_count == 1
    assert store.next_id == 5
    assert store.list() == [{"id": 4, "name": "Old"}]


def test_corrupted_file_is_logged_and_store_starts_empty(tmp_path, caplog):
    path = tmp_path / "leads.json"
    path.write_text("{not json", encoding="utf-8")

    async def scenario():
        return await LeadsStore(path).open()

    with caplog.at_level("WARNING"):
        store = asyncio.run(scenario())
    assert store.list() == []
    assert "load failed" in caplog.text


def test_add_assigns_id_and_persists(tmp_path):
    path = tmp_path / "data" / "leads.json"

    async def scenario():
        store = await LeadsStore(path).open()
        return await store.add(_lead("Ana"))

    result = asyncio.run(scenario())
    assert result.persisted
    assert result.error is None
    assert result.value["id"] == 1
    assert json.loads(path.read_text(encoding="utf-8")) == [result.value]


def test_concurrent_adds_get_contiguous_ids_and_one_complete_file(tmp_path):
    path = tmp_path / "leads.json"
    path.write_text(json.dumps([{"id": 10, "name": "Existing"}]), encoding="utf-8")
    count = 25

    async def scenario():
        store = await LeadsStore(path).open()
        results = await asyncio.gather(*(store.add(_lead(f"Lead{i}")) for i in range(count)))
        await store.close()
        return store, results

    store, results = asyncio.run(scenario())
    ids = sorted(result.value["id"] for result in results)
    assert ids == list(range(11, 11 + count))
    assert all(result.persisted for result in results)

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert len(on_disk) == count + 1
    assert [lead["id"] for lead in on_disk] == [10] + list(range(11, 11 + count))
    assert on_disk == store.list()


def test_list_returns_copy(tmp_path):
    async def scenario():
        store = await LeadsStore(tmp_path / "leads.json").open()
        await store.add(_lead("Ana"))
        return store

    store = asyncio.run(scenario())
    snapshot = store.list()
    snapshot.clear()
    assert len(store.list()) == 1


def test_write_failure_is_reported_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")

    async def scenario():
        store = await LeadsStore(blocker / "leads.json").open()
        return store, await store.add(_lead("Ana"))

    with caplog.at_level("WARNING"):
        store, result = asyncio.run(scenario())
    assert not result.persisted
    assert result.error
    assert result.value["id"] == 1
    assert store.list() == [result.value]
    assert "persist failed" in caplog.text


def test_memory_only_store_without_path():
    async def scenario():
        store = await LeadsStore("").open()
        first = await store.add(_lead("Ana"))
        second = await store.add(_lead("Bob"))
        return store, first, second

    store, first, second = asyncio.run(scenario())
    assert store.persist_path is None
    assert store.load_count == 0
    assert (first.value["id"], second.value["id"]) == (1, 2)
    assert first.persisted
