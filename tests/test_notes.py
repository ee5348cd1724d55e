import pytest

from vocabsync.errors import NoteStoreError
from vocabsync.notes import NoteStore, read_document


@pytest.fixture
def store(tmp_path):
    return NoteStore(tmp_path / "notes" / "notes.json")


def test_save_and_load(store):
    assert store.load("Episode 1") is None
    assert store.save("  Episode 1 ", "  00:01 - hi\n") == "Episode 1"
    assert store.load("Episode 1") == "00:01 - hi"
    store.save("Episode 1", "replaced")
    assert store.load("Episode 1") == "replaced"


def test_save_rejects_empty(store):
    with pytest.raises(NoteStoreError):
        store.save("   ", "text")
    with pytest.raises(NoteStoreError):
        store.save("title", "  \n ")


def test_titles_filter_and_sort(store):
    store.save("beta", "about nervous people")
    store.save("Alpha", "weather talk")
    store.save("gamma nervous", "x")
    assert store.titles() == ["Alpha", "beta", "gamma nervous"]
    assert store.titles("NERVOUS") == ["beta", "gamma nervous"]
    assert store.titles("nothing") == []


def test_delete_all(store):
    assert store.delete_all() == 0
    store.save("a", "1")
    store.save("b", "2")
    assert store.delete_all() == 2
    assert store.titles() == []


def test_corrupt_store_raises(tmp_path):
    path = tmp_path / "notes.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(NoteStoreError):
        NoteStore(path).titles()
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(NoteStoreError):
        NoteStore(path).load("x")


def test_read_document_repairs_mojibake(tmp_path):
    p = tmp_path / "doc.txt"
    p.write_text("00:01 - cafÃ©\n“quoted”", encoding="utf-8")
    assert read_document(p) == "00:01 - café\n“quoted”"


def test_read_missing_document(tmp_path):
    with pytest.raises(NoteStoreError):
        read_document(tmp_path / "missing.txt")


def test_import_file(store, tmp_path):
    p = tmp_path / "doc.txt"
    p.write_text("00:01 - hello\n", encoding="utf-8")
    store.import_file("Lesson", p)
    assert store.load("Lesson") == "00:01 - hello"


def test_non_utf8_store_raises(tmp_path):
    path = tmp_path / "notes.json"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(NoteStoreError):
        NoteStore(path).titles()


def test_unwritable_store_raises(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")
    store = NoteStore(blocker / "notes.json")
    with pytest.raises(NoteStoreError):
        store.save("a", "1")
    assert blocker.read_text(encoding="utf-8") == "not a directory"


def test_failed_write_removes_temp_file(tmp_path):
    path = tmp_path / "notes.json"
    path.mkdir()  # os.replace cannot put a file over a directory
    store = NoteStore(path)
    with pytest.raises(NoteStoreError):
        store._write({"a": "1"})
    assert not (tmp_path / "notes.json.tmp").exists()
