from pathlib import Path

import pytest

from wiki_search.models import IndexedPage, IndexSnapshot, SnapshotLoadError, load_snapshot


def test_snapshot_model_validates_pages() -> None:
    snapshot = IndexSnapshot.model_validate(
        {"pages": [{"url": "https://wiki.test/Java", "counts": {"java": 3}}]}
    )

    assert snapshot.pages == [IndexedPage(url="https://wiki.test/Java", counts={"java": 3})]
    assert IndexedPage(url="https://wiki.test/Empty").counts == {}


def test_load_snapshot_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "snapshot.json"
    path.write_text('{"pages": [{"url": "https://wiki.test/Coffee", "counts": {"coffee": 6}}]}')

    snapshot = load_snapshot(path)

    assert snapshot.pages[0].url == "https://wiki.test/Coffee"
    assert snapshot.pages[0].counts == {"coffee": 6}


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"pages": [{"url": "", "counts": {}}]}',
        '{"pages": [{"url": "https://wiki.test/Java", "counts": {"java": -1}}]}',
        '{"pages": [{"url": "https://wiki.test/Java", "counts": {"java": 9223372036854775808}}]}',
    ],
)
def test_load_snapshot_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    path = tmp_path / "snapshot.json"
    path.write_text(content)

    with pytest.raises(SnapshotLoadError, match="Invalid snapshot"):
        load_snapshot(path)


def test_load_snapshot_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SnapshotLoadError, match="Cannot read snapshot"):
        load_snapshot(tmp_path / "missing.json")
