"""Tail tests: window size, ordering, absent/empty files, partial trailing line, chunk boundaries."""
from wordpane_audit import reader
from wordpane_audit.reader import DEFAULT_TAIL_LINES, tail, tail_naive


def _write_lines(path, count: int, width: int = 10) -> list[str]:
    lines = [f"line-{i:05d}-" + "x" * width for i in range(count)]
    path.write_text("".join(l + "\n" for l in lines), encoding="utf-8")
    return lines


def test_tail_missing_file_is_absent_not_error(tmp_path) -> None:
    result = tail(tmp_path / "missing.log", 10)
    assert result.exists is False
    assert result.lines == []


def test_tail_empty_file(tmp_path) -> None:
    log = tmp_path / "a.log"
    log.write_bytes(b"")
    result = tail(log, 10)
    assert result.exists is True
    assert result.lines == []


def test_tail_only_partial_line_counts_as_empty(tmp_path) -> None:
    log = tmp_path / "a.log"
    log.write_bytes(b"half a line without break")
    assert tail(log, 5).lines == []
    assert tail(log, 5).exists is True


def test_tail_fewer_lines_than_requested_returns_all_in_order(tmp_path) -> None:
    log = tmp_path / "a.log"
    lines = _write_lines(log, 3)
    assert tail(log, 10).lines == lines


def test_tail_returns_last_n_oldest_first(tmp_path) -> None:
    log = tmp_path / "a.log"
    lines = _write_lines(log, 20)
    assert tail(log, 4).lines == lines[-4:]


def test_tail_non_positive_n_means_default(tmp_path) -> None:
    log = tmp_path / "a.log"
    lines = _write_lines(log, DEFAULT_TAIL_LINES + 25)
    expected = lines[-DEFAULT_TAIL_LINES:]
    assert tail(log, 0).lines == expected
    assert tail(log, -5).lines == expected
    assert tail(log, 50).lines == expected
    assert tail(log, None).lines == expected


def test_tail_ignores_trailing_partial_line(tmp_path) -> None:
    log = tmp_path / "a.log"
    lines = _write_lines(log, 5)
    with log.open("a", encoding="utf-8") as f:
        f.write("in-progress write")
    assert tail(log, 2).lines == lines[-2:]


def test_tail_skips_blank_lines(tmp_path) -> None:
    log = tmp_path / "a.log"
    log.write_text("a\n\nb\n   \nc\n", encoding="utf-8")
    assert tail(log, 2).lines == ["b", "c"]
    assert tail(log, 10).lines == ["a", "b", "c"]


def test_tail_across_chunk_boundaries_matches_naive(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(reader, "CHUNK_SIZE", 16)
    log = tmp_path / "a.log"
    _write_lines(log, 40, width=23)
    with log.open("a", encoding="utf-8") as f:
        f.write("partial")
    for n in (1, 2, 7, 39, 40, 41, 200):
        assert tail(log, n).lines == tail_naive(log, n).lines


def test_tail_line_longer_than_chunk(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(reader, "CHUNK_SIZE", 8)
    log = tmp_path / "a.log"
    long_line = "L" * 100
    log.write_text(f"first\n{long_line}\nlast\n", encoding="utf-8")
    assert tail(log, 2).lines == [long_line, "last"]
    assert tail(log, 3).lines == ["first", long_line, "last"]


def test_tail_replaces_undecodable_bytes(tmp_path) -> None:
    log = tmp_path / "a.log"
    log.write_bytes(b"ok\n\xff\xfebad\n")
    result = tail(log, 5)
    assert result.lines[0] == "ok"
    assert result.lines[1].endswith("bad")
