import logging
import pytest
from datetime import datetime, timezone
from clippings.converter import build_shelf, parse_file, generate, read_lines
from clippings.exceptions import ParseError, RecordBoundaryError

VALID_A = [
    "乌合之众:大众心理研究 (社会学经典名著) (古斯塔夫·勒宠)",
    "- 您在位置 #116-119的标注 | 添加于 2015年2月14日星期六 下午3:21:03",
    "first quote",
]
VALID_B = [
    "乌合之众:大众心理研究 (社会学经典名著) (古斯塔夫·勒宠)",
    "- 您在位置 #200-201的标注 | 添加于 2015年2月15日星期日 上午9:05:41",
    "second quote",
]
MALFORMED = [
    "A title with no author",
    "- 您在位置 #1-2的标注 | 添加于 2015年2月15日星期日 上午9:05:41",
    "lost quote",
]

def as_file(*records):
    lines = []
    for record in records:
        lines.extend(record)
        lines.extend(["==========", ""])
    return lines

def test_build_shelf_drops_malformed_record(caplog):
    with caplog.at_level(logging.WARNING, logger='clippings'):
        result = build_shelf(as_file(VALID_A, MALFORMED, VALID_B))

    assert len(result.shelf) == 1
    book = result.shelf.books[0]
    assert [c.text for c in book.clippings] == ["first quote", "second quote"]
    assert result.records_read == 3
    assert result.records_added == 2
    assert len(result.skipped) == 1
    assert result.skipped[0].line_number == 6
    assert result.skipped[0].lines == MALFORMED
    assert "Skipping record at line 6" in caplog.text

def test_build_shelf_strict_raises():
    with pytest.raises(ParseError, match="line 6"):
        build_shelf(as_file(VALID_A, MALFORMED, VALID_B), strict=True)

def test_build_shelf_strict_boundaries():
    with pytest.raises(RecordBoundaryError):
        build_shelf(as_file(VALID_A, VALID_B[:2]), strict=True)

def test_build_shelf_reports_trailing_partial_record():
    result = build_shelf(as_file(VALID_A) + VALID_B[:2])
    assert result.records_added == 1
    assert len(result.skipped) == 1

def test_read_lines_strips_bom_and_terminators(tmp_path):
    path = tmp_path / "clippings.txt"
    path.write_bytes("\ufeffline one\r\nline two\n\n".encode('utf-8'))
    assert read_lines(path) == ["line one", "line two", ""]

def test_parse_file(sample_clippings_path):
    result = parse_file(sample_clippings_path)

    assert result.skipped == []
    assert [(b.title, b.author, len(b.clippings)) for b in result.shelf] == [
        ("乌合之众:大众心理研究", "古斯塔夫·勒宠", 2),
        ("精进:如何成为一个很厉害的人", "采铜", 1),
        ("智识分子", "万维钢", 1),
    ]
    noon = result.shelf.get("精进:如何成为一个很厉害的人", "采铜").clippings[0]
    assert noon.date_time == datetime(2016, 3, 1, 0, 30, 0, tzinfo=timezone.utc)

def test_parse_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_file(tmp_path / "missing.txt")

def test_generate(sample_clippings_path, tmp_path):
    output_dir = tmp_path / "output"
    result = generate(sample_clippings_path, output_dir)

    assert sorted(p.name for p in output_dir.iterdir()) == sorted([
        "index.md", "summary.md",
        "乌合之众:大众心理研究.md", "精进:如何成为一个很厉害的人.md", "智识分子.md",
    ])
    assert len(result.written) == 5
    index = (output_dir / "index.md").read_bytes().decode("utf-8")
    assert index.startswith("# Clipping \r\r- [乌合之众:大众心理研究](./乌合之众:大众心理研究.md)\n")

def test_build_shelf_skips_overflowing_timestamp():
    overflowing = [
        "T (A)",
        "- 您在位置 #1-2的标注 | 添加于 99999999999999999999年2月14日星期六 下午3:21:03",
        "q",
    ]
    result = build_shelf(as_file(VALID_A, overflowing, VALID_B))
    assert result.records_added == 2
    assert [s.lines for s in result.skipped] == [overflowing]

def test_build_shelf_many_tag_groups():
    many_tags = ["T " + "(x) " * 3000 + "(A)", VALID_A[1], "q"]
    result = build_shelf(as_file(VALID_A, many_tags))
    assert result.skipped == []
    assert result.shelf.get("T", "A") is not None
