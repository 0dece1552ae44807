import io
import re
import time

import pytest

from oitools.tools import LogWriter, StopwatchMs, random_list, xor_invert_file

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}:\d{3}\] (\w+): (.*)$")


def test_info_line_format():
    buf = io.StringIO()
    LogWriter(buf).info("started")
    m = LINE.match(buf.getvalue().rstrip("\n"))
    assert m is not None
    assert m.group(1) == "INFO"
    assert m.group(2) == "started"


def test_write_custom_level():
    buf = io.StringIO()
    writer = LogWriter(buf)
    writer.write("boom", "ERROR")
    writer.info("ok")
    lines = buf.getvalue().splitlines()
    assert len(lines) == 2
    assert LINE.match(lines[0]).groups() == ("ERROR", "boom")
    assert LINE.match(lines[1]).groups() == ("INFO", "ok")


def test_path_target_appends(tmp_path):
    path = tmp_path / "log.txt"
    with LogWriter(path) as writer:
        writer.info("one")
    with LogWriter(str(path)) as writer:
        writer.info("two")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [LINE.match(line).group(2) for line in lines] == ["one", "two"]


def test_close_leaves_foreign_stream_open():
    buf = io.StringIO()
    writer = LogWriter(buf)
    writer.close()
    assert buf.closed is False


def test_stopwatch_measures_sleep():
    sw = StopwatchMs()
    sw.toggle()
    assert sw.running is True
    time.sleep(0.03)
    sw.toggle()
    assert sw.running is False
    assert 20 <= sw.result() < 5000


def test_stopwatch_result_before_stop_raises():
    sw = StopwatchMs()
    with pytest.raises(RuntimeError):
        sw.result()
    sw.toggle()
    with pytest.raises(RuntimeError):
        sw.result()


def test_xor_invert_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    original = bytes(range(256)) * 3 + b"tail"
    path.write_bytes(original)
    xor_invert_file(path, 0x0123456789ABCDEF)
    changed = path.read_bytes()
    assert len(changed) == len(original)
    assert changed != original
    xor_invert_file(path, 0x0123456789ABCDEF)
    assert path.read_bytes() == original


def test_xor_invert_zero_key_inverts_bits(tmp_path):
    path = tmp_path / "data.bin"
    original = b"\x00\x0f\xf0\xff"
    path.write_bytes(original)
    xor_invert_file(path, 0)
    assert path.read_bytes() == bytes(0xFF - b for b in original)


def test_xor_invert_key_too_large(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    with pytest.raises(ValueError):
        xor_invert_file(path, 1 << 64)
    assert path.read_bytes() == b"abc"


def test_xor_invert_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        xor_invert_file(tmp_path / "missing.bin", 1)


def test_random_list_size_and_range():
    values = random_list(50)
    assert len(values) == 50
    assert all(0 <= v < 2**31 for v in values)
    assert random_list(0) == []


def test_random_list_negative_size():
    with pytest.raises(ValueError):
        random_list(-1)