import pytest

import huff
from samples import text_like


def test_compress_then_decompress(tmp_path, capsys):
    src = tmp_path / "in.txt"
    packed = tmp_path / "out" / "in.huf"
    back = tmp_path / "back.txt"
    data = text_like(4000)
    src.write_bytes(data)

    assert huff.main(["-huff", str(src), str(packed)]) == 0
    out = capsys.readouterr().out
    assert f"[huff] wrote {packed}" in out
    assert "ratio" in out
    assert packed.stat().st_size < len(data)

    assert huff.main(["-unhuff", str(packed), str(back)]) == 0
    assert f"[unhuff] wrote {back} (4000 bytes)" in capsys.readouterr().out
    assert back.read_bytes() == data


def test_empty_file(tmp_path):
    src = tmp_path / "empty"
    src.write_bytes(b"")
    assert huff.main(["-huff", str(src), str(tmp_path / "e.huf")]) == 0
    assert huff.main(["-unhuff", str(tmp_path / "e.huf"), str(tmp_path / "e.out")]) == 0
    assert (tmp_path / "e.out").read_bytes() == b""


def test_corrupt_container_exits_nonzero(tmp_path, capsys):
    src = tmp_path / "bogus.huf"
    src.write_bytes(b"not a container")
    dst = tmp_path / "never"
    assert huff.main(["-unhuff", str(src), str(dst)]) == 1
    assert "[unhuff] error:" in capsys.readouterr().err
    assert not dst.exists()


def test_missing_input_exits_nonzero(tmp_path, capsys):
    assert huff.main(["-huff", str(tmp_path / "nope"), str(tmp_path / "x")]) == 1
    assert "[huff] error:" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["-zip", "a", "b"],
    ["-huff", "a"],
    ["-huff", "a", "b", "c"],
    ["a", "b"],
    ["-huff", "-unhuff", "a", "b"],
])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as e:
        huff.main(argv)
    assert e.value.code == 2


def test_mode_must_come_first(tmp_path):
    src = tmp_path / "in.bin"
    src.write_bytes(b"abc")
    dst = tmp_path / "out.huf"
    with pytest.raises(SystemExit) as e:
        huff.main([str(src), "-huff", str(dst)])
    assert e.value.code == 2
    assert not dst.exists()


@pytest.mark.parametrize("argv", [["-h", "a", "b"], ["--help"], ["-h"]])
def test_help_flag_is_a_usage_error(argv):
    with pytest.raises(SystemExit) as e:
        huff.main(argv)
    assert e.value.code == 2


def test_dash_prefixed_file_names(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "-data").write_bytes(b"dash named input" * 10)
    assert huff.main(["-huff", "-data", "-data.huf"]) == 0
    assert huff.main(["-unhuff", "-data.huf", "-data.out"]) == 0
    assert (tmp_path / "-data.out").read_bytes() == b"dash named input" * 10
