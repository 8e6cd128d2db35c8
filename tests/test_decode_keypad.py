import pytest

import decode_keypad


ORDER = [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]


@pytest.fixture
def key_files(tmp_path, reference_pngs):
    """Write a shuffled keypad to disk, slot s showing digit ORDER[s]."""
    paths = []
    for slot, digit in enumerate(ORDER):
        path = tmp_path / f"slot{slot}.png"
        path.write_bytes(reference_pngs[digit])
        paths.append(str(path))
    return paths


def test_complete_keypad_exits_zero(key_files, capsys):
    with pytest.raises(SystemExit) as excinfo:
        decode_keypad.main(key_files + ["--pin", "1357"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "1 -> 8" in out
    assert "Click sequence: [8, 6, 4, 2]" in out


def test_incomplete_keypad_exits_one(key_files, tmp_path, capsys):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    key_files[3] = str(bad)
    with pytest.raises(SystemExit) as excinfo:
        decode_keypad.main(key_files + ["--pin", "6"])
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "slot 3: decode error" in out


def test_missing_file_exits_two(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        decode_keypad.main([str(tmp_path / "nope.png")])
    assert excinfo.value.code == 2


def test_invalid_pin_exits_three(key_files):
    with pytest.raises(SystemExit) as excinfo:
        decode_keypad.main(key_files + ["--pin", "12ab"])
    assert excinfo.value.code == 3


def test_load_observed_assigns_slots(key_files):
    observed = decode_keypad.load_observed(key_files[:2])
    assert [o.slot for o in observed] == [0, 1]
    assert all(o.decoded for o in observed)
