import json

import pytest

from color_namer import ColorNames, names_for_hex, names_for_rgb
from color_namer.demo import main


def test_smoke():
    out = names_for_hex("#008080")
    assert isinstance(out, ColorNames)
    assert out.simplified == "Greenish-blue (teal)"
    assert out.detailed == "Teal"
    for label in out:
        assert isinstance(label, str) and label
    assert names_for_rgb((0.0, 128 / 255, 128 / 255)) == out


def test_demo_prints_json(capsys):
    main(["#F0F8FF", "000000"])
    rows = json.loads(capsys.readouterr().out)
    assert [r["detailed"] for r in rows] == ["Alice Blue", "Black"]
    assert set(rows[0]) == {"hex", "simplified", "detailed", "iscc_extended"}


def test_demo_rejects_bad_hex(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["not-a-color"])
    assert exc.value.code == 1
    assert "Error" in capsys.readouterr().err
