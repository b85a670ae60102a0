import sys

from ladder.perf import main


def test_perf(capsys, monkeypatch):
    monkeypatch.setattr(
        sys,
        "argv",
        ["perf", "--dictionary", "testdata/ladder-words-4.txt", "--random_seed", "1", "50"],
    )
    main()
    out = capsys.readouterr().out
    assert "Loaded 9 words" in out
    assert "9 edges" in out
    assert "num_unreachable=" in out
    assert "searches/sec" in out
