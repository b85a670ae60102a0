import click

from ladder.printer import format_path, format_word


def green(s: str):
    return click.style(s, fg="green")


def test_format_word():
    assert format_word("card", "ward") == "c" + green("a") + green("r") + green("d")
    assert format_word("cold", "warm") == "cold"
    assert format_word("card", "ward", color=False) == "card"


def test_format_path():
    path = ["cold", "cord", "card", "ward", "warm"]
    assert format_path(path, "warm", color=False) == "cold -> cord -> card -> ward -> warm"
    assert format_path(path, "warm", color=False, sep=" ") == "cold cord card ward warm"
    assert format_path(["cold", "cord"], "cord") == (
        green("c") + green("o") + "l" + green("d") + " -> " + "".join(map(green, "cord"))
    )


def test_format_path_stops_at_stop():
    path = ["cold", "cord", "card"]
    assert format_path(path, "cord", color=False) == "cold -> cord"
    assert format_path(["cold"], "cold", color=False) == "cold"
    assert format_path([], "cold") == ""
