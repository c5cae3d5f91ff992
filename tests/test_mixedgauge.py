import pytest

from tuidialog.mixedgauge import MixedGauge, percent_cells, status_string


@pytest.mark.parametrize(
    "code, expected",
    [("0", "Succeeded"), ("1", "Failed"), ("7", "In Progress"), ("8", ""), ("9", "N/A")],
)
def test_status_digits(code, expected):
    assert status_string(code) == expected


def test_status_percent_form():
    assert status_string("-50") == " 50%"
    assert status_string("-100") == "100%"


def test_status_text_and_blank():
    assert status_string("custom") == "custom"
    assert status_string("  spaced") is None


def test_percent_cells_bounds():
    assert percent_cells("  0%", 13) == 0
    assert percent_cells("100%", 13) == 13
    assert percent_cells("junk", 13) == 0


def test_percent_cells_monotonic():
    values = [percent_cells(f"{p:>3}%", 13) for p in range(0, 101, 10)]
    assert values == sorted(values)


def test_min_width_grows_with_name():
    short = MixedGauge("t", "", [("ab", "0")])
    long = MixedGauge("t", "", [("abcdef", "0")])
    assert long.min_width - short.min_width == 4


def test_prompt_adds_height():
    plain = MixedGauge("t", "", [("a", "0"), ("b", "1")])
    prompted = MixedGauge("t", "  hello  ", [("a", "0"), ("b", "1")])
    assert prompted.min_height == plain.min_height + 2
    assert prompted.prompt == "hello"


def test_status_lines_skip_blank():
    gauge = MixedGauge("t", "", [("a", "0"), ("b", "8"), ("c", " x")])
    lines = gauge.status_lines(40)
    assert [line.name for line in lines] == ["a"]


def test_status_lines_respect_height():
    gauge = MixedGauge("t", "", [("a", "0"), ("b", "1"), ("c", "2")])
    assert len(gauge.status_lines(40)) == 3
    gauge.height = 4
    assert [line.name for line in gauge.status_lines(40)] == ["a"]


def test_status_line_layout():
    width = 40
    gauge = MixedGauge("t", "", [("disk", "0"), ("net", "-40")])
    first, second = gauge.status_lines(width)
    assert len(first.text) == width
    assert first.text.index("[") < first.text.index("Succeeded")
    assert first.text[width - 3] == "]"
    assert "disk" in first.text
    assert first.filled is None
    assert second.filled == percent_cells(" 40%", gauge.len_text - 2)
    assert second.row == first.row + 1