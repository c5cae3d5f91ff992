import pytest

from tuidialog.rc import (
    ColorAttr,
    RcError,
    RcSettings,
    create_rc,
    find_rc_file,
    from_boolean,
    from_color_name,
    load_rc,
    parse_attribute,
    parse_line,
    parse_rc,
    to_color_name,
)


def _attrs(entry):
    return (entry.fg, entry.bg, entry.hilite, entry.ul, entry.rv)


def test_from_boolean():
    assert from_boolean("on") is True
    assert from_boolean("OFF") is False
    assert from_boolean("maybe") is None
    assert from_boolean("") is None


def test_from_color_name_values():
    assert from_color_name("red") == 1
    assert from_color_name("BLUE") == 4
    assert from_color_name("DEFAULT") == -1
    assert from_color_name("purple") is None


@pytest.mark.parametrize("name", ["BLACK", "RED", "GREEN", "YELLOW", "BLUE",
                                  "MAGENTA", "CYAN", "WHITE", "DEFAULT"])
def test_color_name_round_trip(name):
    assert to_color_name(from_color_name(name.lower())) == name


def test_to_color_name_unknown():
    assert to_color_name(99) == "?"


def test_parse_line_equals():
    assert parse_line("aspect = 12") == ("aspect", "12")
    assert parse_line("name=value  ") == ("name", "value")
    assert parse_line("\tkey =\t\"a b\"") == ("key", '"a b"')


@pytest.mark.parametrize("line", ["", "   ", "# comment", "   # indented"])
def test_parse_line_empty(line):
    assert parse_line(line) is None


@pytest.mark.parametrize("line", ["=x", "novalue", "x =", "a b = c", "x =   "])
def test_parse_line_errors(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_parse_attribute_triple():
    attr = parse_attribute("(RED,BLUE,ON)")
    assert _attrs(attr) == (1, 4, True, False, False)


def test_parse_attribute_five_tokens_with_blanks():
    attr = parse_attribute("( white , black , off , on , on )")
    assert _attrs(attr) == (7, 0, False, True, True)


@pytest.mark.parametrize(
    "text",
    ["(RED,BLUE)", "(RED,BLUE,ON,ON,ON,ON)", "(PINK,BLUE,ON)",
     "(RED,BLUE,ON,MAYBE)", "()", "RED,BLUE,ON"],
)
def test_parse_attribute_invalid(text):
    with pytest.raises(ValueError):
        parse_attribute(text, [])


def test_parse_attribute_by_table_name():
    table = [ColorAttr("screen_color", 6, 4, True)]
    attr = parse_attribute("SCREEN_COLOR", table)
    assert _attrs(attr) == (6, 4, True, False, False)
    attr.fg = 0
    assert table[0].fg == 6


def test_parse_rc_sets_variables():
    lines = [
        "# comment\n",
        "aspect = 12\n",
        'separate_widget = "--"\n',
        "TAB_LEN = 4\n",
        "visit_items = on\n",
        "use_colors = OFF\n",
        "\n",
    ]
    settings = parse_rc(lines, "test.rc", RcSettings())
    assert settings.aspect_ratio == 12
    assert settings.separate_str == "--"
    assert settings.tab_len == 4
    assert settings.visit_items is True
    assert settings.use_colors is False


def test_parse_rc_integer_like_atoi():
    settings = parse_rc(["aspect = 7abc\n", "tab_len = x\n"], "t", RcSettings())
    assert settings.aspect_ratio == 7
    assert settings.tab_len == 0


def test_parse_rc_bindkey_stored():
    settings = parse_rc(["  bindkey menubox TAB ITEM_NEXT\n"], "t", RcSettings())
    assert settings.bindkeys == ["menubox TAB ITEM_NEXT"]


def test_parse_rc_updates_color_table():
    table = [ColorAttr("screen_color", 6, 4, True), ColorAttr("title_color", 3, 7, True)]
    parse_rc(["screen_color = (GREEN,BLACK,OFF,ON)\n", "title_color = screen_color\n"],
             "t", RcSettings(), table)
    assert _attrs(table[0]) == (2, 0, False, True, False)
    assert _attrs(table[1]) == _attrs(table[0])


@pytest.mark.parametrize(
    "bad, message",
    [
        ("bogus = 1\n", "unknown variable"),
        ("separate_widget = --\n", "expected string value"),
        ("visit_items = yes\n", "expected boolean value"),
        ("screen_color = (RED)\n", "expected attribute value"),
        ("= 3\n", "syntax error"),
        ("x" * 3000 + "\n", "line too long"),
    ],
)
def test_parse_rc_errors(bad, message):
    table = [ColorAttr("screen_color", 6, 4, True)]
    settings = RcSettings()
    with pytest.raises(RcError) as info:
        parse_rc(["aspect = 5\n", bad], "my.rc", settings, table)
    assert info.value.line_no == 2
    assert info.value.message == message
    assert str(info.value) == f"my.rc:2: {message}"
    assert settings.aspect_ratio == 5


def test_create_rc_round_trip(tmp_path):
    settings = RcSettings(aspect_ratio=12, separate_str="--", tab_len=4,
                          visit_items=True, use_shadow=False,
                          bindkeys=["menubox TAB ITEM_NEXT"])
    table = [
        ColorAttr("screen_color", 6, 4, True, comment="Screen color"),
        ColorAttr("shadow_color", 6, 4, True, comment="Shadow color"),
        ColorAttr("title_color", 3, 7, False, ul=True, comment="Title color"),
        ColorAttr("border_color", 7, 0, True, rv=True, comment="Border color"),
    ]
    path = tmp_path / "out.rc"
    create_rc(path, settings, table)
    text = path.read_text()
    assert "shadow_color = screen_color\n" in text
    assert 'separate_widget = "--"\n' in text

    fresh = [ColorAttr(entry.name) for entry in table]
    with open(path) as handle:
        restored = parse_rc(handle, str(path), RcSettings(), fresh)
    assert restored == settings
    assert [_attrs(e) for e in fresh] == [_attrs(e) for e in table]


def test_find_rc_file_from_variable(tmp_path):
    rc = tmp_path / "custom.rc"
    rc.write_text("aspect = 3\n")
    assert find_rc_file({"DIALOGRC": str(rc), "HOME": str(tmp_path)}) == str(rc)


def test_find_rc_file_from_home(tmp_path):
    rc = tmp_path / ".dialogrc"
    rc.write_text("aspect = 3\n")
    env = {"DIALOGRC": str(tmp_path / "missing"), "HOME": str(tmp_path)}
    assert find_rc_file(env) == str(tmp_path) + "/.dialogrc"
    assert find_rc_file({"HOME": str(tmp_path) + "/"}) == str(tmp_path) + "/.dialogrc"


def test_load_rc_applies_file(tmp_path):
    rc = tmp_path / "custom.rc"
    rc.write_text("aspect = 3\nuse_scrollbar = ON\n")
    settings = RcSettings()
    assert load_rc(settings, [], {"DIALOGRC": str(rc)}) == str(rc)
    assert settings.aspect_ratio == 3
    assert settings.use_scrollbar is True