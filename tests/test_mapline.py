from tools.symtool.mapline import (
    SymAddr, build_lookup, build_renames, find_address, parse_line,
)


def test_address_then_symbol():
    info = parse_line("80010000 my_symbol_name")
    assert info == SymAddr(
        address=0x80010000,
        address_range=(0, 8),
        symbol="my_symbol_name",
        symbol_range=(9, 23),
    )


def test_symbol_then_address():
    info = parse_line("new_name 80010000")
    assert info.address == 0x80010000
    assert info.address_range == (9, 17)
    assert info.symbol == "new_name"
    assert info.symbol_range == (0, 8)


def test_address_window_bounds():
    assert parse_line("7FFFFFFF tag") is None
    assert parse_line("81800000 tag") is None
    assert parse_line("80000000 tag").address == 0x80000000
    assert parse_line("817FFFFF tag").address == 0x817FFFFF


def test_leftmost_address_in_window_wins():
    info = parse_line("7FFFFFFF 90000000 80001234 80005678 sym")
    assert info.address == 0x80001234
    assert info.address_range == (18, 26)
    assert info.symbol == "sym"


def test_overlapping_windows():
    assert find_address("F80010000") == (0x80010000, 1)
    # the leading letter makes the whole run look like an identifier
    assert parse_line("F80010000 x").symbol == "F80010000"


def test_lowercase_hex():
    assert parse_line("8001abcd func").address == 0x8001ABCD


def test_short_hex_runs_are_not_addresses():
    assert parse_line("8001000 sym") is None
    assert parse_line("") is None


def test_no_symbol_on_line():
    assert parse_line("80010000 1234") is None
    assert parse_line("80010000") is None


def test_hex_tokens_skipped_before_symbol():
    assert parse_line("80010000 12 abc").symbol == "abc"
    assert parse_line("80010000 3deadbeef foo").symbol == "foo"
    # a run starting with a letter is an identifier, even if it is hex
    assert parse_line("80010000 deadbeef_fn").symbol == "deadbeef_fn"


def test_symbol_ends_at_punctuation():
    info = parse_line("\t80123456\tfoo_bar:\t0x20")
    assert info.symbol == "foo_bar"
    assert info.symbol_range == (10, 17)


def test_hex_prefix_is_read_as_symbol():
    info = parse_line("0x80010000 foo")
    assert info.address == 0x80010000
    assert info.address_range == (2, 10)
    assert info.symbol == "x80010000"
    assert info.symbol_range == (1, 10)


def test_str():
    assert str(parse_line("8001abcd func")) == "func 8001ABCD"


def test_build_lookup_last_symbol_wins():
    lookup = build_lookup([
        "80010000 alpha",
        "no address here",
        "80010010 beta",
        "80010020 alpha",
    ])
    assert lookup == {"alpha": 0x80010020, "beta": 0x80010010}


def test_build_renames_last_address_wins():
    renames = build_renames([
        "first 80010000",
        "garbage",
        "second 80010000",
        "third 80010004",
    ])
    assert renames == {0x80010000: "second", 0x80010004: "third"}
