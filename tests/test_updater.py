import pytest

from tools.symtool.edits import TextEdit, apply_edits
from tools.symtool.updater import lines_from_end, plan_renames, update_map_text


def test_rename_single_line():
    text, replaced = update_map_text("80010000 old_name\n",
                                     {0x80010000: "new_name"})
    assert text == "80010000 new_name\n"
    assert replaced == [("old_name", "new_name")]


def test_empty_rename_table():
    text = "80010000 old_name\n"
    assert update_map_text(text, {}) == (text, [])


def test_rename_to_same_name_is_reported():
    text = "80010000 old_name\n"
    assert update_map_text(text, {0x80010000: "old_name"}) == (
        text, [("old_name", "old_name")])


def test_renames_change_length_and_run_end_to_start():
    text = "80000010 a\nheader line\n80000020 bb\n80000030 ccc"
    new_text, replaced = update_map_text(text, {
        0x80000010: "alpha_long",
        0x80000030: "c",
    })
    assert new_text == "80000010 alpha_long\nheader line\n80000020 bb\n80000030 c"
    assert replaced == [("ccc", "c"), ("a", "alpha_long")]


def test_unmatched_lines_untouched():
    text = "Memory map\n  80010000  keep_me\n  80010004  rename_me  (size 4)\n"
    new_text, replaced = update_map_text(text, {0x80010004: "renamed"})
    assert new_text == "Memory map\n  80010000  keep_me\n  80010004  renamed  (size 4)\n"
    assert replaced == [("rename_me", "renamed")]


def test_crlf_line_endings_preserved():
    text = "80010000 old\r\n80010004 other\r\n"
    new_text, _ = update_map_text(text, {0x80010000: "renamed"})
    assert new_text == "80010000 renamed\r\n80010004 other\r\n"


def test_symbol_before_address():
    text = "old_fn = 0x80010000;\n"
    new_text, replaced = update_map_text(text, {0x80010000: "new_fn"})
    assert new_text == "new_fn = 0x80010000;\n"
    assert replaced == [("old_fn", "new_fn")]


def test_lines_from_end():
    assert list(lines_from_end("a\nbc\n")) == [(5, ""), (2, "bc"), (0, "a")]
    assert list(lines_from_end("")) == [(0, "")]


def test_plan_renames_offsets():
    edits, _ = plan_renames("x\n80010000 sym\n", {0x80010000: "other"})
    assert edits == [TextEdit(11, 14, "other")]


def test_apply_edits_any_order():
    edits = [TextEdit(0, 5, "HELLO"), TextEdit(6, 11, "there")]
    assert apply_edits("hello world", edits) == "HELLO there"
    assert apply_edits("hello world", edits[::-1]) == "HELLO there"


def test_apply_edits_insert_and_adjacent():
    assert apply_edits("hello world", [TextEdit(5, 5, ",")]) == "hello, world"
    edits = [TextEdit(0, 2, "A"), TextEdit(2, 4, "B")]
    assert apply_edits("abcd", edits) == "AB"


def test_apply_edits_no_edits():
    assert apply_edits("unchanged", []) == "unchanged"


def test_apply_edits_overlap_rejected():
    with pytest.raises(ValueError):
        apply_edits("hello world", [TextEdit(0, 5, "x"), TextEdit(3, 7, "y")])


def test_apply_edits_out_of_range_rejected():
    with pytest.raises(ValueError):
        apply_edits("abc", [TextEdit(2, 9, "x")])
