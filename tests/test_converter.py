"""Tests for the Normalizer/Converter."""

import pytest

from steam_appinfo.converter import convert, convert_dump, dumps, parse, rewrite
from steam_appinfo.errors import ConversionFailed, MalformedInput
from steam_appinfo.node import Entry, Leaf, Object


# ---------------------------------------------------------------------------
# rewrite
# ---------------------------------------------------------------------------

def test_rewrite_scalar_pair():
    assert rewrite('{"a""b"}') == '{"a":"b"}'

def test_rewrite_scalar_pair_with_tabs():
    assert rewrite('{\n\t"a"\t\t"b"\n}') == '{"a":"b"}'

def test_rewrite_nested_object():
    assert rewrite('{\n"a"\n{\n"b""c"\n}\n}') == '{"a":{"b":"c"}}'

def test_rewrite_members_on_consecutive_lines():
    assert rewrite('{"a""1"\n"b""2"}') == '{"a":"1","b":"2"}'

def test_rewrite_member_after_nested_object():
    assert rewrite('{"a"\n{\n}\n"b""2"}') == '{"a":{},"b":"2"}'

def test_rewrite_keeps_existing_separators():
    text = '{"a":"b","c":{"d":"e"}}'
    assert rewrite(text) == text

def test_rewrite_passes_unknown_text_through():
    assert rewrite("{abc}") == "{abc}"

def test_rewrite_drops_tabs_and_newlines_in_strings():
    assert rewrite('{"a""x\ty\nz"}') == '{"a":"xyz"}'

def test_rewrite_doubles_stray_backslash():
    assert rewrite('{"exe""bin\\win64\\game.exe"}') == '{"exe":"bin\\\\win64\\\\game.exe"}'

def test_rewrite_keeps_json_escapes():
    assert rewrite('{"a""q\\"x\\\\y\\u00e9"}') == '{"a":"q\\"x\\\\y\\u00e9"}'

def test_rewrite_escaped_backslash_at_end():
    assert rewrite('{"a""x\\\\"}') == '{"a":"x\\\\"}'


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------

def test_convert_empty_object():
    node = convert("{}")
    assert isinstance(node, Object)
    assert len(node) == 0

def test_convert_scalar_and_nested():
    node = convert('{"a""1"\n"b"\n{\n"c""2"\n}\n}')
    assert node == Object([
        Entry("a", Leaf("1")),
        Entry("b", Object([Entry("c", Leaf("2"))])),
    ])

def test_convert_preserves_key_order():
    node = convert('{\n"k3""x"\n"k1""y"\n"k2""z"\n}')
    assert node.keys() == ["k3", "k1", "k2"]

def test_convert_deep_nesting():
    node = convert('{"a"{"b"{"c"{"d""e"}}}}')
    assert node["a"]["b"]["c"]["d"] == Leaf("e")

def test_convert_escaped_quote():
    node = convert('{"a""say \\"hi\\""}')
    assert node["a"] == Leaf('say "hi"')

def test_convert_stray_backslash_is_literal():
    node = convert('{"exe""bin\\win64\\game.exe"}')
    assert node["exe"] == Leaf("bin\\win64\\game.exe")

def test_convert_decodes_json_escapes():
    """Escaped sequences are data; only raw tabs and newlines are layout."""
    node = convert('{"exe""bin\\tools\\run.exe"}')
    assert node["exe"] == Leaf("bin\tools\run.exe")

def test_convert_raw_tab_is_layout_escaped_tab_is_data():
    node = convert('{"a""x\ty"\n"b""x\\ty"}')
    assert node["a"] == Leaf("xy")
    assert node["b"] == Leaf("x\ty")

def test_convert_non_ascii():
    node = convert('{"name""Café ☕"}')
    assert node["name"] == Leaf("Café ☕")

def test_convert_empty_value():
    node = convert('{"a"""}')
    assert node["a"] == Leaf("")


# ---------------------------------------------------------------------------
# convert failures
# ---------------------------------------------------------------------------

def test_convert_unmatched_quote_fails():
    with pytest.raises(ConversionFailed) as info:
        convert('{"a""b"c"}')
    assert info.value.text == '{"a":"b"c"}'

def test_convert_key_without_value_fails():
    with pytest.raises(ConversionFailed):
        convert('{"a""b""c"}')

def test_convert_missing_close_fails():
    with pytest.raises(ConversionFailed):
        convert('{"a"{"b""c"}')

def test_convert_duplicate_key_fails():
    with pytest.raises(ConversionFailed, match="duplicate"):
        convert('{"a""1"\n"a""2"}')

def test_convert_number_value_fails():
    with pytest.raises(ConversionFailed):
        convert('{"a":1}')

def test_convert_array_fails():
    with pytest.raises(ConversionFailed, match="not an object"):
        convert("[]")

def test_convert_top_level_string_fails():
    with pytest.raises(ConversionFailed, match="not an object"):
        convert('"a"')

def test_convert_two_top_level_objects_fails():
    with pytest.raises(ConversionFailed):
        convert('{"a""b"}\n{"c""d"}')

def test_parse_is_strict():
    with pytest.raises(ConversionFailed):
        parse('{"a":"b",}')


# ---------------------------------------------------------------------------
# convert_dump / dumps
# ---------------------------------------------------------------------------

def test_convert_dump_extracts_first():
    node = convert_dump('AppID : 10\n"10"\n{\n\t"a"\t\t"b"\n}\nquit')
    assert node == Object([Entry("a", Leaf("b"))])

def test_convert_dump_without_payload():
    with pytest.raises(MalformedInput):
        convert_dump("Loading Steam API...OK")

def test_dumps_compact():
    node = convert('{"a""1"\n"b"\n{\n"c""2"\n}\n}')
    assert dumps(node) == '{"a":"1","b":{"c":"2"}}'

def test_dumps_indent():
    node = convert('{"a""1"}')
    assert dumps(node, indent=2) == '{\n  "a": "1"\n}'

def test_dumps_keeps_non_ascii():
    assert dumps(convert('{"n""Café"}')) == '{"n":"Café"}'

def test_dumps_empty_object():
    assert dumps(convert("{}")) == "{}"


# ---------------------------------------------------------------------------
# Idempotence of canonicalization
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("payload", [
    "{}",
    '{"a""1"\n"b"\n{\n"c""2"\n}\n}',
    '{"a""say \\"hi\\""}',
    '{"exe""bin\\win64\\game.exe"}',
    '{"a""x\\u0001y"}',
    '{"a""x\\u0008y"}',
    '{"name""Café"\n"tab""a\\tb"}',
])
def test_reconvert_canonical_output(payload):
    node = convert(payload)
    assert convert(dumps(node)) == node
    assert convert(dumps(node, indent=4)) == node
    assert dumps(convert(dumps(node))) == dumps(node)
