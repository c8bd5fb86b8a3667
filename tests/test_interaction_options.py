"""交互选项解析测试."""

from types import SimpleNamespace

import pytest

from fillin_report.data.interaction_options import (
    alternatives_from_patterns,
    case_sensitivity_from_patterns,
    parse_options,
)

ALTERNATIVES_KEY = "https://h5p.org/x-api/alternatives"
CASE_KEY = "https://h5p.org/x-api/case-sensitivity"


def test_parse_options_from_dict():
    """测试从字典元数据解析."""
    extras = {"extensions": {ALTERNATIVES_KEY: [["blue"], ["green", "Green"]], CASE_KEY: {"caseSensitive": True}}}
    options = parse_options(extras)
    assert options.alternatives == [["blue"], ["green", "Green"]]
    assert options.case_sensitive is True


def test_parse_options_from_object():
    """测试从属性对象元数据解析."""
    extras = SimpleNamespace(extensions={ALTERNATIVES_KEY: [["x"]], CASE_KEY: {"caseSensitive": False}})
    options = parse_options(extras)
    assert options.alternatives == [["x"]]
    assert options.case_sensitive is False


def test_parse_options_defaults():
    """测试元数据缺失时使用默认值."""
    options = parse_options(None)
    assert options.alternatives == []
    assert options.case_sensitive is False

    options = parse_options({"extensions": {ALTERNATIVES_KEY: [["x"]]}})
    assert options.case_sensitive is False


def test_parse_options_accepts_bare_bool():
    """测试大小写敏感直接为布尔值."""
    options = parse_options({"extensions": {CASE_KEY: True}})
    assert options.case_sensitive is True


def test_parse_options_invalid_alternatives():
    """测试备选答案格式不正确时报错."""
    with pytest.raises(ValueError):
        parse_options({"extensions": {ALTERNATIVES_KEY: "blue"}})


def test_alternatives_from_patterns():
    """测试从正确答案模式推导备选答案."""
    crp = ["{case_sensitive=false}blue[,]green", "blue[,]Green"]
    assert alternatives_from_patterns(crp) == [["blue"], ["green", "Green"]]
    assert alternatives_from_patterns("a[,]b") == [["a"], ["b"]]
    assert alternatives_from_patterns(None) == []


def test_parse_options_falls_back_to_patterns():
    """测试元数据缺少备选答案时使用正确答案模式."""
    options = parse_options({"extensions": {}}, ["blue[,]green"])
    assert options.alternatives == [["blue"], ["green"]]


def test_parse_options_prefers_extension_over_patterns():
    """测试元数据中的备选答案优先."""
    options = parse_options({"extensions": {ALTERNATIVES_KEY: [["sky"]]}}, ["blue"])
    assert options.alternatives == [["sky"]]


@pytest.mark.parametrize("flag, expected", [("false", False), ("0", False), ("no", False), ("true", True), (1, True)])
def test_parse_options_converts_flag_values(flag, expected):
    """测试大小写敏感的字符串和数字取值按布尔含义转换."""
    options = parse_options({"extensions": {CASE_KEY: {"caseSensitive": flag}}})
    assert options.case_sensitive is expected


def test_parse_options_invalid_flag():
    """测试无法识别的大小写敏感取值报错."""
    with pytest.raises(ValueError):
        parse_options({"extensions": {CASE_KEY: {"caseSensitive": "maybe"}}})


def test_case_sensitivity_from_patterns():
    """测试读取正确答案模式中的大小写修饰."""
    assert case_sensitivity_from_patterns(["{case_sensitive=true}blue"]) == "true"
    assert case_sensitivity_from_patterns(["blue", "{order_matters=false}{case_sensitive=false}Blue"]) == "false"
    assert case_sensitivity_from_patterns(["blue{case_sensitive=true}"]) is None
    assert case_sensitivity_from_patterns(None) is None


def test_parse_options_uses_pattern_modifier_when_extension_missing():
    """测试元数据未指定大小写敏感时使用正确答案模式中的声明."""
    options = parse_options({"extensions": {}}, ["{case_sensitive=true}blue[,]green"])
    assert options.case_sensitive is True
    assert options.alternatives == [["blue"], ["green"]]


def test_parse_options_extension_overrides_pattern_modifier():
    """测试元数据中的大小写敏感优先于模式修饰."""
    extras = {"extensions": {CASE_KEY: {"caseSensitive": False}}}
    options = parse_options(extras, ["{case_sensitive=true}blue"])
    assert options.case_sensitive is False
