"""用户答案分词测试."""

from fillin_report.data.response_tokenizer import tokenize


def test_tokenize_multiple_responses():
    """测试按分隔符拆分多个答案."""
    assert tokenize("Blue[,]green") == ["Blue", "green"]


def test_tokenize_keeps_empty_entries():
    """测试空答案保留为空字符串."""
    assert tokenize("[,]green[,]") == ["", "green", ""]


def test_tokenize_empty_input():
    """测试空输入."""
    assert tokenize("") == [""]
    assert tokenize(None) == [""]


def test_tokenize_without_separator():
    """测试没有分隔符时返回单个答案."""
    assert tokenize("Blue, green") == ["Blue, green"]


def test_tokenize_separator_is_literal():
    """测试分隔符按字面匹配而非正则."""
    assert tokenize("a,b[,]c") == ["a,b", "c"]
    assert tokenize("a|b", separator="|") == ["a", "b"]
