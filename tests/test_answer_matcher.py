"""答案匹配器测试."""

import pytest

from fillin_report.data.answer_matcher import AnswerMatcher, match
from fillin_report.data.models import Blank, MatchResult


@pytest.fixture
def matcher():
    """答案匹配器实例."""
    return AnswerMatcher(" / ")


@pytest.mark.parametrize(
    "alternatives, response",
    [
        (["blue"], "blue"),
        (["blue"], "Blue"),
        (["green", "Green"], "GREEN"),
        (["a", "b", "c"], "x"),
        ([], ""),
        (["Straße"], "straße"),
    ],
)
def test_case_sensitive_is_exact_membership(matcher, alternatives, response):
    """测试区分大小写时等价于精确包含判断."""
    assert matcher.match(alternatives, response, True).correct == (response in alternatives)


@pytest.mark.parametrize(
    "alternatives, response",
    [
        (["blue"], "Blue"),
        (["green", "Green"], "GREEN"),
        (["a", "b", "c"], "B"),
        (["a", "b", "c"], "x"),
        ([], ""),
    ],
)
def test_case_insensitive_is_lowered_membership(matcher, alternatives, response):
    """测试不区分大小写时等价于小写后的包含判断."""
    expected = response.lower() in [value.lower() for value in alternatives]
    assert matcher.match(alternatives, response, False).correct == expected


def test_case_insensitive_invariant_under_uniform_case(matcher):
    """测试统一改变大小写不影响不区分大小写的判定."""
    alternatives, response = ["Blue", "navy"], "bLUE"
    original = matcher.match(alternatives, response, False).correct
    upper = matcher.match([v.upper() for v in alternatives], response.upper(), False).correct
    lower = matcher.match([v.lower() for v in alternatives], response.lower(), False).correct
    assert original == upper == lower is True


def test_alternative_order_does_not_affect_correctness(matcher):
    """测试备选答案顺序不影响判定."""
    assert matcher.match(["a", "b"], "b", True).correct
    assert matcher.match(["b", "a"], "b", True).correct


def test_missed_alternatives_excludes_given_answer(matcher):
    """测试未填写备选答案排除用户已填写的值，保持原顺序与原大小写."""
    result = matcher.match(["green", "Green", "lime"], "green", True)
    assert result == MatchResult(correct=True, missed_alternatives="Green / lime")


def test_missed_alternatives_case_insensitive(matcher):
    """测试不区分大小写时同时排除大小写不同的同一答案."""
    result = matcher.match(["green", "Green", "lime"], "GREEN", False)
    assert result.correct is True
    assert result.missed_alternatives == "lime"


def test_missed_alternatives_empty_when_all_suppressed(matcher):
    """测试所有备选答案都被排除时为空字符串."""
    assert matcher.match(["blue"], "Blue", False).missed_alternatives == ""


def test_wrong_answer_lists_all_alternatives(matcher):
    """测试答错时列出全部备选答案."""
    result = matcher.match(["green", "Green"], "", False)
    assert result.correct is False
    assert result.missed_alternatives == "green / Green"


def test_render_omits_empty_pattern_span(matcher):
    """测试没有未填写备选答案时不输出空的span."""
    html = matcher.render("Blue", MatchResult(correct=True, missed_alternatives=""))
    assert html == (
        '<span class="h5p-fill-in-user-response h5p-fill-in-user-response-correct">Blue</span>'
    )
    assert "h5p-fill-in-correct-responses-pattern" not in html


def test_render_wrong_answer_with_pattern(matcher):
    """测试答错时输出错误样式和备选答案."""
    html = matcher.render("Blue", MatchResult(correct=False, missed_alternatives="blue"))
    assert html == (
        '<span class="h5p-fill-in-user-response h5p-fill-in-user-response-wrong">Blue</span>'
        '<span class="h5p-fill-in-correct-responses-pattern">blue</span>'
    )


def test_render_does_not_escape(matcher):
    """测试答案内容不做HTML转义."""
    html = matcher.render("<b>x</b>", MatchResult(correct=False))
    assert "<b>x</b>" in html


def test_render_blank(matcher):
    """测试匹配并渲染单个填空."""
    html = matcher.render_blank(Blank(index=1, alternatives=["green", "Green"], response="green"), True)
    assert "h5p-fill-in-user-response-correct" in html
    assert html.endswith('<span class="h5p-fill-in-correct-responses-pattern">Green</span>')


def test_module_level_match_uses_default_separator():
    """测试模块级 match 使用默认分隔符."""
    assert match(["a", "b", "c"], "x", True).missed_alternatives == "a / b / c"
