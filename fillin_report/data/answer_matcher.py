"""答案匹配器."""

from typing import List, Optional, Sequence

from loguru import logger

from fillin_report.config.settings import settings
from fillin_report.data.models import Blank, MatchResult

USER_RESPONSE_CLASS = "h5p-fill-in-user-response"
USER_RESPONSE_CORRECT_CLASS = "h5p-fill-in-user-response-correct"
USER_RESPONSE_WRONG_CLASS = "h5p-fill-in-user-response-wrong"
CORRECT_RESPONSES_PATTERN_CLASS = "h5p-fill-in-correct-responses-pattern"


class AnswerMatcher:
    """答案匹配器.

    判断用户答案是否命中备选答案，并生成用户未填写的备选答案列表。
    不区分大小写时，比较双方都先转为小写；展示时保留备选答案的原始大小写。
    注意：答案与备选答案均不做 HTML 转义。
    """

    def __init__(self, separator: Optional[str] = None):
        """初始化答案匹配器.

        Args:
            separator: 备选答案之间的分隔符，默认取配置中的 `` / ``
        """
        self.separator = separator if separator is not None else settings.report.crp_report_separator

    @staticmethod
    def _fold(value: str, case_sensitive: bool) -> str:
        return value if case_sensitive else value.lower()

    def is_response_correct(
        self, alternatives: Sequence[str], response: str, case_sensitive: bool
    ) -> bool:
        """判断用户答案是否正确.

        Args:
            alternatives: 备选答案
            response: 用户答案
            case_sensitive: 是否区分大小写

        Returns:
            用户答案与任一备选答案相同则为True
        """
        user_response = self._fold(response, case_sensitive)
        matching_pattern = {self._fold(value, case_sensitive) for value in alternatives}
        return user_response in matching_pattern

    def missed_alternatives(
        self, alternatives: Sequence[str], response: str, case_sensitive: bool
    ) -> List[str]:
        """返回用户未填写的备选答案（保持原顺序和原大小写）."""
        comparison_response = self._fold(response, case_sensitive)
        # 跳过用户已经填写的答案
        return [
            value for value in alternatives
            if self._fold(value, case_sensitive) != comparison_response
        ]

    def match(
        self, alternatives: Sequence[str], response: str, case_sensitive: bool
    ) -> MatchResult:
        """匹配单个填空.

        Args:
            alternatives: 备选答案
            response: 用户答案
            case_sensitive: 是否区分大小写

        Returns:
            匹配结果
        """
        return MatchResult(
            correct=self.is_response_correct(alternatives, response, case_sensitive),
            missed_alternatives=self.separator.join(
                self.missed_alternatives(alternatives, response, case_sensitive)
            ),
        )

    def render(self, response: str, result: MatchResult) -> str:
        """把匹配结果渲染为填空替换内容.

        备选答案为空时不输出外层 span。
        """
        response_class = USER_RESPONSE_CORRECT_CLASS if result.correct else USER_RESPONSE_WRONG_CLASS
        user_response = f'<span class="{USER_RESPONSE_CLASS} {response_class}">{response}</span>'

        correct_responses_pattern = ""
        if result.missed_alternatives:
            correct_responses_pattern = (
                f'<span class="{CORRECT_RESPONSES_PATTERN_CLASS}">'
                f"{result.missed_alternatives}"
                "</span>"
            )
        return user_response + correct_responses_pattern

    def render_blank(self, blank: Blank, case_sensitive: bool) -> str:
        """匹配并渲染单个填空."""
        result = self.match(blank.alternatives, blank.response, case_sensitive)
        logger.debug(
            f"填空{blank.index + 1}: 答案='{blank.response}', "
            f"{'正确' if result.correct else '错误'}, 未填写备选='{result.missed_alternatives}'"
        )
        return self.render(blank.response, result)


def match(alternatives: Sequence[str], response: str, case_sensitive: bool) -> MatchResult:
    """使用默认配置匹配单个填空."""
    return AnswerMatcher().match(alternatives, response, case_sensitive)
