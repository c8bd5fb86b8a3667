"""填空题报告服务."""

from typing import Any, Mapping, Optional, Sequence, Union

from loguru import logger

from fillin_report.config.settings import ReportConfig, settings
from fillin_report.data.answer_matcher import AnswerMatcher
from fillin_report.data.blank_alignment import BlankAlignment
from fillin_report.data.interaction_options import parse_options
from fillin_report.data.models import RenderedReport
from fillin_report.data.placeholder_detector import UnderlinePlaceholderDetector
from fillin_report.data.placeholder_filler import PlaceholderFiller
from fillin_report.data.report_generator import ReportGenerator
from fillin_report.data.response_tokenizer import tokenize
from fillin_report.service.score_renderer import ScoreSettings, render_score_block

ScoreInput = Union[ScoreSettings, Mapping[str, Any], None]


class FillInProcessor:
    """填空题报告处理器.

    把用户答案逐个填回描述的占位符中，并标注正确与否以及未填写的备选答案。
    """

    def __init__(self, config: Optional[ReportConfig] = None) -> None:
        """初始化填空题报告处理器.

        Args:
            config: 报告配置，默认使用全局配置
        """
        self.config = config or settings.report
        self.detector = UnderlinePlaceholderDetector(self.config.placeholder)
        self.filler = PlaceholderFiller(self.detector)
        self.matcher = AnswerMatcher(self.config.crp_report_separator)
        self.report_generator = ReportGenerator(self.config)

    def align(
        self,
        description: str,
        alternatives: Sequence[Sequence[str]],
        responses: Sequence[str],
    ) -> BlankAlignment:
        """按占位符顺序对齐备选答案和用户答案."""
        return BlankAlignment.align(
            self.detector.count(description),
            alternatives,
            responses,
            strict=self.config.strict_alignment,
        )

    def build_report_output(
        self, description: str, alignment: BlankAlignment, case_sensitive: bool
    ) -> str:
        """生成填充后的描述.

        Args:
            description: 含占位符的描述
            alignment: 已对齐的填空序列
            case_sensitive: 是否区分大小写

        Returns:
            填充后的描述HTML
        """
        replacements = alignment.replacements(
            lambda blank: self.matcher.render_blank(blank, case_sensitive)
        )
        return self.filler.substitute(description, replacements)

    def render(
        self,
        description: str,
        crp: Union[str, Sequence[str], None],
        response: Optional[str],
        extras: Any,
        score_settings: ScoreInput = None,
    ) -> RenderedReport:
        """生成报告.

        Args:
            description: 含占位符的描述
            crp: 正确答案模式，元数据缺少备选答案时使用
            response: 序列化的用户答案
            extras: 报告元数据
            score_settings: 分数设置

        Returns:
            渲染后的报告
        """
        options = parse_options(extras, crp)
        responses = tokenize(response, self.config.responses_separator)
        logger.debug(
            f"开始生成填空报告: {len(options.alternatives)} 组备选答案, "
            f"{len(responses)} 个用户答案, 区分大小写={options.case_sensitive}"
        )

        description = description or ""
        alignment = self.align(description, options.alternatives, responses)
        body = self.build_report_output(description, alignment, options.case_sensitive)
        report = self.report_generator.generate_report(body, render_score_block(score_settings))

        report.blank_count = len(alignment)
        report.correct_count = sum(
            1 for blank in alignment
            if self.matcher.is_response_correct(blank.alternatives, blank.response, options.case_sensitive)
        )
        logger.info(f"填空报告已生成: {report.correct_count}/{report.blank_count} 个填空正确")
        return report

    def generate_html(
        self,
        description: str,
        crp: Union[str, Sequence[str], None],
        response: Optional[str],
        extras: Any,
        score_settings: ScoreInput = None,
    ) -> str:
        """生成报告HTML片段."""
        return self.render(description, crp, response, extras, score_settings).html


def generate_report(
    description: str,
    crp: Union[str, Sequence[str], None],
    response: Optional[str],
    extras: Any,
    score_settings: ScoreInput = None,
) -> str:
    """使用默认配置生成填空题报告HTML片段."""
    return FillInProcessor().generate_html(description, crp, response, extras, score_settings)
