"""报告生成器."""

from typing import Optional

from fillin_report.config.settings import ReportConfig, settings
from fillin_report.data.answer_matcher import (
    CORRECT_RESPONSES_PATTERN_CLASS,
    USER_RESPONSE_CORRECT_CLASS,
    USER_RESPONSE_WRONG_CLASS,
)
from fillin_report.data.models import RenderedReport


class ReportGenerator:
    """报告生成器.

    负责报告外壳：容器、分数头部和图例，不含任何判定逻辑。
    """

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or settings.report

    def generate_header(self, score_html: str) -> str:
        return f"<div class='h5p-fill-in-header'>{score_html}</div>"

    def generate_footer(self) -> str:
        """生成图例."""
        return (
            '<div class="h5p-fill-in-footer">'
            f'<span class="{CORRECT_RESPONSES_PATTERN_CLASS}">{self.config.legend_correct_pattern}</span>'
            f'<span class="{USER_RESPONSE_CORRECT_CLASS}">{self.config.legend_user_correct}</span>'
            f'<span class="{USER_RESPONSE_WRONG_CLASS}">{self.config.legend_user_wrong}</span>'
            '</div>'
        )

    def generate_report(self, body: str, score_html: str = "") -> RenderedReport:
        """组装完整报告.

        Args:
            body: 填充后的描述
            score_html: 分数区域HTML

        Returns:
            渲染后的报告，样式表路径放在 stylesheets 中交给宿主注册
        """
        container = (
            '<div class="h5p-reporting-container h5p-fill-in-container">'
            + self.generate_header(score_html)
            + body
            + '</div>'
        )
        stylesheets = [self.config.stylesheet] if self.config.stylesheet else []
        return RenderedReport(html=container + self.generate_footer(), stylesheets=stylesheets)

    @staticmethod
    def generate_page(report: RenderedReport, title: str = "Fill in report") -> str:
        """把报告片段包装成独立的HTML页面（命令行输出使用）."""
        links = "".join(
            f'<link rel="stylesheet" href="{href}">' for href in report.stylesheets
        )
        return (
            "<!DOCTYPE html>\n"
            "<html>\n<head>\n<meta charset=\"utf-8\">\n"
            f"<title>{title}</title>\n{links}\n"
            "</head>\n<body>\n"
            f"{report.html}\n"
            "</body>\n</html>\n"
        )
