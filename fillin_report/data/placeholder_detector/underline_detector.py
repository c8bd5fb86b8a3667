"""下划线占位符检测器."""

import re
from typing import Optional

from fillin_report.config.settings import settings
from fillin_report.data.placeholder_detector.base_detector import PlaceholderDetector
from fillin_report.data.placeholder_detector.marker import MarkerInfo


class UnderlinePlaceholderDetector(PlaceholderDetector):
    """固定长度下划线占位符检测器.

    只识别恰好等于占位符长度的下划线串：九个或十一个下划线都不算占位符。
    """

    def __init__(self, placeholder: Optional[str] = None):
        """初始化下划线占位符检测器.

        Args:
            placeholder: 占位符字面量，默认取配置中的10个下划线
        """
        self.placeholder = placeholder or settings.report.placeholder
        char = re.escape(self.placeholder[0])
        # 前后都不能紧挨同一字符，保证是完整的一段
        self.pattern = re.compile(rf"(?<!{char}){re.escape(self.placeholder)}(?!{char})")

    def find(self, text: str, start: int = 0) -> Optional[MarkerInfo]:
        match = self.pattern.search(text, start)
        if match is None:
            return None
        return MarkerInfo(text=match.group(0), start=match.start(), end=match.end())

    def count(self, text: str) -> int:
        """统计文本中的占位符数量."""
        return len(self.detect(text))
