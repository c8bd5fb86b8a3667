"""描述占位符填充器."""

from typing import Optional, Sequence

from loguru import logger

from fillin_report.data.models import MissingReplacementError
from fillin_report.data.placeholder_detector import PlaceholderDetector, UnderlinePlaceholderDetector


class PlaceholderFiller:
    """按出现顺序依次替换描述中的占位符."""

    def __init__(self, detector: Optional[PlaceholderDetector] = None):
        """初始化占位符填充器.

        Args:
            detector: 占位符检测器，默认使用下划线占位符检测器
        """
        self.detector = detector or UnderlinePlaceholderDetector()

    def substitute(self, template: str, replacements: Sequence[str]) -> str:
        """用替换内容依次填充描述中的占位符.

        每次替换后，扫描位置移到刚插入内容的末尾，因此插入内容中的下划线
        不会被再次当作占位符。多余的替换内容会被忽略。

        Args:
            template: 含占位符的描述
            replacements: 按占位符顺序排列的替换内容

        Returns:
            填充后的描述

        Raises:
            MissingReplacementError: 占位符数量多于替换内容
        """
        replaced = template
        index = 0
        marker = self.detector.find(replaced, 0)

        while marker is not None:
            if index >= len(replacements):
                logger.error(f"第{index + 1}个占位符没有对应的替换内容（共{len(replacements)}个）")
                raise MissingReplacementError(
                    f"占位符数量多于替换内容: 缺少第{index + 1}个替换内容"
                )

            replacement = replacements[index]
            replaced = replaced[:marker.start] + replacement + replaced[marker.end:]

            # 从插入内容之后继续查找
            marker = self.detector.find(replaced, marker.start + len(replacement))
            index += 1

        if index < len(replacements):
            logger.debug(f"忽略多余的替换内容 {len(replacements) - index} 个")
        return replaced


def substitute(template: str, replacements: Sequence[str]) -> str:
    """使用默认占位符填充描述."""
    return PlaceholderFiller().substitute(template, replacements)
