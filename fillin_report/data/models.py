"""数据模型定义."""

from dataclasses import dataclass, field
from typing import List, Optional


class MissingReplacementError(IndexError):
    """填空标记数量多于可用替换内容时抛出."""


class Blank:
    """单个填空信息类."""

    def __init__(self, index: int, alternatives: List[str], response: str = "") -> None:
        """初始化填空信息.

        Args:
            index: 填空在描述中的序号（从0开始）
            alternatives: 该填空可接受的备选答案
            response: 用户填写的答案
        """
        self.index = index
        self.alternatives = list(alternatives)
        self.response = response

    def __repr__(self) -> str:
        return (
            f"Blank(index={self.index}, "
            f"alternatives={self.alternatives!r}, "
            f"response='{self.response}')"
        )


@dataclass
class MatchResult:
    """单个填空的判定结果."""

    correct: bool
    missed_alternatives: str = ""


@dataclass
class RenderedReport:
    """渲染完成的报告.

    stylesheets 由宿主负责注册，渲染过程本身不产生副作用。
    """

    html: str
    stylesheets: List[str] = field(default_factory=list)
    blank_count: int = 0
    correct_count: int = 0

    @property
    def stylesheet(self) -> Optional[str]:
        return self.stylesheets[0] if self.stylesheets else None
