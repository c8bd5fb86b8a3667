"""占位符检测器基类."""

from abc import ABC, abstractmethod
from typing import List, Optional

from fillin_report.data.placeholder_detector.marker import MarkerInfo


class PlaceholderDetector(ABC):
    """占位符检测器基类."""

    @abstractmethod
    def find(self, text: str, start: int = 0) -> Optional[MarkerInfo]:
        """查找 start 及之后的第一个占位符.

        Args:
            text: 待检测文本
            start: 起始位置

        Returns:
            占位符信息，未找到时返回None
        """
        pass

    def detect(self, text: str) -> List[MarkerInfo]:
        """检测文本中的全部占位符（按出现顺序）.

        Args:
            text: 待检测文本

        Returns:
            占位符信息列表
        """
        markers = []
        marker = self.find(text, 0)
        while marker is not None:
            markers.append(marker)
            marker = self.find(text, marker.end)
        return markers
