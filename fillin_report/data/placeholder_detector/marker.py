"""占位符位置信息."""


class MarkerInfo:
    """占位符信息类."""

    def __init__(self, text: str, start: int, end: int) -> None:
        """初始化占位符信息.

        Args:
            text: 占位符文本
            start: 起始位置
            end: 结束位置（不含）
        """
        self.text = text
        self.start = start
        self.end = end

    def __repr__(self) -> str:
        return f"MarkerInfo(text='{self.text}', start={self.start}, end={self.end})"
