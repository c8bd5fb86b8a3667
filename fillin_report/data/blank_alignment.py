"""填空对齐：占位符、备选答案与用户答案按位置配对."""

from typing import Callable, Iterator, List, Sequence

from loguru import logger

from fillin_report.data.models import Blank, MissingReplacementError


class BlankAlignment:
    """按占位符顺序对齐的填空序列."""

    def __init__(self, blanks: List[Blank], marker_count: int) -> None:
        self.blanks = blanks
        self.marker_count = marker_count

    @classmethod
    def align(
        cls,
        marker_count: int,
        alternatives: Sequence[Sequence[str]],
        responses: Sequence[str],
        strict: bool = True,
    ) -> "BlankAlignment":
        """对齐占位符、备选答案和用户答案.

        多余的备选答案组被忽略；用户答案不足时按空字符串处理。

        Args:
            marker_count: 描述中的占位符数量
            alternatives: 每个填空的备选答案
            responses: 每个填空的用户答案
            strict: 备选答案组少于占位符时是否报错

        Returns:
            对齐后的填空序列

        Raises:
            MissingReplacementError: 严格模式下备选答案组少于占位符
        """
        if len(alternatives) < marker_count:
            message = f"描述中有 {marker_count} 个占位符，但只有 {len(alternatives)} 组备选答案"
            if strict:
                logger.error(message)
                raise MissingReplacementError(message)
            logger.warning(f"{message}，缺少的填空将留空")

        if len(alternatives) > marker_count:
            logger.debug(f"忽略多余的备选答案 {len(alternatives) - marker_count} 组")

        blanks = [
            Blank(
                index=index,
                alternatives=values,
                response=responses[index] if index < len(responses) else "",
            )
            for index, values in enumerate(alternatives[:marker_count])
        ]
        return cls(blanks, marker_count)

    def __iter__(self) -> Iterator[Blank]:
        return iter(self.blanks)

    def __len__(self) -> int:
        return len(self.blanks)

    def replacements(self, render: Callable[[Blank], str]) -> List[str]:
        """生成每个占位符的替换内容，没有备选答案的填空为空字符串."""
        rendered = [render(blank) for blank in self.blanks]
        return rendered + [""] * (self.marker_count - len(rendered))
