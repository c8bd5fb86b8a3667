"""用户答案分词器."""

from typing import List, Optional

from fillin_report.config.settings import settings


def tokenize(raw: Optional[str], separator: Optional[str] = None) -> List[str]:
    """按分隔符将用户答案拆分为每个填空的答案.

    分隔符按字面匹配而非正则。空字符串返回 ``[""]``。

    Args:
        raw: 序列化的用户答案
        separator: 分隔符，默认取配置中的 ``[,]``

    Returns:
        按填空顺序排列的答案列表
    """
    separator = separator or settings.report.responses_separator
    return (raw or "").split(separator)
