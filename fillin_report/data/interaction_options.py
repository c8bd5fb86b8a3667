"""填空交互选项解析."""

import re
from typing import Any, List, Mapping, Optional, Sequence, Union

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from fillin_report.config.settings import settings
from fillin_report.data.response_tokenizer import tokenize

# xAPI correctResponsesPattern 开头的 {case_sensitive=false} 之类修饰
_PATTERN_MODIFIER = re.compile(r"^(\{[a-z_]+=[^}]*\})+")
_CASE_SENSITIVE_MODIFIER = re.compile(r"\{case_sensitive=([^}]*)\}")


class InteractionOptions(BaseModel):
    """填空交互选项模型."""

    alternatives: List[List[str]] = Field(default_factory=list, description="每个填空的备选答案")
    case_sensitive: bool = Field(default=False, description="是否区分大小写")


def _get(container: Any, key: str) -> Any:
    """同时兼容字典和属性对象的取值."""
    if container is None:
        return None
    if isinstance(container, Mapping):
        return container.get(key)
    return getattr(container, key, None)


def _case_sensitivity_flag(value: Any) -> Any:
    """取出大小写敏感的原始值，布尔转换交给 InteractionOptions 校验."""
    if value is None or isinstance(value, (bool, str, int)):
        return value
    return _get(value, "caseSensitive")


def case_sensitivity_from_patterns(crp: Union[str, Sequence[str], None]) -> Optional[str]:
    """读取 correctResponsesPattern 中 {case_sensitive=...} 修饰声明的值.

    Args:
        crp: 正确答案模式列表

    Returns:
        第一个声明的原始值，没有声明时返回None
    """
    if not crp:
        return None
    patterns = [crp] if isinstance(crp, str) else list(crp)
    for pattern in patterns:
        modifiers = _PATTERN_MODIFIER.match(pattern)
        if modifiers is None:
            continue
        flag = _CASE_SENSITIVE_MODIFIER.search(modifiers.group(0))
        if flag is not None:
            return flag.group(1)
    return None


def alternatives_from_patterns(crp: Union[str, Sequence[str], None]) -> List[List[str]]:
    """从 correctResponsesPattern 推导每个填空的备选答案.

    每条模式是一份完整答案，第 i 个填空的备选答案取自各模式的第 i 段。

    Args:
        crp: 正确答案模式列表

    Returns:
        每个填空的备选答案列表
    """
    if not crp:
        return []
    patterns = [crp] if isinstance(crp, str) else list(crp)

    alternatives: List[List[str]] = []
    for pattern in patterns:
        for index, value in enumerate(tokenize(_PATTERN_MODIFIER.sub("", pattern))):
            if index >= len(alternatives):
                alternatives.append([])
            if value not in alternatives[index]:
                alternatives[index].append(value)
    return alternatives


def parse_options(extras: Any, crp: Union[str, Sequence[str], None] = None) -> InteractionOptions:
    """从报告元数据中解析交互选项.

    元数据缺失时，大小写敏感取自 crp 中的 {case_sensitive=...} 修饰，
    再退回配置默认值；备选答案取自 crp 或为空。大小写敏感的原始值
    （如 "false"、"0"）由 InteractionOptions 转换为布尔值。

    Args:
        extras: 报告元数据（字典或带 extensions 属性的对象）
        crp: 正确答案模式，仅在元数据没有备选答案时使用

    Returns:
        交互选项

    Raises:
        ValueError: 元数据格式不正确
    """
    report_config = settings.report
    extensions = _get(extras, "extensions")

    # 优先级：元数据 > 正确答案模式中的修饰 > 配置默认值
    case_sensitive = _case_sensitivity_flag(_get(extensions, report_config.case_sensitivity_key))
    if case_sensitive is None:
        case_sensitive = case_sensitivity_from_patterns(crp)
        if case_sensitive is not None:
            logger.debug(f"元数据未指定大小写敏感，使用正确答案模式中的声明: {case_sensitive}")
    if case_sensitive is None:
        logger.debug("元数据未指定大小写敏感，使用默认值")
        case_sensitive = report_config.default_case_sensitive

    alternatives = _get(extensions, report_config.alternatives_key)
    if alternatives is None:
        alternatives = alternatives_from_patterns(crp)
        if alternatives:
            logger.info(f"元数据缺少备选答案，已从正确答案模式推导出 {len(alternatives)} 个填空")
        else:
            logger.warning("元数据缺少备选答案，按空备选答案处理")

    try:
        return InteractionOptions(alternatives=alternatives, case_sensitive=case_sensitive)
    except ValidationError as e:
        logger.error(f"解析交互选项失败: {e}")
        raise ValueError(f"解析交互选项失败: {e}")
