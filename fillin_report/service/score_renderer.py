"""分数展示服务."""

from typing import Any, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fillin_report.config.settings import settings


class ScoreSettings(BaseModel):
    """分数展示设置模型."""

    model_config = ConfigDict(populate_by_name=True)

    score: Union[int, float] = Field(..., description="得分")
    max_score: Union[int, float] = Field(..., alias="maxScore", description="满分")
    score_label: Optional[str] = Field(default=None, alias="scoreLabel", description="分数标签")


def render_score_block(score_settings: Union[ScoreSettings, Mapping[str, Any], None]) -> str:
    """生成分数区域的HTML.

    Args:
        score_settings: 分数设置，为None时不输出分数

    Returns:
        分数区域HTML

    Raises:
        ValueError: 分数设置格式不正确
    """
    if score_settings is None:
        return ""

    if not isinstance(score_settings, ScoreSettings):
        try:
            score_settings = ScoreSettings.model_validate(score_settings)
        except ValidationError as e:
            logger.error(f"分数设置格式不正确: {e}")
            raise ValueError(f"分数设置格式不正确: {e}")

    label = score_settings.score_label or settings.report.score_label
    return (
        "<div class='h5p-reporting-score-container'>"
        f"<span class='h5p-reporting-score-label'>{label}</span>"
        f"<span class='h5p-reporting-score'>{score_settings.score}/{score_settings.max_score}</span>"
        "</div>"
    )
