"""项目配置设置."""

from dotenv import load_dotenv
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# 先加载.env.example（最低优先级），再加载.env（覆盖前者），最后环境变量最高
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / '.env.example', override=False)
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / '.env', override=True)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class ReportConfig(BaseModel):
    """填空题报告配置."""

    placeholder: str = Field(default_factory=lambda: os.environ.get("REPORT_PLACEHOLDER") or "__________", validate_default=True)  # 描述中的填空标记（10个下划线）
    responses_separator: str = Field(default_factory=lambda: os.environ.get("REPORT_RESPONSES_SEPARATOR", "[,]"))  # 用户答案之间的分隔符
    crp_report_separator: str = Field(default_factory=lambda: os.environ.get("REPORT_CRP_SEPARATOR", " / "))  # 报告中备选答案之间的分隔符
    stylesheet: Optional[str] = Field(default_factory=lambda: os.environ.get("REPORT_STYLESHEET", "styles/fill-in.css"))  # 报告样式表路径
    alternatives_key: str = Field(default_factory=lambda: os.environ.get("REPORT_ALTERNATIVES_KEY", "https://h5p.org/x-api/alternatives"))
    case_sensitivity_key: str = Field(default_factory=lambda: os.environ.get("REPORT_CASE_SENSITIVITY_KEY", "https://h5p.org/x-api/case-sensitivity"))
    default_case_sensitive: bool = Field(default_factory=lambda: _env_bool("REPORT_DEFAULT_CASE_SENSITIVE", "false"))  # 元数据缺失时是否区分大小写
    strict_alignment: bool = Field(default_factory=lambda: _env_bool("REPORT_STRICT_ALIGNMENT", "true"))  # 标记数多于备选答案组时是否直接报错

    # 图例文字
    legend_correct_pattern: str = Field(default_factory=lambda: os.environ.get("REPORT_LEGEND_CORRECT_PATTERN", "Correct Answer"))
    legend_user_correct: str = Field(default_factory=lambda: os.environ.get("REPORT_LEGEND_USER_CORRECT", "Your correct answer"))
    legend_user_wrong: str = Field(default_factory=lambda: os.environ.get("REPORT_LEGEND_USER_WRONG", "Your incorrect answer"))
    score_label: str = Field(default_factory=lambda: os.environ.get("REPORT_SCORE_LABEL", "Score"))  # 分数区域标签

    @field_validator("placeholder")
    @classmethod
    def _check_placeholder(cls, value: str) -> str:
        """占位符必须是同一字符的连续串，否则无法判断完整的一段."""
        if not value or value != value[0] * len(value):
            raise ValueError(f"占位符必须是同一字符组成的非空串: {value!r}")
        return value


class LogConfig(BaseModel):
    """日志配置."""

    level: str = Field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))  # 日志级别
    # 精简日志格式
    format: str = Field(default_factory=lambda: os.environ.get("LOG_FORMAT", "<level>{level: <8}</level>| - <level>{message}</level>"))
    log_file: Optional[str] = Field(default_factory=lambda: os.environ.get("LOG_FILE") or None)  # 日志文件名，为空则不写文件
    rotation: str = Field(default_factory=lambda: os.environ.get("LOG_ROTATION", "10 MB"))  # 日志轮转大小
    retention: str = Field(default_factory=lambda: os.environ.get("LOG_RETENTION", "1 week"))  # 日志保留时间


class Settings(BaseModel):
    """项目全局设置."""

    report: ReportConfig = Field(default_factory=ReportConfig)  # 报告渲染相关配置
    log: LogConfig = Field(default_factory=LogConfig)  # 日志相关配置

    # 项目路径配置
    output_dir: Path = Field(default_factory=lambda: Path(os.environ.get("OUTPUT_DIR", str(Path(__file__).parent.parent.parent / "output"))))  # 输出目录


# 单例模式，避免多次实例化
_settings = None
def get_settings():
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

settings = get_settings()
