"""日志配置模块."""

import sys

from loguru import logger

from fillin_report.config.settings import settings


def setup_logger() -> None:
    """配置日志系统.

    设置日志格式、级别和输出位置。
    """
    # 清除默认的日志配置
    logger.remove()

    logger.add(
        sys.stderr,
        format=settings.log.format,
        level=settings.log.level,
        colorize=True,
    )

    # 配置了日志文件时才写入输出目录
    if settings.log.log_file:
        settings.output_dir.mkdir(exist_ok=True, parents=True)
        log_path = settings.output_dir / settings.log.log_file
        logger.add(
            log_path,
            format=settings.log.format,
            level=settings.log.level,
            rotation=settings.log.rotation,
            retention=settings.log.retention,
        )

    logger.debug(f"日志系统已初始化，级别：{settings.log.level}")

# 注意：不在模块级别调用setup_logger()，避免重复初始化
# 初始化将在 fillin_report/__init__.py 中进行
