"""报告输入输出操作."""

import json
from pathlib import Path
from typing import Any, Dict, Union

from loguru import logger


class ReportIO:
    """报告读写操作类."""

    @staticmethod
    def load_input(file_path: Union[str, Path]) -> Dict[str, Any]:
        """加载报告输入（JSON）.

        Args:
            file_path: 输入文件路径

        Returns:
            输入数据字典

        Raises:
            FileNotFoundError: 文件不存在
            ValueError: 文件格式不正确
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"文件不存在: {file_path}")

        if file_path.suffix.lower() not in ['.json']:
            raise ValueError(f"不支持的文件类型: {file_path.suffix}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"加载报告输入失败: {e}")
            raise ValueError(f"加载报告输入失败: {e}")

        if not isinstance(data, dict):
            raise ValueError("报告输入必须是JSON对象")

        logger.info(f"已加载报告输入: {file_path}")
        return data

    @staticmethod
    def save_report(html: str, output_path: Union[str, Path]) -> None:
        """保存报告HTML.

        Args:
            html: 报告HTML
            output_path: 输出文件路径

        Raises:
            ValueError: 保存失败
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(html)
            logger.info(f"已保存报告: {output_path}")
        except OSError as e:
            logger.error(f"保存报告失败: {e}")
            raise ValueError(f"保存报告失败: {e}")
