"""填空题报告渲染根模块."""

# 导入日志配置，确保其在最早被加载
from fillin_report.utils.logger import setup_logger

# 初始化日志配置
setup_logger()

__version__ = "0.1.0"
