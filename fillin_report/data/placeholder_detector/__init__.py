"""占位符检测器包."""

from fillin_report.data.placeholder_detector.base_detector import PlaceholderDetector
from fillin_report.data.placeholder_detector.marker import MarkerInfo
from fillin_report.data.placeholder_detector.underline_detector import UnderlinePlaceholderDetector

__all__ = [
    'PlaceholderDetector',
    'MarkerInfo',
    'UnderlinePlaceholderDetector',
]
