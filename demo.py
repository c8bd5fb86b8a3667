from loguru import logger

from fillin_report.service.fill_in_processor import FillInProcessor

# 测试日志级别
logger.debug("这是DEBUG级别的日志消息")
logger.info("这是INFO级别的日志消息")

processor = FillInProcessor()
report = processor.render(
    "The sky is __________ and grass is __________.",
    ["blue[,]green"],
    "Blue[,]green",
    {
        "extensions": {
            "https://h5p.org/x-api/alternatives": [["blue"], ["green", "Green"]],
            "https://h5p.org/x-api/case-sensitivity": {"caseSensitive": True},
        }
    },
    {"score": 1, "maxScore": 2},
)

print(report.html)
print(f"样式表: {report.stylesheets}")
