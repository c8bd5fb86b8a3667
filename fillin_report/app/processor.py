"""填空题报告命令行应用."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from fillin_report.data.report_generator import ReportGenerator
from fillin_report.data.report_io import ReportIO
from fillin_report.service.fill_in_processor import FillInProcessor

PACKAGE_DIR = Path(__file__).parent.parent


@dataclass
class ProcessResult:
    """处理结果."""

    output_path: str
    blank_count: int
    correct_count: int
    success: bool
    error_message: Optional[str] = None

    @property
    def report(self) -> str:
        """生成结果报告.

        Returns:
            结果报告字符串
        """
        if not self.success:
            return f"处理失败: {self.error_message}"

        return (
            f"处理成功!\n"
            f"- 共 {self.blank_count} 个填空，答对 {self.correct_count} 个\n"
            f"- 输出文件: {self.output_path}"
        )


class ReportProcessor:
    """填空题报告处理器."""

    def __init__(self) -> None:
        self.report_io = ReportIO()
        self.fill_in_processor = FillInProcessor()

    def process(self, input_path: str, output_path: str, full_page: bool = False) -> ProcessResult:
        """读取输入文件，生成报告并保存.

        Args:
            input_path: 输入JSON路径
            output_path: 输出HTML路径
            full_page: 是否输出带样式表链接的完整页面

        Returns:
            处理结果
        """
        try:
            logger.info(f"开始处理报告输入: {input_path}")
            data = self.report_io.load_input(input_path)

            report = self.fill_in_processor.render(
                data.get("description", ""),
                data.get("correctResponsesPattern"),
                data.get("response", ""),
                data.get("extras"),
                data.get("scoreSettings"),
            )

            html = report.html
            if full_page:
                # 样式表相对于包目录，转成文件URI供浏览器直接打开
                report.stylesheets = [
                    (PACKAGE_DIR / href).as_uri() if (PACKAGE_DIR / href).exists() else href
                    for href in report.stylesheets
                ]
                html = ReportGenerator.generate_page(report)

            self.report_io.save_report(html, output_path)
            return ProcessResult(
                output_path=output_path,
                blank_count=report.blank_count,
                correct_count=report.correct_count,
                success=True,
            )

        except Exception as e:
            logger.error(f"生成报告时发生错误: {e}")
            return ProcessResult(
                output_path=output_path,
                blank_count=0,
                correct_count=0,
                success=False,
                error_message=str(e),
            )


# 命令行接口
app = typer.Typer()


@app.command()
def render(
    input_path: str = typer.Argument(..., help="输入JSON路径"),
    output_path: Optional[str] = typer.Option(None, "--output", help="输出HTML路径，默认为'input_report.html'"),
    full_page: bool = typer.Option(False, "--full-page", help="输出带样式表链接的完整HTML页面"),
) -> None:
    """根据描述、备选答案和用户答案生成填空题报告."""
    if not output_path:
        input_file = Path(input_path)
        output_path = str(input_file.parent / f"{input_file.stem}_report.html")

    processor = ReportProcessor()
    result = processor.process(input_path, output_path, full_page=full_page)

    if result.success:
        typer.echo(typer.style(result.report, fg=typer.colors.GREEN))
    else:
        typer.echo(typer.style(result.report, fg=typer.colors.RED))
        raise typer.Exit(code=1)


@app.callback()
def main() -> None:
    """填空题报告工具."""


if __name__ == "__main__":
    app()
