"""
wordcount CLI — 命令行工具入口。

用法::

    wordcount FILENAME COUNT_OPTION
    wordcount input.txt word
    wordcount input.txt char --format json
    wordcount input.txt line --format rich --verbose

COUNT_OPTION 取值：char / word / line（区分大小写）。
"""

from __future__ import annotations

import logging

import typer
from rich.markup import escape

from wordcount.cli.utils import (
    create_console,
    handle_wordcount_error,
    print_error,
    print_plain,
)
from wordcount.config import load_config
from wordcount.counter import count
from wordcount.errors import WordCountError
from wordcount.options import parse_count_option
from wordcount.report import create_frequency_table, format_debug, format_json
from wordcount.source import open_lines

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="wordcount",
    help="统计文件中字符、单词或行的出现频度。",
    add_completion=False,
)

console = create_console()


def _version_callback(value: bool) -> None:
    if value:
        from wordcount import __version__
        console.print(f"wordcount v{__version__}")
        raise typer.Exit()


@app.command()
def run(
    filename: str | None = typer.Argument(
        None,
        metavar="FILENAME",
        help="输入文件路径（UTF-8 编码）",
        show_default=False,
    ),
    count_option: str | None = typer.Argument(
        None,
        metavar="COUNT_OPTION",
        help="统计模式：char / word / line",
        show_default=False,
    ),
    format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="输出格式：debug（默认，字典表示）/ json / rich（表格）",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="配置文件路径（默认自动搜索 wordcount.yaml）",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="详细输出（显示调试日志）",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="显示版本信息",
    ),
) -> None:
    """统计 FILENAME 中各 token 的出现频度并输出。"""
    if filename is None:
        print_error("1 argument FILENAME required")
    if count_option is None:
        print_error("2 argument COUNT_OPTION required")

    try:
        settings = load_config(
            config,
            overrides={"format": format, "log_level": "DEBUG" if verbose else None},
        )
        logging.basicConfig(level=getattr(logging, settings.log_level))

        with open_lines(filename) as lines:
            option = parse_count_option(count_option)
            freqs = count(lines, option)
    except WordCountError as e:
        handle_wordcount_error(e)

    logger.info("%s：%d 个不同 token（%s 模式）", filename, len(freqs), option.value)

    if settings.format == "json":
        print_plain(format_json(freqs))
    elif settings.format == "rich":
        title = escape(f"{filename}（{option.value}）")
        console.print(create_frequency_table(freqs, title=title))
    else:
        print_plain(format_debug(freqs))


def main() -> None:
    """CLI 入口点。"""
    app()


if __name__ == "__main__":
    main()
