"""
데모 러너 콘솔 출력 헬퍼 (rich)
"""
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

DIVIDER_WIDTH = 70


def divider() -> None:
    console.print("\n" + "═" * DIVIDER_WIDTH)


def section(title: str) -> None:
    divider()
    console.print(f"📌  {title.upper()}", style="bold")
    divider()


def success(msg: str) -> None:
    console.print(f"✅ {msg}", style="green")


def info(msg: str) -> None:
    console.print(f"ℹ️  {msg}")


def warn(msg: str) -> None:
    console.print(f"⚠️  {msg}", style="yellow")


def error_log(msg: str, err: Optional[BaseException] = None) -> None:
    err_console.print(f"❌ {msg}", style="bold red")
    if err is not None:
        err_console.print(repr(err), style="red")


def print_table(rows: Sequence[Dict[str, Any]], title: Optional[str] = None,
                columns: Optional[List[str]] = None) -> None:
    """딕셔너리 목록을 표로 출력 (컬럼은 첫 행 기준, 인덱스 컬럼 포함)"""
    if columns is None:
        columns = list(rows[0].keys()) if rows else []

    table = Table(title=title, show_header=True, header_style="bold blue")
    table.add_column("(index)", style="dim", justify="right")
    for column in columns:
        table.add_column(column)

    for i, row in enumerate(rows):
        table.add_row(str(i), *(_cell(row.get(column)) for column in columns))

    console.print(table)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)
