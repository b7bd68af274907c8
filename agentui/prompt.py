"""Line-based prompts for choosing a file and for yes/no confirmation."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence, TextIO

_NUMBER = re.compile(r"\+?[0-9]+")


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if line == "":
        raise EOFError("input closed")
    return line


def select_from_candidates(
    candidates: Sequence[object],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Optional[int]:
    """List candidates and return the zero-based index chosen, or None on empty input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    count = len(candidates)

    print(f"\n找到 {count} 个匹配文件:", file=stdout)
    for number, candidate in enumerate(candidates, start=1):
        print(f"  [{number}] {candidate}", file=stdout)
    print(f"\n选择文件 (1-{count}), 或按 Enter 跳过:", file=stdout)

    while True:
        stdout.write("> ")
        stdout.flush()
        answer = stdin.readline().strip()
        if not answer:
            return None
        if _NUMBER.fullmatch(answer):
            number = int(answer)
            if 1 <= number <= count:
                return number - 1
        print(f"⚠️  无效选择，请输入 1-{count} 之间的数字", file=stdout)


def confirm(
    message: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> bool:
    """Ask a yes/no question until answered; raise EOFError if input ends."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        stdout.write(f"{message} (y/n): ")
        stdout.flush()
        answer = _read_line(stdin).strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("⚠️  请输入 y 或 n", file=stdout)