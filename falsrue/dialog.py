"""Dialogue text shown character by character, and a line reader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, Union

DIALOGS = (
    "嘿，我有一个任务要给你……呃，有点棘手，不过这件事只有你能解决\n……\n"
    "其实我也不太清楚到底是怎么回事，反正咱们一起去看看吧\n…………\n哦，不！坏了！\n"
    "……………………\n……什么都没有了……",
    "好久不见啊，你终于回来了，咱们的任务还没完成呢\n按任意键继续，按C键清除记忆",
    "你……确定要重新来吗？那样我们曾经的努力会白费的！\n*按任意键取消,按c键清除记忆*",
    "好！继续！\n",
)


@dataclass(frozen=True)
class DialogFrame:
    """Text on screen after one more character; ``after_pause`` marks a key wait before it."""

    text: str
    after_pause: bool = False


def dialog_frames(text: str) -> Iterator[DialogFrame]:
    """Yield the growing text of a dialogue, one frame per character.

    A newline waits for a key press and starts a fresh line with the
    character that follows it.
    """
    shown = ""
    chars = iter(text)
    for char in chars:
        paused = False
        if char == "\n":
            paused = True
            shown = ""
            char = next(chars, None)
            if char is None:
                return
        shown += char
        yield DialogFrame(shown, paused)


def read_line(filename: Union[str, os.PathLike], line: int) -> str:
    """Return line number ``line`` (counted from one), or ``""`` past the end."""
    if line <= 0:
        raise ValueError("line number must be positive")
    with open(filename, encoding="utf-8") as handle:
        for number, text in enumerate(handle, start=1):
            if number == line:
                return text.rstrip("\n")
    return ""