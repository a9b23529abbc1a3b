"""A countdown that sleeps between numbers."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

FINAL_WORD = "Go!"
COUNTDOWN_START = 3


class Sleeper(ABC):
    @abstractmethod
    def sleep(self) -> None:
        """Pause once."""


@dataclass
class ConfigurableSleeper(Sleeper):
    duration: float
    sleep_fn: Callable[[float], object]

    def sleep(self) -> None:
        self.sleep_fn(self.duration)


def countdown(out: TextIO, sleeper: Sleeper) -> None:
    for number in range(COUNTDOWN_START, 0, -1):
        sleeper.sleep()
        out.write(f"{number}\n")
    sleeper.sleep()
    out.write(FINAL_WORD)


def main(argv: list[str] | None = None) -> int:
    countdown(sys.stdout, ConfigurableSleeper(1.0, time.sleep))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())