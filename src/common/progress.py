"""Progress reporting for long-running stages.

Stages accept any object implementing ProgressReporter; the core never
writes to the console itself.
"""

from __future__ import annotations

from typing import Protocol

from tqdm import tqdm


class ProgressReporter(Protocol):
    def start(self, total: int, label: str) -> None: ...

    def advance(self, item: str) -> None: ...

    def close(self) -> None: ...


class NullProgress:
    """Discards all progress updates."""

    def start(self, total: int, label: str) -> None:
        pass

    def advance(self, item: str) -> None:
        pass

    def close(self) -> None:
        pass


class TqdmProgress:
    """Terminal progress bar showing the current item next to the count."""

    def __init__(self, unit: str = "article", mininterval: float = 0.5) -> None:
        self._unit = unit
        self._mininterval = mininterval
        self._bar: tqdm | None = None

    def start(self, total: int, label: str) -> None:
        self.close()
        self._bar = tqdm(
            total=total,
            desc=label,
            unit=self._unit,
            mininterval=self._mininterval,
            dynamic_ncols=True,
        )

    def advance(self, item: str) -> None:
        if self._bar is None:
            return
        self._bar.set_postfix_str(item, refresh=False)
        self._bar.update(1)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


def get_progress(progress: ProgressReporter | None) -> ProgressReporter:
    return progress if progress is not None else NullProgress()
