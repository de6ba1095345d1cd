# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Validation context for Optcompose option modules.

`ValidationContext` captures what happened while one module's `validate_opts`
hook ran: which module, its position in the validation chain, the exception it
raised (if any), and how long it took. The application creates one per module and
hands it to every registered validation hook.
"""
from __future__ import annotations

import time
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from optcompose.signals import FlowSignal


class ValidationContext(BaseModel):
    """
    What one `validate_opts` call did.

    Attributes:
        name (str): Name of the module being validated.
        module (Any): The option module itself.
        index (int): Position of the module in the validation chain.
        exception (BaseException | None): What the module raised, if anything,
            flow signals included.
        started_at (datetime | None): Wall-clock time the call began.
        extra (dict): Scratch space shared by the hooks of one call.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    module: Any = None
    index: int = 0
    exception: BaseException | None = None
    started_at: datetime | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    perf_start: float | None = Field(default=None, repr=False)
    perf_end: float | None = Field(default=None, repr=False)

    def start_timer(self) -> None:
        self.started_at = datetime.now()
        self.perf_start = time.perf_counter()

    def stop_timer(self) -> None:
        self.perf_end = time.perf_counter()

    @property
    def duration(self) -> float | None:
        """Seconds spent so far, or in total once the timer was stopped."""
        if self.perf_start is None:
            return None
        end = self.perf_end if self.perf_end is not None else time.perf_counter()
        return end - self.perf_start

    @property
    def success(self) -> bool:
        return self.exception is None

    @property
    def status(self) -> str:
        """OK, SIGNAL when a flow signal ended the call, otherwise ERROR."""
        if self.success:
            return "OK"
        if isinstance(self.exception, FlowSignal):
            return "SIGNAL"
        return "ERROR"

    def _duration_text(self) -> str:
        return "n/a" if self.duration is None else f"{self.duration:.3f}s"

    def to_log_line(self) -> str:
        """Single-line summary for log files."""
        parts = [
            f"[{self.name}]",
            f"position={self.index}",
            f"status={self.status}",
            f"duration={self._duration_text()}",
        ]
        if self.exception is not None:
            parts.append(f"exception={type(self.exception).__name__}: {self.exception}")
        return " ".join(parts)

    def __str__(self) -> str:
        duration = self._duration_text()
        return f"<ValidationContext '{self.name}' | {self.status} | {duration}>"
