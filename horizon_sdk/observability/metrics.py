from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Counters for one streaming session."""
    url: str
    resource: str = "stream"
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None
    frames: int = 0
    records: int = 0
    bytes_received: int = 0
    reconnects: int = 0
    status_code: Optional[int] = None
    outcome: Optional[str] = None  # completed, cancelled, failed
    error_class: Optional[str] = None
    time_to_first_frame_ms: Optional[int] = None

    def record_frame(self, size: int) -> None:
        if self.frames == 0:
            self.time_to_first_frame_ms = int((time.time() - self.start_time) * 1000)
        self.frames += 1
        self.bytes_received += size

    def finish(self, outcome: str, error: Optional[BaseException] = None) -> None:
        self.end_time = time.time()
        self.outcome = outcome
        if error is not None:
            self.error_class = type(error).__name__

    @property
    def duration_ms(self) -> int:
        end = self.end_time if self.end_time is not None else time.time()
        return int((end - self.start_time) * 1000)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "resource": self.resource,
            "frames": self.frames,
            "records": self.records,
            "bytes_received": self.bytes_received,
            "reconnects": self.reconnects,
            "status_code": self.status_code,
            "outcome": self.outcome,
            "error_class": self.error_class,
            "duration_ms": self.duration_ms,
            "time_to_first_frame_ms": self.time_to_first_frame_ms,
        }
