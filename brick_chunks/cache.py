from __future__ import annotations

import threading
from typing import Optional

from .analyzer import AnalysisResult
from .errors import NotAnalyzed


class AnalysisCache:
    """Holds the result of the last analysis of the current world."""

    def __init__(self) -> None:
        self._result: Optional[AnalysisResult] = None
        self._lock = threading.Lock()

    def set(self, result: AnalysisResult) -> None:
        with self._lock:
            self._result = result

    def get(self) -> Optional[AnalysisResult]:
        with self._lock:
            return self._result

    def require(self) -> AnalysisResult:
        result = self.get()
        if result is None:
            raise NotAnalyzed()
        return result
