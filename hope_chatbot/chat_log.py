"""Chat interaction history, kept in memory and optionally appended to CSV."""

import os
import threading
from collections import deque
from datetime import datetime

import pandas as pd

from hope_chatbot.logger import logger

LOG_COLUMNS = ["timestamp", "message", "intent", "confidence", "success"]


class ChatLog:
    def __init__(self, path=None, history_size=100):
        self.path = path
        self._history = deque(maxlen=history_size)
        self._lock = threading.Lock()

    @property
    def history(self):
        return list(self._history)

    def record(self, message, result):
        """Log one interaction; returns False when the CSV append failed"""
        entry = {
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "message": message,
            "intent": result.intent,
            "confidence": float(result.confidence),
            "success": bool(result.success),
        }

        with self._lock:
            self._history.append(entry)
            if not self.path:
                return True
            try:
                file_exists = os.path.exists(self.path)
                pd.DataFrame([entry], columns=LOG_COLUMNS).to_csv(
                    self.path, mode="a", header=not file_exists, index=False, encoding="utf-8"
                )
            except OSError:
                logger.exception("❌ Could not write chat log %s", self.path)
                return False
        return True

    def summary(self):
        """Aggregate counts over the in-memory history"""
        stats = {
            "total_messages": 0,
            "matched_messages": 0,
            "fallback_count": 0,
            "failed_count": 0,
            "avg_confidence": 0.0,
            "top_intents": {},
        }

        with self._lock:
            frame = pd.DataFrame(list(self._history), columns=LOG_COLUMNS)
        if frame.empty:
            return stats

        succeeded = frame[frame["success"]]
        stats["total_messages"] = len(frame)
        stats["matched_messages"] = int((succeeded["confidence"] > 0).sum())
        stats["fallback_count"] = int((succeeded["confidence"] == 0).sum())
        stats["failed_count"] = int((~frame["success"]).sum())
        stats["avg_confidence"] = round(float(frame["confidence"].mean()), 3)
        stats["top_intents"] = {
            intent: int(count) for intent, count in frame["intent"].value_counts().head(5).items()
        }
        return stats
