from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional, Dict

from dish_manager.config import Settings
from dish_manager.core.models import utc_now_iso
from dish_manager.services.repo.json_repo import _locked  # reuse existing cross-platform lock

logger = logging.getLogger(__name__)


class MetricsLogger:
    """Append-only JSONL logger for latency metrics under data/.

    Writes one JSON object per line with fields:
      - ts: ISO timestamp (UTC)
      - kind: "latency"
      - name: short name (e.g., "shopping_list")
      - duration_ms: float
      - extra: optional dict with contextual fields
    """

    def __init__(self, settings: Optional[Settings] = None, filename: str = "latency_log.jsonl") -> None:
        self.settings = settings or Settings()
        self.path = os.path.join(self.settings.data_dir, filename)

    def log_latency(
        self,
        name: str,
        duration_ms: float,
        extra: Optional[Dict[str, Any]] = None,
        corr_id: Optional[str] = None,
    ) -> None:
        entry = {
            "ts": utc_now_iso(),
            "kind": "latency",
            "name": name,
            "duration_ms": float(duration_ms),
        }
        if corr_id:
            entry["corr"] = corr_id
        if extra:
            entry["extra"] = extra
        line = (json.dumps(entry, ensure_ascii=False, separators=(",", ":")) + "\n").encode("utf-8")
        try:
            with _locked(self.path) as f:
                f.seek(0, os.SEEK_END)
                f.write(line)
                f.flush()
                os.fsync(f.fileno())
        except Exception as e:
            # Metrics should never impact user flows
            logger.debug("Dropped latency metric %s: %s", name, e)
