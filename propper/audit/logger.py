"""
Audit Trail — One JSON line per component audited through the HTTP proxy.

Audits run on worker threads, so appends are serialised with a lock. A failed
write is logged and never fails the audit itself.
"""

from __future__ import annotations

import json
import logging
import threading
from collections import deque
from pathlib import Path

from propper.config import settings
from propper.models.audit_models import AuditEntry

logger = logging.getLogger("propper.audit")


class AuditLogger:
    """Append-only JSON-lines trail of AuditEntry records."""

    def __init__(self, log_path: str | Path | None = None) -> None:
        self.log_path = Path(log_path or settings.audit_log_path)
        self._lock = threading.Lock()

    def log(self, entry: AuditEntry) -> None:
        line = entry.model_dump_json() + "\n"
        with self._lock:
            try:
                with self.log_path.open("a", encoding="utf-8") as trail:
                    trail.write(line)
            except OSError as e:
                logger.error(f"Could not append to audit trail {self.log_path}: {e}")

    def read_recent(self, count: int = 50) -> list[dict]:
        """Last ``count`` readable records, oldest first."""
        recent: deque[dict] = deque(maxlen=count)
        try:
            with self.log_path.open(encoding="utf-8") as trail:
                for lineno, raw in enumerate(trail, start=1):
                    if not raw.strip():
                        continue
                    try:
                        recent.append(json.loads(raw))
                    except json.JSONDecodeError:
                        logger.warning(f"Skipping corrupt audit line {lineno} in {self.log_path}")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(f"Could not read audit trail {self.log_path}: {e}")
            return []
        return list(recent)
