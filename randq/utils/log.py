from datetime import datetime
import json
import logging
from pathlib import Path
import sys
from typing import Any, Dict, List, Optional

NORMAL_FORMATTER = logging.Formatter("%(levelname)s %(asctime)s: %(name)s: %(message)s")
JSON_FORMATTER = logging.Formatter("%(levelname)s::%(message)s")
STAT = 15
logging.addLevelName(STAT, "STAT")


class Logger(logging.Logger):
    def __init__(self, name: str = "randq", level: int = logging.WARNING) -> None:
        super().__init__(name, level)
        self._log_path: Optional[Path] = None
        self.start = datetime.now()

    def setLevel(self, level: int) -> None:
        super().setLevel(level)
        # Not created via logging.getLogger, so the manager can't reset our cache
        self._cache.clear()

    def set_file(self, log_path: Path, level: int = STAT) -> None:
        """Writes STAT records to `log_path` as one JSON object per line
        """
        if not log_path.parent.exists():
            log_path.parent.mkdir(parents=True)
        handler = logging.FileHandler(log_path.as_posix())
        handler.setFormatter(JSON_FORMATTER)
        handler.setLevel(level)
        self.addHandler(handler)
        self._log_path = log_path
        if self.level > level:
            self.setLevel(level)

    def set_stderr(self, level: int = logging.WARNING) -> None:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(NORMAL_FORMATTER)
        handler.setLevel(level)
        self.addHandler(handler)
        if self.level > level:
            self.setLevel(level)

    @property
    def log_path(self) -> Optional[Path]:
        return self._log_path

    def stat(self, name: str, msg: Dict[str, Any], *args, **kwargs) -> None:
        """
        For run statistics. Only dict is enabled as argument
        """
        if not self.isEnabledFor(STAT):
            return
        delta = datetime.now() - self.start
        msg = dict(msg, name=name)
        msg["elapsed-time"] = delta.total_seconds()
        self._log(STAT, json.dumps(msg, sort_keys=True), args, **kwargs)

    def close(self) -> None:
        for handler in list(self.handlers):
            handler.close()
            self.removeHandler(handler)


def load_stats(file_path: Path, name: Optional[str] = None) -> List[Dict[str, Any]]:
    with open(file_path.as_posix()) as f:
        lines = f.readlines()
    stats = []
    for line in filter(lambda s: s.startswith("STAT::"), lines):
        stats.append(json.loads(line[6:]))
    if name is not None:
        stats = [s for s in stats if s["name"] == name]
    return stats


LOGGER = Logger()
