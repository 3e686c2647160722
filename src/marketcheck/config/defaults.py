from __future__ import annotations


DEFAULT_CONFIG: dict = {
    "datasets": {
        "dir": "cities",
    },
    "validation": {
        "check_map_initialization": False,
        "fail_fast": False,
    },
    "output": {
        "color": True,
        "report": None,
    },
    "monitoring": {
        "json_logs": False,
        "log_level": "WARNING",
    },
}
