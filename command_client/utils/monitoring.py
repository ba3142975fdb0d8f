"""
Monitoring Utilities
Dispatch counters and system metrics
"""

import os
import platform
import time
from typing import Any, Dict, List


class Monitoring:
    """Dispatch counters and system metrics."""

    def __init__(self):
        self.start_time = time.time()
        self.metrics = {
            "messagesProcessed": 0,
            "commandsExecuted": 0,
            "usageMessages": 0,
            "commandsDenied": 0,
            "errors": 0,
        }

    def record_message(self) -> None:
        self.metrics["messagesProcessed"] += 1

    def record_command(self) -> None:
        self.metrics["commandsExecuted"] += 1

    def record_usage(self) -> None:
        self.metrics["usageMessages"] += 1

    def record_denied(self) -> None:
        self.metrics["commandsDenied"] += 1

    def record_error(self) -> None:
        self.metrics["errors"] += 1

    def get_system_metrics(self) -> Dict[str, Any]:
        """
        Get system metrics.

        Returns:
            Dict with memory, CPU, uptime, and platform info
        """
        import psutil

        process = psutil.Process()
        memory_info = process.memory_info()
        load_avg = os.getloadavg() if hasattr(os, "getloadavg") else (0.0, 0.0, 0.0)

        return {
            "memory": {
                "used": round(memory_info.rss / 1024 / 1024),
                "systemTotal": round(psutil.virtual_memory().total / 1024 / 1024),
            },
            "cpu": {
                "loadAvg1m": round(load_avg[0], 2),
                "cores": psutil.cpu_count(),
            },
            "uptime": {
                "bot": self.format_duration(int(time.time() - self.start_time)),
            },
            "platform": {
                "python": platform.python_version(),
                "os": f"{platform.system()} {platform.release()}",
            },
        }

    def get_app_metrics(self) -> Dict[str, Any]:
        """
        Get application metrics.

        Returns:
            Copy of the counters plus commands per hour
        """
        return {
            **self.metrics,
            "commandsPerHour": self.calculate_commands_per_hour(),
        }

    def calculate_commands_per_hour(self) -> int:
        hours = (time.time() - self.start_time) / 3600
        return round(self.metrics["commandsExecuted"] / hours) if hours > 0 else 0

    @staticmethod
    def format_duration(seconds: int) -> str:
        """
        Format duration in human readable format.

        Args:
            seconds: Duration in seconds

        Returns:
            Formatted duration string
        """
        days = seconds // 86400
        hours = (seconds % 86400) // 3600
        mins = (seconds % 3600) // 60
        secs = seconds % 60

        parts: List[str] = []
        if days > 0:
            parts.append(f"{days}d")
        if hours > 0:
            parts.append(f"{hours}h")
        if mins > 0:
            parts.append(f"{mins}m")
        if secs > 0 or not parts:
            parts.append(f"{secs}s")

        return " ".join(parts)
