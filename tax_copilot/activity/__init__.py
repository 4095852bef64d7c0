"""Activity logging package."""

from tax_copilot.activity.logger import ActivityLogger, configure_log_level, get_logger

__all__ = ["ActivityLogger", "configure_log_level", "get_logger"]
