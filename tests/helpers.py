"""Test doubles shared across test modules."""

from datetime import date

from tax_copilot.activity import ActivityLogger
from tax_copilot.services.storage import KeyValueStorageInterface, StorageUnavailableError


FIXED_TODAY = date(2024, 3, 15)


class FailingStorage(KeyValueStorageInterface):
    """Storage whose every read and write fails."""

    def get_item(self, key):
        raise StorageUnavailableError("disk on fire")

    def set_item(self, key, value):
        raise StorageUnavailableError("disk on fire")

    def remove_item(self, key):
        raise StorageUnavailableError("disk on fire")


class RecordingActivityLogger(ActivityLogger):
    """Activity logger that remembers export events instead of emitting them."""

    def __init__(self):
        super().__init__()
        self.exports = []

    def log_exported(self, filename, row_count):
        self.exports.append((filename, row_count))
