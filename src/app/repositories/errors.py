class UniqueViolationError(Exception):
    """Raised by repositories when a write hits a storage-level unique constraint"""
