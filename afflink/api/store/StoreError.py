class StoreError(RuntimeError):
    """Raised when a store backend cannot read or write link records."""
