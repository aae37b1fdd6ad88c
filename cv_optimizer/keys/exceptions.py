class ApiKeyStoreError(Exception):
    """Raised when the user key store cannot be updated."""
