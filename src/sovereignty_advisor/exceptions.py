"""
Custom exceptions for the advisory gateway.
"""
class AdvisoryError(Exception):
    """Base exception for advisory gateway errors."""
    pass

class AdvisoryConfigError(AdvisoryError):
    """Exception raised when the advisory model cannot be configured."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
