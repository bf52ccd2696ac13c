"""Custom exceptions for the visionfi CLI.

This module defines a hierarchy of custom exceptions for better error
categorization and handling throughout the application.
"""


class VisionFiError(Exception):
    """Base exception for all visionfi CLI errors.

    Parameters
    ----------
    message : str
        Error message describing what went wrong.
    details : dict, optional
        Additional structured information about the error.

    Attributes
    ----------
    message : str
        The error message.
    details : dict
        Dictionary containing additional error context.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        """Format error message with optional details.

        Returns
        -------
        str
            Formatted error message.
        """
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(VisionFiError):
    """Configuration loading or validation error.

    Raised when:
    - The configuration file cannot be written
    - A required configuration value is missing
    - A configuration value has the wrong type
    """

    pass


class ValidationError(VisionFiError):
    """Input validation error.

    Raised when:
    - A cache TTL string cannot be parsed
    - Poll interval or attempt count is out of range
    - A configuration key is unknown
    """

    pass


class APIError(VisionFiError):
    """Error communicating with the VisionFi API.

    Parameters
    ----------
    message : str
        Error message describing the API error.
    endpoint : str, optional
        API endpoint that failed.
    status_code : int, optional
        HTTP status code from the API response.

    Attributes
    ----------
    endpoint : str or None
        API endpoint that failed.
    status_code : int or None
        HTTP status code if available.
    """

    def __init__(self, message: str, endpoint: str = None, status_code: int = None):
        details = {}
        if endpoint:
            details["endpoint"] = endpoint
        if status_code:
            details["status_code"] = status_code

        super().__init__(message, details)
        self.endpoint = endpoint
        self.status_code = status_code


class AuthenticationError(VisionFiError):
    """Service account credentials could not be loaded or refreshed."""

    pass
