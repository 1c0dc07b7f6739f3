"""Custom exceptions for the datasets proxy."""


class DatasetsAppError(Exception):
    """Base exception for the datasets proxy."""

    pass


class UpstreamUnreachable(DatasetsAppError):
    """Exception raised when the marketplace cannot be reached or times out."""

    pass


class UpstreamError(DatasetsAppError):
    """Exception raised when the marketplace answers with a non-success status."""

    def __init__(self, status_code: int, message: str, response_text: str = ""):
        self.status_code = status_code
        self.message = message
        self.response_text = response_text
        super().__init__(f"Marketplace API error {status_code}: {message}")


class InvalidUpstreamPayload(DatasetsAppError):
    """Exception raised when the marketplace body is not valid JSON."""

    pass


class ConfigurationError(DatasetsAppError):
    """Exception raised for configuration errors."""

    pass
