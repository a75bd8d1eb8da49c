from fastapi import status

class BaseAppException(Exception):
    """Base exception for application"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self):
        """Return error response as dictionary"""
        return {"detail": self.message}

class InvalidInputException(BaseAppException):
    """Raised when a request body cannot be decoded into a movie"""
    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class MovieNotFoundException(BaseAppException):
    """Raised when no movie matches the given ID"""
    def __init__(self, message: str = "Movie not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class DataAccessException(BaseAppException):
    """Raised when a database operation fails"""
    def __init__(self, message: str = "Database error"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

class DatabaseUnavailableException(BaseAppException):
    """Raised when the database cannot be reached"""
    def __init__(self, message: str = "Database unavailable"):
        super().__init__(message, status.HTTP_503_SERVICE_UNAVAILABLE)
