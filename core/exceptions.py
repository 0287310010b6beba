"""
Custom exceptions for the node import pipeline with structured error context.

Every error carries a context dictionary so that failures can be logged
and reported to the admin endpoint with enough detail to diagnose them.

Exception Hierarchy:
    NodeSyncError (base)
    ├── ExtractionError
    │   ├── TransportError
    │   ├── HttpStatusError
    │   └── DecodeError
    └── LoadError
        └── StorageError
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class NodeSyncError(Exception):
    """
    Base exception for all node import errors.
    
    Attributes:
        message: Human-readable error message
        context: Additional context information (url, status, table, etc.)
        original_exception: The original exception that was caught (if any)
    """
    
    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = dict(context or {})
        self.original_exception = original_exception
        self.timestamp = datetime.now(timezone.utc)
        
        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception
    
    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = self.message
        
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"
        
        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"
        
        return base_msg
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Extraction Errors
# ============================================================================

class ExtractionError(NodeSyncError):
    """Base exception for failures talking to the upstream feed."""
    pass


class TransportError(ExtractionError):
    """
    The upstream feed could not be reached.
    
    Context should include:
        - api_url: The URL that was requested
        - timeout: Request timeout in seconds
    """
    pass


class HttpStatusError(ExtractionError):
    """
    The upstream feed answered with a non-success status code.
    
    Context should include:
        - api_url: The URL that was requested
        - status_code: HTTP status code
        - response_body: Response body (truncated)
    """
    
    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: str = "",
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, context, original_exception)
        self.status_code = status_code
        self.response_body = response_body
        self.context["status_code"] = status_code
        self.context["response_body"] = response_body


class DecodeError(ExtractionError):
    """
    The upstream payload is not a JSON array of node records.
    
    Context should include:
        - api_url: The URL that was requested
        - record_index: Index of the offending element (if applicable)
    """
    pass


# ============================================================================
# Load Errors
# ============================================================================

class LoadError(NodeSyncError):
    """Base exception for data loading failures."""
    pass


class StorageError(LoadError):
    """
    A database transaction or connection failed.
    
    Context should include:
        - operation: Type of database operation (UPSERT, SELECT)
        - table_name: Name of the table
        - batch_size: Number of records in the failed batch (writes)
    """
    pass
