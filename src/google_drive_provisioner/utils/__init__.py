from .log_sanitizer import sanitize_for_logging

__all__ = ["sanitize_for_logging"]
