"""
Log sanitization utilities to keep document names and identifiers out of logs.

Resource names can carry customer or incident details, so only a short preview
and the length are logged. Identifiers are shortened.
"""

import re


def sanitize_email(email: str) -> str:
    """
    Sanitize email address for logging by showing only domain and length.

    Example:
        "user@example.com" -> "***@example.com (16 chars)"
    """
    if not email or '@' not in email:
        return "[invalid-email]"

    local_part, domain = email.split('@', 1)
    return f"***@{domain} ({len(email)} chars)"


def sanitize_name(name: str, max_preview_length: int = 20) -> str:
    """
    Sanitize a file or folder name for logging.

    Args:
        name: Resource name to sanitize
        max_preview_length: Maximum characters to show from the name

    Returns:
        Sanitized name representation
    """
    if not name:
        return "[empty-name]"

    preview = name[:max_preview_length]
    if len(name) > max_preview_length:
        preview += "..."

    return f"'{preview}' ({len(name)} chars)"


def sanitize_query(query: str, max_length: int = 60) -> str:
    """
    Sanitize a Drive search query for logging by removing potential PII.

    Args:
        query: Search query to sanitize
        max_length: Maximum length to show

    Returns:
        Sanitized query representation
    """
    if not query:
        return "[empty-query]"

    # Replace email addresses in query
    sanitized = re.sub(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b',
                       '[EMAIL]', query)

    # Replace the value compared against the name
    sanitized = re.sub(r"name = '(?:[^'\\]|\\.)*'", "name = '[NAME]'", sanitized)

    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length] + "..."

    return f"'{sanitized}' ({len(query)} chars)"


def sanitize_resource_id(resource_id: str) -> str:
    """
    Sanitize a Drive file, folder or drive id for logging.

    Args:
        resource_id: Identifier to sanitize

    Returns:
        Sanitized identifier representation
    """
    if not resource_id:
        return "[no-id]"

    # Show only first 8 and last 4 characters
    if len(resource_id) <= 12:
        return f"[id: {resource_id}]"
    else:
        return f"[id: {resource_id[:8]}...{resource_id[-4:]}]"


def sanitize_for_logging(**kwargs) -> dict:
    """
    Sanitize multiple fields for logging in one call.

    Args:
        **kwargs: Fields to sanitize (name, query, *_id, email, etc.)

    Returns:
        Dictionary with sanitized values
    """
    sanitized = {}

    for key, value in kwargs.items():
        if key == 'name' or key.endswith('_name'):
            sanitized[key] = sanitize_name(value)
        elif key == 'query':
            sanitized[key] = sanitize_query(value) if value else None
        elif key == 'id' or key.endswith('_id'):
            sanitized[key] = sanitize_resource_id(value) if value else None
        elif key == 'email' and isinstance(value, str):
            sanitized[key] = sanitize_email(value)
        else:
            # For other fields, just include as-is (non-PII data)
            sanitized[key] = value

    return sanitized
