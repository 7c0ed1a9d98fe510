# File: src/geokit/utils/validation.py
"""
Validation helpers shared across geokit.

Pydantic reports validation problems as structured error lists; these
helpers turn them into the one-line messages geokit errors carry.
"""

from pydantic import ValidationError as PydanticValidationError

VALUE_ERROR_PREFIX = "Value error, "


def describe_validation_error(error: PydanticValidationError) -> str:
    """
    Summarize a pydantic ValidationError on one line.
    
    Args:
        error: The validation error
        
    Returns:
        Messages joined with '; ', each prefixed with its location when it has one
        
    Example:
        >>> describe_validation_error(err)
        'min_level: Input should be less than or equal to 30'
    """
    messages = []
    for err in error.errors():
        message = err['msg']
        if message.startswith(VALUE_ERROR_PREFIX):
            message = message[len(VALUE_ERROR_PREFIX):]
        location = '.'.join(str(part) for part in err['loc'])
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)
