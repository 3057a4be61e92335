from .validation import (
    is_missing,
    to_double,
)
