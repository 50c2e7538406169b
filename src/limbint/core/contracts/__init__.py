"""
Contract Validation Module

Валидация JSON-представления LimbSequence.
"""

from .validators import (
    ContractValidator,
    LimbSequenceValidator,
    SchemaLoader,
    validate_limb_sequence,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LimbSequenceValidator",
    # Functions
    "validate_limb_sequence",
]
