"""
limbint — беззнаковые целые произвольной точности в базе 2^32.

Публичный API:
    parse_decimal(s)  → LimbSequence
    add(a, b)         → LimbSequence
    multiply(a, b)    → LimbSequence
    to_limbs(v)       → tuple[int, ...]
"""

from limbint.core.contracts import (
    LimbSequenceValidator,
    SchemaLoader,
    validate_limb_sequence,
)
from limbint.core.domain import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    WIDE_MAX,
    LimbSequence,
    normalize,
    to_limbs,
)
from limbint.core.math import (
    DecimalParserConfig,
    ParseError,
    add,
    multiply,
    multiply_limb,
    parse_decimal,
)

__all__ = [
    # Constants
    "LIMB_BITS",
    "LIMB_BASE",
    "LIMB_MASK",
    "WIDE_MAX",
    # Types
    "LimbSequence",
    "DecimalParserConfig",
    "ParseError",
    # Operations
    "parse_decimal",
    "add",
    "multiply",
    "multiply_limb",
    "normalize",
    "to_limbs",
    # Contracts
    "SchemaLoader",
    "LimbSequenceValidator",
    "validate_limb_sequence",
]
