"""
Core math modules для limbint

Schoolbook арифметика над LimbSequence и парсинг десятичных строк.
"""

# Limb Arithmetic
from limbint.core.math.limb_arithmetic import (
    add,
    multiply,
    multiply_limb,
)

# Decimal Parser
from limbint.core.math.decimal_parser import (
    DEFAULT_CHUNK_DIGITS,
    MAX_CHUNK_DIGITS,
    DecimalParserConfig,
    ParseError,
    parse_decimal,
)

__all__ = [
    # Limb Arithmetic
    "add",
    "multiply",
    "multiply_limb",
    # Decimal Parser — Constants
    "DEFAULT_CHUNK_DIGITS",
    "MAX_CHUNK_DIGITS",
    # Decimal Parser — Types
    "DecimalParserConfig",
    "ParseError",
    # Decimal Parser — Functions
    "parse_decimal",
]
