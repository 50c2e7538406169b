"""
Domain models and value objects.

Contains the LimbSequence value type and its Normalizer.
"""

from limbint.core.domain.limb_sequence import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    WIDE_MAX,
    LimbSequence,
    normalize,
    to_limbs,
)

__all__ = [
    # Constants
    "LIMB_BITS",
    "LIMB_BASE",
    "LIMB_MASK",
    "WIDE_MAX",
    # Model
    "LimbSequence",
    # Normalizer
    "normalize",
    "to_limbs",
]
