"""
LimbSequence — беззнаковое целое произвольной точности в базе 2^32

Значение хранится как кортеж 32-битных limbs, младший limb первым:

    value = Σ limbs[i] * 2^(32 * i)

Immutable Pydantic модель. Все операции (parser, add, multiply) строят
новый экземпляр и никогда не изменяют операнды.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность никогда не пустая; ноль — ровно (0,)
2. Канонная форма: старший limb != 0, если длина > 1
   (восстанавливается normalize() после каждой операции)
3. Каждый limb — int в диапазоне [0, LIMB_MASK]
"""

from typing import Annotated, Final, Iterable

from pydantic import BaseModel, Field

# =============================================================================
# LIMB-ПАРАМЕТРЫ
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 32

# База позиционной записи
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска младших 32 бит (также максимальное значение limb)
LIMB_MASK: Final[int] = LIMB_BASE - 1

# Верхняя граница аккумулятора при умножении limb-пары:
# (2^32 - 1)^2 + 2 * (2^32 - 1) = 2^64 - 1 → помещается ровно в 64 бита
WIDE_MAX: Final[int] = (1 << (2 * LIMB_BITS)) - 1

assert LIMB_MASK * LIMB_MASK + 2 * LIMB_MASK == WIDE_MAX


Limb = Annotated[int, Field(strict=True, ge=0, le=LIMB_MASK)]


# =============================================================================
# LIMB SEQUENCE MODEL
# =============================================================================


class LimbSequence(BaseModel):
    """
    Беззнаковое целое в базе 2^32.

    Immutable модель (frozen=True). Сравнение и hash — по числовому значению:
    (342,) и (342, 0, 0) равны, хотя вторая последовательность не канонная.
    """

    limbs: tuple[Limb, ...] = Field(
        ..., min_length=1, description="Limbs, младший первым (uint32)"
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "LimbSequence":
        return cls._trusted((0,))

    @classmethod
    def one(cls) -> "LimbSequence":
        return cls._trusted((1,))

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "LimbSequence":
        """
        Построение из произвольных limbs с валидацией.

        Канонная форма НЕ восстанавливается: (342, 0, 0) остаётся как есть.

        Raises:
            pydantic.ValidationError: Пустая последовательность или limb вне uint32
        """
        return cls(limbs=tuple(limbs))

    @classmethod
    def from_int(cls, value: int) -> "LimbSequence":
        """
        Конверсия python int → канонная LimbSequence.

        Args:
            value: Неотрицательное целое

        Raises:
            TypeError: Если value не int (bool тоже отклоняется)
            ValueError: Если value < 0
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"value must be non-negative, got {value}")

        limbs = []
        while value:
            limbs.append(value & LIMB_MASK)
            value >>= LIMB_BITS
        return cls._trusted(tuple(limbs) or (0,))

    @classmethod
    def _trusted(cls, limbs: tuple[int, ...]) -> "LimbSequence":
        # limbs уже замаскированы вызывающим кодом, повторная валидация не нужна
        return cls.model_construct(limbs=limbs)

    # -------------------------------------------------------------------------
    # Доступ к представлению
    # -------------------------------------------------------------------------

    @property
    def num_limbs(self) -> int:
        return len(self.limbs)

    @property
    def is_zero(self) -> bool:
        return not any(self.limbs)

    @property
    def is_normalized(self) -> bool:
        """True если последовательность в канонной форме."""
        return len(self.limbs) == 1 or self.limbs[-1] != 0

    def limb(self, index: int) -> int:
        """
        Limb по индексу с нулевым расширением: за пределами длины → 0.

        Raises:
            IndexError: Если index < 0
        """
        if index < 0:
            raise IndexError(f"limb index must be non-negative, got {index}")
        if index < len(self.limbs):
            return self.limbs[index]
        return 0

    def to_limbs(self) -> tuple[int, ...]:
        return self.limbs

    def to_int(self) -> int:
        value = 0
        for limb in reversed(self.limbs):
            value = (value << LIMB_BITS) | limb
        return value

    # -------------------------------------------------------------------------
    # Сравнение по значению
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LimbSequence):
            return NotImplemented
        return _canonical_limbs(self.limbs) == _canonical_limbs(other.limbs)

    def __hash__(self) -> int:
        return hash(_canonical_limbs(self.limbs))

    def __repr__(self) -> str:
        return f"LimbSequence(limbs={self.limbs!r})"


# =============================================================================
# NORMALIZER
# =============================================================================


def _canonical_limbs(limbs: tuple[int, ...]) -> tuple[int, ...]:
    end = len(limbs)
    while end > 1 and limbs[end - 1] == 0:
        end -= 1
    return limbs[:end]


def normalize(seq: LimbSequence) -> LimbSequence:
    """
    Восстановление канонной формы: удаление старших нулевых limbs.

    Удаляет последний limb, пока он равен 0 и limbs больше одного.
    Никогда не падает. Если seq уже канонная, возвращается сам seq
    (значение immutable, разделять его безопасно).

    Examples:
        >>> normalize(LimbSequence(limbs=(342, 0, 0))).limbs
        (342,)
        >>> normalize(LimbSequence(limbs=(0, 0))).limbs
        (0,)
    """
    if seq.is_normalized:
        return seq
    return LimbSequence._trusted(_canonical_limbs(seq.limbs))


def to_limbs(seq: LimbSequence) -> tuple[int, ...]:
    """
    Read-only экспорт внутреннего представления (interop/тесты).

    Returns:
        Кортеж uint32, младший limb первым
    """
    return seq.to_limbs()
