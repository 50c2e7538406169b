"""
Decimal Parser — конверсия десятичной строки в LimbSequence

Базовая конверсия без промежуточной структуры "цифра на элемент":
аккумулятор всегда LimbSequence, каждая цифра вносится как

    acc = add(multiply(acc, 10), digit)

Поддерживается чанкованный режим (DecimalParserConfig.chunk_digits):
за один шаг поглощается до 9 цифр, acc = acc * 10^k + chunk.
10^9 < 2^32, поэтому и множитель, и чанк помещаются в один limb.
Результат одинаков для любого chunk_digits.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Принимаются только ASCII '0'..'9'; пустая строка невалидна
2. Вся строка валидируется до начала арифметики:
   либо парсится целиком, либо ParseError без частичного результата
3. Ведущие нули допустимы и не влияют на значение
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from limbint.core.domain.limb_sequence import LimbSequence
from limbint.core.math.limb_arithmetic import add, multiply

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПАРСЕРА
# =============================================================================

# Максимальный размер чанка: 10^9 < 2^32 <= 10^10
MAX_CHUNK_DIGITS: Final[int] = 9

# Размер чанка по умолчанию: одна цифра за шаг
DEFAULT_CHUNK_DIGITS: Final[int] = 1

_POWERS_OF_TEN: Final[tuple[LimbSequence, ...]] = tuple(
    LimbSequence.from_int(10**k) for k in range(MAX_CHUNK_DIGITS + 1)
)


class ParseError(ValueError):
    """
    Невалидная десятичная строка: пустая или содержит не-ASCII-цифру.

    Attributes:
        text: Исходная строка
        position: Индекс первого невалидного символа (None для пустой строки)
    """

    def __init__(self, message: str, text: str, position: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.position = position


@dataclass(frozen=True)
class DecimalParserConfig:
    """Конфигурация парсера.

    chunk_digits — сколько десятичных цифр поглощается за один шаг
    (1 = по символу, 9 = максимум для одного limb).
    """
    chunk_digits: int = DEFAULT_CHUNK_DIGITS

    def __post_init__(self) -> None:
        if isinstance(self.chunk_digits, bool) or not isinstance(self.chunk_digits, int):
            raise ValueError(f"chunk_digits must be int, got {self.chunk_digits!r}")
        if not 1 <= self.chunk_digits <= MAX_CHUNK_DIGITS:
            raise ValueError(
                f"chunk_digits must be in [1, {MAX_CHUNK_DIGITS}], got {self.chunk_digits}"
            )


# =============================================================================
# ПАРСЕР
# =============================================================================


def _validate_digits(s: str) -> None:
    if not s:
        raise ParseError("decimal string must not be empty", s)

    for position, char in enumerate(s):
        # str.isdigit() принимает и не-ASCII цифры, поэтому сравнение явное
        if not "0" <= char <= "9":
            raise ParseError(
                f"invalid character {char!r} at position {position} in decimal string",
                s,
                position,
            )


def _chunk_value(chunk: str) -> int:
    value = 0
    for char in chunk:
        value = value * 10 + (ord(char) - ord("0"))
    return value


def parse_decimal(s: str, config: Optional[DecimalParserConfig] = None) -> LimbSequence:
    """
    Конверсия десятичной строки в LimbSequence.

    Args:
        s: Строка из ASCII-цифр, ведущие нули допустимы
        config: Конфигурация парсера (default: по одной цифре за шаг)

    Returns:
        Канонная LimbSequence с тем же числовым значением

    Raises:
        TypeError: Если s не str
        ParseError: Если s пустая или содержит не-ASCII-цифру

    Examples:
        >>> parse_decimal("4294967296").limbs
        (0, 1)
        >>> parse_decimal("007") == parse_decimal("7")
        True
    """
    if not isinstance(s, str):
        raise TypeError(f"decimal string must be str, got {type(s).__name__}")

    cfg = config or DecimalParserConfig()
    _validate_digits(s)

    step = cfg.chunk_digits
    acc = LimbSequence.zero()
    for start in range(0, len(s), step):
        chunk = s[start:start + step]
        acc = add(
            multiply(acc, _POWERS_OF_TEN[len(chunk)]),
            LimbSequence.from_int(_chunk_value(chunk)),
        )

    logger.debug(
        "Parsed %d decimal digits into %d limbs (chunk_digits=%d)",
        len(s),
        acc.num_limbs,
        step,
    )
    return acc
