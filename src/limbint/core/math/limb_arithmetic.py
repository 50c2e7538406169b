"""
Limb Arithmetic — schoolbook сложение и умножение в базе 2^32

Модуль реализует арифметику над LimbSequence:
- add: поразрядное сложение с переносом (carry ∈ {0, 1})
- multiply: умножение "в столбик" O(n·m) с широким аккумулятором
- multiply_limb: умножение на один limb за один проход

Python int не ограничен по ширине, поэтому фиксированная ширина
выражена явно: младшие 32 бита выделяются через & LIMB_MASK,
перенос — через >> LIMB_BITS.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Аккумулятор сложения < 2^33 (два limb + carry 1)
2. Аккумулятор умножения <= WIDE_MAX = 2^64 - 1:
   a[i] * b[j] + result[i+j] + carry <= (2^32 - 1)^2 + 2 * (2^32 - 1)
3. Каждый результат проходит через normalize()
4. Операнды никогда не изменяются, результат — новый экземпляр
"""

from limbint.core.domain.limb_sequence import (
    LIMB_BITS,
    LIMB_MASK,
    LimbSequence,
    normalize,
)


# =============================================================================
# ADDER
# =============================================================================


def add(a: LimbSequence, b: LimbSequence) -> LimbSequence:
    """
    Сумма двух LimbSequence.

    Длина результата: max(len(a), len(b)) или max(len(a), len(b)) + 1.

    Examples:
        >>> add(LimbSequence(limbs=(0xFFFFFFFF,)), LimbSequence(limbs=(1,))).limbs
        (0, 1)
    """
    x, y = a.limbs, b.limbs
    if len(x) < len(y):
        x, y = y, x

    result = []
    carry = 0
    for i in range(len(y)):
        acc = x[i] + y[i] + carry
        result.append(acc & LIMB_MASK)
        carry = acc >> LIMB_BITS

    # Недостающие limbs короткого операнда считаются нулями
    for i in range(len(y), len(x)):
        acc = x[i] + carry
        result.append(acc & LIMB_MASK)
        carry = acc >> LIMB_BITS

    if carry:
        result.append(carry)

    return normalize(LimbSequence._trusted(tuple(result)))


# =============================================================================
# MULTIPLIER
# =============================================================================


def multiply_limb(a: LimbSequence, d: int) -> LimbSequence:
    """
    Произведение LimbSequence на один limb.

    Одна строка schoolbook-умножения: a[i] * d + carry <= 2^64 - 2^32.

    Args:
        a: Множимое
        d: Множитель, uint32

    Raises:
        ValueError: Если d вне [0, LIMB_MASK]
    """
    if not 0 <= d <= LIMB_MASK:
        raise ValueError(f"d must be a 32-bit limb, got {d}")

    if d == 0 or a.is_zero:
        return LimbSequence.zero()
    if d == 1:
        return normalize(a)

    result = []
    carry = 0
    for x in a.limbs:
        acc = x * d + carry
        result.append(acc & LIMB_MASK)
        carry = acc >> LIMB_BITS

    if carry:
        result.append(carry)

    return normalize(LimbSequence._trusted(tuple(result)))


def multiply(a: LimbSequence, b: LimbSequence) -> LimbSequence:
    """
    Произведение двух LimbSequence (schoolbook, O(n·m)).

    Алгоритм:
        result = [0] * (n + m)
        для каждого i в a, для каждого j в b:
            acc = a[i] * b[j] + result[i + j] + carry
            result[i + j] = acc & LIMB_MASK
            carry = acc >> LIMB_BITS
        перенос строки записывается в result[i + m]

    Каждый перенос полностью разрешается до перехода к следующему i.
    Операнд из одного limb обрабатывается через multiply_limb
    (численно эквивалентно общему циклу).

    Examples:
        >>> multiply(
        ...     LimbSequence(limbs=(0xFFFFFFFF,)), LimbSequence(limbs=(0xFFFFFFFF,))
        ... ).limbs
        (1, 4294967294)
    """
    if a.is_zero or b.is_zero:
        return LimbSequence.zero()

    # Trailing zeros не дают вклада в произведение
    x = normalize(a).limbs
    y = normalize(b).limbs

    if len(y) == 1:
        return multiply_limb(a, y[0])
    if len(x) == 1:
        return multiply_limb(b, x[0])

    n, m = len(x), len(y)
    result = [0] * (n + m)

    for i, xi in enumerate(x):
        if xi == 0:
            continue

        carry = 0
        k = i
        for yj in y:
            acc = xi * yj + result[k] + carry
            result[k] = acc & LIMB_MASK
            carry = acc >> LIMB_BITS
            k += 1

        # result[i + m] ещё не тронут строками 0..i-1 (они пишут до i + m - 1)
        result[k] = carry

    return normalize(LimbSequence._trusted(tuple(result)))
