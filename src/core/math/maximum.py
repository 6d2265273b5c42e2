"""
Maximum — максимум двух значений одного типа

Stateless функции без побочных эффектов. Входные значения не копируются
и не сохраняются; результат совпадает с PairHolder.get_max() для той же пары.
"""

from typing import Any, Callable, TypeVar

from src.core.math.ordering import (
    DEFAULT_TIE_BREAK,
    GreaterThan,
    SupportsGreaterThan,
    TieBreak,
    select_greater,
)

CT = TypeVar("CT", bound=SupportsGreaterThan)
T = TypeVar("T")


def max_of(
    a: CT,
    b: CT,
    *,
    tie_break: TieBreak | str = DEFAULT_TIE_BREAK,
    greater: GreaterThan | None = None,
) -> CT:
    """
    Большее из двух значений.

    Возвращает b только если b > a, иначе a (первый аргумент побеждает
    при равенстве).

    Args:
        a: Первое значение
        b: Второе значение
        tie_break: Политика при равенстве (default: TieBreak.FIRST)
        greater: Явный компаратор (a, b) -> bool вместо `>`

    Returns:
        a или b (тот же объект)

    Examples:
        >>> max_of(2, 9)
        9
        >>> max_of(9, 2)
        9
        >>> max_of(4, 4)
        4
        >>> max_of("apple", "pear")
        'pear'
    """
    return select_greater(a, b, tie_break=tie_break, greater=greater)


def max_by_key(
    a: T,
    b: T,
    key: Callable[[T], Any],
    *,
    tie_break: TieBreak | str = DEFAULT_TIE_BREAK,
) -> T:
    """
    Большее из двух значений по ключу: key(b) > key(a).

    Возвращается исходное значение, а не ключ.

    Examples:
        >>> max_by_key("bb", "a", key=len)
        'bb'
        >>> max_by_key(-5, 3, key=abs)
        -5
    """
    if not callable(key):
        raise TypeError(f"key must be callable, got {key!r}")

    def by_key(x: T, y: T) -> bool:
        return key(x) > key(y)

    return select_greater(a, b, tie_break=tie_break, greater=by_key)
