"""
Ordering — общий контракт сравнения для поиска максимума

Модуль содержит единственную процедуру выбора большего из двух значений,
которой пользуются и free-функция max_of, и доменная модель PairHolder:
- Protocol SupportsGreaterThan (требуется только строгий `>`)
- Политика tie-break для равных значений
- Компаратор по умолчанию (нативный оператор `>`)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. При равенстве (ни одно значение не строго больше) возвращается first
   (политика по умолчанию TieBreak.FIRST)
2. Сравнение выполняется ровно один раз за вызов
3. Значения возвращаются как есть: без копирования и преобразования
4. Ошибки сравнения T не перехватываются: логируются и пробрасываются
"""

import logging
from enum import Enum
from typing import Any, Callable, Final, Protocol, TypeVar

import structlog

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

LOGGER_NAME: Final[str] = "pairmax.ordering"

# Stdlib-логгер: без настройки хостом debug-события никуда не выводятся
logger = structlog.wrap_logger(
    logging.getLogger(LOGGER_NAME),
    wrapper_class=structlog.stdlib.BoundLogger,
)


# =============================================================================
# ТИПЫ
# =============================================================================


class SupportsGreaterThan(Protocol):
    """Тип, поддерживающий строгое сравнение `>`"""

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T")

# Компаратор: greater(a, b) == True означает "a строго больше b"
GreaterThan = Callable[[Any, Any], bool]


class TieBreak(str, Enum):
    """
    Политика выбора при равенстве значений.

    FIRST: second побеждает только если second > first
    SECOND: first побеждает только если first > second
    """

    FIRST = "first"
    SECOND = "second"


DEFAULT_TIE_BREAK: Final[TieBreak] = TieBreak.FIRST


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def native_greater(a: Any, b: Any) -> bool:
    """Компаратор по умолчанию: нативный оператор `>`"""
    return a > b


def select_greater(
    first: T,
    second: T,
    tie_break: TieBreak | str = DEFAULT_TIE_BREAK,
    greater: GreaterThan | None = None,
) -> T:
    """
    Выбор большего из двух значений.

    Общая процедура для max_of и PairHolder.get_max, гарантирующая
    одинаковый результат обоих компонентов.

    Args:
        first: Первое значение (предпочтительное при TieBreak.FIRST)
        second: Второе значение
        tie_break: Политика при равенстве (default: TieBreak.FIRST)
        greater: Компаратор (a, b) -> bool, default: native_greater

    Returns:
        Большее из значений (тот же объект, без копирования)

    Raises:
        ValueError: Если tie_break не является значением TieBreak
        TypeError: Если greater не вызываемый
        Exception: Любая ошибка сравнения T пробрасывается без изменений

    Examples:
        >>> select_greater(3, 7)
        7
        >>> select_greater(7, 3)
        7
        >>> select_greater(1.0, 1, tie_break=TieBreak.SECOND)
        1
    """
    policy = TieBreak(tie_break)

    if greater is None:
        greater = native_greater
    elif not callable(greater):
        raise TypeError(f"greater must be callable, got {greater!r}")

    try:
        if policy is TieBreak.FIRST:
            return second if greater(second, first) else first
        return first if greater(first, second) else second
    except Exception as exc:
        logger.debug(
            "comparison_failed",
            first_type=type(first).__name__,
            second_type=type(second).__name__,
            tie_break=policy.value,
            error=str(exc),
        )
        raise
