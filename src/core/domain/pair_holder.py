"""
PairHolder — Модель пары значений одного типа

Immutable Pydantic модель, владеющая ровно двумя значениями (first, second)
и возвращающая большее из них по запросу.

Модель generic: PairHolder(3, 7) хранит значения как есть,
PairHolder[int](3, 7) дополнительно валидирует тип элементов в strict-режиме
(без преобразования: PairHolder[int]("3", "10") отклоняется).
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from src.core.math.ordering import (
    DEFAULT_TIE_BREAK,
    GreaterThan,
    TieBreak,
    select_greater,
)

T = TypeVar("T")

_SLOTS = ("first", "second")


# =============================================================================
# PAIR HOLDER MODEL
# =============================================================================


class PairHolder(BaseModel, Generic[T]):
    """
    Пара значений одного типа с операцией get_max.

    Immutable модель (frozen=True): после создания значения не меняются,
    мутаторов нет. Инвариант: всегда ровно два элемента.
    """

    first: T = Field(
        ..., strict=True, description="Первое значение (побеждает при равенстве)"
    )
    second: T = Field(..., strict=True, description="Второе значение")

    tie_break: TieBreak = Field(
        default=DEFAULT_TIE_BREAK, description="Политика при равенстве значений"
    )
    greater: GreaterThan | None = Field(
        default=None,
        exclude=True,
        description="Явный компаратор (a, b) -> bool вместо `>`",
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def __init__(self, *args: Any, **data: Any) -> None:
        """
        Создание пары: PairHolder(first, second) или
        PairHolder(first=..., second=...).

        Raises:
            TypeError: Если передано больше двух позиционных значений
                или значение задано и позиционно, и по имени
            ValidationError: Если значения не проходят валидацию типа
        """
        if len(args) > len(_SLOTS):
            raise TypeError(
                f"PairHolder takes exactly 2 values, got {len(args)} positional"
            )

        for name, value in zip(_SLOTS, args):
            if name in data:
                raise TypeError(f"PairHolder got multiple values for '{name}'")
            data[name] = value

        super().__init__(**data)

    def get_max(self) -> T:
        """
        Большее из двух хранимых значений.

        Returns:
            second если second > first, иначе first

        Examples:
            >>> PairHolder(3, 7).get_max()
            7
            >>> PairHolder(5, 5).get_max()
            5
        """
        return select_greater(
            self.first,
            self.second,
            tie_break=self.tie_break,
            greater=self.greater,
        )

    def as_tuple(self) -> tuple[T, T]:
        """Пара в виде кортежа (first, second)"""
        return (self.first, self.second)
