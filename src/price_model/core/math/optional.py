"""
Optional — Пропагация неизвестных значений

Любая производная величина модели может быть неизвестна (None), пока
внешние метрики не загружены. Модуль даёт один комбинатор, через который
проходят все расчёты: если хотя бы один аргумент None, результат None.

КРИТИЧЕСКИЙ ИНВАРИАНТ:
Неизвестное значение никогда не подменяется нулём. Ложный ноль выдал бы
неизвестную рыночную величину за вычисленную.
"""

import functools
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


def all_defined(*values: object) -> bool:
    """True если ни одно из значений не None."""
    return all(value is not None for value in values)


def lift_optional(func: Callable[P, R]) -> Callable[P, R | None]:
    """
    Поднимает функцию над Optional-аргументами.

    Обёрнутая функция возвращает None, если любой позиционный или
    именованный аргумент равен None; иначе вызывает исходную функцию.

    Examples:
        >>> @lift_optional
        ... def add(a: float, b: float) -> float:
        ...     return a + b
        >>> add(1.0, 2.0)
        3.0
        >>> add(1.0, None) is None
        True
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:
        if not all_defined(*args, *kwargs.values()):
            return None
        return func(*args, **kwargs)

    return wrapper