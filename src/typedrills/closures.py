"""
Functions passed as arguments.

`does_apply` and `manipulate_strings` take a function value. A named
function, a lambda and a nested `def` are interchangeable there.
"""

from collections.abc import Callable

from beartype import beartype

IntPredicate = Callable[[int, int], bool]
StringTransform = Callable[[str, str], str | None]

SMALL_STRING_LIMIT = 5


@beartype
def sum_of_digits(a: int) -> int:
    """Sum of the decimal digits of `a`; the sign is ignored."""
    return sum(int(digit) for digit in str(abs(a)))


@beartype
def does_apply(a: int, b: int, predicate: IntPredicate) -> bool:
    return predicate(a, b)


@beartype
def are_both_divisible_by_three(a: int, b: int) -> bool:
    return a % 3 == 0 and b % 3 == 0


@beartype
def have_same_digit_sum(a: int, b: int) -> bool:
    return sum_of_digits(a) == sum_of_digits(b)


@beartype
def manipulate_strings(a: str, b: str, transform: StringTransform) -> None:
    """Print the transform's result; print nothing when it returns None."""
    result = transform(a, b)
    if result is None:
        return
    print(result)


@beartype
def concatenate_small_strings(a: str, b: str) -> str | None:
    """
    Concatenate when both strings are shorter than 5 characters.

    Length is `len()`, so it counts code points: a letter written with a
    combining accent counts as two.
    """
    if len(a) < SMALL_STRING_LIMIT and len(b) < SMALL_STRING_LIMIT:
        return a + b
    return None
