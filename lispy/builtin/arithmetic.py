"""Arithmetic builtins. Each folds left to right over Number arguments."""
from __future__ import annotations

from lispy.builtin.checks import expect_all, expect_at_least
from lispy.diagnostics import DIVISION_BY_ZERO
from lispy.errors import LispyDomainError
from lispy.types.environment import Environment
from lispy.types.values import Number, Value


def _numbers(name: str, args: list[Value]) -> list[int]:
    expect_at_least(name, args, 1)
    expect_all(name, args, Number)
    return [a.value for a in args]


def _trunc_div(a: int, b: int) -> int:
    # Integer division rounding toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def add(env: Environment, args: list[Value]) -> Value:
    """Return the sum of all arguments."""
    return Number(sum(_numbers("+", args)))


def sub(env: Environment, args: list[Value]) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = _numbers("-", args)
    if len(nums) == 1:
        return Number(-nums[0])
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return Number(result)


def mul(env: Environment, args: list[Value]) -> Value:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers("*", args):
        result *= x
    return Number(result)


def div(env: Environment, args: list[Value]) -> Value:
    """Divide left-to-right, truncating toward zero; a zero divisor is an error."""
    nums = _numbers("/", args)
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise LispyDomainError(DIVISION_BY_ZERO)
        result = _trunc_div(result, x)
    return Number(result)


def mod(env: Environment, args: list[Value]) -> Value:
    """Remainder left-to-right; the sign follows the dividend."""
    nums = _numbers("%", args)
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise LispyDomainError(DIVISION_BY_ZERO)
        result -= x * _trunc_div(result, x)
    return Number(result)
