import logging
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from validated_core import (
    ArityError,
    Validated,
    accum,
    accum_bind,
    curry,
    invalid,
    sequence,
    traverse,
    valid,
    validate,
)

# --- curry ---


def test_curry_applies_one_argument_at_a_time() -> None:
    def join(a: str, b: str, c: str) -> str:
        return a + b + c

    curried = curry(join, 3)
    partial = curried("x")

    assert partial("y")("z") == "xyz"
    assert partial("q")("r") == "xqr"


def test_curry_single_argument() -> None:
    assert curry(str.upper, 1)("a") == "A"


def test_curry_rejects_zero_arity() -> None:
    with pytest.raises(ArityError):
        curry(lambda: None, 0)


# --- accum (two inputs) ---


def test_accum_success(make_user) -> None:
    assert accum(valid("Ola"), valid(35), make_user) == valid(make_user("Ola", 35))


def test_accum_single_failure_on_either_side(make_user) -> None:
    assert accum(valid("Ola"), invalid("E2"), make_user) == invalid("E2")
    assert accum(invalid("E1"), valid(35), make_user) == invalid("E1")


def test_accum_double_failure_accumulates_in_argument_order(make_user) -> None:
    assert accum(invalid("E1"), invalid("E2"), make_user) == invalid("E1", "E2")
    assert accum(invalid("E2"), invalid("E1"), make_user) == invalid("E2", "E1")


def test_accum_keeps_multi_message_inputs_intact(make_user) -> None:
    result = accum(invalid("A1", "A2"), invalid("B1", "A1"), make_user)
    assert result == invalid("A1", "A2", "B1", "A1")


def test_accum_does_not_call_function_on_failure() -> None:
    f = Mock()
    accum(invalid("E1"), valid(2), f)
    accum(valid(1), invalid("E2"), f)
    f.assert_not_called()


def test_accum_user_scenarios(make_user) -> None:
    def age(value: int) -> Validated[int]:
        return validate(value, lambda v: 0 <= v < 150, "The age must be in range [0,150)")

    missing = invalid("The settings do not contain any value with key 'username'")
    failed = accum(missing, age(235), make_user)

    assert failed.fold(lambda m: m.to_list(), lambda _: []) == [
        "The settings do not contain any value with key 'username'",
        "The age must be in range [0,150)",
    ]
    assert accum(valid("Ola"), age(35), make_user) == valid(("Ola", 35))


# --- accum (three to five inputs) ---


def test_accum_three_to_five_inputs_success() -> None:
    assert accum(valid(1), valid(2), valid(3), lambda a, b, c: a + b + c) == valid(6)
    assert accum(
        valid(1), valid(2), valid(3), valid(4), lambda a, b, c, d: [a, b, c, d]
    ) == valid([1, 2, 3, 4])
    assert accum(
        valid("a"),
        valid("b"),
        valid("c"),
        valid("d"),
        valid("e"),
        lambda *parts: "".join(parts),
    ) == valid("abcde")


@pytest.mark.parametrize(
    ("inputs", "expected"),
    [
        ([invalid("E1"), valid(2), invalid("E3")], ["E1", "E3"]),
        ([valid(1), invalid("E2"), valid(3), invalid("E4")], ["E2", "E4"]),
        (
            [invalid("E1"), invalid("E2"), invalid("E3"), invalid("E4"), invalid("E5")],
            ["E1", "E2", "E3", "E4", "E5"],
        ),
        ([valid(1), valid(2), valid(3), valid(4), invalid("E5")], ["E5"]),
    ],
)
def test_accum_higher_arity_collects_all_failures_left_to_right(
    inputs: list[Validated[int]], expected: list[str]
) -> None:
    f = Mock()
    result = accum(*inputs, f)

    assert result.fold(lambda m: m.to_list(), lambda _: None) == expected
    f.assert_not_called()


@pytest.mark.parametrize("count", [0, 1, 6])
def test_accum_rejects_unsupported_arity(count: int) -> None:
    with pytest.raises(ArityError):
        accum(*[valid(i) for i in range(count)], lambda *args: args)


def test_accum_without_arguments() -> None:
    with pytest.raises(ArityError):
        accum()  # type: ignore[call-overload]


def test_accum_rejects_non_validated_input() -> None:
    with pytest.raises(TypeError, match="must be Validated"):
        accum(valid(1), 2, lambda a, b: a + b)  # type: ignore[call-overload]


def test_accum_rejects_non_callable_combiner() -> None:
    with pytest.raises(TypeError, match="callable"):
        accum(valid(1), valid(2), "nope")  # type: ignore[call-overload]


def test_accum_logs_collected_failures(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="validated.accumulate")

    accum(invalid("E1"), invalid("E2"), lambda a, b: (a, b))

    assert "accum over 2 inputs collected 2 failure message(s)" in caplog.text


def test_accum_success_does_not_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="validated.accumulate")

    accum(valid(1), valid(2), lambda a, b: (a, b))

    assert [r for r in caplog.records if r.name == "validated.accumulate"] == []


# --- accum_bind ---


def _checked_sum(a: int, b: int) -> Validated[int]:
    return validate(a + b, lambda total: total < 10, "sum too large")


def test_accum_bind_success() -> None:
    assert accum_bind(valid(2), valid(3), _checked_sum) == valid(5)


def test_accum_bind_function_failure_propagates_alone() -> None:
    assert accum_bind(valid(5), valid(6), _checked_sum) == invalid("sum too large")


def test_accum_bind_input_failures_accumulate_without_calling_function() -> None:
    f = Mock(return_value=valid(0))

    assert accum_bind(invalid("E1"), invalid("E2"), f) == invalid("E1", "E2")
    assert accum_bind(valid(1), invalid("E2"), f) == invalid("E2")
    f.assert_not_called()


def test_accum_bind_higher_arity() -> None:
    def total(a: int, b: int, c: int) -> Validated[int]:
        return valid(a + b + c)

    assert accum_bind(valid(1), valid(2), valid(3), total) == valid(6)
    assert accum_bind(valid(1), invalid("E2"), invalid("E3"), total) == invalid(
        "E2", "E3"
    )


# --- sequence / traverse ---


def test_sequence_all_valid() -> None:
    assert sequence([valid(1), valid(2), valid(3)]) == valid([1, 2, 3])


def test_sequence_empty() -> None:
    assert sequence([]) == valid([])


def test_sequence_collects_every_failure_in_order() -> None:
    result = sequence([invalid("E1"), valid(2), invalid("E3", "E4")])
    assert result == invalid("E1", "E3", "E4")


def test_sequence_accepts_generators() -> None:
    assert sequence(valid(i) for i in range(3)) == valid([0, 1, 2])


def test_traverse() -> None:
    def even(x: int) -> Validated[int]:
        return validate(x, lambda n: n % 2 == 0, f"{x} is odd")

    assert traverse([2, 4], even) == valid([2, 4])
    assert traverse([1, 2, 3], even) == invalid("1 is odd", "3 is odd")
    assert traverse([], even) == valid([])


def test_sequence_many_failures_in_one_pass() -> None:
    result = sequence(invalid(f"E{i}") for i in range(20_000))

    messages = result.fold(lambda m: m.to_list(), lambda _: [])
    assert len(messages) == 20_000
    assert messages[0] == "E0"
    assert messages[-1] == "E19999"


def test_sequence_many_values() -> None:
    assert sequence(valid(i) for i in range(20_000)) == valid(list(range(20_000)))


def test_sequence_does_not_share_result_list() -> None:
    first = sequence([valid(1)])
    second = sequence([valid(1)])

    first.fold(lambda _: None, lambda values: values.append(2))

    assert second == valid([1])


def test_sequence_logs_collected_failures(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="validated.accumulate")

    sequence([invalid("E1"), valid(2), invalid("E3")])

    assert "sequence over 3 inputs collected 2 failure message(s)" in caplog.text


# --- Sharing across threads ---


def test_shared_values_combine_from_many_threads() -> None:
    name = valid("Ola")
    bad_age = invalid("E-age")
    bad_name = invalid("E-name")

    def combine(i: int) -> Validated[tuple[str, int]]:
        if i % 2:
            return accum(bad_name, bad_age, lambda n, a: (n, a))
        return accum(name, valid(i), lambda n, a: (n, a))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(combine, range(64)))

    for i, result in enumerate(results):
        if i % 2:
            assert result == invalid("E-name", "E-age")
        else:
            assert result == valid(("Ola", i))
    assert bad_name == invalid("E-name")
    assert bad_age == invalid("E-age")
