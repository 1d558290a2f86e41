import asyncio

import pytest
from kungfu import Error, Ok

from effectlog import BottomError, Log, Writer, WriterResult, writer_bottom, writer_of


def rejected(value):
    """A Writer that short-circuits via filter."""
    return Writer.pure(value).filter(lambda _: False)


# ============================================================================
# Construction
# ============================================================================


@pytest.mark.parametrize("value", [0, "x", None, [1, 2], (1, "a")])
def test_pure_is_identity(value):
    wr = Writer.pure(value).evaluate()
    assert wr.value == value
    assert wr.log == []
    assert wr.is_bottom is False


def test_tell_writes_entries_only():
    assert Writer.tell("a", "b").evaluate() == WriterResult(None, ["a", "b"])


def test_writer_of_and_bottom():
    assert writer_of(1, "a").evaluate() == WriterResult(1, ["a"])
    wr = writer_bottom("why").evaluate()
    assert wr.is_bottom
    assert wr.log == ["why"]


def test_from_result():
    assert Writer.from_result(Ok(3)).evaluate() == WriterResult(3, [])
    assert Writer.from_result(Error("boom")).evaluate().is_bottom


def test_composed_chain_evaluates_identically_twice():
    w = (
        writer_of(3, "start")
        .bind(lambda x: writer_of(x * 2, f"doubled:{x}"))
        .filter(lambda x: x > 5)
        .with_log("end")
    )
    first = w.evaluate()
    second = w.evaluate()
    assert first == second
    assert first == WriterResult(6, ["start", "doubled:3", "end"])
    assert w() == first


def test_mutating_a_result_log_does_not_leak_into_later_evaluations():
    w = writer_of(3, "start").bind(lambda x: writer_of(x + 1, "next")).with_log("end")
    first = w.evaluate()
    first.log.append("tampered")
    assert w.evaluate().log == ["start", "next", "end"]


def test_listen_value_log_is_independent_of_result_log():
    wr = writer_of(1, "a").listen().evaluate()
    _, seen = wr.value
    assert seen is not wr.log
    seen.append("extra")
    assert wr.log == ["a"]


def test_result_copies_incoming_log():
    log = Log.of("a")
    wr = WriterResult(1, log)
    log.append("b")
    assert wr.log == ["a"]


# ============================================================================
# Scenarios
# ============================================================================


def test_lift_then_map():
    assert Writer.pure(5).map(lambda x: x * 2).evaluate() == WriterResult(10, [])


def test_bind_collects_log():
    w = Writer.pure(3).bind(lambda x: writer_of(x + 1, f"logged-{x}"))
    assert w.evaluate() == WriterResult(4, ["logged-3"])


def test_filter_rejection_skips_map(recorder):
    w = Writer.pure(7).filter(lambda x: x > 10).map(recorder.wrap(lambda x: x + 1))
    assert w.evaluate().is_bottom
    assert not recorder.called


def test_count():
    assert Writer.pure("anything").count().evaluate() == WriterResult(1, [])
    assert rejected("anything").count().evaluate().is_bottom


# ============================================================================
# Monad laws and log order
# ============================================================================


def f(x):
    return writer_of(x + 1, f"f:{x}", "f-done")


def g(x):
    return writer_of(x * 10, f"g:{x}")


def g_rejects(x):
    return writer_of(x, f"g:{x}").filter(lambda v: v > 100)


@pytest.mark.parametrize(
    "m",
    [
        Writer.pure(1),
        writer_of(2, "a", "b"),
        writer_bottom("stopped"),
        writer_of(5, "x").filter(lambda v: v < 0),
    ],
)
@pytest.mark.parametrize("second", [g, g_rejects])
def test_bind_associativity(m, second):
    left = m.bind(f).bind(second).evaluate()
    right = m.bind(lambda x: f(x).bind(second)).evaluate()
    assert left.is_bottom == right.is_bottom
    assert left.log == right.log
    if not left.is_bottom:
        assert left.value == right.value


def test_left_and_right_identity():
    assert Writer.pure(4).bind(f).evaluate() == f(4).evaluate()
    m = writer_of(4, "a")
    assert m.bind(Writer.pure).evaluate() == m.evaluate()


def test_log_concatenation_order():
    m = writer_of(0, "a", "b")
    w = m.bind(lambda _: writer_of(1, "c", "d"))
    assert w.evaluate().log == ["a", "b", "c", "d"]


def test_bind_takes_second_step_bottom_flag():
    w = writer_of(1, "a").bind(lambda x: rejected(x).with_log("b"))
    wr = w.evaluate()
    assert wr.is_bottom
    assert wr.log == ["a", "b"]


# ============================================================================
# Bottom absorption
# ============================================================================


@pytest.mark.parametrize(
    "combinator",
    [
        lambda w, fn: w.map(fn),
        lambda w, fn: w.bind(lambda x: Writer.pure(fn(x))),
        lambda w, fn: w.fold(0, lambda acc, x: fn(x)),
        lambda w, fn: w.for_all(fn),
        lambda w, fn: w.exists(fn),
        lambda w, fn: w.filter(fn),
        lambda w, fn: w.select_many(lambda x: Writer.pure(fn(x)), lambda t, u: u),
    ],
    ids=["map", "bind", "fold", "for_all", "exists", "filter", "select_many"],
)
def test_bottom_absorbs_without_calling_closures(recorder, combinator):
    source = writer_of(1, "kept").filter(lambda _: False)
    wr = combinator(source, recorder.wrap(lambda x: True)).evaluate()
    assert wr.is_bottom
    assert wr.log == ["kept"]
    assert not recorder.called


def test_bottom_absorbs_count_and_sum():
    assert rejected(3).count().evaluate().is_bottom
    assert rejected(3).sum().evaluate().is_bottom


def test_bottom_is_terminal_across_a_chain():
    w = (
        writer_of(1, "start")
        .filter(lambda x: x > 1)
        .map(lambda x: x + 1)
        .bind(lambda x: writer_of(x, "never"))
        .fold(0, lambda acc, x: acc + x)
    )
    wr = w.evaluate()
    assert wr.is_bottom
    assert wr.log == ["start"]


# ============================================================================
# filter / iter / folds
# ============================================================================


@pytest.mark.parametrize("value, expected_bottom", [(11, False), (10, True), (-1, True)])
def test_filter_semantics(value, expected_bottom):
    m = writer_of(value, "v")
    wr = m.filter(lambda x: x > 10).evaluate()
    assert wr.is_bottom is expected_bottom
    assert wr.log == ["v"]


def test_where_is_filter():
    assert Writer.where is Writer.filter


def test_iter_runs_action_once_and_discards_log(recorder):
    wr = writer_of(5, "a", "b").iter(recorder.wrap(lambda x: None)).evaluate()
    assert recorder.calls == [(5,)]
    assert wr == WriterResult(None, [])


def test_iter_skips_action_on_bottom(recorder):
    wr = writer_of(5, "a").filter(lambda _: False).iter(recorder.wrap(lambda x: None)).evaluate()
    assert recorder.calls == []
    assert wr.log == []


def test_fold_sum_predicates():
    m = writer_of(4, "n")
    assert m.fold(10, lambda acc, x: acc + x).evaluate() == WriterResult(14, ["n"])
    assert m.sum().evaluate() == WriterResult(4, ["n"])
    assert m.for_all(lambda x: x % 2 == 0).evaluate().value is True
    assert m.exists(lambda x: x > 5).evaluate().value is False


# ============================================================================
# Log operations
# ============================================================================


def test_with_log_appends_after_existing_entries():
    assert writer_of(1, "a").with_log("b", "c").evaluate().log == ["a", "b", "c"]


def test_with_log_keeps_bottom():
    wr = rejected(1).with_log("after").evaluate()
    assert wr.is_bottom
    assert wr.log == ["after"]


def test_listen_exposes_log():
    wr = writer_of(1, "a").listen().evaluate()
    value, log = wr.value
    assert value == 1
    assert log == ["a"]
    assert wr.log == ["a"]


def test_censor_and_map_log():
    m = writer_of(1, "a", "b")
    assert m.censor(lambda log: Log(reversed(log))).evaluate().log == ["b", "a"]
    assert m.map_log(lambda log: [e.upper() for e in log]).evaluate().log == ["A", "B"]


# ============================================================================
# Accessors
# ============================================================================


def test_values_accessor():
    assert list(Writer.pure(1).values()) == [1]
    assert list(rejected(1).values()) == []


def test_unwrap():
    assert Writer.pure(2).unwrap() == 2
    assert rejected(2).unwrap_or(0) == 0
    with pytest.raises(BottomError):
        rejected(2).unwrap()


def test_caller_exceptions_propagate():
    def boom(_):
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        Writer.pure(1).map(boom).evaluate()


def test_add_appends_values_and_logs():
    wr = (writer_of(10, "a") + writer_of(20, "b")).evaluate()
    assert wr == WriterResult(30, ["a", "b"])
    assert (writer_of("x", "a") + rejected("y")).evaluate().is_bottom


def test_to_lazy_coro_result():
    async def run(lcr):
        return await lcr

    match asyncio.run(run(writer_of(1, "a").to_lazy_coro_result(lambda: "bottom"))):
        case Ok((value, log)):
            assert value == 1
            assert log == ["a"]
        case _:
            pytest.fail("expected Ok")

    match asyncio.run(run(rejected(1).to_lazy_coro_result(lambda: "bottom"))):
        case Error(err):
            assert err == "bottom"
        case _:
            pytest.fail("expected Error")
