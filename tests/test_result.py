import pytest
from kungfu import Error, Ok

from effectlog import BottomError, Log, MissingLogError, WriterResult


def test_missing_log_is_rejected():
    with pytest.raises(MissingLogError):
        WriterResult(1, None)


def test_missing_log_is_a_type_error():
    with pytest.raises(TypeError):
        WriterResult(1, None, True)


def test_log_is_normalized_to_log():
    wr = WriterResult(1, ["a"])
    assert isinstance(wr.log, Log)
    assert wr.log == ["a"]
    assert wr.is_bottom is False


def test_unwrap_active():
    assert WriterResult(3, []).unwrap() == 3
    assert WriterResult(3, []).unwrap_or(0) == 3


def test_unwrap_bottom_raises_with_log():
    wr = WriterResult.bottom(["why"])
    with pytest.raises(BottomError) as exc_info:
        wr.unwrap()
    assert exc_info.value.log == ["why"]
    assert wr.unwrap_or(0) == 0


def test_iteration_yields_zero_or_one_value():
    assert list(WriterResult(5, [])) == [5]
    assert list(WriterResult.bottom([])) == []


def test_to_result():
    match WriterResult(5, []).to_result(lambda: "nope"):
        case Ok(value):
            assert value == 5
        case _:
            pytest.fail("expected Ok")

    match WriterResult.bottom([]).to_result(lambda: "nope"):
        case Error(err):
            assert err == "nope"
        case _:
            pytest.fail("expected Error")


def test_equality_compares_triple():
    assert WriterResult(1, ["a"]) == WriterResult(1, Log.of("a"))
    assert WriterResult(1, ["a"]) != WriterResult(1, ["a"], True)
    assert WriterResult(1, ["a"]) != WriterResult(1, ["b"])


def test_match_args():
    match WriterResult(7, ["x"]):
        case WriterResult(value, log, False):
            assert value == 7
            assert log == ["x"]
        case _:
            pytest.fail("pattern did not match")
