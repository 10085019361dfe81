import logging

from sparse_life.utils import timing_decorator


def test_timing_decorator_logs_and_returns(caplog):
    caplog.set_level(logging.DEBUG)

    @timing_decorator
    def add(a, b):
        return a + b

    assert add(2, b=3) == 5
    assert add.__name__ == "add"
    assert caplog.records[-1].getMessage().startswith(
        "Function 'add' executed in:"
    )
