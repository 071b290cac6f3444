import pytest

from fakes import FakePlaywright


@pytest.fixture
def fake_pw():
    def make(redirect_to=None, cookies=None):
        return FakePlaywright(redirect_to=redirect_to, cookies=cookies)
    return make


@pytest.fixture
def lines():
    """Records calls to the console reader; fails the test if it's called unexpectedly."""
    calls = []

    def make(value="\n", allowed=True):
        def read_line():
            calls.append(value)
            if not allowed:
                raise AssertionError("read_line should not be called")
            if isinstance(value, BaseException):
                raise value
            return value
        return read_line

    make.calls = calls
    return make
