from types import SimpleNamespace

import pytest

from src.api.utils.rate_limit import LOGIN, REGISTER, RateLimiter, parse_limit


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_parse_limit():
    assert parse_limit("10/900") == (10, 900.0)


def test_requests_beyond_allowance_are_refused_until_window_ends():
    clock = FakeClock()
    limiter = RateLimiter({LOGIN: (2, 60)}, clock=clock)

    assert limiter.hit(LOGIN, "1.2.3.4")
    assert limiter.hit(LOGIN, "1.2.3.4")
    assert not limiter.hit(LOGIN, "1.2.3.4")

    clock.now += 60
    assert limiter.hit(LOGIN, "1.2.3.4")


def test_clients_and_scopes_are_counted_separately():
    limiter = RateLimiter({LOGIN: (1, 60), REGISTER: (1, 60)}, clock=FakeClock())

    assert limiter.hit(LOGIN, "1.2.3.4")
    assert limiter.hit(LOGIN, "5.6.7.8")
    assert limiter.hit(REGISTER, "1.2.3.4")
    assert not limiter.hit(LOGIN, "1.2.3.4")


def test_zero_allowance_means_unlimited():
    limiter = RateLimiter({LOGIN: (0, 60)}, clock=FakeClock())

    assert all(limiter.hit(LOGIN, "1.2.3.4") for _ in range(100))


@pytest.mark.parametrize("enabled,expected_none", [(True, False), (False, True)])
def test_from_config(enabled, expected_none):
    config = SimpleNamespace(
        RATE_LIMIT_ENABLED=enabled,
        LOGIN_RATE_LIMIT="10/900",
        REGISTER_RATE_LIMIT="20/900",
        PASSWORD_RESET_RATE_LIMIT="5/900",
    )

    limiter = RateLimiter.from_config(config)

    assert (limiter is None) is expected_none
    if limiter is not None:
        assert limiter.limits[LOGIN] == (10, 900.0)
