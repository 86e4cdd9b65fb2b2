import pytest

from datasources.exceptions import DataSourceUnavailable, InvalidQuery
from datasources.retry import retry


@pytest.mark.asyncio
async def test_retry_success_after_failure():
    calls = []

    @retry(attempts=3, delay=0.01, backoff=1, exceptions=(DataSourceUnavailable,))
    async def flaky(x):
        calls.append(x)
        if len(calls) < 2:
            raise DataSourceUnavailable("temporary")
        return x * 2

    result = await flaky(5)
    assert result == 10
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_retry_exhausted():
    calls = []

    @retry(attempts=2, delay=0.01, backoff=1, exceptions=(DataSourceUnavailable,))
    async def always_fail():
        calls.append(1)
        raise DataSourceUnavailable("nope")

    with pytest.raises(DataSourceUnavailable):
        await always_fail()
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_retry_ignores_unlisted_exceptions():
    calls = []

    @retry(attempts=5, delay=0.01, exceptions=(DataSourceUnavailable,))
    async def bad_request():
        calls.append(1)
        raise InvalidQuery("404")

    with pytest.raises(InvalidQuery):
        await bad_request()
    assert len(calls) == 1


def test_retry_rejects_zero_attempts():
    with pytest.raises(ValueError):
        retry(attempts=0)
