import pytest

from api.requests import ForecastRequest, MhlwForecastRequest
from pydantic import ValidationError


def _pairs(n):
    return [{"date": f"2021-01-{i + 1:02d}", "count": 10} for i in range(n)]


def test_forecast_request_requires_both_series():
    req = ForecastRequest(tested=_pairs(3), positive=_pairs(3))
    assert len(req.tested) == 3
    with pytest.raises(ValidationError):
        ForecastRequest(tested=_pairs(3))
    with pytest.raises(ValidationError):
        ForecastRequest(tested=[], positive=_pairs(3))


def test_negative_counts_rejected():
    with pytest.raises(ValidationError):
        ForecastRequest(tested=[{"date": "2021-01-01", "count": -1}], positive=_pairs(1))


def test_overrides_only_carry_set_config_fields():
    req = ForecastRequest(tested=_pairs(2), positive=_pairs(2), horizon=14, confidence_level=0.8)
    assert req.overrides() == {"horizon": 14, "confidence_level": 0.8}


def test_mhlw_request_defaults():
    req = MhlwForecastRequest()
    assert req.refresh is False
    assert req.overrides() == {}


def test_overrides_carry_ssa_tuning_fields():
    req = MhlwForecastRequest(ssa_energy_threshold=0.9, ssa_stabilize=False, ssa_max_rank=3)
    assert req.overrides() == {"ssa_energy_threshold": 0.9, "ssa_stabilize": False, "ssa_max_rank": 3}


@pytest.mark.parametrize(
    "field",
    [{"ssa_energy_threshold": 0.0}, {"ssa_energy_threshold": 1.5}, {"ssa_max_rank": 0}],
)
def test_ssa_tuning_fields_are_range_checked(field):
    with pytest.raises(ValidationError):
        MhlwForecastRequest(**field)
