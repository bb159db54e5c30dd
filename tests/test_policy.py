import pytest

from animation.policy import AnimationPolicy, default_animation_policy, policy_from_env


def test_default_policy_matches_reference_values():
    policy = default_animation_policy()

    assert policy.tick_ms == 100
    assert policy.tick_seconds == pytest.approx(0.1)
    assert policy.arc_segments == 200
    assert policy.viewport_padding == (50, 50)
    assert policy.catalog_path is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tick_ms": 0},
        {"arc_segments": 0},
        {"viewport_padding": (50, -1)},
    ],
)
def test_invalid_policy_is_rejected(kwargs):
    with pytest.raises(ValueError):
        AnimationPolicy(**kwargs).validate()


def test_policy_from_env(monkeypatch):
    monkeypatch.setenv("ROUTE_TICK_MS", "25")
    monkeypatch.setenv("ROUTE_ARC_SEGMENTS", "50")
    monkeypatch.setenv("ROUTE_CATALOG_PATH", "/tmp/locations.csv")

    policy = policy_from_env()

    assert policy.tick_ms == 25
    assert policy.arc_segments == 50
    assert policy.catalog_path == "/tmp/locations.csv"


def test_policy_from_env_rejects_bad_values(monkeypatch):
    monkeypatch.setenv("ROUTE_TICK_MS", "-1")
    with pytest.raises(ValueError):
        policy_from_env()
