import pytest
from boardsession import GameConfig, InvalidConfigurationError, SessionSettings


def test_defaults():
    config = GameConfig()

    assert config.board_size == 20
    assert config.require_init is True


@pytest.mark.parametrize(
    "kwargs",
    [{"board_size": 3}, {"dice_count": 0}, {"dice_sides": 0}, {"max_turns": 0}],
)
def test_invalid_config(kwargs):
    with pytest.raises(InvalidConfigurationError):
        GameConfig(**kwargs)


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("BOARD_SESSION_NUM_PLAYERS", "3")
    monkeypatch.setenv("BOARD_SESSION_SEED", "99")
    monkeypatch.setenv("BOARD_SESSION_LOG_LEVEL", "debug")

    settings = SessionSettings(_env_file=None)

    assert settings.num_players == 3
    assert settings.seed == 99
    assert settings.log_level == "DEBUG"


def test_rng_streams_are_reproducible_and_distinct():
    config = GameConfig(seed=42)

    dice = [config.rng_for("dice").random() for _ in range(2)]
    board = config.rng_for("board").random()

    assert dice[0] == dice[1]
    assert board != dice[0]


def test_rng_without_seed_is_unseeded():
    config = GameConfig()

    assert config.rng_for("dice").random() != config.rng_for("dice").random()
