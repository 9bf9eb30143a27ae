from catch_rush.settings import RushSettings


def test_defaults():
    s = RushSettings.from_options(None)
    assert s == RushSettings()
    assert s.round_seconds == 20
    assert s.respawn_delay_ms == 120


def test_options_override_and_coerce():
    s = RushSettings.from_options({"target_size": "60", "tap_slop": 0, "unknown": 5})
    assert s.target_size == 60
    assert s.tap_slop == 0


def test_bad_values_fall_back(caplog):
    with caplog.at_level("WARNING"):
        s = RushSettings.from_options({"round_seconds": "soon", "target_size": 0})
    assert s.round_seconds == 20
    assert s.target_size == 74
    assert len(caplog.records) == 2


def test_options_that_are_not_a_mapping_use_defaults(caplog):
    with caplog.at_level("WARNING"):
        s = RushSettings.from_options(["round_seconds", 10])
    assert s == RushSettings()
    assert any("should be a mapping" in r.getMessage() for r in caplog.records)


def test_touch_taps_get_extra_slop():
    s = RushSettings.from_options({"tap_slop": 10, "touch_pad": 6})
    assert s.slop_for("mouse") == 10
    assert s.slop_for("touch") == 16
    assert RushSettings().slop_for("touch") == 14 + 8
