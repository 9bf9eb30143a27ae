from catch_rush import summary
from catch_rush.machine import Phase, RushSnapshot, TargetView


def snap(**kw):
    base = dict(
        phase=Phase.Result,
        round=3,
        total_rounds=10,
        time_left=0,
        round_seconds=20,
        score=20,
        target=TargetView(x=10, y=20, size=74, visible=False),
        pass_threshold=20,
        reaction_window_ms=793,
        total_hits=120,
    )
    base.update(kw)
    return RushSnapshot(**base)


def test_passed_result_texts():
    s = snap()
    assert s.passed
    assert summary.result_title(s) == "ROUND COMPLETE"
    assert summary.result_hint(s) == "Next round is ready."
    assert summary.primary_action_label(s) == "NEXT ROUND"
    assert summary.result_badge(s) == 2


def test_failed_result_texts():
    s = snap(score=19)
    assert not s.passed
    assert summary.result_title(s) == "ROUND FAILED"
    assert summary.result_hint(s) == "Need 20+ to pass."
    assert summary.primary_action_label(s) == "TRY AGAIN"
    assert summary.result_badge(s) is None


def test_last_round_texts():
    s = snap(round=10, score=60, pass_threshold=55)
    assert summary.result_hint(s) == "All rounds finished."
    assert summary.primary_action_label(s) == "FINISH"
    assert summary.result_badge(s) == 4


def test_hud_only_shows_live_values_during_a_round():
    live = snap(phase=Phase.Round, time_left=7, score=4)
    assert summary.hud_time(live) == "7s"
    assert summary.hud_score(live) == 4

    idle = snap(phase=Phase.Idle, time_left=7, score=4)
    assert summary.hud_time(idle) == "20s"
    assert summary.hud_score(idle) == 0


def test_info_lines():
    s = snap()
    assert summary.hud_round(s) == "3/10"
    assert summary.reaction_hint(s) == "Reaction window: 793ms"
    assert summary.pass_hint(s) == "Pass: 20+ taps in 20s"
    assert summary.taps_line(s) == "Taps: 20"
    assert summary.progress_line(s) == "Round 3/10 • Total taps 120"
