"""
Display text derived from a RushSnapshot.

Nothing here is stored on the machine: every string is recomputed from the
snapshot so the HUD and the result card can never disagree with the state.
"""
from __future__ import annotations

from .difficulty import TOTAL_ROUNDS, badge_index
from .machine import Phase, RushSnapshot


def result_title(snap: RushSnapshot) -> str:
    return "ROUND COMPLETE" if snap.passed else "ROUND FAILED"


def result_hint(snap: RushSnapshot) -> str:
    if not snap.passed:
        return f"Need {snap.pass_threshold}+ to pass."
    if snap.round >= TOTAL_ROUNDS:
        return "All rounds finished."
    return "Next round is ready."


def primary_action_label(snap: RushSnapshot) -> str:
    if not snap.passed:
        return "TRY AGAIN"
    return "FINISH" if snap.round >= TOTAL_ROUNDS else "NEXT ROUND"


def result_badge(snap: RushSnapshot):
    """Badge index for a passed round, None otherwise."""
    return badge_index(snap.round) if snap.passed else None


def hud_round(snap: RushSnapshot) -> str:
    return f"{snap.round}/{snap.total_rounds}"


def hud_time(snap: RushSnapshot) -> str:
    if snap.phase == Phase.Round:
        return f"{snap.time_left}s"
    return f"{snap.round_seconds}s"


def hud_score(snap: RushSnapshot) -> int:
    return snap.score if snap.phase == Phase.Round else 0


def reaction_hint(snap: RushSnapshot) -> str:
    return f"Reaction window: {snap.reaction_window_ms}ms"


def pass_hint(snap: RushSnapshot) -> str:
    return f"Pass: {snap.pass_threshold}+ taps in {snap.round_seconds}s"


def taps_line(snap: RushSnapshot) -> str:
    return f"Taps: {snap.score}"


def progress_line(snap: RushSnapshot) -> str:
    return f"Round {snap.round}/{snap.total_rounds} • Total taps {snap.total_hits}"
