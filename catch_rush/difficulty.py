# Round difficulty curve. Pure functions of the round number only.

TOTAL_ROUNDS = 10

PASS_TAPS_BASE = 10                # taps needed on round 1
PASS_TAPS_PER_ROUND = 5            # extra taps per round after the first

REACTION_MS_START = 900            # target lifetime on round 1
REACTION_MS_END = 420              # target lifetime on the last round

BADGE_COUNT = 5


def clamp(n, lo, hi):
    return max(lo, min(hi, n))


def clamp_round(round_num: int) -> int:
    return clamp(int(round_num), 1, TOTAL_ROUNDS)


def pass_taps_for_round(round_num: int) -> int:
    r = clamp_round(round_num)
    return PASS_TAPS_BASE + (r - 1) * PASS_TAPS_PER_ROUND


def reaction_ms_for_round(round_num: int) -> int:
    """Linear from REACTION_MS_START on round 1 to REACTION_MS_END on the last round."""
    r = clamp_round(round_num)
    t = (r - 1) / (TOTAL_ROUNDS - 1)
    ms = REACTION_MS_START + (REACTION_MS_END - REACTION_MS_START) * t
    # round half up, matching the values shown to players
    return int(ms + 0.5)


def badge_index(round_num: int) -> int:
    return (clamp_round(round_num) - 1) % BADGE_COUNT
