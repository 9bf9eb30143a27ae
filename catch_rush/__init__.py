from .difficulty import TOTAL_ROUNDS, pass_taps_for_round, reaction_ms_for_round
from .machine import Phase, RoundMachine, RushEvent, RushSnapshot
from .progress import Progress, ProgressStore
from .settings import RushSettings

__all__ = [
    "TOTAL_ROUNDS",
    "pass_taps_for_round",
    "reaction_ms_for_round",
    "Phase",
    "RoundMachine",
    "RushEvent",
    "RushSnapshot",
    "Progress",
    "ProgressStore",
    "RushSettings",
]
