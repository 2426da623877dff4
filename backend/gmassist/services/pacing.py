# backend/gmassist/services/pacing.py
from typing import List, Dict, Any, NamedTuple

from gmassist.models.enums import CreatorMode

# Minutes of slack before a session counts as behind or ahead
PACING_TOLERANCE = 10


class Phase(NamedTuple):
    key: str
    name: str
    duration: int


SCHEDULES: Dict[CreatorMode, List[Phase]] = {
    CreatorMode.ROAD: [
        Phase("setup", "Setup & Briefing", 30),
        Phase("journey-start", "Journey Begins", 45),
        Phase("major-encounter", "Major Encounter", 60),
        Phase("break", "Mid-Session Break", 15),
        Phase("complications", "Complications", 45),
        Phase("arrival", "Arrival & Resolution", 35),
    ],
    CreatorMode.CITY: [
        Phase("setup", "City Entry", 30),
        Phase("investigation", "Investigation Phase", 60),
        Phase("political-tension", "Political Maneuvering", 45),
        Phase("break", "Mid-Session Break", 15),
        Phase("climax", "Dramatic Climax", 50),
        Phase("resolution", "Resolution", 20),
    ],
}


def get_schedule(mode: CreatorMode) -> List[Phase]:
    return SCHEDULES[CreatorMode(mode)]


def phase_count(mode: CreatorMode) -> int:
    return len(get_schedule(mode))


def describe_schedule(mode: CreatorMode) -> Dict[str, Any]:
    phases = []
    starts_at = 0
    for index, phase in enumerate(get_schedule(mode)):
        phases.append({
            "index": index,
            "key": phase.key,
            "name": phase.name,
            "duration": phase.duration,
            "starts_at": starts_at,
        })
        starts_at += phase.duration
    return {"mode": CreatorMode(mode), "total_minutes": starts_at, "phases": phases}


def assess_pacing(mode: CreatorMode, phase_index: int, elapsed_minutes: int) -> Dict[str, Any]:
    """Compare elapsed time with the scheduled start of the current phase.

    Raises ValueError when ``phase_index`` is outside the mode's schedule.
    """
    schedule = get_schedule(mode)
    if not 0 <= phase_index < len(schedule):
        raise ValueError(
            f"Phase index {phase_index} out of range for {CreatorMode(mode).value} "
            f"schedule (0-{len(schedule) - 1})"
        )

    expected_start = sum(phase.duration for phase in schedule[:phase_index])
    delay = elapsed_minutes - expected_start

    if delay > PACING_TOLERANCE:
        status = "behind"
        message = f"Running {delay} minutes behind schedule. Consider speeding up current phase."
    elif delay < -PACING_TOLERANCE:
        status = "ahead"
        message = f"Running {abs(delay)} minutes ahead. Great pacing!"
    else:
        status = "on_track"
        message = "Session pacing is on track."

    phase = schedule[phase_index]
    return {
        "mode": CreatorMode(mode),
        "phase_index": phase_index,
        "phase_key": phase.key,
        "phase_name": phase.name,
        "elapsed_minutes": elapsed_minutes,
        "expected_start": expected_start,
        "delay": delay,
        "status": status,
        "message": message,
    }
