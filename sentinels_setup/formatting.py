"""Plain-text rendering of setups and card listings."""

from __future__ import annotations

from .catalog import EligiblePool
from .models import Candidate


def format_setup(candidate: Candidate) -> str:
    """One-line form used in logs.

    "Legacy[-45], Ra[-7], Haka[-5]; Baron Blade[-63]; Megalopolis[-9]; 3 heroes[42]; difficulty=-87"
    """
    heroes = ", ".join(f"{h.name}[{h.points}]" for h in candidate.heroes)
    return (
        f"{heroes}; "
        f"{candidate.villain.name}[{candidate.villain.points}]; "
        f"{candidate.environment.name}[{candidate.environment.points}]; "
        f"{len(candidate.heroes)} heroes[{candidate.offset}]; "
        f"difficulty={candidate.score}"
    )


def format_setup_report(candidate: Candidate, trials: int) -> str:
    lines = [f"Found in {trials} iterations:", "", "Heroes:"]
    lines.extend(f"   {h.name} [{h.points}]" for h in candidate.heroes)
    lines.append(f"Villain:\n   {candidate.villain.name} [{candidate.villain.points}]")
    lines.append(
        f"Environment:\n   {candidate.environment.name} [{candidate.environment.points}]"
    )
    lines.append(f"{len(candidate.heroes)} heroes [{candidate.offset}]")
    lines.append(f"Difficulty: {candidate.score}")
    return "\n".join(lines) + "\n"


def format_card_listing(pool: EligiblePool) -> str:
    lines = ["Heroes:"]
    lines.extend(f"   {c.name}" for c in pool.heroes)
    lines.append("Villains:")
    lines.extend(f"   {c.name}" for c in pool.villains)
    lines.append("Environments:")
    lines.extend(f"   {c.name}" for c in pool.environments)
    return "\n".join(lines) + "\n"
