"""
Availability overlap rule (Weight: 15 points).

Walks the days in the viewer's availability. For each day the candidate
also lists, counts the shared time slots and the larger of the two slot
sets. Days only the candidate lists are ignored.

Scoring:
  - overlap_slots / total_slots * weight
  - No shared days, or shared days with no slots at all: 0 pts
"""

from app.matching.profile import PlayerProfile


def score(
    viewer: PlayerProfile,
    candidate: PlayerProfile,
    weight: float = 15.0,
) -> dict:
    """
    Score availability overlap between viewer and candidate.

    Returns:
        dict with keys: score (float), max_score (float), details (str)
    """
    overlap_slots = 0
    total_slots = 0

    for day, viewer_slots in viewer.availability.items():
        if day not in candidate.availability:
            continue
        candidate_slots = candidate.availability[day]
        overlap_slots += len(viewer_slots & candidate_slots)
        total_slots += max(len(viewer_slots), len(candidate_slots))

    if total_slots == 0:
        return {
            "score": 0.0,
            "max_score": weight,
            "details": "No shared availability days",
        }

    return {
        "score": (overlap_slots / total_slots) * weight,
        "max_score": weight,
        "details": f"{overlap_slots} of {total_slots} time slot(s) overlap",
    }
