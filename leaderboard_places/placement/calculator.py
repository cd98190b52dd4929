from typing import Iterable, List
from ..models.data import MinScores, Placement, UserScore
from ..logger import get_logger

logger = get_logger()

def calculate_leaderboard_places(users: Iterable[UserScore], min_scores: MinScores) -> List[Placement]:
    """
    Assign a leaderboard place to every user.

    Users are numbered in descending score order. Place numbers 1, 2 and 3
    belong to the first, second and third place tiers whether or not anyone
    reaches them; each qualifier already placed (place_offset) pushes the
    next qualifier's number up by the excess over what its own tier would
    consume. Users below every threshold are numbered from 4 by their
    position among the non-qualifiers.

    Scores are expected to be pairwise distinct; nothing is validated here.
    """
    ranked = sorted(users, key=lambda user: user.score, reverse=True)
    result = []
    place_offset = 0

    for i, user in enumerate(ranked):
        tier = min_scores.reserved_place(user.score)
        if tier == 1:
            place = 1 + place_offset
            place_offset += 1
        elif tier == 2:
            place = 2 + max(place_offset - 1, 0)
            place_offset += 1
        elif tier == 3:
            place = 3 + max(place_offset - 2, 0)
            place_offset += 1
        else:
            place = 4 + (i - place_offset)
        result.append(Placement(user.user_id, place))

    logger.debug(f"Placed {len(result)} users, {place_offset} of them above a threshold")
    return result

class PlacementCalculator:
    def __init__(self, min_scores: MinScores):
        self.min_scores = min_scores

    def calculate(self, users: Iterable[UserScore]) -> List[Placement]:
        """Calculate places for users against this calculator's thresholds"""
        return calculate_leaderboard_places(users, self.min_scores)

    def calculate_dict(self, users: Iterable[dict]) -> List[dict]:
        """Same as calculate, taking and returning plain user_id/score dicts"""
        placements = self.calculate(UserScore.from_dict(user) for user in users)
        return [placement.to_dict() for placement in placements]
