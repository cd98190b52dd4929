from leaderboard_places.models.data import UserScore


def make_users(*pairs):
    """Build UserScore values from (user_id, score) pairs."""
    return [UserScore(user_id, score) for user_id, score in pairs]


def places_by_user(placements):
    return {placement.user_id: placement.place for placement in placements}
