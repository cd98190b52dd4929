from typing import Hashable, NamedTuple

class UserScore:
    __slots__ = ('user_id', 'score')
    def __init__(self, user_id: Hashable, score: int):
        self.user_id = user_id
        self.score = int(score)

    @classmethod
    def from_dict(cls, data: dict) -> 'UserScore':
        return cls(data['user_id'], data['score'])

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'score': self.score
        }

    def __repr__(self):
        return f"UserScore({self.user_id!r}, {self.score})"

class MinScores(NamedTuple):
    """Minimum scores for 1st, 2nd and 3rd place, first > second > third > 0"""
    first: int
    second: int
    third: int

    def reserved_place(self, score: int) -> int:
        """Tier a score reaches: 1, 2 or 3, or 4 when it misses every threshold"""
        if score >= self.first:
            return 1
        if score >= self.second:
            return 2
        if score >= self.third:
            return 3
        return 4

    def to_dict(self):
        return {
            'first_place_min_score': self.first,
            'second_place_min_score': self.second,
            'third_place_min_score': self.third
        }

class Placement:
    __slots__ = ('user_id', 'place')
    def __init__(self, user_id: Hashable, place: int):
        self.user_id = user_id
        self.place = place

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'place': self.place
        }

    def __eq__(self, other):
        if not isinstance(other, Placement):
            return NotImplemented
        return self.user_id == other.user_id and self.place == other.place

    def __repr__(self):
        return f"Placement({self.user_id!r}, {self.place})"
