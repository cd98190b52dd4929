# --- Pydantic Models ---
from pydantic import BaseModel, Field, validator
from typing import List, Optional
from .data import MinScores, UserScore

class UserScoreRequest(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=100)
    score: int = Field(..., gt=0)

    @validator('user_id')
    def validate_id(cls, v):
        if not v.strip():
            raise ValueError('ID cannot be empty or whitespace')
        return v.strip()

    def to_user_score(self) -> UserScore:
        return UserScore(self.user_id, self.score)

class MinScoresRequest(BaseModel):
    first_place_min_score: int = Field(..., gt=0)
    second_place_min_score: int = Field(..., gt=0)
    third_place_min_score: int = Field(..., gt=0)

    @validator('second_place_min_score')
    def validate_second(cls, v, values):
        first = values.get('first_place_min_score')
        if first is not None and not first > v:
            raise ValueError('second_place_min_score must be lower than first_place_min_score')
        return v

    @validator('third_place_min_score')
    def validate_third(cls, v, values):
        second = values.get('second_place_min_score')
        if second is not None and not second > v:
            raise ValueError('third_place_min_score must be lower than second_place_min_score')
        return v

    def to_min_scores(self) -> MinScores:
        return MinScores(
            self.first_place_min_score,
            self.second_place_min_score,
            self.third_place_min_score
        )

class PlacesRequest(BaseModel):
    users: List[UserScoreRequest] = Field(..., min_length=1, max_length=100)
    min_scores: Optional[MinScoresRequest] = None

    @validator('users')
    def validate_unique(cls, v):
        user_ids = [user.user_id for user in v]
        if len(set(user_ids)) != len(user_ids):
            raise ValueError('user_id values must be unique')
        scores = [user.score for user in v]
        if len(set(scores)) != len(scores):
            raise ValueError('score values must be unique')
        return v
