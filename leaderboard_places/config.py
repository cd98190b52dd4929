from pydantic import validator
from pydantic_settings import BaseSettings
import os

from .models.data import MinScores

class PlacesConfig(BaseSettings):
    first_place_min_score: int = int(os.getenv('FIRST_PLACE_MIN_SCORE', 100))
    second_place_min_score: int = int(os.getenv('SECOND_PLACE_MIN_SCORE', 50))
    third_place_min_score: int = int(os.getenv('THIRD_PLACE_MIN_SCORE', 10))
    max_users: int = 100

    @validator('second_place_min_score')
    def validate_second(cls, v, values):
        first = values.get('first_place_min_score')
        if first is not None and not first > v:
            raise ValueError('second place minimum must be below the first place minimum')
        return v

    @validator('third_place_min_score')
    def validate_third(cls, v, values):
        second = values.get('second_place_min_score')
        if v <= 0:
            raise ValueError('third place minimum must be positive')
        if second is not None and not second > v:
            raise ValueError('third place minimum must be below the second place minimum')
        return v

    def min_scores(self) -> MinScores:
        return MinScores(
            self.first_place_min_score,
            self.second_place_min_score,
            self.third_place_min_score
        )

places = PlacesConfig()

class ServiceConfig(BaseSettings):
    title: str = 'Leaderboard Places Service'
    version: str = '1.0.0'
    host: str = os.getenv('HOST', '0.0.0.0')
    port: int = int(os.getenv('PORT', 8000))
    workers: int = int(os.getenv('WORKERS', 1))
    log_level: str = os.getenv('LOG_LEVEL', 'INFO')

service = ServiceConfig()
