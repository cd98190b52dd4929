from pydantic import BaseModel
from typing import List, Literal

class PlacementEntry(BaseModel):
    user_id: str
    place: int

class MinScoresResponse(BaseModel):
    first_place_min_score: int
    second_place_min_score: int
    third_place_min_score: int

class PlacesResponse(BaseModel):
    min_scores: MinScoresResponse
    places: List[PlacementEntry]

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    version: str
    min_scores: MinScoresResponse
    uptime: float
