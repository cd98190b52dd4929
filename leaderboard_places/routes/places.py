from fastapi import APIRouter, HTTPException
from ..models.score import PlacesRequest
from ..models.response import MinScoresResponse, PlacementEntry, PlacesResponse
from ..placement import PlacementCalculator
from ..config import places as places_config
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

@router.post("/places", response_model=PlacesResponse)
async def calculate_places(data: PlacesRequest):
    """
    Calculate leaderboard places for a set of user scores.

    - **users**: 1-100 entries of user_id and positive score, ids and scores unique
    - **min_scores**: minimum scores for 1st, 2nd and 3rd place; configured defaults when omitted
    """
    try:
        if data.min_scores is not None:
            min_scores = data.min_scores.to_min_scores()
        else:
            min_scores = places_config.min_scores()
        logger.info(f"Calculating places for {len(data.users)} users with thresholds {tuple(min_scores)}")

        calculator = PlacementCalculator(min_scores)
        placements = calculator.calculate(user.to_user_score() for user in data.users)

        response = PlacesResponse(
            min_scores=MinScoresResponse(**min_scores.to_dict()),
            places=[PlacementEntry(**placement.to_dict()) for placement in placements]
        )
        logger.info(f"Successfully placed {len(response.places)} users")
        return response
    except HTTPException:
        raise
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error calculating places: {e}")
        raise HTTPException(status_code=500, detail="Failed to calculate places")

@router.get("/thresholds", response_model=MinScoresResponse)
async def get_thresholds():
    """Get the default minimum scores used when a request omits them"""
    return MinScoresResponse(**places_config.min_scores().to_dict())
