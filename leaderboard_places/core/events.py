from ..config import places, service
from ..logger import get_logger

logger = get_logger()

async def startup_event():
    """Log the effective configuration once the service starts"""
    logger.info(f"{service.title} {service.version} starting")
    logger.info(f"Default minimum scores: {places.min_scores().to_dict()}")

async def shutdown_event():
    logger.info(f"{service.title} shutting down")
