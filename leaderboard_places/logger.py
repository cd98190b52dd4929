import logging

def configure_logging(level: str = 'INFO'):
    """Configure root logging for the service process"""
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

def get_logger(name: str = 'leaderboard_places') -> logging.Logger:
    return logging.getLogger(name)
