from cars_practice.services.progress import compute_average_score, get_progress, recompute_progress
from cars_practice.services.seeding import seed_passages
from cars_practice.services.timer import SessionTimer

__all__ = ["compute_average_score", "get_progress", "recompute_progress", "seed_passages", "SessionTimer"]
