"""Cache invalidation keys for views derived from a workout.

Mutations return the affected record (with its parent ids) so the router can
work out which cached pages are stale. The keys travel back to whatever sits
in front of the API in the ``X-Revalidate`` response header.
"""
import logging

from fastapi import Response

log = logging.getLogger("uvicorn")

REVALIDATE_HEADER = "X-Revalidate"
DASHBOARD_PATH = "/dashboard"


def workout_path(workout_id: int) -> str:
    return f"{DASHBOARD_PATH}/workout/{workout_id}"


def paths_for_workout(workout_id: int, *, listing: bool = True) -> list[str]:
    """Detail page of the workout, plus the owner's listing page unless `listing` is off."""
    paths = [workout_path(workout_id)]
    return [DASHBOARD_PATH, *paths] if listing else paths


def revalidate(response: Response, paths: list[str]) -> None:
    response.headers[REVALIDATE_HEADER] = ",".join(paths)
    log.info("revalidate %s", " ".join(paths))
