from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.models import WorkoutSet
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.set_repo import SetRepository
from liftlog.revalidation import paths_for_workout, revalidate
from liftlog.schemas.workout_set import SetCreate, SetRead, SetUpdate

router = APIRouter(tags=["sets"])

def _revalidate_parent(response: Response, s: WorkoutSet) -> None:
    revalidate(response, paths_for_workout(s.workout_exercise.workout_id, listing=False))

@router.get("/workout-exercises/{workout_exercise_id}/sets", response_model=list[SetRead])
def list_sets(
    workout_exercise_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    sets = SetRepository(db).list_by_workout_exercise(workout_exercise_id, user_id)
    if sets is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return sets

@router.post(
    "/workout-exercises/{workout_exercise_id}/sets",
    response_model=SetRead,
    status_code=status.HTTP_201_CREATED,
)
def add_set(
    workout_exercise_id: int,
    payload: SetCreate,
    response: Response,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    new_set = SetRepository(db).create(workout_exercise_id, user_id, reps=payload.reps, weight=payload.weight)
    if not new_set:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    _revalidate_parent(response, new_set)
    return new_set

@router.patch("/sets/{set_id}", response_model=SetRead)
def update_set(
    set_id: int,
    payload: SetUpdate,
    response: Response,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    s = SetRepository(db).update(set_id, user_id, reps=payload.reps, weight=payload.weight)
    if not s:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    _revalidate_parent(response, s)
    return s

@router.delete("/sets/{set_id}", response_model=SetRead)
def delete_set(
    set_id: int,
    response: Response,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    s = SetRepository(db).delete(set_id, user_id)
    if not s:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    _revalidate_parent(response, s)
    return s
