from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.revalidation import DASHBOARD_PATH, paths_for_workout, revalidate
from liftlog.schemas.exercise import WorkoutExerciseDetail
from liftlog.schemas.workout import WorkoutCreate, WorkoutDetail, WorkoutRead, WorkoutUpdate

router = APIRouter(prefix="/workouts", tags=["workouts"])

def _not_found() -> HTTPException:
    # Missing and not-yours look the same to the caller
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    day: date | None = Query(None, alias="date"),
):
    repo = WorkoutRepository(db)
    if day is None:
        return repo.list_by_user(user_id)
    return repo.list_by_user_and_date(user_id, day)

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(
    payload: WorkoutCreate,
    response: Response,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    workout = WorkoutRepository(db).create(user_id, name=payload.name, started_at=payload.started_at)
    revalidate(response, [DASHBOARD_PATH])
    return workout

@router.get("/{workout_id}", response_model=WorkoutDetail)
def get_workout(workout_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    workout = WorkoutRepository(db).get_with_exercises(workout_id, user_id)
    if not workout:
        raise _not_found()
    return workout

@router.get("/{workout_id}/exercises", response_model=list[WorkoutExerciseDetail])
def list_workout_exercises(workout_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    entries = WorkoutRepository(db).get_exercises_with_sets(workout_id, user_id)
    if entries is None:
        raise _not_found()
    return entries

@router.patch("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    response: Response,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    # Only fields present in the body change; {"completed_at": null} reopens a workout
    workout = WorkoutRepository(db).update(workout_id, user_id, **payload.model_dump(exclude_unset=True))
    if not workout:
        raise _not_found()
    revalidate(response, paths_for_workout(workout.id))
    return workout

@router.delete("/{workout_id}", response_model=WorkoutRead)
def delete_workout(
    workout_id: int,
    response: Response,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    workout = WorkoutRepository(db).delete(workout_id, user_id)
    if not workout:
        raise _not_found()
    revalidate(response, paths_for_workout(workout.id))
    return workout
