from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.exercise_repo import ExerciseRepository, WorkoutExerciseRepository
from liftlog.revalidation import paths_for_workout, revalidate
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead, WorkoutExerciseCreate, WorkoutExerciseRead

router = APIRouter(tags=["exercises"])

@router.get("/exercises", response_model=list[ExerciseRead])
def list_exercises(db: Session = Depends(get_db), _user_id: str = Depends(get_current_user_id)):
    return ExerciseRepository(db).list_all()

@router.post("/exercises", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(
    payload: ExerciseCreate,
    db: Session = Depends(get_db),
    _user_id: str = Depends(get_current_user_id),
):
    repo = ExerciseRepository(db)
    if repo.get_by_name(payload.name):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="exercise already exists")
    try:
        return repo.create(name=payload.name)
    except ValueError as e:
        if str(e) == "exercise_already_exists":
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="exercise already exists")
        raise

@router.post(
    "/workouts/{workout_id}/exercises",
    response_model=WorkoutExerciseRead,
    status_code=status.HTTP_201_CREATED,
)
def add_exercise_to_workout(
    workout_id: int,
    payload: WorkoutExerciseCreate,
    response: Response,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    entry = WorkoutExerciseRepository(db).add_to_workout(workout_id, payload.exercise_id, user_id)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout or exercise not found")
    revalidate(response, paths_for_workout(entry.workout_id, listing=False))
    return entry

@router.delete("/workout-exercises/{workout_exercise_id}", response_model=WorkoutExerciseRead)
def remove_exercise_from_workout(
    workout_exercise_id: int,
    response: Response,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    deleted = WorkoutExerciseRepository(db).remove(workout_exercise_id, user_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    revalidate(response, paths_for_workout(deleted.workout_id, listing=False))
    return deleted
