from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from liftlog.db import SessionLocal
from liftlog.models import WorkoutExercise, WorkoutSet
from liftlog.repositories.exercise_repo import ExerciseRepository, WorkoutExerciseRepository
from liftlog.repositories.set_repo import SetRepository
from liftlog.repositories.workout_repo import WorkoutRepository
import uuid, pytest

def uid(): return f"user_{uuid.uuid4().hex[:10]}"

@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()

def new_workout(db, user_id):
    return WorkoutRepository(db).create(user_id, name="W", started_at=datetime(2024, 6, 1, 8, tzinfo=timezone.utc))

def new_exercise(db):
    return ExerciseRepository(db).create(name=f"Ex {uuid.uuid4().hex[:8]}")

def test_order_starts_at_zero_and_counts_up(db):
    owner = uid()
    w = new_workout(db, owner)
    repo = WorkoutExerciseRepository(db)
    orders = [repo.add_to_workout(w.id, new_exercise(db).id, owner).order for _ in range(3)]
    assert orders == [0, 1, 2]

def test_order_is_not_reused_after_removal(db):
    owner = uid()
    w = new_workout(db, owner)
    repo = WorkoutExerciseRepository(db)
    first = repo.add_to_workout(w.id, new_exercise(db).id, owner)
    last = repo.add_to_workout(w.id, new_exercise(db).id, owner)
    repo.remove(first.id, owner)
    assert repo.add_to_workout(w.id, new_exercise(db).id, owner).order == last.order + 1

def test_add_to_foreign_workout_returns_none(db):
    w = new_workout(db, uid())
    assert WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, uid()) is None

def test_set_numbers_are_one_to_n(db):
    owner = uid()
    w = new_workout(db, owner)
    we = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    repo = SetRepository(db)
    for i in range(5):
        repo.create(we.id, owner, reps=i + 1, weight=Decimal("60"))
    assert [s.set_number for s in repo.list_by_workout_exercise(we.id, owner)] == [1, 2, 3, 4, 5]

def test_set_numbers_are_scoped_per_exercise_entry(db):
    owner = uid()
    w = new_workout(db, owner)
    a = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    b = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    repo = SetRepository(db)
    repo.create(a.id, owner, reps=5, weight=Decimal("60"))
    repo.create(a.id, owner, reps=5, weight=Decimal("60"))
    assert repo.create(b.id, owner, reps=5, weight=Decimal("60")).set_number == 1

def test_create_set_for_foreign_entry_returns_none(db):
    owner = uid()
    w = new_workout(db, owner)
    we = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    assert SetRepository(db).create(we.id, uid(), reps=5, weight=Decimal("60")) is None
    assert SetRepository(db).list_by_workout_exercise(we.id, owner) == []

def test_unauthorized_update_leaves_row_unchanged(db):
    owner = uid()
    w = new_workout(db, owner)
    we = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    s = SetRepository(db).create(we.id, owner, reps=8, weight=Decimal("135"))

    assert SetRepository(db).update(s.id, uid(), reps=1, weight=Decimal("1")) is None
    assert SetRepository(db).delete(s.id, uid()) is None

    fresh = SessionLocal()
    row = SetRepository(fresh).get(s.id, owner)
    assert (row.reps, row.weight) == (8, Decimal("135"))
    fresh.close()

def test_update_and_delete_by_owner(db):
    owner = uid()
    w = new_workout(db, owner)
    we = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    s = SetRepository(db).create(we.id, owner, reps=8, weight=Decimal("135"))

    updated = SetRepository(db).update(s.id, owner, reps=6, weight=Decimal("145"))
    assert (updated.reps, updated.weight, updated.set_number) == (6, Decimal("145"), 1)

    assert updated.workout_exercise.workout_id == w.id

    deleted = SetRepository(db).delete(s.id, owner)
    assert deleted.workout_exercise_id == we.id
    assert deleted.workout_exercise.workout_id == w.id
    assert SetRepository(db).get(s.id, owner) is None

def test_removing_entry_drops_its_sets(db):
    owner = uid()
    w = new_workout(db, owner)
    we = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    s = SetRepository(db).create(we.id, owner, reps=8, weight=Decimal("135"))

    assert WorkoutExerciseRepository(db).remove(we.id, uid()) is None
    removed = WorkoutExerciseRepository(db).remove(we.id, owner)
    assert removed.workout_id == w.id
    assert SetRepository(db).get(s.id, owner) is None

def test_created_set_knows_its_workout(db):
    owner = uid()
    w = new_workout(db, owner)
    we = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    s = SetRepository(db).create(we.id, owner, reps=5, weight=Decimal("60"))
    assert s.workout_exercise.workout_id == w.id

# Store-level guards behind the max+1 numbering and the input rules

def test_duplicate_set_number_rejected_by_store(db):
    owner = uid()
    w = new_workout(db, owner)
    we = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)
    SetRepository(db).create(we.id, owner, reps=5, weight=Decimal("60"))

    db.add(WorkoutSet(workout_exercise_id=we.id, set_number=1, reps=5, weight=Decimal("60")))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

def test_duplicate_order_rejected_by_store(db):
    owner = uid()
    w = new_workout(db, owner)
    WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)

    db.add(WorkoutExercise(workout_id=w.id, exercise_id=new_exercise(db).id, order=0))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

@pytest.mark.parametrize("reps,weight", [(0, Decimal("60")), (5, Decimal("-1"))])
def test_bad_reps_or_weight_rejected_by_store(db, reps, weight):
    owner = uid()
    w = new_workout(db, owner)
    we = WorkoutExerciseRepository(db).add_to_workout(w.id, new_exercise(db).id, owner)

    db.add(WorkoutSet(workout_exercise_id=we.id, set_number=1, reps=reps, weight=weight))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

def test_exercise_names_unique_ignoring_case(db):
    name = f"Squat {uuid.uuid4().hex[:6]}"
    ExerciseRepository(db).create(name=name)
    with pytest.raises(ValueError):
        ExerciseRepository(db).create(name=name.lower())
    assert ExerciseRepository(db).get_by_name(name.upper()).name == name
