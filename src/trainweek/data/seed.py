"""Demo data for a fresh database."""

from dataclasses import replace

from loguru import logger

from ..db.base import UserRepository, WorkoutDayRepository
from ..models.user import User, UserRole, UserStats, UserStatus, utcnow
from ..models.workout_day import WorkoutDay, WorkoutType

DEMO_USERS = [
    User(
        name="Ana García",
        email="ana@email.com",
        role=UserRole.TRAINER,
        age=25,
        location="Madrid",
        bio="Strength coach focused on beginners.",
        specialties=["strength", "mobility"],
        stats=UserStats(
            total_workouts=142,
            current_streak=6,
            longest_streak=21,
            total_calories_burned=58400,
            average_workout_duration=70,
            favorite_workout_type=WorkoutType.FORCE.value,
            monthly_goal=16,
            monthly_progress=62,
        ),
    ),
    User(
        name="Carlos López",
        email="carlos@email.com",
        age=30,
        location="Barcelona",
    ),
    User(
        name="María Rodríguez",
        email="maria@email.com",
        role=UserRole.NUTRITIONIST,
        status=UserStatus.INACTIVE,
        age=28,
        specialties=["sports nutrition"],
    ),
    User(
        name="Juan Pérez",
        email="juan@email.com",
        age=35,
        location="Valencia",
    ),
]

# (index into the seeded active users, workout)
DEMO_WORKOUT_DAYS = [
    (0, dict(
        name="Monday - Chest and Triceps",
        description="Strength session for chest, shoulders and triceps: bench press, push-ups and extensions.",
        day_of_week=1,
        duration_minutes=90,
        intensity_level=4,
        workout_type=WorkoutType.FORCE,
    )),
    (0, dict(
        name="Wednesday - Legs",
        description="Full leg routine: squats, deadlifts, leg extensions and leg curls.",
        day_of_week=3,
        duration_minutes=75,
        intensity_level=5,
        workout_type=WorkoutType.FORCE,
    )),
    (0, dict(
        name="Friday - Intense Cardio",
        description="High-intensity interval cardio: running, burpees and jumps.",
        day_of_week=5,
        duration_minutes=45,
        intensity_level=4,
        workout_type=WorkoutType.CARDIO,
    )),
    (1, dict(
        name="Tuesday - Yoga and Flexibility",
        description="Yoga session for flexibility and relaxation, focused on posture and breathing.",
        day_of_week=2,
        duration_minutes=60,
        intensity_level=2,
        workout_type=WorkoutType.FLEXIBILITY,
    )),
]


async def seed_demo_data(
    users: UserRepository,
    workout_days: WorkoutDayRepository,
) -> tuple[int, int]:
    """Insert demo users and workout days into empty stores.

    Each store is only seeded when it holds no rows. Workout days are spread
    over the active users that exist after seeding; with a single active user
    every workout goes to that user.

    Returns:
        Number of users and workout days inserted
    """
    users_added = 0
    if await users.count() == 0:
        for user in DEMO_USERS:
            now = utcnow()
            await users.create(replace(user, created_at=now, updated_at=now))
            users_added += 1
        logger.info(f"Seeded {users_added} demo users")

    days_added = 0
    if await workout_days.count() == 0:
        owners = await users.list_active()
        if not owners:
            logger.warning("No active users, skipping workout day seed")
            return users_added, 0

        for owner_index, fields in DEMO_WORKOUT_DAYS:
            owner = owners[owner_index] if owner_index < len(owners) else owners[0]
            if await workout_days.find_active_on_day(owner.id, fields["day_of_week"]):
                continue
            await workout_days.create(WorkoutDay(user_id=owner.id, **fields))
            days_added += 1
        logger.info(f"Seeded {days_added} demo workout days")

    return users_added, days_added
