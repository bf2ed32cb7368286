"""Tests for request and response schemas."""

import pytest
from pydantic import ValidationError

from trainweek.errors import MAX_ID, BadRequestError, ConflictError, NotFoundError, parse_id
from trainweek.models.user import User, UserStats
from trainweek.models.workout_day import WorkoutDay, WorkoutType
from trainweek.schemas import (
    UserCreate,
    UserResponse,
    UserSearch,
    UserUpdate,
    WorkoutDayCreate,
    WorkoutDayResponse,
    WorkoutDaySearch,
    WorkoutDayUpdate,
)
from trainweek.schemas.common import validation_messages


class TestUserCreate:
    """Tests for user creation payloads."""

    def test_minimal_payload(self):
        payload = UserCreate(name="Pedro Silva", email="pedro@email.com")
        assert payload.role is None
        assert payload.age is None

    def test_accepts_camel_case_keys(self):
        payload = UserCreate.model_validate(
            {"name": "Ana", "email": "ana@email.com", "specialties": ["yoga"]}
        )
        assert payload.specialties == ["yoga"]

    def test_name_is_trimmed(self):
        assert UserCreate(name="  Pedro  ", email="p@email.com").name == "Pedro"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    def test_rejects_bad_names(self, name):
        with pytest.raises(ValidationError):
            UserCreate(name=name, email="pedro@email.com")

    @pytest.mark.parametrize("email", ["invalid-email", "a@b", "@email.com", "a b@email.com"])
    def test_rejects_bad_emails(self, email):
        with pytest.raises(ValidationError):
            UserCreate(name="Pedro", email=email)

    @pytest.mark.parametrize("age", [-1, 151, True])
    def test_rejects_out_of_range_age(self, age):
        with pytest.raises(ValidationError):
            UserCreate(name="Pedro", email="pedro@email.com", age=age)

    def test_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Pedro", email="pedro@email.com", role="owner")

    def test_avatar_must_be_url(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Pedro", email="pedro@email.com", avatar="not a url")
        payload = UserCreate(
            name="Pedro", email="pedro@email.com", avatar="https://example.com/p.png"
        )
        assert payload.avatar == "https://example.com/p.png"


class TestUserUpdate:
    def test_age_must_be_an_integer(self):
        with pytest.raises(ValidationError):
            UserUpdate.model_validate({"age": True})

    def test_unset_fields_are_not_dumped(self):
        payload = UserUpdate(name="Pedro")
        assert payload.model_dump(exclude_unset=True) == {"name": "Pedro"}

    def test_status_accepted(self):
        assert UserUpdate(status="suspended").status.value == "suspended"


class TestWorkoutDayCreate:
    """Tests for workout day creation payloads."""

    def test_camel_case_keys(self):
        payload = WorkoutDayCreate.model_validate(
            {
                "name": "Day1",
                "dayOfWeek": 1,
                "durationMinutes": 90,
                "userId": 1,
                "workoutType": "Cardio",
            }
        )
        assert payload.day_of_week == 1
        assert payload.workout_type == WorkoutType.CARDIO
        assert payload.intensity_level is None

    @pytest.mark.parametrize(
        "field,value",
        [
            ("day_of_week", 0),
            ("day_of_week", 8),
            ("duration_minutes", 0),
            ("duration_minutes", 301),
            ("intensity_level", 0),
            ("intensity_level", 6),
            ("user_id", 0),
            ("user_id", MAX_ID + 1),
            ("workout_type", "Pilates"),
            ("day_of_week", True),
            ("duration_minutes", True),
            ("intensity_level", False),
            ("user_id", True),
            ("day_of_week", "1"),
            ("duration_minutes", 90.0),
        ],
    )
    def test_rejects_out_of_range(self, field, value):
        fields = {"name": "Day1", "day_of_week": 1, "duration_minutes": 60, "user_id": 1}
        fields[field] = value
        with pytest.raises(ValidationError):
            WorkoutDayCreate(**fields)

    def test_requires_day_and_duration(self):
        with pytest.raises(ValidationError) as exc_info:
            WorkoutDayCreate.model_validate({"name": "Day1", "userId": 1})
        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"dayOfWeek", "durationMinutes"}


class TestFlags:
    """Boolean filters accept only true/false."""

    @pytest.mark.parametrize("raw,expected", [("true", True), ("FALSE", False), (True, True)])
    def test_accepted(self, raw, expected):
        assert WorkoutDaySearch.model_validate({"isActive": raw}).is_active is expected

    @pytest.mark.parametrize("raw", ["yes", "1", "maybe", 1])
    def test_rejected(self, raw):
        with pytest.raises(ValidationError):
            WorkoutDaySearch.model_validate({"isActive": raw})

    def test_update_flag(self):
        assert WorkoutDayUpdate.model_validate({"isActive": "true"}).is_active is True

    def test_update_rejects_boolean_numbers(self):
        with pytest.raises(ValidationError):
            WorkoutDayUpdate.model_validate({"dayOfWeek": True})


class TestSearchSchemas:
    def test_numeric_strings_are_coerced(self):
        filters = WorkoutDaySearch.model_validate({"dayOfWeek": "3", "userId": "2"})
        assert filters.day_of_week == 3
        assert filters.user_id == 2

    def test_user_id_bounded(self):
        assert WorkoutDaySearch.model_validate({"userId": str(MAX_ID)}).user_id == MAX_ID
        with pytest.raises(ValidationError):
            WorkoutDaySearch.model_validate({"userId": str(MAX_ID + 1)})

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            WorkoutDaySearch.model_validate({"dayOfWeek": "monday"})

    def test_user_search_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            UserSearch.model_validate({"status": "deleted"})


class TestResponses:
    """Tests for rendered responses."""

    def test_user_response(self):
        user = User(
            id=7,
            name="Ana",
            email="ana@email.com",
            stats=UserStats(total_workouts=3, monthly_goal=12),
        )
        body = UserResponse.from_model(user).model_dump(by_alias=True, mode="json")
        assert body["id"] == 7
        assert body["isActive"] is True
        assert body["status"] == "active"
        assert body["role"] == "user"
        assert body["joinedDate"].endswith("Z")
        assert body["stats"]["totalWorkouts"] == 3
        assert body["stats"]["monthlyGoal"] == 12

    def test_workout_day_response(self):
        workout = WorkoutDay(
            id=1, name="Day1", day_of_week=1, duration_minutes=90, user_id=1
        )
        body = WorkoutDayResponse.from_model(workout).model_dump(by_alias=True, mode="json")
        assert body["dayName"] == "Monday"
        assert body["formattedDuration"] == "1h 30m"
        assert body["intensityName"] == "High"
        assert body["workoutType"] == "Force"
        assert body["isActive"] is True


class TestValidationMessages:
    def test_strips_request_location(self):
        errors = [
            {"loc": ("body", "email"), "msg": "bad email"},
            {"loc": ("query", "dayOfWeek"), "msg": "too big"},
            {"loc": (), "msg": "broken"},
        ]
        assert validation_messages(errors) == ["email: bad email", "dayOfWeek: too big", "broken"]


class TestErrors:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize(
        "error_cls,status,reason",
        [
            (BadRequestError, 400, "Bad Request"),
            (NotFoundError, 404, "Not Found"),
            (ConflictError, 409, "Conflict"),
        ],
    )
    def test_to_dict(self, error_cls, status, reason):
        assert error_cls("boom").to_dict() == {
            "statusCode": status,
            "error": reason,
            "message": "boom",
        }

    def test_list_message(self):
        error = BadRequestError(["name: required", "email: required"])
        assert error.to_dict()["message"] == ["name: required", "email: required"]
        assert str(error) == "name: required; email: required"

    @pytest.mark.parametrize(
        "raw,expected", [("12", 12), (" 3 ", 3), (5, 5), (str(MAX_ID), MAX_ID)]
    )
    def test_parse_id(self, raw, expected):
        assert parse_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1.5", "", True, "1_000", "+7", "-1", "\u0661\u0662"])
    def test_parse_id_rejects(self, raw):
        with pytest.raises(BadRequestError, match="ID must be a valid integer"):
            parse_id(raw)

    @pytest.mark.parametrize("raw", [0, "0", -3, MAX_ID + 1, str(MAX_ID + 1)])
    def test_parse_id_out_of_range(self, raw):
        with pytest.raises(BadRequestError, match="ID must be between 1 and"):
            parse_id(raw)
