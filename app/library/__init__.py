"""Built-in exercise library."""

from app.library.exercise_catalog import (
    EXERCISE_CATALOG,
    default_library,
    get_exercise,
    register_exercise,
)

__all__ = ["EXERCISE_CATALOG", "default_library", "get_exercise", "register_exercise"]
