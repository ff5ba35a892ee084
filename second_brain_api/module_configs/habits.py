# File: /second_brain_api/module_configs/habits.py | Version: 1.0 | Title: Habits module config
from second_brain_api.module_configs.factory import (
    SYSTEM_TIMESTAMP_RULES,
    by,
    core_rule,
    create_module_config,
    frozen_rules,
    options,
    prop,
    view,
    where,
)

habits_config = create_module_config(
    module_type="habits",
    display_name="Habit",
    display_name_plural="Habits",
    description="Track and build positive habits",
    icon="🔄",
    model_name="Habit",
    properties=[
        prop("name", "Habit Name", "text", order=0, description="Name of the habit", required=True, frozen=True),
        prop("description", "Description", "text", order=1, description="Habit description"),
        prop(
            "category", "Category", "select", order=2, description="Habit category",
            options=options(
                ("Health", "#green", "health"),
                ("Fitness", "#red", "fitness"),
                ("Productivity", "#blue", "productivity"),
                ("Learning", "#purple", "learning"),
                ("Mindfulness", "#orange", "mindfulness"),
                ("Social", "#pink", "social"),
                ("Creative", "#yellow", "creative"),
                ("Financial", "#brown", "financial"),
            ),
        ),
        prop(
            "frequency", "Frequency", "select", order=3, description="How often to perform the habit",
            required=True, default_value="daily",
            options=options(
                ("Daily", "#green", "daily"),
                ("Weekly", "#blue", "weekly"),
                ("Monthly", "#orange", "monthly"),
                ("Custom", "#purple", "custom"),
            ),
        ),
        prop(
            "targetCount", "Target Count", "number", order=4, description="Target number per frequency period",
            default_value=1, validation={"min": 1},
        ),
        prop(
            "currentStreak", "Current Streak", "number", order=5, description="Current consecutive days/periods",
            default_value=0, frozen=True, validation={"min": 0},
        ),
        prop(
            "longestStreak", "Longest Streak", "number", order=6,
            description="Longest consecutive streak achieved", default_value=0, frozen=True,
            validation={"min": 0},
        ),
        prop(
            "status", "Status", "select", order=7, description="Habit status",
            required=True, default_value="active",
            options=options(
                ("Active", "#green", "active"),
                ("Paused", "#orange", "paused"),
                ("Completed", "#blue", "completed"),
                ("Abandoned", "#red", "abandoned"),
            ),
        ),
        prop(
            "difficulty", "Difficulty", "select", order=8, description="Habit difficulty level",
            default_value="medium",
            options=options(
                ("Easy", "#green", "easy"),
                ("Medium", "#yellow", "medium"),
                ("Hard", "#orange", "hard"),
                ("Very Hard", "#red", "very_hard"),
            ),
        ),
        prop("reminder", "Reminder Time", "text", order=9, description="Reminder time (e.g., 08:00)"),
        prop("tags", "Tags", "multiSelect", order=10, description="Habit tags"),
        prop("startDate", "Start Date", "date", order=11, description="Date habit was started"),
        prop("lastCompleted", "Last Completed", "date", order=12, description="Last completion date", frozen=True),
        prop("createdAt", "Created", "date", order=13, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=14, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-habits", "All Habits", "TABLE", description="View all habits", is_default=True,
            visible=["name", "category", "frequency", "currentStreak", "status", "lastCompleted"],
            sorts=[by("createdAt", "desc")],
        ),
        view(
            "active-habits", "Active Habits", "TABLE", description="View active habits only",
            filters=[where("status", "equals", "active")],
            visible=["name", "frequency", "currentStreak", "targetCount", "lastCompleted"],
            sorts=[by("currentStreak", "desc")],
        ),
        view(
            "by-category", "By Category", "BOARD", description="Habits grouped by category",
            group_by="category", visible=["name", "frequency", "currentStreak", "status"],
            config={"groupProperty": "category", "colorProperty": "status"},
        ),
        view(
            "streak-tracker", "Streak Tracker", "TABLE", description="Track habit streaks",
            visible=["name", "currentStreak", "longestStreak", "lastCompleted", "status"],
            sorts=[by("currentStreak", "desc")],
            filters=[where("status", "equals", "active")],
        ),
        view(
            "daily-habits", "Daily Habits", "LIST", description="Daily habits checklist",
            filters=[where("frequency", "equals", "daily"), where("status", "equals", "active")],
            visible=["name", "currentStreak", "reminder"],
            sorts=[by("reminder", "asc")],
        ),
    ],
    required=["name", "frequency", "status"],
    frozen=["name", "currentStreak", "longestStreak", "lastCompleted", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "LIST", "CALENDAR"],
    frozen_config=frozen_rules(
        "habits",
        "Habits tracking frozen configuration",
        [
            core_rule("name", "Core habit property"),
            ("currentStreak", "System calculated value", False, False, False),
            ("longestStreak", "System calculated value", False, False, False),
            ("lastCompleted", "System timestamp", False, True, False),
            *SYSTEM_TIMESTAMP_RULES,
        ],
    ),
)
