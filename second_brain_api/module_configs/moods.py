# File: /second_brain_api/module_configs/moods.py | Version: 1.0 | Title: Moods module config
from datetime import date

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

MOODS = options(
    ("Excellent 😄", "#22c55e", "excellent"),
    ("Good 😊", "#3b82f6", "good"),
    ("Neutral 😐", "#6b7280", "neutral"),
    ("Bad 😔", "#f59e0b", "bad"),
    ("Terrible 😢", "#ef4444", "terrible"),
)

moods_config = create_module_config(
    module_type="moods",
    display_name="Mood",
    display_name_plural="Moods",
    description="Track your daily moods and emotional well-being",
    icon="😊",
    model_name="Mood",
    properties=[
        prop(
            "date", "Date", "date", order=0, description="Mood tracking date", required=True, frozen=True,
            default_value=date.today().isoformat(),
        ),
        prop("mood", "Mood", "select", order=1, description="Your overall mood", required=True, options=MOODS),
        prop(
            "energy", "Energy Level", "select", order=2, description="Your energy level",
            options=options(
                ("Very High ⚡", "#22c55e", "very_high"),
                ("High 🔋", "#3b82f6", "high"),
                ("Medium ⚖️", "#6b7280", "medium"),
                ("Low 🪫", "#f59e0b", "low"),
                ("Very Low 😴", "#ef4444", "very_low"),
            ),
        ),
        prop(
            "stress", "Stress Level", "select", order=3, description="Your stress level",
            options=options(
                ("None 😌", "#22c55e", "none"),
                ("Low 🙂", "#3b82f6", "low"),
                ("Medium 😐", "#6b7280", "medium"),
                ("High 😰", "#f59e0b", "high"),
                ("Very High 😫", "#ef4444", "very_high"),
            ),
        ),
        prop(
            "anxiety", "Anxiety Level", "select", order=4, description="Your anxiety level",
            options=options(
                ("None 😌", "#22c55e", "none"),
                ("Low 🙂", "#3b82f6", "low"),
                ("Medium 😐", "#6b7280", "medium"),
                ("High 😰", "#f59e0b", "high"),
                ("Very High 😱", "#ef4444", "very_high"),
            ),
        ),
        prop(
            "sleep", "Sleep Quality", "select", order=5, description="How well did you sleep?",
            options=options(
                ("Excellent 😴", "#22c55e", "excellent"),
                ("Good 😊", "#3b82f6", "good"),
                ("Fair 😐", "#6b7280", "fair"),
                ("Poor 😔", "#f59e0b", "poor"),
                ("Terrible 😵", "#ef4444", "terrible"),
            ),
        ),
        prop(
            "activities", "Activities", "multiSelect", order=6,
            description="Activities that influenced your mood",
            options=options(
                ("Exercise 🏃", "#22c55e", "exercise"),
                ("Work 💼", "#3b82f6", "work"),
                ("Social 👥", "#8b5cf6", "social"),
                ("Family 👨‍👩‍👧‍👦", "#f59e0b", "family"),
                ("Hobbies 🎨", "#06b6d4", "hobbies"),
                ("Nature 🌳", "#10b981", "nature"),
                ("Reading 📚", "#8b5cf6", "reading"),
                ("Music 🎵", "#f59e0b", "music"),
            ),
        ),
        prop("notes", "Notes", "text", order=7, description="Additional notes about your mood"),
        prop(
            "weather", "Weather", "select", order=8, description="Weather condition",
            options=options(
                ("Sunny ☀️", "#f59e0b", "sunny"),
                ("Cloudy ☁️", "#6b7280", "cloudy"),
                ("Rainy 🌧️", "#3b82f6", "rainy"),
                ("Snowy ❄️", "#e5e7eb", "snowy"),
                ("Stormy ⛈️", "#374151", "stormy"),
            ),
        ),
        prop(
            "moodScore", "Mood Score", "number", order=9, description="Overall mood score (1-10)",
            frozen=True, validation={"min": 1, "max": 10},
        ),
        prop("createdAt", "Created", "date", order=10, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=11, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-moods", "All Moods", "TABLE", description="View all mood entries", is_default=True,
            visible=["date", "mood", "energy", "stress", "anxiety", "moodScore"], sorts=[by("date", "desc")],
        ),
        view(
            "mood-calendar", "Mood Calendar", "CALENDAR", description="Calendar view of mood entries",
            visible=["mood", "energy", "moodScore"], sorts=[by("date", "asc")],
            config={"dateProperty": "date", "colorProperty": "mood"},
        ),
        view(
            "mood-trends", "Mood Trends", "TABLE", description="Track mood trends over time",
            visible=["date", "mood", "moodScore", "sleep", "activities"], sorts=[by("date", "desc")],
        ),
        view(
            "positive-moods", "Positive Moods", "TABLE", description="View positive mood entries",
            filters=[where("mood", "in", ["excellent", "good"])],
            visible=["date", "mood", "energy", "activities", "notes"], sorts=[by("date", "desc")],
        ),
        view(
            "stress-tracker", "Stress Tracker", "TABLE", description="Track stress and anxiety levels",
            visible=["date", "stress", "anxiety", "activities", "notes"], sorts=[by("date", "desc")],
        ),
    ],
    required=["date", "mood"],
    frozen=["date", "moodScore", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "CALENDAR", "LIST"],
    # Mood data stays private
    capabilities={"can_share": False},
    frozen_config=frozen_rules(
        "moods",
        "Moods tracking frozen configuration",
        [
            core_rule("date", "Core tracking property"),
            ("moodScore", "System calculated value", False, True, False),
            *SYSTEM_TIMESTAMP_RULES,
        ],
    ),
)
