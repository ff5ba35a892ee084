# File: /second_brain_api/module_configs/journals.py | Version: 1.0 | Title: Journals module config
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

JOURNAL_MOODS = options(
    ("Excellent", "#green", "excellent"),
    ("Good", "#blue", "good"),
    ("Neutral", "#gray", "neutral"),
    ("Bad", "#orange", "bad"),
    ("Terrible", "#red", "terrible"),
)

journals_config = create_module_config(
    module_type="journals",
    display_name="Journal",
    display_name_plural="Journals",
    description="Write and manage your daily journals",
    icon="📔",
    model_name="Journal",
    properties=[
        prop("title", "Title", "text", order=0, description="Journal entry title", required=True, frozen=True),
        prop("content", "Content", "text", order=1, description="Journal entry content", required=True),
        prop(
            "date", "Date", "date", order=2, description="Journal entry date", required=True,
            default_value=date.today().isoformat(),
        ),
        prop("mood", "Mood", "select", order=3, description="Your mood for this entry", options=JOURNAL_MOODS),
        prop(
            "category", "Category", "select", order=4, description="Journal category",
            options=options(
                ("Personal", "#blue", "personal"),
                ("Work", "#green", "work"),
                ("Travel", "#purple", "travel"),
                ("Health", "#red", "health"),
                ("Relationships", "#pink", "relationships"),
                ("Learning", "#orange", "learning"),
                ("Gratitude", "#yellow", "gratitude"),
            ),
        ),
        prop(
            "weather", "Weather", "select", order=5, description="Weather condition",
            options=options(
                ("Sunny", "#yellow", "sunny"),
                ("Cloudy", "#gray", "cloudy"),
                ("Rainy", "#blue", "rainy"),
                ("Snowy", "#white", "snowy"),
                ("Stormy", "#purple", "stormy"),
            ),
        ),
        prop("tags", "Tags", "multiSelect", order=6, description="Journal tags"),
        prop("isPrivate", "Private", "checkbox", order=7, description="Mark as private entry", default_value=True),
        prop("wordCount", "Word Count", "number", order=8, description="Number of words in entry", frozen=True),
        prop("createdAt", "Created", "date", order=9, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=10, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-journals", "All Journals", "TABLE", description="View all journal entries", is_default=True,
            visible=["title", "date", "mood", "category", "wordCount"], sorts=[by("date", "desc")],
        ),
        view(
            "recent-entries", "Recent Entries", "TABLE", description="Recent journal entries",
            visible=["title", "date", "mood", "category"], sorts=[by("createdAt", "desc")],
        ),
        view(
            "by-mood", "By Mood", "BOARD", description="Journal entries grouped by mood", group_by="mood",
            visible=["title", "date", "category"],
            config={"groupProperty": "mood", "colorProperty": "mood"},
        ),
        view(
            "calendar-view", "Calendar", "CALENDAR", description="Calendar view of journal entries",
            visible=["title", "mood", "category"], sorts=[by("date", "asc")],
            config={"dateProperty": "date", "colorProperty": "mood"},
        ),
        view(
            "gratitude-journal", "Gratitude", "LIST", description="Gratitude journal entries",
            filters=[where("category", "equals", "gratitude")],
            visible=["title", "date", "content"], sorts=[by("date", "desc")],
        ),
    ],
    required=["title", "content", "date"],
    frozen=["title", "wordCount", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "LIST", "CALENDAR"],
    # Journals stay private
    capabilities={"can_share": False},
    frozen_config=frozen_rules(
        "journals",
        "Journals management frozen configuration",
        [
            core_rule("title", "Core journal property"),
            ("wordCount", "System calculated value", False, True, False),
            *SYSTEM_TIMESTAMP_RULES,
        ],
    ),
)
