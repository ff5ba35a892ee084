# File: /second_brain_api/module_configs/goals.py | Version: 1.0 | Title: Goals module config
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

goals_config = create_module_config(
    module_type="goals",
    display_name="Goal",
    display_name_plural="Goals",
    description="Track your personal and professional goals",
    icon="🎯",
    model_name="Goal",
    properties=[
        prop("title", "Title", "text", order=0, description="Goal title", required=True, frozen=True),
        prop("description", "Description", "text", order=1, description="Goal description"),
        prop(
            "category", "Category", "select", order=2, description="Goal category",
            options=options(
                ("Personal", "#blue", "personal"),
                ("Professional", "#green", "professional"),
                ("Health", "#red", "health"),
                ("Financial", "#yellow", "financial"),
                ("Learning", "#purple", "learning"),
                ("Relationship", "#pink", "relationship"),
            ),
        ),
        prop(
            "status", "Status", "select", order=3, description="Goal status",
            required=True, default_value="not_started",
            options=options(
                ("Not Started", "#gray", "not_started"),
                ("In Progress", "#blue", "in_progress"),
                ("Completed", "#green", "completed"),
                ("On Hold", "#orange", "on_hold"),
                ("Cancelled", "#red", "cancelled"),
            ),
        ),
        prop(
            "progress", "Progress", "number", order=4, description="Progress percentage (0-100)",
            default_value=0, validation={"min": 0, "max": 100},
        ),
        prop("targetDate", "Target Date", "date", order=5, description="Target completion date"),
        prop(
            "priority", "Priority", "select", order=6, description="Goal priority", default_value="medium",
            options=options(
                ("Low", "#green", "low"),
                ("Medium", "#yellow", "medium"),
                ("High", "#orange", "high"),
                ("Critical", "#red", "critical"),
            ),
        ),
        prop("tags", "Tags", "multiSelect", order=7, description="Goal tags"),
        prop("createdAt", "Created", "date", order=8, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=9, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-goals", "All Goals", "TABLE", description="View all goals", is_default=True,
            visible=["title", "category", "status", "progress", "targetDate", "priority"],
            sorts=[by("createdAt", "desc")],
        ),
        view(
            "active-goals", "Active Goals", "TABLE", description="View active goals only",
            filters=[where("status", "equals", "in_progress")],
            visible=["title", "category", "progress", "targetDate", "priority"],
            sorts=[by("priority", "desc")],
        ),
        view(
            "by-category", "By Category", "BOARD", description="Goals grouped by category",
            group_by="category", visible=["title", "status", "progress", "targetDate"],
            config={"groupProperty": "category", "colorProperty": "status"},
        ),
        view(
            "progress-tracker", "Progress Tracker", "TABLE", description="Track goal progress",
            visible=["title", "progress", "status", "targetDate"],
            sorts=[by("progress", "desc")],
            filters=[
                where("status", "not_equals", "completed"),
                where("status", "not_equals", "cancelled"),
            ],
        ),
    ],
    required=["title", "status"],
    frozen=["title", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "GALLERY", "LIST"],
    frozen_config=frozen_rules(
        "goals",
        "Goals management frozen configuration",
        [core_rule("title", "Core goal property"), *SYSTEM_TIMESTAMP_RULES],
    ),
)
