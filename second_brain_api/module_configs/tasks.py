# File: /second_brain_api/module_configs/tasks.py | Version: 1.0 | Title: Tasks module config
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

TASK_STATUS = options(
    ("Not Started", "#gray", "not_started"),
    ("In Progress", "#blue", "in_progress"),
    ("Completed", "#green", "completed"),
    ("Cancelled", "#red", "cancelled"),
)

TASK_PRIORITY = options(
    ("Low", "#green", "low"),
    ("Medium", "#yellow", "medium"),
    ("High", "#orange", "high"),
    ("Urgent", "#red", "urgent"),
)

tasks_config = create_module_config(
    module_type="tasks",
    display_name="Task",
    display_name_plural="Tasks",
    description="Manage your tasks and to-dos",
    icon="✅",
    model_name="Task",
    properties=[
        prop("title", "Title", "text", order=0, description="Task title", required=True, frozen=True),
        prop("description", "Description", "text", order=1, description="Task description"),
        prop(
            "status", "Status", "select", order=2, description="Task status",
            required=True, frozen=True, options=TASK_STATUS, default_value="not_started",
        ),
        prop(
            "priority", "Priority", "select", order=3, description="Task priority",
            required=True, frozen=True, options=TASK_PRIORITY, default_value="medium",
        ),
        prop("dueDate", "Due Date", "date", order=4, description="Task due date"),
        prop("assignee", "Assignee", "text", order=5, description="Person assigned to the task"),
        prop("tags", "Tags", "multiSelect", order=6, description="Task tags"),
        prop("createdAt", "Created", "date", order=7, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=8, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-tasks", "All Tasks", "TABLE", description="View all tasks", is_default=True,
            visible=["title", "status", "priority", "dueDate", "assignee"],
            sorts=[by("createdAt", "desc")],
        ),
        view(
            "active-tasks", "Active Tasks", "TABLE", description="View active tasks only",
            filters=[
                where("status", "not_equals", "completed"),
                where("status", "not_equals", "cancelled"),
            ],
            visible=["title", "status", "priority", "dueDate"],
            sorts=[by("priority", "desc")],
        ),
        view(
            "kanban-board", "Kanban Board", "BOARD", description="Kanban board view",
            group_by="status", visible=["title", "priority", "dueDate"],
            config={"groupProperty": "status", "colorProperty": "priority"},
        ),
        view(
            "calendar-view", "Calendar", "CALENDAR", description="Calendar view of tasks",
            visible=["title", "status", "priority"], sorts=[by("dueDate", "asc")],
            config={"dateProperty": "dueDate", "colorProperty": "priority"},
        ),
    ],
    required=["title", "status", "priority"],
    frozen=["title", "status", "priority", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "KANBAN", "CALENDAR", "LIST"],
    frozen_config=frozen_rules(
        "tasks",
        "Task management frozen configuration",
        [
            core_rule("title", "Core task property"),
            core_rule("status", "Core task property"),
            core_rule("priority", "Core task property"),
            *SYSTEM_TIMESTAMP_RULES,
        ],
    ),
)
