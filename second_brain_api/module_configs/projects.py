# File: /second_brain_api/module_configs/projects.py | Version: 1.0 | Title: Projects module config
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

PROJECT_STATUS = options(
    ("Planning", "#gray", "planning"),
    ("In Progress", "#blue", "in_progress"),
    ("On Hold", "#orange", "on_hold"),
    ("Completed", "#green", "completed"),
    ("Cancelled", "#red", "cancelled"),
)

projects_config = create_module_config(
    module_type="projects",
    display_name="Project",
    display_name_plural="Projects",
    description="Manage your projects and initiatives",
    icon="📋",
    model_name="Project",
    properties=[
        prop("name", "Project Name", "text", order=0, description="Name of the project", required=True, frozen=True),
        prop("description", "Description", "text", order=1, description="Project description"),
        prop(
            "status", "Status", "select", order=2, description="Project status",
            required=True, frozen=True, options=PROJECT_STATUS, default_value="planning",
        ),
        prop(
            "priority", "Priority", "select", order=3, description="Project priority",
            required=True, default_value="medium",
            options=options(
                ("Low", "#green", "low"),
                ("Medium", "#yellow", "medium"),
                ("High", "#orange", "high"),
                ("Critical", "#red", "critical"),
            ),
        ),
        prop(
            "category", "Category", "select", order=4, description="Project category",
            options=options(
                ("Personal", "#blue", "personal"),
                ("Work", "#green", "work"),
                ("Learning", "#purple", "learning"),
                ("Side Project", "#orange", "side_project"),
                ("Client Work", "#red", "client_work"),
                ("Research", "#pink", "research"),
            ),
        ),
        prop(
            "progress", "Progress", "number", order=5, description="Progress percentage (0-100)",
            default_value=0, validation={"min": 0, "max": 100},
        ),
        prop("startDate", "Start Date", "date", order=6, description="Project start date"),
        prop("dueDate", "Due Date", "date", order=7, description="Project due date"),
        prop("completedDate", "Completed Date", "date", order=8, description="Project completion date"),
        prop("owner", "Project Owner", "text", order=9, description="Person responsible for the project"),
        prop("team", "Team Members", "multiSelect", order=10, description="Team members involved"),
        prop("budget", "Budget", "number", order=11, description="Project budget", validation={"min": 0}),
        prop("tags", "Tags", "multiSelect", order=12, description="Project tags"),
        prop("notes", "Notes", "text", order=13, description="Project notes and updates"),
        prop("createdAt", "Created", "date", order=14, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=15, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-projects", "All Projects", "TABLE", description="View all projects", is_default=True,
            visible=["name", "status", "priority", "category", "progress", "dueDate", "owner"],
            sorts=[by("createdAt", "desc")],
        ),
        view(
            "active-projects", "Active Projects", "TABLE", description="View active projects only",
            filters=[where("status", "equals", "in_progress")],
            visible=["name", "priority", "progress", "dueDate", "owner"], sorts=[by("priority", "desc")],
        ),
        view(
            "project-board", "Project Board", "BOARD", description="Kanban board view of projects",
            group_by="status", visible=["name", "priority", "progress", "dueDate"],
            config={"groupProperty": "status", "colorProperty": "priority"},
        ),
        view(
            "by-category", "By Category", "BOARD", description="Projects grouped by category",
            group_by="category", visible=["name", "status", "priority", "progress"],
            config={"groupProperty": "category", "colorProperty": "status"},
        ),
        view(
            "timeline-view", "Timeline", "TIMELINE", description="Timeline view of projects",
            visible=["name", "status", "progress", "owner"], sorts=[by("startDate", "asc")],
            config={"startDateProperty": "startDate", "endDateProperty": "dueDate", "colorProperty": "status"},
        ),
        view(
            "overdue-projects", "Overdue", "TABLE", description="Overdue projects",
            filters=[
                where("status", "not_equals", "completed"),
                where("status", "not_equals", "cancelled"),
            ],
            visible=["name", "status", "priority", "dueDate", "owner"], sorts=[by("dueDate", "asc")],
        ),
    ],
    required=["name", "status", "priority"],
    frozen=["name", "status", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "TIMELINE", "GALLERY", "LIST"],
    frozen_config=frozen_rules(
        "projects",
        "Projects management frozen configuration",
        [
            core_rule("name", "Core project property"),
            core_rule("status", "Core project property"),
            *SYSTEM_TIMESTAMP_RULES,
        ],
    ),
)
