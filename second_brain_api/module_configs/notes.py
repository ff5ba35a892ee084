# File: /second_brain_api/module_configs/notes.py | Version: 1.0 | Title: Notes module config
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

notes_config = create_module_config(
    module_type="notes",
    display_name="Note",
    display_name_plural="Notes",
    description="Manage your notes and ideas",
    icon="📝",
    model_name="Note",
    properties=[
        prop("title", "Title", "text", order=0, description="Note title", required=True, frozen=True),
        prop("content", "Content", "text", order=1, description="Note content"),
        prop(
            "category", "Category", "select", order=2, description="Note category",
            options=options(
                ("Personal", "#blue", "personal"),
                ("Work", "#orange", "work"),
                ("Ideas", "#purple", "ideas"),
                ("Research", "#green", "research"),
                ("Archive", "#gray", "archive"),
            ),
        ),
        prop("tags", "Tags", "multiSelect", order=3, description="Note tags"),
        prop("favorite", "Favorite", "checkbox", order=4, description="Mark as favorite", default_value=False),
        prop("createdAt", "Created", "date", order=5, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=6, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-notes", "All Notes", "TABLE", description="View all notes", is_default=True,
            visible=["title", "category", "tags", "favorite", "updatedAt"], sorts=[by("updatedAt", "desc")],
        ),
        view(
            "favorites", "Favorites", "TABLE", description="View favorite notes",
            filters=[where("favorite", "equals", True)],
            visible=["title", "category", "tags", "updatedAt"], sorts=[by("updatedAt", "desc")],
        ),
        view(
            "by-category", "By Category", "BOARD", description="Notes grouped by category",
            group_by="category", visible=["title", "tags", "favorite"],
            config={"groupProperty": "category", "colorProperty": "category"},
        ),
        view(
            "gallery-view", "Gallery", "GALLERY", description="Gallery view of notes",
            visible=["title", "category", "tags"], config={"cardFields": ["title", "category", "tags"]},
        ),
    ],
    required=["title"],
    frozen=["title", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "GALLERY", "LIST"],
    frozen_config=frozen_rules(
        "notes",
        "Notes management frozen configuration",
        [core_rule("title", "Core note property"), *SYSTEM_TIMESTAMP_RULES],
    ),
)
