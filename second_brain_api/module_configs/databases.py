# File: /second_brain_api/module_configs/databases.py | Version: 1.0 | Title: Databases module config
from second_brain_api.module_configs.factory import by, create_module_config, frozen_rules, options, prop, view, where

databases_config = create_module_config(
    module_type="databases",
    display_name="Database",
    display_name_plural="Databases",
    description="Manage custom databases with flexible schemas",
    icon="🗄️",
    model_name="Database",
    properties=[
        prop("name", "Name", "text", order=0, description="Database name", required=True),
        prop("description", "Description", "text", order=1, description="Database description"),
        prop("icon", "Icon", "text", order=2, description="Database icon"),
        prop("cover", "Cover", "url", order=3, description="Database cover image"),
        prop("isPublic", "Public", "checkbox", order=4, description="Whether the database is public"),
        prop("isFavorite", "Favorite", "checkbox", order=5, description="Whether the database is favorited"),
        prop(
            "categoryId", "Category", "select", order=6, description="Database category",
            options=options(
                ("Personal", "blue", "personal"),
                ("Work", "green", "work"),
                ("Project", "purple", "project"),
                ("Reference", "gray", "reference"),
            ),
        ),
        prop("tags", "Tags", "multiSelect", order=7, description="Database tags", options=[]),
        prop("lastAccessedAt", "Last Accessed", "date", order=8, description="When the database was last accessed"),
        prop(
            "accessCount", "Access Count", "number", order=9,
            description="Number of times the database has been accessed",
        ),
        prop("frozen", "Frozen", "checkbox", order=10, description="Whether the database is frozen"),
        prop("createdBy", "Created By", "text", order=11, description="User who created the database", required=True),
        prop("lastEditedBy", "Last Edited By", "text", order=12, description="User who last edited the database"),
        prop("createdAt", "Created", "date", order=13, description="When the database was created", required=True),
        prop("updatedAt", "Updated", "date", order=14, description="When the database was last updated", required=True),
    ],
    views=[
        view(
            "all-databases", "All Databases", "TABLE", description="View all databases", is_default=True,
            visible=["name", "description", "categoryId", "isFavorite", "lastAccessedAt", "createdAt"],
            sorts=[by("lastAccessedAt", "desc")],
        ),
        view(
            "favorites", "Favorites", "TABLE", description="View favorite databases",
            filters=[where("isFavorite", "equals", True)],
            visible=["name", "description", "categoryId", "lastAccessedAt"],
            sorts=[by("lastAccessedAt", "desc")],
        ),
        view(
            "by-category", "By Category", "BOARD", description="View databases grouped by category",
            group_by="categoryId", visible=["name", "description", "isFavorite", "lastAccessedAt"],
            sorts=[by("name", "asc")],
        ),
        view(
            "gallery", "Gallery", "GALLERY", description="View databases as cards with covers",
            visible=["name", "description", "cover", "categoryId", "isFavorite"],
            sorts=[by("lastAccessedAt", "desc")],
        ),
    ],
    required=["name", "createdBy", "createdAt", "updatedAt"],
    frozen=["createdBy", "createdAt", "updatedAt", "lastEditedBy"],
    supported_view_types=["TABLE", "BOARD", "KANBAN", "GALLERY", "LIST"],
    frozen_config=frozen_rules(
        "databases",
        "System-managed database properties that cannot be modified",
        [
            ("createdBy", "System-managed user tracking", False, False, False),
            ("createdAt", "System-managed timestamp", False, False, False),
            ("updatedAt", "System-managed timestamp", False, False, False),
            ("lastEditedBy", "System-managed user tracking", False, True, False),
        ],
    ),
)
