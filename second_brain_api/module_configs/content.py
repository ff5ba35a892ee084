# File: /second_brain_api/module_configs/content.py | Version: 1.0 | Title: Content module config
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

CONTENT_TYPES = options(
    ("Article", "#3b82f6", "article"),
    ("Video", "#ef4444", "video"),
    ("Audio", "#8b5cf6", "audio"),
    ("Image", "#10b981", "image"),
    ("Document", "#f59e0b", "document"),
    ("Link", "#06b6d4", "link"),
    ("Code", "#374151", "code"),
    ("Other", "#6b7280", "other"),
)

content_config = create_module_config(
    module_type="content",
    display_name="Content",
    display_name_plural="Content",
    description="Manage your digital content and media",
    icon="📄",
    model_name="Content",
    properties=[
        prop("title", "Title", "text", order=0, description="Content title", required=True, frozen=True),
        prop("description", "Description", "text", order=1, description="Content description"),
        prop("type", "Content Type", "select", order=2, description="Type of content", required=True, options=CONTENT_TYPES),
        prop(
            "category", "Category", "select", order=3, description="Content category",
            options=options(
                ("Work", "#3b82f6", "work"),
                ("Personal", "#10b981", "personal"),
                ("Learning", "#8b5cf6", "learning"),
                ("Entertainment", "#f59e0b", "entertainment"),
                ("Reference", "#06b6d4", "reference"),
                ("Archive", "#6b7280", "archive"),
            ),
        ),
        prop(
            "status", "Status", "select", order=4, description="Content status",
            required=True, default_value="draft",
            options=options(
                ("Draft", "#6b7280", "draft"),
                ("In Review", "#f59e0b", "in_review"),
                ("Published", "#10b981", "published"),
                ("Archived", "#374151", "archived"),
            ),
        ),
        prop("url", "URL", "url", order=5, description="Content URL or link"),
        prop("author", "Author", "text", order=6, description="Content author or creator"),
        prop("source", "Source", "text", order=7, description="Content source or platform"),
        prop("tags", "Tags", "multiSelect", order=8, description="Content tags"),
        prop(
            "rating", "Rating", "select", order=9, description="Content rating (1-5 stars)",
            options=options(
                ("1 Star ⭐", "#ef4444", 1),
                ("2 Stars ⭐⭐", "#f59e0b", 2),
                ("3 Stars ⭐⭐⭐", "#6b7280", 3),
                ("4 Stars ⭐⭐⭐⭐", "#3b82f6", 4),
                ("5 Stars ⭐⭐⭐⭐⭐", "#10b981", 5),
            ),
        ),
        prop(
            "priority", "Priority", "select", order=10, description="Content priority", default_value="medium",
            options=options(("Low", "#10b981", "low"), ("Medium", "#f59e0b", "medium"), ("High", "#ef4444", "high")),
        ),
        prop("datePublished", "Date Published", "date", order=11, description="Content publication date"),
        prop("dateAccessed", "Date Accessed", "date", order=12, description="Date content was accessed"),
        prop("fileSize", "File Size", "text", order=13, description="File size (if applicable)"),
        prop("duration", "Duration", "text", order=14, description="Content duration (for video/audio)"),
        prop("notes", "Notes", "text", order=15, description="Additional notes about the content"),
        prop("createdAt", "Created", "date", order=16, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=17, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-content", "All Content", "TABLE", description="View all content", is_default=True,
            visible=["title", "type", "category", "status", "rating", "dateAccessed"],
            sorts=[by("createdAt", "desc")],
        ),
        view(
            "by-type", "By Type", "BOARD", description="Content grouped by type", group_by="type",
            visible=["title", "category", "status", "rating"],
            config={"groupProperty": "type", "colorProperty": "status"},
        ),
        view(
            "published-content", "Published", "TABLE", description="Published content only",
            filters=[where("status", "equals", "published")],
            visible=["title", "type", "author", "datePublished", "rating"],
            sorts=[by("datePublished", "desc")],
        ),
        view(
            "high-priority", "High Priority", "TABLE", description="High priority content",
            filters=[where("priority", "equals", "high")],
            visible=["title", "type", "category", "status", "dateAccessed"],
            sorts=[by("updatedAt", "desc")],
        ),
        view(
            "gallery-view", "Gallery", "GALLERY", description="Gallery view of content",
            visible=["title", "type", "category", "rating"],
            config={"cardFields": ["title", "type", "category", "rating"]},
        ),
        view(
            "learning-content", "Learning", "TABLE", description="Learning and educational content",
            filters=[where("category", "equals", "learning")],
            visible=["title", "type", "author", "rating", "dateAccessed"],
            sorts=[by("rating", "desc")],
        ),
    ],
    required=["title", "type", "status"],
    frozen=["title", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "GALLERY", "LIST"],
    frozen_config=frozen_rules(
        "content",
        "Content management frozen configuration",
        [core_rule("title", "Core content property"), *SYSTEM_TIMESTAMP_RULES],
    ),
)
