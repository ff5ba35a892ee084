# File: /second_brain_api/module_configs/books.py | Version: 1.0 | Title: Books module config
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

books_config = create_module_config(
    module_type="books",
    display_name="Book",
    display_name_plural="Books",
    description="Track your reading list and book reviews",
    icon="📚",
    model_name="Book",
    properties=[
        prop("title", "Title", "text", order=0, description="Book title", required=True, frozen=True),
        prop("author", "Author", "text", order=1, description="Book author", required=True),
        prop("isbn", "ISBN", "text", order=2, description="Book ISBN"),
        prop(
            "genre", "Genre", "select", order=3, description="Book genre",
            options=options(
                ("Fiction", "#blue", "fiction"),
                ("Non-Fiction", "#green", "non_fiction"),
                ("Biography", "#purple", "biography"),
                ("Science", "#orange", "science"),
                ("Technology", "#red", "technology"),
                ("Business", "#yellow", "business"),
                ("Self-Help", "#pink", "self_help"),
                ("History", "#brown", "history"),
                ("Philosophy", "#gray", "philosophy"),
            ),
        ),
        prop(
            "status", "Reading Status", "select", order=4, description="Current reading status",
            required=True, default_value="want_to_read",
            options=options(
                ("Want to Read", "#gray", "want_to_read"),
                ("Currently Reading", "#blue", "currently_reading"),
                ("Completed", "#green", "completed"),
                ("On Hold", "#orange", "on_hold"),
                ("Abandoned", "#red", "abandoned"),
            ),
        ),
        prop(
            "rating", "Rating", "select", order=5, description="Book rating (1-5 stars)",
            options=options(
                ("1 Star", "#red", 1),
                ("2 Stars", "#orange", 2),
                ("3 Stars", "#yellow", 3),
                ("4 Stars", "#blue", 4),
                ("5 Stars", "#green", 5),
            ),
        ),
        prop("pages", "Pages", "number", order=6, description="Total number of pages", validation={"min": 1}),
        prop(
            "currentPage", "Current Page", "number", order=7, description="Current reading page",
            default_value=0, validation={"min": 0},
        ),
        prop("startDate", "Start Date", "date", order=8, description="Date started reading"),
        prop("finishDate", "Finish Date", "date", order=9, description="Date finished reading"),
        prop("notes", "Notes", "text", order=10, description="Reading notes and thoughts"),
        prop("tags", "Tags", "multiSelect", order=11, description="Book tags"),
        prop("createdAt", "Added", "date", order=12, description="Date added to library", frozen=True),
        prop("updatedAt", "Updated", "date", order=13, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-books", "All Books", "TABLE", description="View all books in library", is_default=True,
            visible=["title", "author", "genre", "status", "rating"], sorts=[by("createdAt", "desc")],
        ),
        view(
            "currently-reading", "Currently Reading", "TABLE", description="Books currently being read",
            filters=[where("status", "equals", "currently_reading")],
            visible=["title", "author", "pages", "currentPage", "startDate"],
            sorts=[by("startDate", "desc")],
        ),
        view(
            "completed-books", "Completed", "TABLE", description="Completed books",
            filters=[where("status", "equals", "completed")],
            visible=["title", "author", "rating", "finishDate", "genre"],
            sorts=[by("finishDate", "desc")],
        ),
        view(
            "by-genre", "By Genre", "BOARD", description="Books grouped by genre", group_by="genre",
            visible=["title", "author", "status", "rating"],
            config={"groupProperty": "genre", "colorProperty": "status"},
        ),
        view(
            "reading-list", "Reading List", "LIST", description="Books to read",
            filters=[where("status", "equals", "want_to_read")],
            visible=["title", "author", "genre"], sorts=[by("createdAt", "asc")],
        ),
    ],
    required=["title", "author", "status"],
    frozen=["title", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "GALLERY", "LIST"],
    frozen_config=frozen_rules(
        "books",
        "Books management frozen configuration",
        [core_rule("title", "Core book property"), *SYSTEM_TIMESTAMP_RULES],
    ),
)
