# File: /second_brain_api/module_configs/people.py | Version: 1.0 | Title: People module config
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

people_config = create_module_config(
    module_type="people",
    display_name="Person",
    display_name_plural="People",
    description="Manage your contacts and relationships",
    icon="👥",
    model_name="Person",
    properties=[
        prop("name", "Name", "text", order=0, description="Person full name", required=True, frozen=True),
        prop("email", "Email", "email", order=1, description="Email address"),
        prop("phone", "Phone", "phone", order=2, description="Phone number"),
        prop("company", "Company", "text", order=3, description="Company or organization"),
        prop("title", "Title", "text", order=4, description="Job title or position"),
        prop(
            "relationship", "Relationship", "select", order=5, description="Relationship type",
            options=options(
                ("Friend", "#blue", "friend"),
                ("Family", "#green", "family"),
                ("Colleague", "#orange", "colleague"),
                ("Client", "#purple", "client"),
                ("Vendor", "#red", "vendor"),
                ("Other", "#gray", "other"),
            ),
        ),
        prop(
            "status", "Status", "select", order=6, description="Contact status", default_value="active",
            options=options(
                ("Active", "#green", "active"),
                ("Inactive", "#gray", "inactive"),
                ("Prospect", "#blue", "prospect"),
                ("Lead", "#orange", "lead"),
            ),
        ),
        prop("tags", "Tags", "multiSelect", order=7, description="Contact tags"),
        prop("notes", "Notes", "text", order=8, description="Additional notes"),
        prop("lastContact", "Last Contact", "date", order=9, description="Last contact date"),
        prop("createdAt", "Created", "date", order=10, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=11, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-people", "All People", "TABLE", description="View all contacts", is_default=True,
            visible=["name", "email", "phone", "company", "relationship", "status"], sorts=[by("name", "asc")],
        ),
        view(
            "active-contacts", "Active Contacts", "TABLE", description="View active contacts only",
            filters=[where("status", "equals", "active")],
            visible=["name", "email", "phone", "company", "lastContact"], sorts=[by("lastContact", "desc")],
        ),
        view(
            "by-company", "By Company", "TABLE", description="Grouped by company", group_by="company",
            visible=["name", "email", "title", "phone"], sorts=[by("company", "asc")],
        ),
        view(
            "gallery-view", "Gallery", "GALLERY", description="Gallery view of contacts",
            visible=["name", "company", "title", "email"],
            config={"cardFields": ["name", "company", "title", "email"]},
        ),
        view(
            "relationship-board", "By Relationship", "BOARD", description="Grouped by relationship type",
            group_by="relationship", visible=["name", "company", "email", "phone"],
            config={"groupProperty": "relationship", "colorProperty": "status"},
        ),
    ],
    required=["name"],
    frozen=["name", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "GALLERY", "LIST"],
    frozen_config=frozen_rules(
        "people",
        "People management frozen configuration",
        [core_rule("name", "Core contact property"), *SYSTEM_TIMESTAMP_RULES],
    ),
)
