# File: /second_brain_api/module_configs/finance.py | Version: 1.0 | Title: Finance module config
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

TRANSACTION_TYPES = options(
    ("Income 💰", "#10b981", "income"),
    ("Expense 💸", "#ef4444", "expense"),
    ("Transfer 🔄", "#3b82f6", "transfer"),
    ("Investment 📈", "#8b5cf6", "investment"),
)

TRANSACTION_CATEGORIES = options(
    ("Food & Dining 🍽️", "#f59e0b", "food"),
    ("Transportation 🚗", "#3b82f6", "transportation"),
    ("Shopping 🛍️", "#8b5cf6", "shopping"),
    ("Entertainment 🎬", "#06b6d4", "entertainment"),
    ("Bills & Utilities ⚡", "#ef4444", "bills"),
    ("Healthcare 🏥", "#10b981", "healthcare"),
    ("Education 📚", "#f59e0b", "education"),
    ("Travel ✈️", "#8b5cf6", "travel"),
    ("Salary 💼", "#10b981", "salary"),
    ("Investment 📈", "#3b82f6", "investment"),
    ("Other 📝", "#6b7280", "other"),
)

ACCOUNTS = options(
    ("Checking Account 🏦", "#3b82f6", "checking"),
    ("Savings Account 💰", "#10b981", "savings"),
    ("Credit Card 💳", "#ef4444", "credit_card"),
    ("Cash 💵", "#f59e0b", "cash"),
    ("Investment Account 📈", "#8b5cf6", "investment"),
    ("Other 📝", "#6b7280", "other"),
)

_TX_COLUMNS = ["date", "description", "amount", "category", "payee", "account"]

finance_config = create_module_config(
    module_type="finance",
    display_name="Transaction",
    display_name_plural="Finance",
    description="Manage your financial transactions and budgets",
    icon="💰",
    model_name="Transaction",
    properties=[
        prop(
            "description", "Description", "text", order=0, description="Transaction description",
            required=True, frozen=True,
        ),
        prop(
            "amount", "Amount", "number", order=1, description="Transaction amount", required=True,
            validation={"min": -999999, "max": 999999},
        ),
        prop("type", "Type", "select", order=2, description="Transaction type", required=True, options=TRANSACTION_TYPES),
        prop(
            "category", "Category", "select", order=3, description="Transaction category",
            required=True, options=TRANSACTION_CATEGORIES,
        ),
        prop("account", "Account", "select", order=4, description="Account used for transaction", options=ACCOUNTS),
        # Default is the date the process started
        prop(
            "date", "Date", "date", order=5, description="Transaction date", required=True,
            default_value=date.today().isoformat(),
        ),
        prop("payee", "Payee/Payer", "text", order=6, description="Who you paid or who paid you"),
        prop("reference", "Reference", "text", order=7, description="Transaction reference or receipt number"),
        prop(
            "status", "Status", "select", order=8, description="Transaction status", default_value="completed",
            options=options(
                ("Pending ⏳", "#f59e0b", "pending"),
                ("Completed ✅", "#10b981", "completed"),
                ("Failed ❌", "#ef4444", "failed"),
                ("Cancelled 🚫", "#6b7280", "cancelled"),
            ),
        ),
        prop(
            "recurring", "Recurring", "checkbox", order=9, description="Is this a recurring transaction?",
            default_value=False,
        ),
        prop("budget", "Budget", "text", order=10, description="Associated budget category"),
        prop("tags", "Tags", "multiSelect", order=11, description="Transaction tags"),
        prop("notes", "Notes", "text", order=12, description="Additional notes"),
        prop(
            "balance", "Account Balance", "number", order=13, description="Account balance after transaction",
            frozen=True,
        ),
        prop("createdAt", "Created", "date", order=14, description="Creation date", frozen=True),
        prop("updatedAt", "Updated", "date", order=15, description="Last update date", frozen=True),
    ],
    views=[
        view(
            "all-transactions", "All Transactions", "TABLE", description="View all financial transactions",
            is_default=True,
            visible=["date", "description", "amount", "type", "category", "account", "status"],
            sorts=[by("date", "desc")],
        ),
        view(
            "income-transactions", "Income", "TABLE", description="Income transactions only",
            filters=[where("type", "equals", "income")], visible=_TX_COLUMNS, sorts=[by("date", "desc")],
        ),
        view(
            "expense-transactions", "Expenses", "TABLE", description="Expense transactions only",
            filters=[where("type", "equals", "expense")], visible=_TX_COLUMNS, sorts=[by("date", "desc")],
        ),
        view(
            "by-category", "By Category", "BOARD", description="Transactions grouped by category",
            group_by="category", visible=["date", "description", "amount", "type"],
            config={"groupProperty": "category", "colorProperty": "type"},
        ),
        view(
            "monthly-view", "Monthly View", "CALENDAR", description="Calendar view of transactions",
            visible=["description", "amount", "type", "category"], sorts=[by("date", "asc")],
            config={"dateProperty": "date", "colorProperty": "type"},
        ),
        view(
            "pending-transactions", "Pending", "TABLE", description="Pending transactions",
            filters=[where("status", "equals", "pending")],
            visible=["date", "description", "amount", "type", "category", "account"],
            sorts=[by("date", "asc")],
        ),
        view(
            "recurring-transactions", "Recurring", "TABLE", description="Recurring transactions",
            filters=[where("recurring", "equals", True)],
            visible=["description", "amount", "type", "category", "account", "date"],
            sorts=[by("date", "desc")],
        ),
    ],
    required=["description", "amount", "type", "category", "date"],
    frozen=["description", "balance", "createdAt", "updatedAt"],
    supported_view_types=["TABLE", "BOARD", "CALENDAR", "LIST"],
    # Financial data stays private
    capabilities={"can_share": False},
    frozen_config=frozen_rules(
        "finance",
        "Finance management frozen configuration",
        [
            core_rule("description", "Core transaction property"),
            ("balance", "System calculated value", False, True, False),
            *SYSTEM_TIMESTAMP_RULES,
        ],
    ),
)
