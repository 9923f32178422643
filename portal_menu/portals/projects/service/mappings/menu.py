from __future__ import annotations


MENU_CONFIG = {
    "menus": [
        {"title": "Basic", "children": [{"name": "Home"}, {"name": "Message"}, {"name": "Calendar"}]},
        {
            "title": "HR",
            "children": [{"name": "Talents"}, {"name": "Times"}, {"name": "Expenses"}, {"name": "Payroll"}],
        },
        {
            "title": "Service",
            "children": [
                {"name": "Orders"},
                {"name": "Projects"},
                {"name": "Payments"},
                {"name": "Invoice"},
                {"name": "CalendarSchedule"},
            ],
        },
        {"title": "Advanced", "children": [{"name": "Reports"}, {"name": "Compliance"}, {"name": "Insights"}]},
    ]
}
