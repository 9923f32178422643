from __future__ import annotations


MENU_CONFIG = {
    "menus": [
        {"title": "Basic", "children": [{"name": "Home"}, {"name": "Message"}]},
        {
            "title": "HR",
            "children": [{"name": "Profiles"}, {"name": "Times"}, {"name": "Expenses"}, {"name": "Payslips"}],
        },
        {"title": "Service", "children": [{"name": "Invoice"}, {"name": "WorkVisa"}, {"name": "Contract"}]},
    ]
}
