from __future__ import annotations


MENU_CONFIG = {
    "menus": [
        {
            "title": "Basic",
            "children": [
                {"name": "Home", "icon": "House"},
                {"name": "AIChat", "icon": "ChatDotRound"},
                {"name": "Message", "icon": "Message"},
                {"name": "Calendar", "icon": "Calendar"},
            ],
        },
        {
            "title": "HR",
            "children": [
                {"name": "Talents", "icon": "User"},
                {"name": "Times", "icon": "Clock"},
                {"name": "Expenses", "icon": "ScaleToOriginal"},
                {"name": "Payroll", "icon": "CreditCard"},
            ],
        },
        {
            "title": "Service",
            "children": [
                {"name": "Orders", "icon": "DocumentCopy"},
                {"name": "Projects", "icon": "FolderOpened"},
                {"name": "Payments", "icon": "Money"},
                {"name": "Invoice", "icon": "Printer"},
            ],
        },
        {
            "title": "Advanced",
            "children": [
                {"name": "Reports", "icon": "DataLine"},
                {"name": "Compliance", "icon": "CircleCheck"},
                {"name": "Insights", "icon": "DataAnalysis"},
            ],
        },
        {
            "title": "System",
            "children": [
                {"name": "Users", "icon": "User"},
                {"name": "Roles", "icon": "Key"},
                {"name": "Access", "icon": "Lock"},
            ],
        },
        {
            "title": "Logs",
            "children": [
                {"name": "ActiveLog", "icon": "MessageBox"},
                {"name": "EmailLog", "icon": "MessageBox"},
                {"name": "ErrorLog", "icon": "MessageBox"},
                {"name": "DataLog", "icon": "MessageBox"},
            ],
        },
    ]
}
