from __future__ import annotations

# Basic, Service, Business, System and Logs sections.
MENU_CONFIG = {
    "menus": [
        {
            "title": "Basic",
            "children": [
                {"name": "Home", "icon": "House"},
                {"name": "AIChat", "icon": "ChatDotRound"},
                {"name": "Message", "icon": "Message"},
            ],
        },
        {
            "title": "Service",
            "children": [
                {"name": "Clients", "icon": "OfficeBuilding"},
                {"name": "Projects", "icon": "Folder"},
                {"name": "Reports", "icon": "DataLine"},
            ],
        },
        {
            "title": "Business",
            "children": [
                {"name": "Entity", "icon": "School"},
                {"name": "Location", "icon": "Location"},
                {"name": "ServiceType", "icon": "Guide"},
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
