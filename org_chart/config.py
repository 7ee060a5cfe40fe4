# -------------------------------------------
# CONFIG
# -------------------------------------------

# Accepted header spellings per canonical field, lower-cased, in priority order.
COL_SYNONYMS = {
    "id": ["id", "employee_id", "employee id", "employeeid", "unique identifier"],
    "name": ["name", "full name", "employee name"],
    "position": ["position", "title", "job title", "line detail 1"],
    "manager_id": [
        "manager_id",
        "managerid",
        "manager id",
        "reports_to",
        "reports to",
        "manager uid",
    ],
    "department": ["department", "dept"],
    "organization": ["organization", "organization name", "org", "phase"],
    "image_url": ["imageurl", "image_url", "image url", "photo"],
}

# Cell values treated as empty
NULL_STRINGS = {"", "nan"}

DEFAULT_GROUP_LABEL = "Default Org"
DEFAULT_POSITION = "Employee"     # renderer placeholder only, never stored

OUTPUT_FILE = "org_chart"         # will create org_chart.png (or .pdf)
OUTPUT_FORMAT = "png"
RANKDIR = "TB"                    # "TB" = top-bottom, "LR" = left-right
FONT = "Helvetica"

# pastel-ish department colors
PALETTE = [
    "#E3F2FD",  # light blue
    "#FFF3E0",  # light orange
    "#E8F5E9",  # light green
    "#F3E5F5",  # light purple
    "#E0F7FA",  # light cyan
    "#FBE9E7",  # light coral
    "#FFFDE7",  # light yellow
]

THEMES = {
    "light": {
        "bgcolor": "white",
        "node_fill": "#f9f9f9",
        "node_border": "#555555",
        "font_color": "#111827",
        "edge_color": "#888888",
        "root_fill": "#e3f2fd",
    },
    "dark": {
        "bgcolor": "#121212",
        "node_fill": "#1e1e1e",
        "node_border": "#9ca3af",
        "font_color": "#f9fafb",
        "edge_color": "#6b7280",
        "root_fill": "#005c97",
    },
}
