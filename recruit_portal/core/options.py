"""
Fixed choice lists shown on the application form and the dashboard.

Departments are stored on a recruit by code; the dashboard turns the
code back into a short label (table) or full name (detail panel).
"""

from typing import Dict, List


# code -> (short label, full name)
DEPARTMENTS: Dict[str, tuple] = {
    "fm": ("F&M", "Finance and Marketing Department"),
    "it": ("IT", "Department of IT"),
    "ep": ("E&P", "Editorial and Publications Department"),
    "rpm": ("RPM", "Research and Project Management Department"),
    "em": ("EM", "Event Management"),
    "sp": ("SP", "Strategic Planning Department"),
    "hr": ("HR", "Human Resources Department"),
    "ad": ("A&D", "Arts & Design"),
}

SEMESTERS: List[str] = ["N/A"] + [
    f"{season} {year}"
    for year in (2023, 2024, 2025)
    for season in ("Spring", "Summer", "Fall")
]

DEFAULT_CURRENT_SEMESTER = "Fall 2025"


def department_label(code: str) -> str:
    """Short label for a department code; unknown codes are returned as-is."""
    entry = DEPARTMENTS.get(code)
    return entry[0] if entry else code


def department_full_name(code: str) -> str:
    """Full department name for a code; unknown codes are returned as-is."""
    entry = DEPARTMENTS.get(code)
    return entry[1] if entry else code


def department_options() -> List[dict]:
    return [
        {"value": code, "label": short, "name": full}
        for code, (short, full) in DEPARTMENTS.items()
    ]
