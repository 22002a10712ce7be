"""
Seed catalogs for the org chart generator.

The catalogs are fixed domain data, not generated. Level-indexed tables
are ordered tuples with an explicit default for levels past their end.
"""

from typing import Dict, Tuple

from org_chart.models.org_node import Headcount, JobFunction


FIRST_NAMES: Tuple[str, ...] = (
    "James", "Mary", "John", "Patricia", "Robert", "Jennifer", "Michael", "Linda",
    "William", "Elizabeth", "David", "Susan", "Richard", "Jessica", "Joseph", "Sarah",
    "Thomas", "Karen", "Charles", "Nancy", "Christopher", "Lisa", "Daniel", "Margaret",
    "Matthew", "Betty", "Anthony", "Sandra", "Mark", "Ashley", "Donald", "Kimberly",
    "Steven", "Emily", "Paul", "Donna", "Andrew", "Michelle", "Joshua", "Dorothy",
)

LAST_NAMES: Tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas",
    "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson", "White",
    "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson", "Walker", "Young",
    "Allen", "King", "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores",
)

DEPARTMENTS: Tuple[str, ...] = (
    "Marketing",
    "Sales",
    "Engineering",
    "Product",
    "Operations",
    "Finance",
    "Human Resources",
    "Legal",
    "Customer Success",
    "Research",
    "Development",
    "Strategy",
    "Business Development",
    "Quality Assurance",
    "Information Technology",
)

JOB_FUNCTIONS: Dict[int, JobFunction] = {
    jf.job_function_id: jf
    for jf in (
        JobFunction(1, "Administration"),
        JobFunction(2, "Logistics and Fulfillment"),
        JobFunction(3, "Business and Financial Operations"),
        JobFunction(4, "Communications"),
        JobFunction(5, "Clinical Affairs"),
        JobFunction(6, "Marketing"),
        JobFunction(7, "Analytics"),
        JobFunction(8, "Medical and Regulatory Affairs"),
        JobFunction(9, "Legal and Compliance"),
        JobFunction(10, "Sales"),
        JobFunction(11, "Customer Success"),
        JobFunction(12, "Supply Chain"),
        JobFunction(13, "Manufacturing and Maintenance"),
        JobFunction(14, "Engineering and Science"),
        JobFunction(15, "Environmental Health and Safety"),
        JobFunction(16, "Facilities"),
        JobFunction(17, "Human Resources"),
        JobFunction(18, "Healthcare Provision - Patient Facing Clinical"),
        JobFunction(19, "Healthcare Provision - Non-Patient Facing Clinical"),
        JobFunction(20, "Information Technology"),
    )
}

DEFAULT_JOB_FUNCTION_ID = 1

DEPARTMENT_JOB_FUNCTION_IDS: Dict[str, int] = {
    "Marketing": 6,
    "Sales": 10,
    "Engineering": 14,
    "Product": 14,
    "Operations": 12,
    "Finance": 3,
    "Human Resources": 17,
    "Legal": 9,
    "Customer Success": 11,
    "Research": 14,
    "Development": 14,
    "Strategy": 3,
    "Business Development": 3,
    "Quality Assurance": 15,
    "Information Technology": 20,
}

# Index = level below the root
TITLES_BY_LEVEL: Tuple[Tuple[str, ...], ...] = (
    ("Chief Executive Officer (CEO)",),
    (
        "Chief Operating Officer (COO)",
        "Chief Financial Officer (CFO)",
        "Chief Technology Officer (CTO)",
        "Chief Marketing Officer (CMO)",
        "Chief Human Resources Officer (CHRO)",
    ),
    ("VP of Engineering", "VP of Sales", "VP of Marketing", "VP of Operations", "VP of Product", "VP of Finance"),
    ("Senior Director", "Executive Director", "Director"),
    ("Senior Manager", "Manager", "Product Manager", "Engineering Manager"),
    ("Team Lead", "Technical Lead", "Project Lead"),
    ("Senior Engineer", "Senior Developer", "Principal Analyst"),
    ("Associate Engineer", "Coordinator", "Analyst", "Staff Member"),
    ("Junior Staff", "Assistant", "Intern"),
)

DEFAULT_TITLES: Tuple[str, ...] = ("Employee",)

# Levels up to and including this one get FIXED_HEADCOUNT
FIXED_HEADCOUNT_MAX_LEVEL = 1
FIXED_HEADCOUNT = Headcount(active=1, inactive=0, open=0, total=1)

# Exclusive upper bounds (active, inactive, open) per level
HEADCOUNT_RANGES: Dict[int, Tuple[int, int, int]] = {
    2: (2, 1, 0),
    3: (5, 1, 1),
    4: (10, 2, 1),
    5: (15, 3, 2),
    6: (20, 4, 3),
    7: (30, 5, 5),
    8: (40, 8, 6),
}

DEFAULT_HEADCOUNT_RANGE: Tuple[int, int, int] = (5, 1, 0)


def titles_for_level(level: int) -> Tuple[str, ...]:
    """Titles a node at `level` may hold."""
    if 0 <= level < len(TITLES_BY_LEVEL):
        return TITLES_BY_LEVEL[level]
    return DEFAULT_TITLES


def headcount_range_for_level(level: int) -> Tuple[int, int, int]:
    """Exclusive (active, inactive, open) bounds used above the fixed tier."""
    return HEADCOUNT_RANGES.get(level, DEFAULT_HEADCOUNT_RANGE)


def job_function_id_for_department(department: str) -> int:
    return DEPARTMENT_JOB_FUNCTION_IDS.get(department, DEFAULT_JOB_FUNCTION_ID)


def job_function_for_department(department: str) -> JobFunction:
    """Map a department to its job function, defaulting to Administration."""
    return JOB_FUNCTIONS[job_function_id_for_department(department)]
