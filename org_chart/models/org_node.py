"""
Org chart data models.

OrgNode: one person/position in the generated hierarchy.
JobFunction: coarse classification derived from a department.
Headcount: staffing figures carried by every node.

Nodes are frozen and own their children as a tuple, so a generated
tree is an immutable snapshot. to_dict() emits the camelCase
interchange form consumed by the grid UI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class JobFunction:
    """A job function from the fixed catalog."""
    job_function_id: int
    function: str

    def to_dict(self) -> Dict[str, Any]:
        return {"jobFunctionId": self.job_function_id, "function": self.function}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobFunction":
        return cls(job_function_id=data["jobFunctionId"], function=data["function"])


@dataclass(frozen=True)
class Headcount:
    """Staffing figures. total is always active + inactive + open."""
    active: int
    inactive: int
    open: int
    total: int

    def __post_init__(self):
        for name in ("active", "inactive", "open", "total"):
            if getattr(self, name) < 0:
                raise ValueError(f"Headcount {name} must be non-negative, got {getattr(self, name)}")
        if self.total != self.active + self.inactive + self.open:
            raise ValueError(
                f"Headcount total {self.total} != "
                f"{self.active} + {self.inactive} + {self.open}"
            )

    @classmethod
    def of(cls, active: int, inactive: int, open: int) -> "Headcount":
        """Build a headcount, deriving the total."""
        return cls(active=active, inactive=inactive, open=open, total=active + inactive + open)

    def to_dict(self) -> Dict[str, int]:
        return {
            "active": self.active,
            "inactive": self.inactive,
            "open": self.open,
            "total": self.total,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Headcount":
        return cls(
            active=data["active"],
            inactive=data["inactive"],
            open=data["open"],
            total=data["total"],
        )


@dataclass(frozen=True)
class OrgNode:
    """A node in the org chart. The root sits at level 0."""
    id: str
    name: str
    position: str
    department: str
    job_function: JobFunction
    headcount: Headcount
    level: int
    is_managerial: bool
    children: Tuple["OrgNode", ...] = field(default_factory=tuple)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_nodes(self):
        """Yield this node and every descendant, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "department": self.department,
            "jobFunction": self.job_function.to_dict(),
            "headcount": self.headcount.to_dict(),
            "level": self.level,
            "isManagerial": self.is_managerial,
            "children": [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrgNode":
        return cls(
            id=data["id"],
            name=data["name"],
            position=data["position"],
            department=data["department"],
            job_function=JobFunction.from_dict(data["jobFunction"]),
            headcount=Headcount.from_dict(data["headcount"]),
            level=data["level"],
            is_managerial=data["isManagerial"],
            children=tuple(cls.from_dict(child) for child in data.get("children", [])),
        )
