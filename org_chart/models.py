from dataclasses import dataclass, field


@dataclass(frozen=True)
class Employee:
    """Canonical employee record. Optional fields are "" when absent."""

    id: str
    name: str
    position: str = ""
    manager_id: str = ""
    department: str = ""
    organization: str = ""
    image_url: str = ""


@dataclass(eq=False)
class TreeNode:
    """One employee in the chart plus its direct reports, in input order."""

    employee: Employee
    children: list = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.employee.id

    @property
    def name(self) -> str:
        return self.employee.name

    @property
    def position(self) -> str:
        return self.employee.position

    @property
    def department(self) -> str:
        return self.employee.department

    @property
    def image_url(self) -> str:
        return self.employee.image_url

    def to_dict(self):
        """Nested dict in the shape tree-drawing components consume."""
        return {
            "name": self.name,
            "attributes": {
                "position": self.position,
                "department": self.department,
                "imageUrl": self.image_url,
                "id": self.id,
            },
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self):
        return f"TreeNode(id={self.id!r}, name={self.name!r}, children={len(self.children)})"
