"""Student model for roster members."""
import uuid
from dataclasses import dataclass, field

from nobet.exceptions import InvalidArgumentError


def new_id() -> str:
    """Short random identifier for stored list items."""
    return uuid.uuid4().hex[:12]


@dataclass
class Student:
    """A student on the duty roster. Position in the roster drives rotation."""

    name: str
    id: str = field(default_factory=new_id, compare=False)

    def __post_init__(self):
        self.name = str(self.name).strip()
        if not self.name:
            raise InvalidArgumentError("student name must not be empty")
        self.id = str(self.id)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, d: dict) -> "Student":
        """Create from dictionary."""
        if d.get("id"):
            return cls(name=d.get("name", ""), id=d["id"])
        return cls(name=d.get("name", ""))
