"""Pipeline state and the value types passed between the conversation and the stages."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Literal, TypedDict


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    role: Role
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class TurnResult:
    text: str  # Diagnostic text when failed is True.
    failed: bool = False


@dataclass
class PipelineResult:
    drafts: str = ""
    critique: str = ""
    resolution: str = ""

    @property
    def completed(self) -> bool:
        """True when the run reached the resolution stage."""
        return bool(self.resolution)

    def to_dict(self) -> dict:
        return asdict(self)


class PipelineState(TypedDict):
    question: str  # Original user question. Immutable after init.
    drafts: str  # Labeled draft answers, joined by blank lines.
    critique: str  # Researcher output (or its failure diagnostic).
    resolution: str  # Resolver output (or its failure diagnostic).
    status: Literal["in_progress", "drafting_failed", "critique_failed", "done"]
