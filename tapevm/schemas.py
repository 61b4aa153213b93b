from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VMStatus(str, Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class EofPolicy(str, Enum):
    FAULT = "fault"
    ZERO = "zero"
    UNCHANGED = "unchanged"


class LeftMovePolicy(str, Enum):
    # Negative addresses are never wrapped or clamped.
    FAULT = "fault"


class VMSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    eof_policy: EofPolicy = EofPolicy.FAULT
    left_move_policy: LeftMovePolicy = LeftMovePolicy.FAULT
    echo_banner: bool = False


class MachineSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: VMStatus
    program_counter: int = Field(ge=0)
    data_pointer: int = Field(ge=0)
    steps_executed: int = Field(default=0, ge=0)
    cells: dict[int, int] = Field(default_factory=dict)
