"""Trace objects emitted while a plan moves through production."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from mc_plan.planner import PlanningTrace


@dataclass
class PhaseRecord:
    phase: str
    applied: bool
    details: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {"phase": self.phase, "applied": self.applied, "details": dict(self.details)}


@dataclass
class ProductionTrace:
    plan_id: str
    phases: List[PhaseRecord] = field(default_factory=list)
    planning: Optional[PlanningTrace] = None

    def record(self, phase: str, applied: bool, **details: Any) -> None:
        self.phases.append(PhaseRecord(phase=phase, applied=applied, details=details))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "plan_id": self.plan_id,
            "phases": [phase.as_dict() for phase in self.phases],
            "planning": self.planning.as_dict() if self.planning else None,
        }


__all__ = ["PhaseRecord", "ProductionTrace"]
