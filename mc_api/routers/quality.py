"""Quality scoring endpoints."""
from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from mc_api.utils import ok
from mc_eval.evaluator import QualityStandards
from mc_sdk.models import VideoPlan

router = APIRouter()


class QualityRequest(BaseModel):
    plan: VideoPlan


@router.post("/quality/score")
def quality_score(payload: QualityRequest):
    report = QualityStandards().assess(payload.plan)
    return ok(report.model_dump(mode="json", by_alias=True, exclude_none=True))


@router.post("/quality/enforce")
def quality_enforce(payload: QualityRequest):
    fixed, report = QualityStandards().enforce(payload.plan)
    return ok(
        {
            "plan": fixed.to_wire(),
            "report": report.model_dump(mode="json", by_alias=True, exclude_none=True),
        }
    )
