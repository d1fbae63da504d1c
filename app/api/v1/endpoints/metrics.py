"""
Metrics endpoints — stateless physiological calculations.
"""

from fastapi import APIRouter

from app.momentum import metrics
from app.schemas.sample import CaloricTarget, CaloricTargetRequest, DerivedMetrics, MetricsRequest

router = APIRouter()


@router.post("/compute", summary="Compute BMI, BMR, TDEE and classifications for a sample.",
             response_model=DerivedMetrics, )
def compute_metrics(data: MetricsRequest):
    return metrics.compute_metrics(data.sample, data.activity_level)


@router.post("/caloric-target", summary="Daily calorie target for a weight goal.", response_model=CaloricTarget, )
def compute_caloric_target(data: CaloricTargetRequest):
    return metrics.caloric_target(data.tdee, data.current_weight_kg, data.target_weight_kg, data.weeks)
