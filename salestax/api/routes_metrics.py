from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from salestax.api.dependencies import require_report_access

router = APIRouter()


@router.get("/metrics")
def metrics_endpoint(_auth=Depends(require_report_access)) -> Response:
    # Counters are incremented at event points; just expose registry.
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
