from fastapi import APIRouter, Depends, HTTPException, Request

from ..errors import InvalidMonetaryValue, ReceiptNotFound
from ..schemas import IdResponse, PointsResponse, ReceiptIn, ReceiptOut, ScoreBreakdown
from ..services.scoring import ScoringService


router = APIRouter(tags=["receipts"])

def get_scoring(request: Request) -> ScoringService:
    return request.app.state.scoring

@router.post("/receipts/process", response_model=IdResponse)
@router.post("/receipt/process", response_model=IdResponse, include_in_schema=False)
def process_receipt(payload: ReceiptIn, scoring: ScoringService = Depends(get_scoring)):
    try:
        receipt_id = scoring.submit(payload)
    except InvalidMonetaryValue as e:
        raise HTTPException(status_code=400, detail=str(e))
    return IdResponse(id=receipt_id)

@router.get("/receipts", response_model=list[ReceiptOut])
def list_receipts(scoring: ScoringService = Depends(get_scoring)):
    return [ReceiptOut.from_receipt(r) for r in scoring.list_receipts()]

@router.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
@router.get("/receipts/{receipt_id}/point", response_model=PointsResponse, include_in_schema=False)
def get_points(receipt_id: str, scoring: ScoringService = Depends(get_scoring)):
    try:
        points, _ = scoring.score(receipt_id)
    except ReceiptNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return PointsResponse(points=points)

@router.get("/receipts/{receipt_id}/points/steps", response_model=ScoreBreakdown)
@router.get("/receipts/{receipt_id}/point/steps", response_model=ScoreBreakdown, include_in_schema=False)
def get_points_with_steps(receipt_id: str, scoring: ScoringService = Depends(get_scoring)):
    try:
        _, breakdown = scoring.score(receipt_id, with_trace=True)
    except ReceiptNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return breakdown
