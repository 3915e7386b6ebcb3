from fastapi import APIRouter, Depends

from api.dependencies import get_scorer, get_stats
from api.schemas import AnalysisResponse, AnalyzeRequest
from api.stats import ServiceStats
from sentiment import SentimentScorer

router = APIRouter(tags=["Analysis"])

@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(
    body: AnalyzeRequest,
    scorer: SentimentScorer = Depends(get_scorer),
    stats: ServiceStats = Depends(get_stats),
):
    """
    Score inline text.
    """
    result = scorer.score(body.text)
    stats.record_analysis()
    return result.to_dict()
