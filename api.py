"""
FastAPI application for the career matching engine.
Thin HTTP layer: all scoring happens in matching.engine.
"""
from datetime import datetime
from typing import Any, Dict, List, Tuple

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

import config
from explanation.career_analysis import build_career_analysis
from ingestion.catalog import get_career, get_default_catalog
from logger import setup_logging
from matching.engine import match_careers
from models.career import Career

setup_logging()
app = FastAPI(title="Career Match API", version="1.0.0")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_catalog() -> Tuple[Career, ...]:
    return get_default_catalog()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class MatchRequest(BaseModel):
    """Normalised test scores from the frontend"""
    model_config = ConfigDict(populate_by_name=True)

    big_five: Dict[str, Any] = Field(default_factory=dict, alias="bigFive")
    holland: Dict[str, Any] = Field(default_factory=dict)
    top_n: int = Field(default=config.DEFAULT_TOP_N, ge=1, le=config.MAX_TOP_N, alias="topN")


class MatchResponse(BaseModel):
    matches: List[Dict[str, Any]]
    total: int


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "career-match",
        "timestamp": datetime.now().isoformat()
    }


# ============================================================================
# CATALOG ENDPOINTS
# ============================================================================

@app.get("/careers")
async def list_careers(catalog: Tuple[Career, ...] = Depends(get_catalog)):
    return [career.to_dict() for career in catalog]


@app.get("/careers/{career_id}")
async def get_career_detail(career_id: str, catalog: Tuple[Career, ...] = Depends(get_catalog)):
    career = get_career(career_id, catalog)
    if career is None:
        raise HTTPException(status_code=404, detail=f"Career not found: {career_id}")
    return career.to_dict()


# ============================================================================
# MATCHING ENDPOINTS
# ============================================================================

@app.post("/careers/match", response_model=MatchResponse)
async def match(request: MatchRequest, catalog: Tuple[Career, ...] = Depends(get_catalog)):
    """Rank the catalog against a user's Big Five and Holland scores"""
    matches = match_careers(request.big_five, request.holland, top_n=request.top_n, catalog=catalog)
    logger.info(f"[API] Matched {len(matches)} careers (topN={request.top_n})")
    return MatchResponse(matches=[m.to_dict() for m in matches], total=len(matches))


@app.post("/careers/analysis")
async def analysis(test_results: Dict[str, Any], catalog: Tuple[Career, ...] = Depends(get_catalog)):
    """Deterministic profile analysis from a test-results document"""
    return build_career_analysis(test_results, catalog=catalog)


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
