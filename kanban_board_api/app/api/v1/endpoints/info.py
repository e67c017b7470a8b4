"""
Liveness endpoint for API v1.

``GET /testing`` answers with a fixed message so that API clients
(Postman collections, load balancers) can check the service is up
without touching the store.
"""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/testing", response_model=Dict[str, str])
async def testing() -> Dict[str, str]:
    return {"message": "Testing in postman"}
