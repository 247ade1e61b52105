from fastapi import APIRouter
from wardrobe_recs.core.taxonomy import taxonomy_snapshot

router = APIRouter(prefix="/taxonomy", tags=["taxonomy"])

_cache = None

@router.get("")
async def read_taxonomy():
    global _cache
    if _cache is None:
        _cache = taxonomy_snapshot()
    return _cache
