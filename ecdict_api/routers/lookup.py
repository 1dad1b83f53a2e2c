from typing import List

from fastapi import APIRouter, Depends, Request

from ..dictionary import DictionaryService
from ..metrics import LookupMetrics
from ..schemas import Word

router = APIRouter()

def get_dictionary(request: Request) -> DictionaryService:
    return request.app.state.dictionary

def get_metrics(request: Request) -> LookupMetrics:
    return request.app.state.metrics

@router.get('/exact/{word}', response_model=Word)
async def handle_exact(
    word: str,
    dictionary: DictionaryService = Depends(get_dictionary),
    metrics: LookupMetrics = Depends(get_metrics),
):
    with metrics.track('handle_exact'):
        return await dictionary.exact(word)

@router.get('/fuzzy/{query}', response_model=List[Word])
async def handle_fuzzy(
    query: str,
    dictionary: DictionaryService = Depends(get_dictionary),
    metrics: LookupMetrics = Depends(get_metrics),
):
    with metrics.track('handle_fuzzy'):
        return await dictionary.fuzzy(query)
