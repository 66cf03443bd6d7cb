from fastapi import APIRouter, Depends, HTTPException, Request
from core.analyser import CriteriaAnalyser, RAND_KEY
from core.registry import ClassCriteriaRegistry
from exceptions.custom_errors import *
from schemas.criteria.analyse import CriteriaErrorDetail, CriteriaRequest, CriteriaResponse
from docs.criteria.analyse import analyse_criteria_description, class_criteria_description
from utils.logger import logger

router = APIRouter(prefix="/criteria", tags=["Criteria"])


def get_registry(request: Request) -> ClassCriteriaRegistry:
    return request.app.state.registry


def get_analyser(
    registry: ClassCriteriaRegistry = Depends(get_registry),
) -> CriteriaAnalyser:
    return CriteriaAnalyser(registry)


# analyse criteria line
@router.post(
    "/analyse",
    response_model=CriteriaResponse,
    description=analyse_criteria_description,
    summary="Analyse Criteria",
)
def analyse_criteria(
    body: CriteriaRequest,
    analyser: CriteriaAnalyser = Depends(get_analyser),
):
    try:
        parsed = analyser.parse(body.criteria)
        validated = analyser.validate(parsed)
    except CriteriaConflictError as e:
        logger.info("Rejected criteria %r: %s", body.criteria, e.message)
        raise HTTPException(
            status_code=CUSTOM_ERRORS[type(e)],
            detail=CriteriaErrorDetail(code=e.code, message=e.message).model_dump(),
        )

    sorted_line = analyser.sort(
        {key: value for key, value in validated.items() if key != RAND_KEY}
    )
    return CriteriaResponse(criteria=validated, sorted=sorted_line)


# class criteria lookup
@router.get(
    "/classes/{name}",
    response_model=dict,
    description=class_criteria_description,
    summary="Get Class Criteria",
)
def get_class_criteria(
    name: str,
    registry: ClassCriteriaRegistry = Depends(get_registry),
):
    try:
        criteria = registry.get(name)
        if criteria is None:
            raise UnknownClassError(f"Unknown class: {name}")
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))

    return {
        "name": name,
        "combined": not registry.is_canonical(name),
        "criteria": criteria.model_dump(by_alias=True, exclude_none=True),
    }
