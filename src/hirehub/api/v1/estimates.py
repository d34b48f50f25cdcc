"""Company ratings of users."""

from fastapi import APIRouter, status

from src.hirehub.api.dependencies import CurrentCompany, EstimateServiceDep
from src.hirehub.schemas.estimate import EstimateCreate, EstimateRead, EstimateSummary

router = APIRouter(prefix="/estimates", tags=["estimates"])


@router.post(
    "/{username}",
    response_model=EstimateRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
        422: {"description": "Score out of range"},
    },
)
async def create_estimate(
    username: str,
    data: EstimateCreate,
    current_company: CurrentCompany,
    service: EstimateServiceDep,
) -> EstimateRead:
    """Rate a user on behalf of the authenticated company."""
    estimate = await service.create_estimate(current_company, username, data)
    return EstimateRead.model_validate(estimate)


@router.get(
    "/{username}",
    response_model=EstimateSummary,
    responses={
        200: {
            "description": "Estimates newest first, with the mean score",
            "content": {
                "application/json": {
                    "example": {
                        "username": "jdoe",
                        "average_score": 4.5,
                        "count": 2,
                        "items": [
                            {
                                "id": 2,
                                "user_id": 1,
                                "company_id": 3,
                                "score": 5,
                                "comment": "Shipped early",
                                "created_at": "2024-02-01T09:00:00",
                            },
                            {
                                "id": 1,
                                "user_id": 1,
                                "company_id": 1,
                                "score": 4,
                                "comment": None,
                                "created_at": "2024-01-15T10:30:00",
                            },
                        ],
                    }
                }
            },
        },
        404: {"description": "User not found"},
    },
)
async def list_estimates(username: str, service: EstimateServiceDep) -> EstimateSummary:
    user, estimates, average = await service.list_for_user(username)
    return EstimateSummary(
        username=user.username,
        average_score=average,
        count=len(estimates),
        items=[EstimateRead.model_validate(e) for e in estimates],
    )
