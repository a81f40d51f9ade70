"""Meal, summary and mindfulness endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID, uuid4  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from mindful_tracker.api.dependencies import require_user
from mindful_tracker.api.schemas import (
    DayDataSchema,
    DaySummarySchema,
    DaysResponse,
    FoodItemSchema,
    MealRequest,
    MealResponse,
    MealSchema,
    MealsResponse,
    MindfulnessResponse,
    ParsedItemsResponse,
    ParseMealRequest,
    SummariesResponse,
)
from mindful_tracker.domain.errors import MealNotFoundError, MealParseError

if TYPE_CHECKING:
    from mindful_tracker.containers import AppContainer
    from mindful_tracker.domain.meals import FoodItem

router = APIRouter(tags=["meals"])

MAX_DAYS = 366


@router.get("/meals")
async def list_meals(
    request: Request,
    user_id: UUID = Depends(require_user),
    days: int | None = Query(default=None, ge=1, le=MAX_DAYS),
    today: date | None = None,
    day: date | None = Query(default=None, alias="date"),
) -> DaysResponse | MealsResponse:
    """Return day aggregates, one day's meals, or every meal."""
    container: AppContainer = request.app.state.container
    service = container.meal_service
    if days is not None:
        day_data = service.get_days(user_id, days, today or date.today())
        return DaysResponse(days=[DayDataSchema.from_domain(d) for d in day_data])
    if day is not None:
        meals = service.get_day(user_id, day).meals
    else:
        meals = service.list_meals(user_id)
    return MealsResponse(meals=[MealSchema.from_domain(meal) for meal in meals])


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(
    body: MealRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> MealResponse:
    """Log a new meal."""
    container: AppContainer = request.app.state.container
    meal = container.meal_service.log_meal(
        user_id,
        day=body.day,
        meal_type=body.type,
        items=_items(body),
        context=body.context.to_domain() if body.context else None,
    )
    return MealResponse(meal=MealSchema.from_domain(meal))


@router.put("/meals/{meal_id}")
async def update_meal(
    meal_id: str,
    body: MealRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> MealResponse:
    """Replace a meal's contents."""
    container: AppContainer = request.app.state.container
    try:
        meal = container.meal_service.update_meal(
            user_id,
            meal_id,
            day=body.day,
            meal_type=body.type,
            items=_items(body),
            context=body.context.to_domain() if body.context else None,
        )
    except MealNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from None
    return MealResponse(meal=MealSchema.from_domain(meal))


@router.delete("/meals/{meal_id}")
async def delete_meal(
    meal_id: str,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, bool]:
    """Delete a meal."""
    container: AppContainer = request.app.state.container
    container.meal_service.delete_meal(user_id, meal_id)
    return {"success": True}


@router.get("/summary")
async def day_summaries(
    request: Request,
    user_id: UUID = Depends(require_user),
    days: int = Query(default=7, ge=1, le=MAX_DAYS),
    today: date | None = None,
) -> SummariesResponse:
    """Return scored day summaries using the user's goals."""
    container: AppContainer = request.app.state.container
    goals = container.user_settings_service.get_goals(user_id)
    summaries = container.meal_service.get_day_summaries(
        user_id, days, today or date.today(), goals
    )
    return SummariesResponse(
        days=[DaySummarySchema.from_domain(summary) for summary in summaries]
    )


@router.get("/mindfulness")
async def mindfulness(
    request: Request,
    user_id: UUID = Depends(require_user),
    today: date | None = None,
) -> MindfulnessResponse:
    """Return the two-week mindful eating report."""
    container: AppContainer = request.app.state.container
    overview = container.meal_service.get_mindfulness(user_id, today or date.today())
    return MindfulnessResponse.from_domain(overview)


@router.post("/parse-meal", dependencies=[Depends(require_user)])
async def parse_meal(body: ParseMealRequest, request: Request) -> ParsedItemsResponse:
    """Estimate food items from a free-text description."""
    container: AppContainer = request.app.state.container
    try:
        items = await container.meal_parser_service.parse(body.text or "")
    except MealParseError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return ParsedItemsResponse(items=[FoodItemSchema.from_domain(i) for i in items])


def _items(body: MealRequest) -> list[FoodItem]:
    return [item.to_domain(fallback_id=str(uuid4())) for item in body.items]
