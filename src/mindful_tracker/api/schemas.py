"""Pydantic models for the JSON API.

Field names are serialized in camelCase.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mindful_tracker.domain.goals import DailyGoals, Sex, UserSettings
from mindful_tracker.domain.meals import DayData, FoodItem, Meal, MealContext, MealType
from mindful_tracker.domain.mindfulness import (
    DailyMindfulnessPoint,
    MindfulnessMetric,
    MindfulnessMetrics,
    MindfulnessOverview,
    MindfulnessReport,
    PercentColor,
    WeakestMealType,
)
from mindful_tracker.domain.quality import NutrientEfficiency, QualityLevel
from mindful_tracker.domain.summary import DaySummary, ItemSummary, MealSummary
from mindful_tracker.services.mindfulness import percent_color


class ApiModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FoodItemSchema(ApiModel):
    """Food item payload."""

    id: str | None = None
    name: str
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    fiber: float = Field(ge=0)
    quantity: str | None = None

    @classmethod
    def from_domain(cls, item: FoodItem) -> "FoodItemSchema":
        return cls(
            id=item.id,
            name=item.name,
            calories=item.calories,
            protein=item.protein,
            fiber=item.fiber,
            quantity=item.quantity,
        )

    def to_domain(self, fallback_id: str) -> FoodItem:
        return FoodItem(
            id=self.id or fallback_id,
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            fiber=self.fiber,
            quantity=self.quantity,
        )


class MealContextSchema(ApiModel):
    """Meal context payload; ``stressLevel`` is the calm scale (5 = very calm)."""

    hunger_level: int | None = Field(default=None, ge=1, le=5)
    stress_level: int | None = Field(default=None, ge=1, le=5)
    ate_with_others: bool | None = None
    notes: str | None = None

    @classmethod
    def from_domain(cls, context: MealContext) -> "MealContextSchema":
        return cls(
            hunger_level=context.hunger_level,
            stress_level=context.stress_level,
            ate_with_others=context.ate_with_others,
            notes=context.notes,
        )

    def to_domain(self) -> MealContext:
        return MealContext(
            hunger_level=self.hunger_level,
            stress_level=self.stress_level,
            ate_with_others=self.ate_with_others,
            notes=self.notes,
        )


class MealRequest(ApiModel):
    """Body for creating or replacing a meal."""

    day: date = Field(alias="date")
    type: MealType
    items: list[FoodItemSchema]
    context: MealContextSchema | None = None


class MealSchema(ApiModel):
    """Stored meal."""

    id: str
    day: date = Field(alias="date")
    type: MealType
    items: list[FoodItemSchema]
    total_calories: float
    total_protein: float
    total_fiber: float
    context: MealContextSchema | None = None
    created_at: datetime

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealSchema":
        return cls(
            id=meal.id,
            day=meal.day,
            type=meal.type,
            items=[FoodItemSchema.from_domain(item) for item in meal.items],
            total_calories=meal.total_calories,
            total_protein=meal.total_protein,
            total_fiber=meal.total_fiber,
            context=(
                MealContextSchema.from_domain(meal.context) if meal.context else None
            ),
            created_at=meal.created_at,
        )


class MealResponse(ApiModel):
    """Single meal envelope."""

    meal: MealSchema


class MealsResponse(ApiModel):
    """List of meals."""

    meals: list[MealSchema]


class DayDataSchema(ApiModel):
    """Day aggregate."""

    day: date = Field(alias="date")
    meals: list[MealSchema]
    total_calories: float
    total_protein: float
    total_fiber: float
    protein_per_calorie: float
    fiber_per_calorie: float

    @classmethod
    def from_domain(cls, day: DayData) -> "DayDataSchema":
        return cls(
            day=day.day,
            meals=[MealSchema.from_domain(meal) for meal in day.meals],
            total_calories=day.total_calories,
            total_protein=day.total_protein,
            total_fiber=day.total_fiber,
            protein_per_calorie=day.protein_per_calorie,
            fiber_per_calorie=day.fiber_per_calorie,
        )


class DaysResponse(ApiModel):
    """Day aggregates, newest first."""

    days: list[DayDataSchema]


class EfficiencySchema(ApiModel):
    """Efficiency index with its quality band."""

    index: int
    quality: QualityLevel
    nutrient_percent: float
    calorie_percent: float

    @classmethod
    def from_domain(cls, efficiency: NutrientEfficiency) -> "EfficiencySchema":
        return cls(
            index=efficiency.index,
            quality=efficiency.quality,
            nutrient_percent=efficiency.nutrient_percent,
            calorie_percent=efficiency.calorie_percent,
        )


class ItemSummarySchema(ApiModel):
    """Food item with efficiency badges."""

    item: FoodItemSchema
    protein_efficiency: EfficiencySchema
    fiber_efficiency: EfficiencySchema

    @classmethod
    def from_domain(cls, summary: ItemSummary) -> "ItemSummarySchema":
        return cls(
            item=FoodItemSchema.from_domain(summary.item),
            protein_efficiency=EfficiencySchema.from_domain(summary.protein_efficiency),
            fiber_efficiency=EfficiencySchema.from_domain(summary.fiber_efficiency),
        )


class MealSummarySchema(ApiModel):
    """Meal with efficiency badges for itself and its items."""

    meal: MealSchema
    protein_efficiency: EfficiencySchema
    fiber_efficiency: EfficiencySchema
    items: list[ItemSummarySchema]

    @classmethod
    def from_domain(cls, summary: MealSummary) -> "MealSummarySchema":
        return cls(
            meal=MealSchema.from_domain(summary.meal),
            protein_efficiency=EfficiencySchema.from_domain(summary.protein_efficiency),
            fiber_efficiency=EfficiencySchema.from_domain(summary.fiber_efficiency),
            items=[ItemSummarySchema.from_domain(item) for item in summary.items],
        )


class DaySummarySchema(ApiModel):
    """Day aggregate with score and quality."""

    day: DayDataSchema
    score: int
    protein_quality: QualityLevel
    fiber_quality: QualityLevel
    protein_efficiency: EfficiencySchema
    fiber_efficiency: EfficiencySchema
    meals: list[MealSummarySchema]

    @classmethod
    def from_domain(cls, summary: DaySummary) -> "DaySummarySchema":
        return cls(
            day=DayDataSchema.from_domain(summary.day),
            score=summary.score,
            protein_quality=summary.protein_quality,
            fiber_quality=summary.fiber_quality,
            protein_efficiency=EfficiencySchema.from_domain(summary.protein_efficiency),
            fiber_efficiency=EfficiencySchema.from_domain(summary.fiber_efficiency),
            meals=[MealSummarySchema.from_domain(meal) for meal in summary.meals],
        )


class SummariesResponse(ApiModel):
    """Day summaries, newest first."""

    days: list[DaySummarySchema]


class MetricsSchema(ApiModel):
    """Mindfulness counts and percentages."""

    total_meals: int
    calm_meals: int
    hungry_meals: int
    calm_percent: int
    hungry_percent: int
    calm_color: PercentColor
    hungry_color: PercentColor

    @classmethod
    def from_domain(cls, metrics: MindfulnessMetrics) -> "MetricsSchema":
        return cls(
            total_meals=metrics.total_meals,
            calm_meals=metrics.calm_meals,
            hungry_meals=metrics.hungry_meals,
            calm_percent=metrics.calm_percent,
            hungry_percent=metrics.hungry_percent,
            calm_color=percent_color(metrics.calm_percent),
            hungry_color=percent_color(metrics.hungry_percent),
        )


class TrendsSchema(ApiModel):
    """Week-over-week deltas."""

    calm_delta: int | None
    hungry_delta: int | None


class ReportSchema(ApiModel):
    """Mindfulness report."""

    this_week: MetricsSchema
    last_week: MetricsSchema | None
    by_meal_type: dict[MealType, MetricsSchema]
    trends: TrendsSchema

    @classmethod
    def from_domain(cls, report: MindfulnessReport) -> "ReportSchema":
        return cls(
            this_week=MetricsSchema.from_domain(report.this_week),
            last_week=(
                MetricsSchema.from_domain(report.last_week)
                if report.last_week
                else None
            ),
            by_meal_type={
                meal_type: MetricsSchema.from_domain(metrics)
                for meal_type, metrics in report.by_meal_type.items()
            },
            trends=TrendsSchema(
                calm_delta=report.trends.calm_delta,
                hungry_delta=report.trends.hungry_delta,
            ),
        )


class MindfulnessPointSchema(ApiModel):
    """Time-series point."""

    day: date = Field(alias="date")
    day_label: str
    calm_percent: int | None
    hungry_percent: int | None
    total_meals: int

    @classmethod
    def from_domain(cls, point: DailyMindfulnessPoint) -> "MindfulnessPointSchema":
        return cls(
            day=point.day,
            day_label=point.day_label,
            calm_percent=point.calm_percent,
            hungry_percent=point.hungry_percent,
            total_meals=point.total_meals,
        )


class WeakestSchema(ApiModel):
    """Weakest meal type and metric."""

    type: MealType
    metric: MindfulnessMetric
    percent: int
    color: PercentColor

    @classmethod
    def from_domain(cls, weakest: WeakestMealType) -> "WeakestSchema":
        return cls(
            type=weakest.type,
            metric=weakest.metric,
            percent=weakest.percent,
            color=percent_color(weakest.percent),
        )


class MindfulnessResponse(ApiModel):
    """Report, time series and weakest spot."""

    report: ReportSchema
    time_series: list[MindfulnessPointSchema]
    weakest: WeakestSchema | None

    @classmethod
    def from_domain(cls, overview: MindfulnessOverview) -> "MindfulnessResponse":
        return cls(
            report=ReportSchema.from_domain(overview.report),
            time_series=[
                MindfulnessPointSchema.from_domain(point)
                for point in overview.time_series
            ],
            weakest=(
                WeakestSchema.from_domain(overview.weakest)
                if overview.weakest
                else None
            ),
        )


class ParseMealRequest(ApiModel):
    """Free-text meal description."""

    text: str | None = None


class ParsedItemsResponse(ApiModel):
    """Items estimated from a description."""

    items: list[FoodItemSchema]


class SettingsSchema(ApiModel):
    """User settings with flat goal fields."""

    age: int = Field(ge=0)
    sex: Sex
    height_feet: int = Field(ge=0)
    height_inches: int = Field(ge=0)
    weight: float = Field(ge=0)
    activity_level: float = Field(gt=0)
    calorie_goal: float = Field(ge=0)
    protein_goal: float = Field(ge=0)
    fiber_goal: float = Field(ge=0)

    @classmethod
    def from_domain(cls, settings: UserSettings) -> "SettingsSchema":
        return cls(
            age=settings.age,
            sex=settings.sex,
            height_feet=settings.height_feet,
            height_inches=settings.height_inches,
            weight=settings.weight,
            activity_level=settings.activity_level,
            calorie_goal=settings.goals.calories,
            protein_goal=settings.goals.protein,
            fiber_goal=settings.goals.fiber,
        )

    def to_domain(self) -> UserSettings:
        return UserSettings(
            age=self.age,
            sex=self.sex,
            height_feet=self.height_feet,
            height_inches=self.height_inches,
            weight=self.weight,
            activity_level=self.activity_level,
            goals=DailyGoals(
                calories=self.calorie_goal,
                protein=self.protein_goal,
                fiber=self.fiber_goal,
            ),
        )
