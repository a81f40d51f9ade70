"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from mindful_tracker.domain.meals import FoodItem, Meal, MealContext, MealType
from mindful_tracker.services.meals import MealRepository

CONTEXT_PAGE_SIZE = 1000


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        """Return meals dated in the range, newest day first."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=True)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def list_all_meals(self, user_id: UUID) -> list[Meal]:
        """Return all meals for a user, most recently created first."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, user_id: UUID, meal_id: str) -> Meal | None:
        """Return a meal by id."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("id", meal_id)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def create_meal(self, user_id: UUID, meal: Meal) -> Meal:
        """Insert a meal row and return it."""
        payload = {
            "id": meal.id,
            "user_id": str(user_id),
            "created_at": meal.created_at.isoformat(),
            **_meal_payload(meal),
        }
        response = self.client.table("meals").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(self, user_id: UUID, meal: Meal) -> Meal | None:
        """Update a meal row and return it."""
        response = (
            self.client.table("meals")
            .update(_meal_payload(meal))
            .eq("id", meal.id)
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, user_id: UUID, meal_id: str) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", meal_id).eq(
            "user_id", str(user_id)
        ).execute()

    def list_meal_contexts(self) -> list[tuple[str, dict[str, object]]]:
        """Return raw contexts for meals that have one.

        The server caps rows per select, so pages are read until one comes
        back empty.
        """
        contexts: list[tuple[str, dict[str, object]]] = []
        start = 0
        while True:
            response = (
                self.client.table("meals")
                .select("id, context")
                .order("id")
                .range(start, start + CONTEXT_PAGE_SIZE - 1)
                .execute()
            )
            rows = response.data or []
            if not rows:
                return contexts
            contexts.extend(
                (str(row["id"]), row["context"])
                for row in rows
                if isinstance(row.get("context"), dict)
            )
            start += len(rows)

    def update_meal_context(self, meal_id: str, context: dict[str, object]) -> None:
        """Overwrite a meal's raw context."""
        self.client.table("meals").update({"context": context}).eq(
            "id", meal_id
        ).execute()


def _meal_payload(meal: Meal) -> dict[str, object]:
    return {
        "type": meal.type.value,
        "date": meal.day.isoformat(),
        "items": [_item_to_json(item) for item in meal.items],
        "total_calories": meal.total_calories,
        "total_protein": meal.total_protein,
        "total_fiber": meal.total_fiber,
        "context": _context_to_json(meal.context),
    }


def _item_to_json(item: FoodItem) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": item.id,
        "name": item.name,
        "calories": item.calories,
        "protein": item.protein,
        "fiber": item.fiber,
    }
    if item.quantity is not None:
        payload["quantity"] = item.quantity
    return payload


def _context_to_json(context: MealContext | None) -> dict[str, object] | None:
    if context is None:
        return None
    return {
        key: value
        for key, value in {
            "hungerLevel": context.hunger_level,
            "stressLevel": context.stress_level,
            "ateWithOthers": context.ate_with_others,
            "notes": context.notes,
        }.items()
        if value is not None
    }


def _parse_meal(row: dict[str, object]) -> Meal:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    items_raw = row.get("items") or []
    return Meal(
        id=str(row["id"]),
        day=date.fromisoformat(str(row["date"])),
        type=MealType(str(row["type"])),
        items=[_parse_item(item) for item in items_raw if isinstance(item, dict)],
        total_calories=float(row.get("total_calories") or 0.0),
        total_protein=float(row.get("total_protein") or 0.0),
        total_fiber=float(row.get("total_fiber") or 0.0),
        created_at=created_at,
        context=_parse_context(row.get("context")),
    )


def _parse_item(raw: dict[str, object]) -> FoodItem:
    quantity = raw.get("quantity")
    return FoodItem(
        id=str(raw.get("id") or ""),
        name=str(raw.get("name") or ""),
        calories=float(raw.get("calories") or 0.0),
        protein=float(raw.get("protein") or 0.0),
        fiber=float(raw.get("fiber") or 0.0),
        quantity=str(quantity) if quantity is not None else None,
    )


def _parse_context(raw: object) -> MealContext | None:
    if not isinstance(raw, dict):
        return None
    notes = raw.get("notes")
    ate_with_others = raw.get("ateWithOthers")
    return MealContext(
        hunger_level=_optional_int(raw.get("hungerLevel")),
        stress_level=_optional_int(raw.get("stressLevel")),
        ate_with_others=ate_with_others if isinstance(ate_with_others, bool) else None,
        notes=str(notes) if notes is not None else None,
    )


def _optional_int(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return int(value)
