"""Nutrition calculation helpers.

Provides BMR/TDEE, macro allocation and calorie adjustment utilities used by
the nutrition, client and meal-plan routers. Every lookup table is a
read-only mapping with an explicit default key, so an unknown label resolves
to a documented fallback instead of an error.
"""

import math
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional
from core.exceptions import InvalidDistributionError, InvalidInputError
from core.logger import get_logger

logger = get_logger("services.nutrition_calculator")

DEFAULT_ACTIVITY_LEVEL = "moderate"
ACTIVITY_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
    # alternative labels used by older profile forms
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "extra_active": 1.9,
    "extremely_active": 1.9,
})

DEFAULT_MACRO_GOAL = "maintenance"
MACRO_DISTRIBUTIONS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "weight_loss": MappingProxyType({"protein": 0.35, "carbs": 0.30, "fat": 0.35}),
    "muscle_gain": MappingProxyType({"protein": 0.30, "carbs": 0.45, "fat": 0.25}),
    "maintenance": MappingProxyType({"protein": 0.30, "carbs": 0.40, "fat": 0.30}),
    "endurance": MappingProxyType({"protein": 0.25, "carbs": 0.50, "fat": 0.25}),
    "strength": MappingProxyType({"protein": 0.35, "carbs": 0.35, "fat": 0.30}),
})

DEFAULT_WEIGHT_GOAL = "maintain"
DEFAULT_RATE = "moderate"
CALORIC_ADJUSTMENTS: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "loss": MappingProxyType({"slow": -250, "moderate": -500, "fast": -750}),
    "gain": MappingProxyType({"slow": 250, "moderate": 500, "fast": 750}),
    "maintain": MappingProxyType({"slow": 0, "moderate": 0, "fast": 0}),
})

REQUIRED_BIOMETRIC_FIELDS = ("weight", "height", "age", "gender")
MACRO_SUM_TOLERANCE = 0.01


def _normalize_label(label: Optional[str]) -> str:
    return (label or "").strip().lower().replace("-", "_").replace(" ", "_")


def round_half_up(value: float) -> int:
    # half-up: 2.5 -> 3, 1617.5 -> 1618
    return int(math.floor(value + 0.5))


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmr(self, weight_kg: float, height_cm: float, age: int, gender: str) -> int:
        """Calculate BMR with the Mifflin-St Jeor equation.

        ``10*weight + 6.25*height - 5*age``, plus 5 for men and minus 161
        otherwise, rounded to the nearest calorie.

        Raises:
            InvalidInputError: If weight, height or age is missing, zero,
                negative or not finite, or gender is absent.
        """
        missing = [
            field for field, value in zip(REQUIRED_BIOMETRIC_FIELDS, (weight_kg, height_cm, age, gender))
            if not value
        ]
        if missing:
            raise InvalidInputError("Missing required parameters for BMR calculation", missing_fields=missing)
        if not all(math.isfinite(value) for value in (weight_kg, height_cm, age)):
            raise InvalidInputError("Weight, height and age must be finite numbers for BMR calculation")
        if weight_kg <= 0 or height_cm <= 0 or age <= 0:
            raise InvalidInputError("Weight, height and age must be positive for BMR calculation")

        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        bmr = base + 5 if str(gender).strip().lower() == "male" else base - 161
        return round_half_up(bmr)

    def get_activity_multiplier(self, activity_level: Optional[str]) -> float:
        """Return the TDEE multiplier for an activity label (default: moderate)."""
        key = _normalize_label(activity_level)
        if key not in ACTIVITY_MULTIPLIERS:
            logger.debug("Unknown activity level %r, using %s", activity_level, DEFAULT_ACTIVITY_LEVEL)
            key = DEFAULT_ACTIVITY_LEVEL
        return ACTIVITY_MULTIPLIERS[key]

    def tdee_from_bmr(self, bmr: float, activity_level: Optional[str]) -> int:
        """Scale an already-computed BMR by the activity multiplier."""
        return round_half_up(bmr * self.get_activity_multiplier(activity_level))

    def calculate_tdee(self, bmr_input: Mapping[str, Any], activity_level: Optional[str]) -> int:
        """Estimate TDEE from biometric inputs and an activity label.

        Args:
            bmr_input: Mapping with ``weight``, ``height``, ``age`` and ``gender``.
            activity_level: Activity label; unknown labels use the moderate tier.

        Returns:
            Rounded daily energy expenditure in calories.
        """
        bmr = self.calculate_bmr(
            bmr_input.get("weight"),
            bmr_input.get("height"),
            bmr_input.get("age"),
            bmr_input.get("gender"),
        )
        tdee = self.tdee_from_bmr(bmr, activity_level)
        logger.debug("TDEE calculated: bmr=%s level=%s tdee=%s", bmr, activity_level, tdee)
        return tdee

    def calculate_macros(self, calories: float, distribution: Optional[Mapping[str, float]] = None) -> Dict[str, int]:
        """Allocate macronutrient targets in grams from a calorie total.

        Protein and carbs carry 4 kcal/g, fat 9 kcal/g. The distribution
        defaults to 30/40/30 and must sum to 1.0 within 0.01.

        Raises:
            InvalidDistributionError: If calories is not positive or the split
                does not add up to 100%.
        """
        if calories is None or not math.isfinite(calories) or calories <= 0:
            raise InvalidDistributionError("Calories must be greater than 0")
        ratios = distribution or MACRO_DISTRIBUTIONS[DEFAULT_MACRO_GOAL]
        total = ratios["protein"] + ratios["carbs"] + ratios["fat"]
        if not math.isfinite(total) or abs(total - 1) > MACRO_SUM_TOLERANCE:
            raise InvalidDistributionError("Macro percentages must sum to 1 (100%)", total=total)

        macros = {
            "protein_g": round_half_up(calories * ratios["protein"] / 4),
            "carbs_g": round_half_up(calories * ratios["carbs"] / 4),
            "fat_g": round_half_up(calories * ratios["fat"] / 9),
        }
        logger.debug("Macros calculated: %s", macros)
        return macros

    def get_recommended_macro_distribution(self, goal: Optional[str]) -> Dict[str, float]:
        """Return the protein/carbs/fat split for a fitness goal (default: maintenance)."""
        key = _normalize_label(goal)
        if key not in MACRO_DISTRIBUTIONS:
            key = DEFAULT_MACRO_GOAL
        return dict(MACRO_DISTRIBUTIONS[key])

    def calculate_caloric_adjustment(self, tdee: float, weight_goal: Optional[str], rate: Optional[str] = DEFAULT_RATE) -> int:
        """Apply a fixed deficit or surplus to TDEE for a weight goal.

        Unknown goals behave like ``maintain``; unknown rates like ``moderate``.
        """
        if not math.isfinite(tdee):
            raise InvalidInputError("TDEE must be a finite number")
        goal_key = _normalize_label(weight_goal)
        offsets = CALORIC_ADJUSTMENTS.get(goal_key, CALORIC_ADJUSTMENTS[DEFAULT_WEIGHT_GOAL])
        rate_key = _normalize_label(rate)
        offset = offsets.get(rate_key, offsets[DEFAULT_RATE])
        return round_half_up(tdee + offset)

    def apply_adjustment_percentage(self, base_calories: float, percentage: float) -> int:
        """Shift a calorie figure by a signed percentage (``-20`` is a 20% cut)."""
        if not (math.isfinite(base_calories) and math.isfinite(percentage)):
            raise InvalidInputError("Calories and percentage must be finite numbers")
        return round_half_up(base_calories + base_calories * percentage / 100)

    def validate_nutrition_data(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Report which biometric fields are missing, without raising."""
        missing_fields: List[str] = [field for field in REQUIRED_BIOMETRIC_FIELDS if not data.get(field)]
        return {"valid": not missing_fields, "missing_fields": missing_fields}

    def calculate_tdee_from_client(self, client) -> Optional[Dict[str, Any]]:
        """Compute BMR and TDEE from a client profile.

        Returns None when the profile is incomplete or holds non-positive
        values; a missing activity level counts as moderate.
        """
        profile = {field: getattr(client, field, None) for field in REQUIRED_BIOMETRIC_FIELDS}
        if not self.validate_nutrition_data(profile)["valid"]:
            return None
        numbers = (profile["weight"], profile["height"], profile["age"])
        if not all(math.isfinite(value) and value > 0 for value in numbers):
            return None

        activity_level = client.activity_level or DEFAULT_ACTIVITY_LEVEL
        bmr = self.calculate_bmr(profile["weight"], profile["height"], profile["age"], profile["gender"])
        return {"bmr": bmr, "tdee": self.tdee_from_bmr(bmr, activity_level), "activity_level": activity_level}


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = [
    "ACTIVITY_MULTIPLIERS",
    "CALORIC_ADJUSTMENTS",
    "MACRO_DISTRIBUTIONS",
    "NutritionCalculator",
    "nutrition_calculator",
    "round_half_up",
]
