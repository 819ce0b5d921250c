"""Serving data models."""

ServingRecord = dict[str, object]
ServingTable = dict[str, ServingRecord]

# Fields rescaled to a per-unit value when a metric unit entry is synthesized.
PER_UNIT_FIELDS: tuple[str, ...] = (
    "calories",
    "carbohydrate",
    "cholesterol",
    "fat",
    "fiber",
    "iron",
    "metric_serving_amount",
    "number_of_units",
    "protein",
    "saturated_fat",
    "sodium",
    "sugar",
    "vitamin_a",
    "vitamin_c",
)

GENERIC_SERVING_LABEL = "serving"
