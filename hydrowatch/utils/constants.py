"""Project-wide constants."""

TRENDS = ["up", "down", "stable"]

SEVERITIES = ["low", "critical"]

SEASONS = ["Summer", "Monsoon", "Winter"]

FORECAST_DAYS = ["Today", "Tomorrow", "Day 3", "Day 4", "Day 5"]

# Water level thresholds in meters
ALERT_THRESHOLD = 3000
CRITICAL_THRESHOLD = 2000

DEFAULT_SEED = 42
CHART_YEARS = 20
Y_AXIS_STEP = 500

# (index offset, min, max) for each seasonal series
SERIES_PARAMS = {
    "water_level": (1, 200, 4800),
    "Summer": (20, 100, 4000),
    "Monsoon": (40, 500, 5000),
    "Winter": (60, 50, 3000),
}

SEASON_MONTHS = {
    "Summer": "Mar-Jun",
    "Monsoon": "Jul-Oct",
    "Winter": "Nov-Feb",
}

# Local-storage style keys for persisted UI state
STORAGE_KEYS = {
    "selected_location": "selectedLocation",
    "water_data": "waterData",
}

ALERT_PRECAUTIONS = [
    "Limit non-essential water usage",
    "Fix any leaks immediately",
    "Use water-efficient appliances",
    "Collect and store rainwater",
    "Follow local water conservation guidelines",
]

PRECAUTIONS = [
    "Fix leaky faucets and pipes immediately",
    "Install water-efficient fixtures and appliances",
    "Take shorter showers (5 minutes or less)",
    "Turn off the tap while brushing teeth or shaving",
    "Only run dishwashers and washing machines with full loads",
    "Water plants early in the morning or late in the evening",
    "Use a broom instead of a hose to clean driveways and sidewalks",
    "Collect rainwater for gardening and outdoor use",
    "Use a bucket instead of a running hose to wash your car",
    "Install a water-efficient irrigation system",
]

SEASONAL_TIPS = {
    "summer": [
        "Water plants in the early morning to reduce evaporation",
        "Use mulch in gardens to retain soil moisture",
        "Raise your lawn mower blade to keep grass longer and reduce water needs",
        "Check for leaks in outdoor faucets and hoses",
        "Use a pool cover to reduce evaporation",
    ],
    "monsoon": [
        "Install rain barrels to collect rainwater",
        "Check for proper drainage to prevent waterlogging",
        "Clean gutters and downspouts regularly",
        "Avoid unnecessary watering during rainy periods",
        "Inspect your property for potential flood risks",
    ],
    "winter": [
        "Insulate pipes to prevent freezing and bursting",
        "Drain and store hoses properly",
        "Check for leaks in indoor plumbing",
        "Set your water heater to 120°F (49°C) to save energy and water",
        "Use a timer for holiday light displays to save electricity",
    ],
}

REGIONAL_TIPS = {
    "urban": [
        "Report water leaks in public spaces to local authorities",
        "Participate in community water conservation programs",
        "Use car washes that recycle water",
        "Support local water conservation initiatives",
        "Educate others about water conservation",
    ],
    "rural": [
        "Implement drip irrigation systems for crops",
        "Practice crop rotation to improve soil water retention",
        "Use drought-resistant crops in water-scarce areas",
        "Maintain proper drainage systems in agricultural fields",
        "Monitor soil moisture levels before irrigation",
    ],
}

EMERGENCY_NOTICE = (
    "During critical water shortages, additional restrictions may apply. "
    "Please follow local water authority guidelines and restrictions."
)
