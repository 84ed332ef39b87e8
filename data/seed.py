"""
Seed production data.

Stands in for the line's data source until a storage backend is wired
up. Raw dicts in the dashboard's wire format (camelCase keys).
"""

PRODUCTION_RECORDS = [
    {
        "id": 1,
        "product": "Papas Clásicas",
        "weight": 180,
        "target": 250,
        "produced": 175,
        "pallets": {"total": 6, "completed": 3, "remaining": 3, "currentPallet": 28},
        "shifts": {"A": True, "B": True, "C": False, "D": True, "E": False, "F": False},
        "nextShiftSameWeight": True,
        "nextShiftWeightChange": False,
    },
    {
        "id": 2,
        "product": "Papas Sabor Queso",
        "weight": 150,
        "target": 200,
        "produced": 190,
        "pallets": {"total": 5, "completed": 4, "remaining": 1, "currentPallet": 42},
        "shifts": {"A": True, "B": True, "C": True, "D": False, "E": False, "F": True},
        "nextShiftSameWeight": False,
        "nextShiftWeightChange": True,
    },
    {
        "id": 3,
        "product": "Chicharrones",
        "weight": 100,
        "target": 300,
        "produced": 210,
        "pallets": {"total": 7, "completed": 5, "remaining": 2, "currentPallet": 17},
        "shifts": {"A": True, "B": False, "C": True, "D": True, "E": True, "F": False},
        "nextShiftSameWeight": True,
        "nextShiftWeightChange": False,
    },
]

# Oldest appended first
HISTORY_ENTRIES = [
    {
        "date": "2025-03-08",
        "shift": "A",
        "product": "Papas Clásicas",
        "weight": 180,
        "target": 250,
        "produced": 242,
    },
    {
        "date": "2025-03-08",
        "shift": "B",
        "product": "Papas Sabor Queso",
        "weight": 150,
        "target": 200,
        "produced": 185,
    },
    {
        "date": "2025-03-07",
        "shift": "F",
        "product": "Chicharrones",
        "weight": 100,
        "target": 300,
        "produced": 275,
    },
]
