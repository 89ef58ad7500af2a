"""
Fixed rules of the wine list format and how it is displayed.

This file exists to make the quirks of the source format explicit.
"""

# canonical field -> source header
COLUMNS = {
    "name": "WINE NAME",
    "type": "WINE COLOR",
    "varietal": "VARIETAL",
    "sweetness": "SWEETNESS",
    "alcohol": "ALCOHOL",
    "region": "MADE IN",
    "style": "SYTLE",  # misspelled in the real data file, must stay as is
    "pairings": "FOOD PAIRING",
    "description": "DESCRIPTION",
}

# accepted in older exports, never read
OPTIONAL_COLUMNS = ("WINE ID",)

ALL = "all"
CATEGORIES = ("red", "white")

OTHER_VARIETAL = "Other"

EMPTY_MESSAGE = "No wines found. Try a different search."

SNIFF_DELIMITERS = [",", ";", "\t", "|"]
DEFAULT_DELIMITER = ","

COMMON_PAIRINGS = [
    "Aged Cheeses",
    "Asian Cuisine",
    "BBQ",
    "Beef",
    "Chicken",
    "Chocolate",
    "Creamy Pasta",
    "Duck",
    "Filet Mignon",
    "Fish",
    "Game Meats",
    "Goat Cheese",
    "Lamb",
    "Lobster",
    "Mushrooms",
    "NY Strip",
    "Pasta",
    "Pizza",
    "Pork",
    "Ribeye",
    "Salads",
    "Salmon",
    "Seafood",
    "Shellfish",
    "Spicy Foods",
    "Steak",
    "Turkey",
]
