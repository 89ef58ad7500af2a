import pytest

from cellar.models import WineRecord


def wine(name, type="red", varietal="", **fields):
    return WineRecord(name=name, type=type, varietal=varietal, **fields)


@pytest.fixture
def wines():
    return [
        wine("Cab Reserve", "red", "Cabernet Sauvignon", description="Black cherry and cedar", pairings="Ribeye, Lamb"),
        wine("House Malbec", "red", "Malbec", region="Mendoza", pairings="Skirt Steak, BBQ"),
        wine("Mystery Red", "red", "", description="Dark fruit", pairings="Pizza"),
        wine("Old Vine Malbec", "red", "Malbec", region="Cahors", pairings="Duck"),
        wine("Pinot Noir", "red", "Pinot Noir", description="Red cherry, earthy", pairings="Salmon, Duck"),
        wine("Sonoma Chard", "white", "Chardonnay", region="California", pairings="Chicken, Lobster"),
        wine("Mosel Riesling", "white", "Riesling", region="Germany", pairings="Spicy Foods, Pork"),
        wine("Rose of Pinot", "rose", "Pinot Noir", description="Cherry blossom", pairings="Salads"),
    ]
