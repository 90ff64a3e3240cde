import pytest

from citysaver.business_objects.items import Item


@pytest.fixture
def abc_items():
    return [
        Item("A", 3, 10),
        Item("B", 4, 40),
        Item("C", 2, 30),
    ]


@pytest.fixture
def cities_csv(tmp_path):
    """A small uscities.csv-style export (quoted fields, comma-grouped populations)."""
    content = (
        '"city","city_ascii","state_id","state_name","county_fips","county_name","lat","lng","population"\n'
        '"New York","New York","NY","New York","36081","Queens","40.6943","-73.9249","18,908,608"\n'
        '"Los Angeles","Los Angeles","CA","California","06037","Los Angeles","34.1141","-118.4068","11,922,389"\n'
        '"Chicago","Chicago","IL","Illinois","17031","Cook","41.8375","-87.6866","8,497,759"\n'
    )
    path = tmp_path / "uscities.csv"
    path.write_text(content, encoding="utf-8")
    return path
