from pathlib import Path

import yaml

from city_catalog import crud
from city_catalog.api.deps import get_db_context
from city_catalog.core.db import engine, init_db
from city_catalog.models import CityCreate

script_dir = Path(__file__).resolve().parent
data_dir = script_dir.parent / "data"
print(f"Data path: {data_dir}")

cities_yaml_path = data_dir / "cities.yaml"


def load_yaml_data(file_path: Path) -> list[dict]:
    with open(file_path, encoding="utf-8") as file:
        return yaml.safe_load(file)


def seed_cities():
    init_db(engine)
    cities = load_yaml_data(cities_yaml_path)
    for city in cities:
        city_id = city.pop("id")
        city_create = CityCreate.model_validate(city)
        with get_db_context() as session:
            print(f"Seeding city: {city_create.name} ({city_id})")
            crud.set_city(session=session, city_id=city_id, city=city_create)
            session.commit()


if __name__ == "__main__":
    seed_cities()
