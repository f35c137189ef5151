# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Car Config Demo: validating a property setter at runtime.

A car's ``config`` only accepts records shaped like
``{"flag1": bool, "speed": number}``. A second car uses a range-parameterized
version of the same rule that also bounds the speed.

Run with:
    python examples/car_config_demo.py
"""

from typing import Any

from valguard import ValidationError, annotation_factory, enforce, make_annotation
from valguard.validation import RangeOptions, in_range, is_boolean, is_mapping, is_number


def is_car_config(value: Any) -> bool:
    return is_mapping(value) and is_boolean(value.get("flag1")) and is_number(value.get("speed"))


def car_config_within(value: Any, limits: RangeOptions) -> bool:
    return is_car_config(value) and in_range(value["speed"], limits)


valid_car_config = make_annotation(is_car_config, "Invalid car config: {value}")
car_config_in_range = annotation_factory(
    car_config_within,
    "Car config out of range: {value}",
    options_type=RangeOptions,
)


class Car:
    def __init__(self):
        self._config = None

    @property
    def config(self):
        return self._config

    @enforce
    @valid_car_config
    @config.setter
    def config(self, value):
        self._config = value


class CityCar:
    def __init__(self):
        self._config = None

    @property
    def config(self):
        return self._config

    @enforce
    @car_config_in_range(min=0, max=100)
    @config.setter
    def config(self, value):
        self._config = value


def attempt(car, value):
    try:
        car.config = value
        print(f"  accepted  {value!r}")
    except ValidationError as e:
        print(f"  rejected  {e}")


def main():
    print("\n" + "=" * 70)
    print("Car: shape check only")
    print("=" * 70)
    car = Car()
    attempt(car, {"flag1": True, "speed": 1000})
    attempt(car, {"flag1": False, "speed": -2000})
    attempt(car, "Fooo")
    attempt(car, {"flag1": "true", "speed": "1000"})
    print(f"  stored    {car.config!r}")

    print("\n" + "=" * 70)
    print("CityCar: shape check plus 0 <= speed <= 100")
    print("=" * 70)
    city = CityCar()
    attempt(city, {"flag1": True, "speed": 150})
    attempt(city, {"flag1": True, "speed": 50})
    print(f"  stored    {city.config!r}")


if __name__ == "__main__":
    main()
