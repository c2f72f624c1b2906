"""Faker-based data generator."""

import json
import math
from decimal import Decimal
from typing import Any

from faker import Faker

from seedsmith.models import DEFAULT_PRECISION, FieldSpec


def _decimals(number: float) -> int:
    """Count of decimal places in a number's shortest repr."""
    exponent = Decimal(str(number)).normalize().as_tuple().exponent
    return max(0, -exponent)


def _random_int(fake: Faker, spec: FieldSpec) -> int:
    low, high = spec.bounds
    return fake.random_int(min=math.ceil(low), max=math.floor(high))


def _random_float(fake: Faker, spec: FieldSpec) -> float:
    """Draw ``min + k * precision`` with k uniform over the steps that fit."""
    low, high = spec.bounds
    step = spec.precision if spec.precision is not None else DEFAULT_PRECISION
    steps = math.floor((high - low) / step + 1e-9)
    k = fake.random_int(min=0, max=steps)
    return round(low + k * step, max(_decimals(step), _decimals(low)))


def _json_blob(fake: Faker, spec: FieldSpec) -> str:
    return json.dumps({"key": fake.word(), "value": fake.sentence()})


class FakerGenerator:
    """Generate realistic data per field category using the Faker library."""

    # Category label -> generator over (faker, spec)
    CATEGORY_GENERATORS = {
        "uuid": lambda fake, spec: fake.uuid4(),
        "slug": lambda fake, spec: fake.slug(),
        "string": lambda fake, spec: fake.word(),
        "word": lambda fake, spec: fake.word(),
        "email": lambda fake, spec: fake.email(),
        "password": lambda fake, spec: fake.password(),
        "first_name": lambda fake, spec: fake.first_name(),
        "last_name": lambda fake, spec: fake.last_name(),
        "full_name": lambda fake, spec: fake.name(),
        "phone": lambda fake, spec: fake.phone_number(),
        "url": lambda fake, spec: fake.url(),
        "address": lambda fake, spec: fake.street_address(),
        "city": lambda fake, spec: fake.city(),
        "country": lambda fake, spec: fake.country(),
        "zip_code": lambda fake, spec: fake.postcode(),
        "company": lambda fake, spec: fake.company(),
        "job_title": lambda fake, spec: fake.job(),
        "sentence": lambda fake, spec: fake.sentence(),
        "paragraph": lambda fake, spec: "\n".join(fake.paragraphs()),
        "text": lambda fake, spec: "\n".join(fake.paragraphs()),
        "avatar": lambda fake, spec: fake.image_url(width=128, height=128),
        "image": lambda fake, spec: fake.image_url(),
        "int": _random_int,
        "number": _random_float,
        "float": _random_float,
        "boolean": lambda fake, spec: fake.boolean(),
        "date": lambda fake, spec: fake.date_time_between(start_date="-1d", end_date="now"),
        "datetime": lambda fake, spec: fake.date_time_between(start_date="-1d", end_date="now"),
        "past_date": lambda fake, spec: fake.past_datetime(start_date="-1y"),
        "future_date": lambda fake, spec: fake.future_datetime(end_date="+1y"),
        "json": _json_blob,
        "enum": lambda fake, spec: fake.random_element(elements=spec.enum_values),
    }

    def __init__(self, fake: Faker | None = None):
        """
        Initialize generator.

        Args:
            fake: Faker instance to draw from (default: new en_US instance)
        """
        self.fake = fake or Faker()

    def supports(self, category: str) -> bool:
        """Check whether a category has a built-in Faker mapping."""
        return category in self.CATEGORY_GENERATORS

    def generate(self, spec: FieldSpec) -> Any:
        """Generate a value for a spec's category, defaulting to a word."""
        generator = self.CATEGORY_GENERATORS.get(spec.category)
        if generator is None:
            return self.fake.word()
        return generator(self.fake, spec)
