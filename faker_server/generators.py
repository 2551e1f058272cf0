# faker_server/generators.py
import string
from enum import Enum
from typing import Any, Callable, Dict, List

from faker import Faker

# ---------------------- word lists ----------------------
# Faker ships no commerce / animal / vehicle providers, these cover the gap.
PRODUCT_ADJECTIVES = [
    "Small", "Ergonomic", "Rustic", "Intelligent", "Gorgeous", "Incredible",
    "Fantastic", "Practical", "Sleek", "Awesome", "Generic", "Handcrafted",
    "Handmade", "Licensed", "Refined", "Unbranded", "Tasty", "Modern",
]
PRODUCT_MATERIALS = [
    "Steel", "Wooden", "Concrete", "Plastic", "Cotton", "Granite", "Rubber",
    "Metal", "Soft", "Fresh", "Frozen", "Bronze", "Marble", "Silk",
]
PRODUCT_NOUNS = [
    "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball", "Gloves",
    "Pants", "Shirt", "Table", "Shoes", "Hat", "Towels", "Soap", "Tuna",
    "Chicken", "Fish", "Cheese", "Bacon", "Pizza", "Salad", "Sausages", "Chips",
]
DEPARTMENTS = [
    "Books", "Movies", "Music", "Games", "Electronics", "Computers", "Home",
    "Garden", "Tools", "Grocery", "Health", "Beauty", "Toys", "Kids", "Baby",
    "Clothing", "Shoes", "Jewelery", "Sports", "Outdoors", "Automotive", "Industrial",
]
GENDERS = ["Female", "Male", "Non-binary", "Agender", "Genderqueer", "Two-spirit"]
TRANSACTION_TYPES = ["deposit", "withdrawal", "payment", "invoice"]
ANIMAL_TYPES = [
    "dog", "cat", "snake", "bear", "lion", "cetacean", "insect", "crocodilia",
    "cow", "bird", "fish", "rabbit", "horse",
]
VEHICLES = [
    "Ford Focus", "Toyota Corolla", "Honda Civic", "Tesla Model 3", "BMW X5",
    "Volkswagen Golf", "Chevrolet Camaro", "Nissan Leaf", "Kia Sportage",
    "Audi A4", "Mazda CX-5", "Jeep Wrangler", "Hyundai Elantra",
]

BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
ALPHANUMERIC = string.ascii_letters + string.digits


# ---------------------- scalar helpers ----------------------
def product_name(fake: Faker) -> str:
    return " ".join([
        fake.random_element(PRODUCT_ADJECTIVES),
        fake.random_element(PRODUCT_MATERIALS),
        fake.random_element(PRODUCT_NOUNS),
    ])


def price(fake: Faker) -> str:
    return f"{fake.random_int(min=100, max=100000) / 100:.2f}"


def bitcoin_address(fake: Faker) -> str:
    # legacy P2PKH shape: leading 1, 26-34 base58 characters in total
    length = fake.random_int(min=25, max=33)
    return "1" + fake.lexify("?" * length, letters=BASE58)


# ---------------------- record generators ----------------------
def person(fake: Faker) -> Dict[str, Any]:
    return {
        "firstName": fake.first_name(),
        "lastName": fake.last_name(),
        "fullName": fake.name(),
        "email": fake.email(),
        "phone": fake.phone_number(),
        "dateOfBirth": fake.date_of_birth(minimum_age=18, maximum_age=80).isoformat(),
        "avatar": fake.image_url(width=128, height=128),
        "bio": fake.sentence(nb_words=10),
        "jobTitle": fake.job(),
        "gender": fake.random_element(GENDERS),
    }


def address(fake: Faker) -> Dict[str, Any]:
    return {
        "streetAddress": fake.street_address(),
        "city": fake.city(),
        "state": fake.state(),
        "country": fake.country(),
        "zipCode": fake.postcode(),
        "latitude": float(fake.latitude()),
        "longitude": float(fake.longitude()),
        "timeZone": fake.timezone(),
    }


def company(fake: Faker) -> Dict[str, Any]:
    return {
        "name": fake.company(),
        "industry": fake.bs(),
        "description": fake.catch_phrase(),
        "website": fake.url(),
        "email": fake.company_email(),
        "phone": fake.phone_number(),
        "employees": fake.random_int(min=1, max=10000),
        "founded": fake.date_between(start_date="-50y", end_date="today").isoformat(),
    }


def product(fake: Faker) -> Dict[str, Any]:
    weight = fake.random_int(min=10, max=10000) / 100
    return {
        "name": product_name(fake),
        "description": fake.paragraph(nb_sentences=2),
        "price": price(fake),
        "category": fake.random_element(DEPARTMENTS),
        "material": fake.random_element(PRODUCT_MATERIALS),
        "color": fake.color_name(),
        "sku": fake.lexify("?" * 8, letters=ALPHANUMERIC),
        "barcode": fake.numerify("#" * 12),
        "weight": f"{weight} lbs",
    }


def finance(fake: Faker) -> Dict[str, Any]:
    return {
        "accountNumber": fake.bban(),
        "routingNumber": fake.aba(),
        "creditCardNumber": fake.credit_card_number(),
        "creditCardCVV": fake.credit_card_security_code(),
        "iban": fake.iban(),
        "bic": fake.swift(),
        "bitcoin": bitcoin_address(fake),
        "amount": f"{fake.random_int(min=0, max=100000) / 100:.2f}",
        "transactionType": fake.random_element(TRANSACTION_TYPES),
        "currency": fake.currency_code(),
    }


def internet(fake: Faker) -> Dict[str, Any]:
    return {
        "email": fake.email(),
        "username": fake.user_name(),
        "password": fake.password(),
        "url": fake.url(),
        "domain": fake.domain_name(),
        "ip": fake.ipv4(),
        "ipv6": fake.ipv6(),
        "mac": fake.mac_address(),
        "userAgent": fake.user_agent(),
        "color": fake.hex_color(),
    }


# ---------------------- generic tool ----------------------
class CustomType(str, Enum):
    firstName = "firstName"
    lastName = "lastName"
    fullName = "fullName"
    email = "email"
    phone = "phone"
    address = "address"
    city = "city"
    country = "country"
    company = "company"
    jobTitle = "jobTitle"
    productName = "productName"
    price = "price"
    color = "color"
    animal = "animal"
    vehicle = "vehicle"
    isbn = "isbn"
    uuid = "uuid"
    password = "password"
    url = "url"
    username = "username"
    avatar = "avatar"
    date = "date"
    word = "word"
    sentence = "sentence"
    paragraph = "paragraph"


CUSTOM_GENERATORS: Dict[CustomType, Callable[[Faker], Any]] = {
    CustomType.firstName: lambda f: f.first_name(),
    CustomType.lastName: lambda f: f.last_name(),
    CustomType.fullName: lambda f: f.name(),
    CustomType.email: lambda f: f.email(),
    CustomType.phone: lambda f: f.phone_number(),
    CustomType.address: lambda f: f.street_address(),
    CustomType.city: lambda f: f.city(),
    CustomType.country: lambda f: f.country(),
    CustomType.company: lambda f: f.company(),
    CustomType.jobTitle: lambda f: f.job(),
    CustomType.productName: product_name,
    CustomType.price: price,
    CustomType.color: lambda f: f.color_name(),
    CustomType.animal: lambda f: f.random_element(ANIMAL_TYPES),
    CustomType.vehicle: lambda f: f.random_element(VEHICLES),
    CustomType.isbn: lambda f: f.isbn13(),
    CustomType.uuid: lambda f: f.uuid4(),
    CustomType.password: lambda f: f.password(),
    CustomType.url: lambda f: f.url(),
    CustomType.username: lambda f: f.user_name(),
    CustomType.avatar: lambda f: f.image_url(width=128, height=128),
    CustomType.date: lambda f: f.date_time_between(start_date="-1d", end_date="now").isoformat(),
    CustomType.word: lambda f: f.word(),
    CustomType.sentence: lambda f: f.sentence(),
    CustomType.paragraph: lambda f: f.paragraph(),
}

_missing = set(CustomType) - set(CUSTOM_GENERATORS)
if _missing:
    raise RuntimeError(f"CustomType members without a generator: {sorted(m.value for m in _missing)}")


def custom_value(fake: Faker, kind: CustomType) -> Any:
    return CUSTOM_GENERATORS[CustomType(kind)](fake)


def lenient_custom_value(fake: Faker, kind: str) -> Any:
    """Legacy behaviour: unknown tags fall back to a lorem word instead of failing."""
    try:
        member = CustomType(kind)
    except ValueError:
        return fake.word()
    return CUSTOM_GENERATORS[member](fake)


# ---------------------- batch ----------------------
def generate_many(fake: Faker, generator: Callable[[Faker], Any], count: int) -> List[Any]:
    if not 1 <= count <= 100:
        raise ValueError(f"count must be between 1 and 100, got {count}")
    return [generator(fake) for _ in range(count)]
