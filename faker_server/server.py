# faker_server/server.py
"""Faker MCP server.

Exposes six record generators and one type-tagged generator over MCP stdio.
Every tool returns a JSON array wrapped in a single text content block.
Argument bounds are declared on the signatures; the SDK validates them
before the handler runs and reports violations as tool errors.
"""
import json
import sys
from typing import Annotated, Any, Callable, Optional

import structlog
from faker import Faker
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from faker_server import generators as gen
from faker_server.logsetup import setup_logging
from faker_server.settings import Settings, SettingsError

log = structlog.get_logger("faker_server")

SERVER_NAME = "faker"
MIN_COUNT, MAX_COUNT = 1, 100
# a plain str is advertised in lenient mode, so the menu goes in the description
LENIENT_TYPE_DESCRIPTION = (
    "Type of fake data to generate, one of: "
    + ", ".join(member.value for member in gen.CustomType)
    + ". Unknown types yield a random word."
)


def _count(what: str):
    return Annotated[int, Field(ge=MIN_COUNT, le=MAX_COUNT, description=f"Number of {what} to generate")]


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def make_faker(settings: Settings) -> Faker:
    fake = Faker(settings.LOCALE)
    if settings.SEED is not None:
        fake.seed_instance(settings.SEED)
    return fake


def build_server(settings: Optional[Settings] = None, fake: Optional[Faker] = None) -> FastMCP:
    settings = settings or Settings()
    fake = fake or make_faker(settings)
    server = FastMCP(SERVER_NAME, log_level=settings.LOG_LEVEL)

    def _records(tool: str, generator: Callable[[Faker], dict], count: int) -> str:
        log.info("tool.call", tool=tool, count=count)
        return _dump(gen.generate_many(fake, generator, count))

    @server.tool(
        name="generate_person",
        description="Generate fake person data including name, email, phone, job, avatar, etc.",
    )
    def generate_person(count: _count("people") = 1) -> str:
        return _records("generate_person", gen.person, count)

    @server.tool(
        name="generate_address",
        description="Generate fake address data including street, city, country, coordinates, etc.",
    )
    def generate_address(count: _count("addresses") = 1) -> str:
        return _records("generate_address", gen.address, count)

    @server.tool(
        name="generate_company",
        description="Generate fake company data including name, industry, website, contact info, etc.",
    )
    def generate_company(count: _count("companies") = 1) -> str:
        return _records("generate_company", gen.company, count)

    @server.tool(
        name="generate_product",
        description="Generate fake product data including name, price, description, SKU, etc.",
    )
    def generate_product(count: _count("products") = 1) -> str:
        return _records("generate_product", gen.product, count)

    @server.tool(
        name="generate_finance",
        description="Generate fake financial data including account numbers, credit cards, transactions, etc.",
    )
    def generate_finance(count: _count("financial records") = 1) -> str:
        return _records("generate_finance", gen.finance, count)

    @server.tool(
        name="generate_internet",
        description="Generate fake internet data including emails, URLs, IPs, usernames, etc.",
    )
    def generate_internet(count: _count("internet records") = 1) -> str:
        return _records("generate_internet", gen.internet, count)

    if settings.LENIENT_TYPES:
        @server.tool(
            name="generate_custom",
            description="Generate custom fake data of a specific type (unknown types yield a random word)",
        )
        def generate_custom_lenient(
            type: Annotated[str, Field(description=LENIENT_TYPE_DESCRIPTION)],
            count: _count("items") = 1,
        ) -> str:
            log.info("tool.call", tool="generate_custom", type=type, count=count, lenient=True)
            return _dump(gen.generate_many(fake, lambda f: gen.lenient_custom_value(f, type), count))
    else:
        @server.tool(
            name="generate_custom",
            description="Generate custom fake data of a specific type",
        )
        def generate_custom(
            type: Annotated[gen.CustomType, Field(description="Type of fake data to generate")],
            count: _count("items") = 1,
        ) -> str:
            log.info("tool.call", tool="generate_custom", type=type.value, count=count)
            return _dump(gen.generate_many(fake, lambda f: gen.custom_value(f, type), count))

    return server


def main():
    try:
        settings = Settings()
    except SettingsError as e:
        print(f"faker-mcp-server: {e}", file=sys.stderr)
        sys.exit(2)
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    try:
        server = build_server(settings)
        log.info("server.start", server=SERVER_NAME, transport="stdio", lenient_types=settings.LENIENT_TYPES)
        server.run("stdio")
    except KeyboardInterrupt:
        pass
    except Exception:
        log.exception("server.fatal")
        sys.exit(1)


if __name__ == "__main__":
    main()
