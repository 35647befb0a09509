"""Shared test fixtures for the claims query catalog."""

import sqlite3
from pathlib import Path

import pytest

from claims_query_catalog.models.data_source_models import DataSourceConfiguration
from claims_query_catalog.operations.query_executor import QueryExecutor
from claims_query_catalog.tools.query_catalog import QueryCatalog
from claims_query_catalog.tools.template_loader import load_template_store
from claims_query_catalog.tools.template_store import TemplateStore

# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

CLIENTS = [
    (1, "Alice Moreau", "F", "1980-04-12", "CA", 85000.0),
    (2, "Bob Tran", "M", "1975-09-30", "TX", 62000.0),
    (3, "Carla Diaz", "F", "1990-01-05", "CA", 48000.0),
    (4, "Dan Okafor", "M", "1985-06-21", "NY", 91000.0),
]

# car_id, client_id, car_type, car_use, car_value, red_car, car_age
CARS = [
    (1, 1, "SUV", "Commercial", 30000.0, 1, 3),
    (2, 1, "Sedan", "Private", 20000.0, 0, 5),
    (3, 2, "SUV", "Private", 35000.0, 0, 1),
    (4, 3, "Minivan", "Private", 25000.0, 1, 7),
    (5, 4, "Pickup", "Commercial", 28000.0, 0, 2),
]

# claim_id, car_id, claim_date, claim_amt, travel_time
CLAIMS = [
    (1, 1, "2024-01-10", 120.0, 14),
    (2, 1, "2024-02-14", 80.0, 22),
    (3, 1, "2024-03-03", 200.0, 9),
    (4, 2, "2024-01-22", 150.0, 31),
    (5, 2, "2024-04-18", 90.0, 12),
    (6, 3, "2024-02-01", 300.0, 45),
    (7, 3, "2024-05-09", 110.0, 18),
    (8, 3, "2024-06-30", 250.0, 27),
    (9, 4, "2024-03-15", 60.0, 8),
    (10, 4, "2024-07-04", 140.0, 16),
    (11, 4, "2024-08-19", 100.0, 20),
    (12, 3, "2024-09-01", 50000.0, 52),
]

SCHEMA = """
CREATE TABLE clients (
    client_id INTEGER PRIMARY KEY,
    client_name TEXT NOT NULL,
    gender TEXT,
    birth_date TEXT,
    state TEXT,
    household_income REAL
);
CREATE TABLE cars (
    car_id INTEGER PRIMARY KEY,
    client_id INTEGER NOT NULL REFERENCES clients (client_id),
    car_type TEXT NOT NULL,
    car_use TEXT,
    car_value REAL,
    red_car INTEGER,
    car_age INTEGER
);
CREATE TABLE claims (
    claim_id INTEGER PRIMARY KEY,
    car_id INTEGER NOT NULL REFERENCES cars (car_id),
    claim_date TEXT NOT NULL,
    claim_amt REAL NOT NULL,
    travel_time INTEGER
);
"""


@pytest.fixture
def claims_database(tmp_path: Path) -> str:
    """SQLite file holding the clients, cars and claims seed data."""
    database = tmp_path / "claims.db"
    connection = sqlite3.connect(database)
    try:
        connection.executescript(SCHEMA)
        connection.executemany("INSERT INTO clients VALUES (?, ?, ?, ?, ?, ?)", CLIENTS)
        connection.executemany("INSERT INTO cars VALUES (?, ?, ?, ?, ?, ?, ?)", CARS)
        connection.executemany("INSERT INTO claims VALUES (?, ?, ?, ?, ?)", CLAIMS)
        connection.commit()
    finally:
        connection.close()
    return str(database)


@pytest.fixture
def data_source_configuration(claims_database: str) -> DataSourceConfiguration:
    return DataSourceConfiguration(sqlite_database=claims_database)


@pytest.fixture
def template_store() -> TemplateStore:
    """The packaged template catalog."""
    return load_template_store()


@pytest.fixture
def catalog(
    template_store: TemplateStore, data_source_configuration: DataSourceConfiguration
) -> QueryCatalog:
    return QueryCatalog(template_store, QueryExecutor(data_source_configuration))
