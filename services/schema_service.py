import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from models.cash_flow import Account, CashFlow
from models.portfolio import Asset, Portfolio
from services.result_dto import PaymentDTO, SimulationResponseDTO

logger = logging.getLogger(__name__)

SCHEMA_MODELS = {
    "account": Account,
    "cash_flow": CashFlow,
    "payment": PaymentDTO,
    "asset": Asset,
    "portfolio": Portfolio,
    "simulation_result": SimulationResponseDTO,
}

# file name for each schema written by generate_json_schemas
SCHEMA_FILES = {
    "account": ".account.json",
    "payment": ".payment.json",
    "asset": ".asset.json",
    "portfolio": ".portfolio.json",
}


def json_schema(name: str) -> dict:
    """Return the JSON schema for a named model.

    Raises:
        KeyError: ``name`` is not a known model.
    """
    return TypeAdapter(SCHEMA_MODELS[name]).json_schema()


def generate_json_schemas(directory) -> list:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    written = []
    for name, filename in SCHEMA_FILES.items():
        path = directory / filename
        path.write_text(json.dumps(json_schema(name), indent=2), encoding="utf-8")
        written.append(path)
        logger.info("Wrote %s schema to %s", name, path)
    return written
