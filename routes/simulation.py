import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from models.cash_flow import Account
from models.errors import ConfigurationError
from services.result_dto import result_to_dict
from services.schema_service import SCHEMA_MODELS, json_schema
from services.simulation_service import run_simulation

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_class=PlainTextResponse)
def index():
    return "Hello, world!"


@router.post("/results")
def get_results(account: Account):
    """
    Run a simulation for the posted account.

    Returns:
        JSON with the daily ``balances`` and all ``payments`` in the window.
    """
    try:
        result = run_simulation(account)
    except ConfigurationError as e:
        logger.warning("Rejected account %s: %s", account.name, e)
        return JSONResponse(status_code=422, content={"error": str(e)})

    return result_to_dict(result)


@router.get("/schemas/{name}")
def get_schema(name: str):
    if name not in SCHEMA_MODELS:
        return JSONResponse(
            status_code=404,
            content={"error": f"Unknown schema '{name}'", "available": sorted(SCHEMA_MODELS)},
        )
    return json_schema(name)
