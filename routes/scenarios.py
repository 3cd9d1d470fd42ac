import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from models.cash_flow import Account
from models.errors import ConfigurationError
from services.result_dto import result_to_dict
from services.scenario_service import (
    fetch_account,
    list_account_names,
    remove_account,
    save_account,
)
from services.simulation_service import run_simulation

router = APIRouter()
logger = logging.getLogger(__name__)


def _not_found(name):
    return JSONResponse(status_code=404, content={"error": f"Scenario '{name}' not found"})


@router.post("/scenarios")
def add_scenario(account: Account):
    save_account(account)
    return {
        "status": "scenario saved",
        "name": account.identity,
    }


@router.get("/scenarios")
def list_scenarios():
    names = list_account_names()
    return {
        "count": len(names),
        "scenarios": names,
    }


@router.get("/scenarios/{name}")
def get_scenario(name: str):
    account = fetch_account(name)
    if account is None:
        return _not_found(name)
    return account.model_dump(mode="json")


@router.delete("/scenarios/{name}")
def delete_scenario(name: str):
    if not remove_account(name):
        return _not_found(name)
    return {"status": "scenario deleted", "name": name}


@router.get("/scenarios/{name}/results")
def get_scenario_results(name: str):
    """Run the stored scenario and return its balances and payments."""
    account = fetch_account(name)
    if account is None:
        return _not_found(name)

    try:
        result = run_simulation(account)
    except ConfigurationError as e:
        logger.warning("Scenario %s is misconfigured: %s", name, e)
        return JSONResponse(status_code=422, content={"error": str(e)})

    return result_to_dict(result)
