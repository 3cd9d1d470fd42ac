import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from db import get_db
from models.cash_flow import Account
from models.errors import ScenarioError
from models.portfolio import Portfolio
from repositories.scenarios_repository import (
    delete_scenario as repo_delete_scenario,
    get_scenario as repo_get_scenario,
    list_scenarios as repo_list_scenarios,
    save_scenario as repo_save_scenario,
)

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _load_document(path, model):
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScenarioError(f"Cannot read {path}: {exc}") from exc

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ScenarioError(f"{path} is not valid JSON: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ScenarioError(f"{path} is not valid YAML: {exc}") from exc

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ScenarioError(f"{path} is not a valid {model.__name__}: {exc}") from exc


def load_account(path) -> Account:
    """Read an account configuration document from a JSON or YAML file."""
    account = _load_document(path, Account)
    logger.info("Loaded account %s from %s", account.name, path)
    return account


def load_portfolio(path) -> Portfolio:
    return _load_document(path, Portfolio)


def save_account(account: Account):
    """Store the account as a named scenario, keyed by its identity.

    Opens and closes a database connection on the caller's behalf.
    """
    conn = get_db()
    try:
        repo_save_scenario(conn, account.identity, account.model_dump_json())
    finally:
        conn.close()
    logger.info("Saved scenario %s", account.identity)


def fetch_account(name):
    """Return the stored Account for ``name``, or None."""
    conn = get_db()
    try:
        stored = repo_get_scenario(conn, name)
    finally:
        conn.close()

    if stored is None:
        return None
    return Account.model_validate_json(stored)


def list_account_names():
    conn = get_db()
    try:
        return repo_list_scenarios(conn)
    finally:
        conn.close()


def remove_account(name):
    conn = get_db()
    try:
        removed = repo_delete_scenario(conn, name)
    finally:
        conn.close()
    if removed:
        logger.info("Deleted scenario %s", name)
    return removed
