from fastapi import FastAPI

from db import init_db
from routes import scenarios, simulation
from settings import configure_logging

app = FastAPI(title="Budget Simulator")


@app.on_event("startup")
def startup():
    configure_logging()
    init_db()


app.include_router(simulation.router)
app.include_router(scenarios.router)
